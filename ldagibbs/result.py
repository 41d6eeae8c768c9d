import numbers

import numpy as np

from .exceptions import InvalidDocument, InvalidTopic


def _frozen(array):
    array = np.array(array)
    array.flags.writeable = False
    return array


def _is_index(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class FitResult:
    """ Immutable outcome of one LDA fit

    Array attributes hand out copies, so callers can never change the
    posteriors of a fitted model in place.

    Attributes
    ----------
    phi: ndarray, shape (n_topic, n_voca)
        term-topic distribution, every row sums to 1
    theta: ndarray, shape (n_doc, n_topic)
        document-topic distribution, every row sums to 1
    topic_assignment: ndarray, shape (n_token)
        final topic of each token in token-stream order
    config: LDAConfig
        hyperparameters of the fit
    n_iter: int
        number of Gibbs iterations actually run
    log_likelihoods: list
        log joint likelihood after each iteration
    terms: list
        term names, size=n_voca
    doc_names: list
        document names, size=n_doc
    """

    def __init__(self, phi, theta, topic_assignment, config, n_iter, log_likelihoods=(), terms=None,
                 doc_names=None):
        self._phi = _frozen(phi)
        self._theta = _frozen(theta)
        self._topic_assignment = _frozen(topic_assignment)
        self._config = config.replace()
        self.n_iter = n_iter
        self._log_likelihoods = tuple(float(ll) for ll in log_likelihoods)

        n_topic, n_voca = self._phi.shape
        if self._theta.shape[1] != n_topic:
            raise ValueError('phi has %d topics but theta has %d' % (n_topic, self._theta.shape[1]))
        if terms is None:
            terms = [str(w) for w in range(n_voca)]
        if doc_names is None:
            doc_names = [None] * self._theta.shape[0]
        self._terms = tuple(terms)
        self._doc_names = tuple(doc_names)

    @property
    def phi(self):
        return self._phi.copy()

    @property
    def theta(self):
        return self._theta.copy()

    @property
    def topic_assignment(self):
        return self._topic_assignment.copy()

    @property
    def log_likelihoods(self):
        return list(self._log_likelihoods)

    @property
    def log_likelihood(self):
        """ log likelihood after the last iteration, None when no iteration ran """
        return self._log_likelihoods[-1] if self._log_likelihoods else None

    @property
    def terms(self):
        return list(self._terms)

    @property
    def doc_names(self):
        return list(self._doc_names)

    @property
    def n_topic(self):
        return self._phi.shape[0]

    @property
    def n_voca(self):
        return self._phi.shape[1]

    @property
    def n_doc(self):
        return self._theta.shape[0]

    @property
    def config(self):
        """ copy of the LDAConfig the model was fitted with """
        return self._config.replace()

    @property
    def alpha(self):
        return self._config.alpha

    @property
    def beta(self):
        return self._config.beta

    def _check_topic(self, topic):
        if not _is_index(topic) or not 0 <= topic < self.n_topic:
            raise InvalidTopic('topic %r out of range [0, %d)' % (topic, self.n_topic))

    def _check_document(self, doc):
        if not _is_index(doc) or not 0 <= doc < self.n_doc:
            raise InvalidDocument('document %r out of range [0, %d)' % (doc, self.n_doc))

    def top_term_ids(self, topic, n_words=20):
        """ Indices of the `n_words` most probable terms of `topic`

        Ordered by descending phi; equal probabilities keep the lower term index first.
        """
        self._check_topic(topic)
        if n_words < 0:
            raise ValueError('n_words must be non-negative, got %d' % n_words)
        order = np.argsort(-self._phi[topic], kind='stable')
        return order[:n_words].tolist()

    def top_terms(self, topic, n_words=20):
        return [self._terms[w] for w in self.top_term_ids(topic, n_words)]

    def top_terms_table(self, n_words=20):
        """ list of n_topic rows, each the top term names of one topic """
        return [self.top_terms(ti, n_words) for ti in range(self.n_topic)]

    def dominant_topic(self, doc):
        """ most probable topic of `doc`, the lowest index on ties """
        self._check_document(doc)
        return int(np.argmax(self._theta[doc]))

    def dominant_topics(self):
        return [int(k) for k in np.argmax(self._theta, axis=1)]

    def topic_distribution(self, doc):
        self._check_document(doc)
        return self._theta[doc].copy()

    def term_distribution(self, topic):
        self._check_topic(topic)
        return self._phi[topic].copy()

    def to_dict(self):
        """ plain python snapshot of the fit, e.g. for json serialisation """
        return {
            'config': self._config.to_dict(),
            'n_iter': self.n_iter,
            'log_likelihoods': list(self._log_likelihoods),
            'terms': list(self._terms),
            'doc_names': list(self._doc_names),
            'phi': self._phi.tolist(),
            'theta': self._theta.tolist(),
        }

    def __repr__(self):
        return 'FitResult(n_topic=%d, n_doc=%d, n_voca=%d, n_iter=%d)' % (
            self.n_topic, self.n_doc, self.n_voca, self.n_iter)
