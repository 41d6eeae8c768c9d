import time

import numpy as np
from scipy.special import gammaln

from .base import ModelState
from .config import LDAConfig
from .formatted_logger import formatted_logger
from .posterior import extract
from .random_source import RandomSource
from .utils import log_normalize

logger = formatted_logger('GibbsLDA')


class GibbsLDA:
    """
    Latent dirichlet allocation,
    Blei, David M and Ng, Andrew Y and Jordan, Michael I, 2003

    Latent Dirichlet allocation with collapsed Gibbs sampling

    Tokens are visited in token-stream order (document by document, term
    index ascending inside a document) on every iteration.

    Attributes
    ----------
    config: LDAConfig
        hyperparameters of the fit
    rng: RandomSource or None
        random source of the fit; a fresh one seeded with config.seed is created when None
    stopping_predicate: callable or None
        called as stopping_predicate(iteration, log_likelihood, state) after every
        iteration; returning True ends sampling at that iteration boundary
    """

    def __init__(self, config, rng=None, stopping_predicate=None):
        self.config = config
        self.rng = rng
        self.stopping_predicate = stopping_predicate

    def fit(self, dtm):
        """ Gibbs sampling for LDA

        Parameters
        ----------
        dtm: DocumentTermMatrix

        Returns
        -------
        result: FitResult
        """
        self.config.validate()
        dtm.check_documents()

        rng = self.rng if self.rng is not None else RandomSource(self.config.seed)
        doc_ids, word_ids = dtm.token_stream()
        state = ModelState(doc_ids, word_ids, dtm.n_doc, dtm.n_voca, self.config.n_topic)
        state.random_init(rng)

        level = 'info' if self.config.verbose else 'debug'
        log_likelihoods = list()
        n_iter = 0
        for iteration in range(self.config.n_iter):
            tic = time.time()
            self.sweep(state, rng)
            n_iter = iteration + 1

            ll = self.log_likelihood(state)
            log_likelihoods.append(ll)
            getattr(logger, level)('[ITER] %d,\telapsed time:%.2f,\tlog_likelihood:%.2f',
                                   iteration, time.time() - tic, ll)

            if self.stopping_predicate is not None and self.stopping_predicate(iteration, ll, state):
                logger.info('stopped after %d of %d iterations', n_iter, self.config.n_iter)
                break

        return extract(state, self.config, n_iter, log_likelihoods, dtm.terms, dtm.doc_names)

    def sweep(self, state, rng):
        """ resample the topic of every token once """
        alpha = self.config.alpha
        beta = self.config.beta
        v_beta = state.n_voca * beta
        doc_ids = state.doc_ids
        word_ids = state.word_ids

        for position in range(state.n_token):
            doc = doc_ids[position]
            word = word_ids[position]
            doc_topic, topic_word, topic_total = state.excluded_counts(position)

            # compute conditional probability of a topic of current word
            prob = (doc_topic + alpha) * (topic_word + beta) / (topic_total + v_beta)

            total = prob.sum()
            if not (np.isfinite(total) and total > 0):
                prob = log_normalize(np.log(doc_topic + alpha) + np.log(topic_word + beta)
                                     - np.log(topic_total + v_beta))

            new_topic = rng.categorical(prob)
            state.reassign(position, doc, word, new_topic)

    def log_likelihood(self, state):
        """
        log joint likelihood log p(w, z) of the current assignment
        """
        alpha = self.config.alpha
        beta = self.config.beta
        n_topic = state.n_topic

        ll = state.n_doc * gammaln(alpha * n_topic)
        ll -= state.n_doc * n_topic * gammaln(alpha)
        ll += n_topic * gammaln(beta * state.n_voca)
        ll -= n_topic * state.n_voca * gammaln(beta)

        ll += gammaln(state.doc_topic + alpha).sum() - gammaln(state.doc_total + alpha * n_topic).sum()
        ll += gammaln(state.topic_term + beta).sum() - gammaln(state.topic_total + beta * state.n_voca).sum()
        return float(ll)


def fit(dtm, n_topic=None, config=None, rng=None, stopping_predicate=None, **kwargs):
    """ Fit LDA to `dtm` and return the immutable FitResult

    Either pass a ready LDAConfig as `config`, or `n_topic` plus any LDAConfig
    keyword (alpha, beta, n_iter, seed, verbose). Hyperparameters and the corpus
    are checked before the random source is touched.
    """
    if config is None:
        config = LDAConfig(n_topic, **kwargs)
    elif n_topic is not None or kwargs:
        if n_topic is not None:
            kwargs['n_topic'] = n_topic
        config = config.replace(**kwargs)
    return GibbsLDA(config, rng=rng, stopping_predicate=stopping_predicate).fit(dtm)
