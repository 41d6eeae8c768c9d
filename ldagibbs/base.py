import numpy as np

from .exceptions import InvalidTopic


def _read_only(array):
    view = array.view()
    view.flags.writeable = False
    return view


class ModelState():
    """ Mutable state of a collapsed Gibbs fit: topic assignments and count tables

    The count tables hold raw integer counts; the Dirichlet priors are added
    only when scores or posteriors are computed. All mutation goes through
    `reassign`, so after every call

        doc_topic[d, :].sum() == doc_total[d]      for every document d
        topic_term[k, :].sum() == topic_total[k]   for every topic k

    Attributes
    ----------
    n_doc: int
        the number of total documents in the corpus
    n_voca: int
        the vocabulary size of the corpus
    n_topic: int
        number of topics
    doc_ids: ndarray, shape (n_token)
        document of each token in the token stream
    word_ids: ndarray, shape (n_token)
        term of each token in the token stream
    topic_assignment: ndarray, shape (n_token)
        current topic of each token
    topic_term: ndarray, shape (n_topic, n_voca)
        word-topic matrix, keeps the number of assigned word tokens for each word-topic pair
    doc_topic: ndarray, shape (n_doc, n_topic)
        document-topic matrix, keeps the number of assigned word tokens for each document-topic pair
    topic_total: ndarray, shape (n_topic)
        number of word tokens assigned for each topic
    doc_total: ndarray, shape (n_doc)
        number of word tokens of each document
    """

    def __init__(self, doc_ids, word_ids, n_doc, n_voca, n_topic):
        self.n_doc = n_doc
        self.n_voca = n_voca
        self.n_topic = n_topic

        self._doc_ids = np.array(doc_ids, dtype=np.int64)
        self._word_ids = np.array(word_ids, dtype=np.int64)
        if self._doc_ids.shape != self._word_ids.shape or self._doc_ids.ndim != 1:
            raise ValueError('doc_ids and word_ids must be vectors of equal length')

        self._assignment = np.zeros(len(self._doc_ids), dtype=np.int64)
        self._topic_term = np.zeros([self.n_topic, self.n_voca], dtype=np.int64)
        self._doc_topic = np.zeros([self.n_doc, self.n_topic], dtype=np.int64)
        self._topic_total = np.zeros(self.n_topic, dtype=np.int64)
        self._doc_total = np.bincount(self._doc_ids, minlength=self.n_doc).astype(np.int64)
        self.initialized = False

    @property
    def n_token(self):
        return len(self._doc_ids)

    @property
    def doc_ids(self):
        return _read_only(self._doc_ids)

    @property
    def word_ids(self):
        return _read_only(self._word_ids)

    @property
    def topic_assignment(self):
        return _read_only(self._assignment)

    @property
    def topic_term(self):
        return _read_only(self._topic_term)

    @property
    def doc_topic(self):
        return _read_only(self._doc_topic)

    @property
    def topic_total(self):
        return _read_only(self._topic_total)

    @property
    def doc_total(self):
        return _read_only(self._doc_total)

    def random_init(self, rng):
        """ Assign every token a topic drawn uniformly from [0, n_topic)

        Parameters
        ----------
        rng: RandomSource
        """
        topics = np.asarray(rng.randint(self.n_topic, size=self.n_token), dtype=np.int64)
        self._assignment[:] = topics
        np.add.at(self._topic_term, (topics, self._word_ids), 1)
        np.add.at(self._doc_topic, (self._doc_ids, topics), 1)
        self._topic_total[:] = np.bincount(topics, minlength=self.n_topic)
        self.initialized = True

    def reassign(self, position, doc, word, new_topic):
        """ Move the token at `position` of the token stream to `new_topic`

        Old-topic cells are decremented and new-topic cells incremented in one
        step, so the count invariants hold after the call.
        """
        if self._doc_ids[position] != doc or self._word_ids[position] != word:
            raise ValueError('token %d is (doc %d, word %d), not (doc %d, word %d)'
                             % (position, self._doc_ids[position], self._word_ids[position], doc, word))
        if not 0 <= new_topic < self.n_topic:
            raise InvalidTopic('topic %d out of range [0, %d)' % (new_topic, self.n_topic))

        old_topic = self._assignment[position]
        if old_topic == new_topic:
            return

        self._topic_term[old_topic, word] -= 1
        self._topic_total[old_topic] -= 1
        self._doc_topic[doc, old_topic] -= 1

        self._assignment[position] = new_topic
        self._topic_term[new_topic, word] += 1
        self._topic_total[new_topic] += 1
        self._doc_topic[doc, new_topic] += 1

    def excluded_counts(self, position):
        """ Count vectors seen by the token at `position` with its own contribution removed

        Returns
        -------
        doc_topic: ndarray, shape (n_topic)
            topic counts of the token's document
        topic_word: ndarray, shape (n_topic)
            counts of the token's term under each topic
        topic_total: ndarray, shape (n_topic)
            number of tokens assigned to each topic
        """
        doc = self._doc_ids[position]
        word = self._word_ids[position]
        topic = self._assignment[position]

        doc_topic = self._doc_topic[doc, :].copy()
        topic_word = self._topic_term[:, word].copy()
        topic_total = self._topic_total.copy()
        doc_topic[topic] -= 1
        topic_word[topic] -= 1
        topic_total[topic] -= 1
        return doc_topic, topic_word, topic_total

    def is_consistent(self):
        """ True when both row-sum invariants hold and the tables match a recount of the assignment """
        if not np.array_equal(self._doc_topic.sum(1), self._doc_total):
            return False
        if not np.array_equal(self._topic_term.sum(1), self._topic_total):
            return False

        topic_term = np.zeros_like(self._topic_term)
        doc_topic = np.zeros_like(self._doc_topic)
        np.add.at(topic_term, (self._assignment, self._word_ids), 1)
        np.add.at(doc_topic, (self._doc_ids, self._assignment), 1)
        return np.array_equal(topic_term, self._topic_term) and np.array_equal(doc_topic, self._doc_topic)
