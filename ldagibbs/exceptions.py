class LDAError(Exception):
    """Base class of every error raised by ldagibbs"""


class InvalidHyperparameter(LDAError, ValueError):
    """ Raised before sampling when n_topic, alpha, beta or n_iter is out of range """


class EmptyCorpus(LDAError, ValueError):
    """ Raised when the corpus has no document or no token at all """


class DegenerateDocument(EmptyCorpus):
    """ Raised when one or more documents contribute zero tokens

    Attributes
    ----------
    doc_indices: list
        indices of the empty documents
    """

    def __init__(self, doc_indices):
        self.doc_indices = list(doc_indices)
        super(DegenerateDocument, self).__init__(
            '%d document(s) with zero tokens: %s' % (len(self.doc_indices), self.doc_indices[:10]))


class InvalidTopic(LDAError, IndexError):
    pass


class InvalidDocument(LDAError, IndexError):
    pass
