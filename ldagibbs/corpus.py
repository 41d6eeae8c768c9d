import numpy as np
from scipy import sparse

from .exceptions import DegenerateDocument, EmptyCorpus


class DocumentTermMatrix:
    """ Immutable document-term count matrix handed to the sampler

    Parameters
    ----------
    counts: array-like or scipy.sparse matrix, shape (n_doc, n_voca)
        non-negative integer count of each term in each document
    terms: list, size=n_voca, optional
        term names, used only to label outputs
    doc_names: list, size=n_doc, optional
        document names, used only to label outputs
    """

    def __init__(self, counts, terms=None, doc_names=None):
        if sparse.issparse(counts):
            matrix = sparse.csr_matrix(counts)
        else:
            dense = np.asarray(counts)
            if dense.ndim != 2:
                raise ValueError('counts must be a 2-D matrix, got %d dimension(s)' % dense.ndim)
            matrix = sparse.csr_matrix(dense)

        data = matrix.data
        if data.size and not np.issubdtype(data.dtype, np.integer):
            if not np.all(np.isfinite(data)) or np.any(data != np.round(data)):
                raise ValueError('counts must be integers')
        if data.size and data.min() < 0:
            raise ValueError('counts must be non-negative')

        matrix = matrix.astype(np.int64)
        matrix.eliminate_zeros()
        matrix.sum_duplicates()
        matrix.sort_indices()
        self._matrix = matrix

        if terms is None:
            terms = [str(w) for w in range(self.n_voca)]
        if len(terms) != self.n_voca:
            raise ValueError('expected %d terms, got %d' % (self.n_voca, len(terms)))
        if doc_names is None:
            doc_names = [None] * self.n_doc
        if len(doc_names) != self.n_doc:
            raise ValueError('expected %d document names, got %d' % (self.n_doc, len(doc_names)))
        self._terms = tuple(terms)
        self._doc_names = tuple(doc_names)

    @classmethod
    def from_triplets(cls, triplets, n_doc, n_voca, terms=None, doc_names=None):
        """ build from (doc index, term index, count) triplets; repeated pairs are summed """
        triplets = list(triplets)
        if triplets:
            rows, cols, vals = (np.asarray(x) for x in zip(*triplets))
        else:
            rows = cols = vals = np.zeros(0, dtype=np.int64)
        if rows.size and (rows.min() < 0 or rows.max() >= n_doc):
            raise ValueError('document index out of range [0, %d)' % n_doc)
        if cols.size and (cols.min() < 0 or cols.max() >= n_voca):
            raise ValueError('term index out of range [0, %d)' % n_voca)
        # checked per triplet, before repeated pairs are summed
        if vals.size and not np.issubdtype(vals.dtype, np.integer):
            if not np.issubdtype(vals.dtype, np.number) or not np.all(np.isfinite(vals)) \
                    or np.any(vals != np.round(vals)):
                raise ValueError('counts must be integers')
        if vals.size and vals.min() < 0:
            raise ValueError('counts must be non-negative')
        matrix = sparse.coo_matrix((vals, (rows, cols)), shape=(n_doc, n_voca))
        return cls(matrix, terms=terms, doc_names=doc_names)

    @classmethod
    def from_ids_cnt(cls, doc_ids, doc_cnt, n_voca=None, terms=None, doc_names=None):
        """ build from per-document word id lists and matching count lists

        Parameters
        ----------
        doc_ids: list
            list of list of word id for each document
        doc_cnt: list
            list of list of word count for each document
        """
        if len(doc_ids) != len(doc_cnt):
            raise ValueError('doc_ids and doc_cnt differ in length')
        if n_voca is None:
            n_voca = len(terms) if terms is not None else 1 + max([max(ids) for ids in doc_ids if len(ids)] or [-1])
        triplets = list()
        for di in range(len(doc_ids)):
            if len(doc_ids[di]) != len(doc_cnt[di]):
                raise ValueError('document %d: ids and counts differ in length' % di)
            for word, cnt in zip(doc_ids[di], doc_cnt[di]):
                triplets.append((di, word, cnt))
        return cls.from_triplets(triplets, len(doc_ids), n_voca, terms=terms, doc_names=doc_names)

    @classmethod
    def from_docs(cls, docs, n_voca=None, terms=None, doc_names=None):
        """ build from token id lists, e.g. [[0, 2, 2, 3], [1, 3, 3, 4]] """
        if n_voca is None:
            n_voca = len(terms) if terms is not None else 1 + max([max(doc) for doc in docs if len(doc)] or [-1])
        triplets = [(di, word, 1) for di, doc in enumerate(docs) for word in doc]
        return cls.from_triplets(triplets, len(docs), n_voca, terms=terms, doc_names=doc_names)

    @property
    def n_doc(self):
        return self._matrix.shape[0]

    @property
    def n_voca(self):
        return self._matrix.shape[1]

    @property
    def n_token(self):
        return int(self._matrix.data.sum())

    @property
    def doc_lengths(self):
        return np.asarray(self._matrix.sum(axis=1)).ravel()

    @property
    def terms(self):
        return list(self._terms)

    @property
    def doc_names(self):
        return list(self._doc_names)

    @property
    def matrix(self):
        """ copy of the counts as a CSR matrix """
        return self._matrix.copy()

    def toarray(self):
        return self._matrix.toarray()

    def check_documents(self):
        """ raise EmptyCorpus or DegenerateDocument unless every document has a token """
        if self.n_doc == 0 or self.n_token == 0:
            raise EmptyCorpus('corpus contains no tokens')
        empty = np.flatnonzero(self.doc_lengths == 0)
        if empty.size:
            raise DegenerateDocument(empty.tolist())

    def drop_empty_documents(self):
        """
        Returns
        -------
        dtm: DocumentTermMatrix
            the documents that have at least one token
        kept: ndarray
            original index of every kept document
        """
        kept = np.flatnonzero(self.doc_lengths > 0)
        dtm = DocumentTermMatrix(self._matrix[kept], terms=self._terms,
                                 doc_names=[self._doc_names[di] for di in kept])
        return dtm, kept

    def token_stream(self):
        """ Expand the counts into one (document, term) pair per token occurrence

        Tokens are ordered by document, then by term index inside a document;
        a term with count c contributes c consecutive entries.

        Returns
        -------
        doc_ids: ndarray, shape (n_token)
        word_ids: ndarray, shape (n_token)
        """
        m = self._matrix
        nnz_doc = np.repeat(np.arange(self.n_doc, dtype=np.int64), np.diff(m.indptr))
        doc_ids = np.repeat(nnz_doc, m.data)
        word_ids = np.repeat(m.indices.astype(np.int64), m.data)
        return doc_ids, word_ids

    def doc_term_frequency(self):
        """ boolean matrix, shape (n_doc, n_voca): True where the term occurs in the document """
        return self._matrix.toarray() > 0

    def __repr__(self):
        return 'DocumentTermMatrix(n_doc=%d, n_voca=%d, n_token=%d)' % (self.n_doc, self.n_voca, self.n_token)
