"""Dirichlet-smoothed point estimates of the LDA posteriors from final counts.

Both estimates only read the count tables of a ModelState.
"""
import numpy as np

from .result import FitResult


def estimate_phi(state, beta):
    """ phi[k, w] = (n_kw + beta) / (n_k + V * beta), shape (n_topic, n_voca) """
    topic_term = np.asarray(state.topic_term, dtype=float)
    topic_total = np.asarray(state.topic_total, dtype=float)
    return (topic_term + beta) / (topic_total + state.n_voca * beta)[:, np.newaxis]


def estimate_theta(state, alpha):
    """ theta[d, k] = (n_dk + alpha) / (n_d + K * alpha), shape (n_doc, n_topic) """
    doc_topic = np.asarray(state.doc_topic, dtype=float)
    doc_total = np.asarray(state.doc_total, dtype=float)
    return (doc_topic + alpha) / (doc_total + state.n_topic * alpha)[:, np.newaxis]


def extract(state, config, n_iter, log_likelihoods=(), terms=None, doc_names=None):
    """ Build the FitResult of a finished fit

    Parameters
    ----------
    state: ModelState
        final state of the sampler
    config: LDAConfig
    n_iter: int
        number of iterations actually run
    log_likelihoods: list
        log joint likelihood recorded after each iteration
    terms: list, optional
    doc_names: list, optional
    """
    return FitResult(phi=estimate_phi(state, config.beta),
                     theta=estimate_theta(state, config.alpha),
                     topic_assignment=np.array(state.topic_assignment),
                     config=config,
                     n_iter=n_iter,
                     log_likelihoods=log_likelihoods,
                     terms=terms,
                     doc_names=doc_names)
