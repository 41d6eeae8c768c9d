"""Fit-quality scores used to compare models with different numbers of topics.

Every metric is called as ``metric(result, dtm)`` with a FitResult and the
DocumentTermMatrix it was fitted on, and returns a float. The first four
are the topic-count criteria of Griffiths & Steyvers (2004), Cao Juan et al.
(2009), Arun et al. (2010) and Deveaud et al. (2014).
"""
import itertools

import numpy as np
from scipy.spatial.distance import jensenshannon
from scipy.special import logsumexp

MAXIMIZE = 'maximize'
MINIMIZE = 'minimize'


def griffiths2004(result, dtm, burn_in=0.5):
    """ Log harmonic mean of the per-iteration likelihoods recorded after `burn_in` """
    ll = np.asarray(result.log_likelihoods, dtype=float)
    if ll.size == 0:
        raise ValueError('result has no recorded log likelihood')
    kept = ll[int(ll.size * burn_in):]
    if kept.size == 0:
        kept = ll[-1:]
    return float(np.log(kept.size) - logsumexp(-kept))


def cao_juan2009(result, dtm):
    """ mean cosine similarity between pairs of topics """
    phi = result.phi
    if phi.shape[0] < 2:
        return 0.0
    unit = phi / np.linalg.norm(phi, axis=1)[:, np.newaxis]
    similarity = np.dot(unit, unit.T)
    rows, cols = np.triu_indices(phi.shape[0], k=1)
    return float(similarity[rows, cols].mean())


def arun2010(result, dtm):
    """ symmetric KL divergence between the singular values of phi and the topic mass of theta """
    cm1 = np.linalg.svd(result.phi, compute_uv=False)
    cm2 = np.sort(np.dot(dtm.doc_lengths, result.theta))[::-1]
    size = min(cm1.size, cm2.size)
    cm1 = cm1[:size] / cm1[:size].sum()
    cm2 = cm2[:size] / cm2[:size].sum()
    return float(np.sum(cm1 * np.log(cm1 / cm2)) + np.sum(cm2 * np.log(cm2 / cm1)))


def deveaud2014(result, dtm):
    """ mean Jensen-Shannon divergence between pairs of topics """
    phi = result.phi
    if phi.shape[0] < 2:
        return 0.0
    divergence = [jensenshannon(phi[i], phi[j]) ** 2
                  for i, j in itertools.combinations(range(phi.shape[0]), 2)]
    return float(np.mean(divergence))


def perplexity(result, dtm):
    """ exp of the negative per-token log likelihood of dtm under theta and phi """
    counts = dtm.matrix.tocoo()
    theta = result.theta
    phi = result.phi
    prob = np.einsum('ij,ji->i', theta[counts.row], phi[:, counts.col])
    return float(np.exp(-np.sum(counts.data * np.log(prob)) / counts.data.sum()))


def umass_coherence(result, dtm, top_n=10):
    """ UMass coherence averaged over topics

    For the top terms w_1..w_M of a topic, the mean over pairs l < m of
    log((D(w_m, w_l) + 1) / D(w_l)), where D counts documents containing the
    terms. Pairs whose earlier term occurs in no document are skipped.
    """
    occurs = dtm.doc_term_frequency().astype(np.int64)
    co_doc = np.dot(occurs.T, occurs)
    doc_freq = np.diag(co_doc)

    scores = list()
    for ti in range(result.n_topic):
        words = result.top_term_ids(ti, top_n)
        score = 0.
        n_pair = 0
        for m in range(1, len(words)):
            for l in range(m):
                if doc_freq[words[l]] == 0:
                    continue
                score += np.log((co_doc[words[m], words[l]] + 1.) / doc_freq[words[l]])
                n_pair += 1
        scores.append(score / n_pair if n_pair else 0.)
    return float(np.mean(scores))


METRICS = {
    'griffiths2004': griffiths2004,
    'cao_juan2009': cao_juan2009,
    'arun2010': arun2010,
    'deveaud2014': deveaud2014,
    'perplexity': perplexity,
    'umass_coherence': umass_coherence,
}

METRIC_DIRECTIONS = {
    'griffiths2004': MAXIMIZE,
    'cao_juan2009': MINIMIZE,
    'arun2010': MINIMIZE,
    'deveaud2014': MAXIMIZE,
    'perplexity': MINIMIZE,
    'umass_coherence': MAXIMIZE,
}
