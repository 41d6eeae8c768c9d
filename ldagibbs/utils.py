import numpy as np


def log_normalize(log_prob_vector):
    """ Probability vector of a vector of unnormalised log probabilities

    The maximum is subtracted before exponentiating, so very small scores
    do not underflow to zero.

    Parameters
    ----------
    log_prob_vector: ndarray

    Returns
    -------
    prob: ndarray
        non-negative vector summing to 1
    """
    log_prob_vector = np.asarray(log_prob_vector, dtype=float)
    prob = np.exp(log_prob_vector - log_prob_vector.max())
    return prob / prob.sum()


def read_voca(path):
    """
    open file from path and read each line to return the word list
    """
    with open(path, 'r') as f:
        return [word.strip() for word in f.readlines()]


def write_top_words(result, filepath, n_words=20, delimiter=',', newline='\n'):
    """ write one line per topic: the topic index followed by its top words """
    with open(filepath, 'w') as f:
        for ti, top_words in enumerate(result.top_terms_table(n_words)):
            f.write('%d' % ti)
            for word in top_words:
                f.write(delimiter + word)
            f.write(newline)
