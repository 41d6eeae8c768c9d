import numpy as np


class RandomSource:
    """ Seedable source of the random draws used by one model fit

    Every fit owns its own instance, so two fits never share generator state.
    The same seed with the same sequence of calls reproduces the same draws.

    Attributes
    ----------
    seed: int or None
        seed handed to the underlying numpy RandomState
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._state = np.random.RandomState(seed)

    def uniform(self):
        """ uniform real in [0, 1) """
        return self._state.random_sample()

    def randint(self, high, size=None):
        """ uniform integers in [0, high) """
        return self._state.randint(high, size=size)

    def categorical(self, weights):
        """ Sample an index from an unnormalised probability vector

        Parameters
        ----------
        weights: ndarray
            non-negative weights, at least one of them positive

        Returns
        -------
        index: int
            index k drawn with probability weights[k] / weights.sum()
        """
        weights = np.asarray(weights, dtype=float)
        if weights.ndim != 1 or weights.size == 0:
            raise ValueError('weights must be a non-empty vector')
        if not np.all(np.isfinite(weights)):
            raise ValueError('weights must be finite')
        if np.any(weights < 0):
            raise ValueError('weights must be non-negative')

        c_sum = weights.cumsum()
        if c_sum[-1] <= 0:
            raise ValueError('at least one weight must be positive')

        thr = c_sum[-1] * self.uniform()
        index = int(np.searchsorted(c_sum, thr, side='right'))
        if index >= weights.size:
            # rounding pushed thr onto the total; fall back to the last positive weight
            index = int(np.flatnonzero(weights > 0)[-1])
        return index
