import numbers

import numpy as np

from .exceptions import InvalidHyperparameter


class LDAConfig:
    """ Hyperparameters and run options of a collapsed Gibbs LDA fit

    Attributes
    ----------
    n_topic: int
        number of topics to be inferred through the Gibbs sampling
    alpha: float
        symmetric parameter of Dirichlet prior for document-topic distribution.
        The string 'symmetric' resolves to 50 / n_topic.
    beta: float
        symmetric parameter of Dirichlet prior for topic-word distribution
    n_iter: int
        number of Gibbs sampling sweeps over the corpus
    seed: int or None
        seed of the random source created for the fit
    verbose: boolean
        if True, log each iteration step at INFO level instead of DEBUG
    """

    fields = ('n_topic', 'alpha', 'beta', 'n_iter', 'seed', 'verbose')

    def __init__(self, n_topic, alpha=0.1, beta=0.01, n_iter=100, seed=None, verbose=False):
        self.symmetric_alpha = isinstance(alpha, str)
        if self.symmetric_alpha:
            if alpha != 'symmetric':
                raise InvalidHyperparameter("alpha must be a positive number or 'symmetric', got %r" % alpha)
            if not _is_int(n_topic) or n_topic < 1:
                raise InvalidHyperparameter('n_topic must be a positive integer, got %r' % (n_topic,))
            alpha = 50. / n_topic

        self.n_topic = n_topic
        self.alpha = alpha
        self.beta = beta
        self.n_iter = n_iter
        self.seed = seed
        self.verbose = verbose
        self.validate()

    def validate(self):
        """ raise InvalidHyperparameter when any value is out of range """
        if not _is_int(self.n_topic) or self.n_topic < 1:
            raise InvalidHyperparameter('n_topic must be a positive integer, got %r' % (self.n_topic,))
        if not _is_number(self.alpha) or not np.isfinite(self.alpha) or not self.alpha > 0:
            raise InvalidHyperparameter('alpha must be positive and finite, got %r' % (self.alpha,))
        if not _is_number(self.beta) or not np.isfinite(self.beta) or not self.beta > 0:
            raise InvalidHyperparameter('beta must be positive and finite, got %r' % (self.beta,))
        if not _is_int(self.n_iter) or self.n_iter <= 0:
            raise InvalidHyperparameter('n_iter must be a positive integer, got %r' % (self.n_iter,))
        if self.seed is not None and not _is_int(self.seed):
            raise InvalidHyperparameter('seed must be an integer or None, got %r' % (self.seed,))

    @classmethod
    def from_dict(cls, options):
        unknown = set(options) - set(cls.fields)
        if unknown:
            raise ValueError('unknown option(s): %s' % ', '.join(sorted(unknown)))
        return cls(**options)

    def to_dict(self):
        options = dict((name, getattr(self, name)) for name in self.fields)
        if self.symmetric_alpha:
            # re-resolved against n_topic when the config is rebuilt
            options['alpha'] = 'symmetric'
        return options

    def replace(self, **changes):
        """ copy of this config with some options changed """
        options = self.to_dict()
        options.update(changes)
        return self.from_dict(options)

    def __eq__(self, other):
        if not isinstance(other, LDAConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return 'LDAConfig(%s)' % ', '.join('%s=%r' % (k, v) for k, v in self.to_dict().items())


def _is_int(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
