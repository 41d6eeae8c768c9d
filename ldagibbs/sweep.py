"""Model selection over the number of topics.

Each candidate topic count gets an independent fit with a fresh model state
and random source seeded identically, so rows do not depend on each other.
This is slow by nature: the cost is one full fit per candidate.
"""
from collections import namedtuple

from .config import LDAConfig
from .formatted_logger import formatted_logger
from .lda_gibbs import GibbsLDA
from .metrics import MAXIMIZE, METRIC_DIRECTIONS, METRICS

logger = formatted_logger('TopicSweep')

SweepRow = namedtuple('SweepRow', ['n_topic', 'scores'])


def _resolve_metrics(metrics):
    if metrics is None:
        return dict(METRICS)
    if isinstance(metrics, dict):
        return dict(metrics)
    resolved = dict()
    for metric in metrics:
        if callable(metric):
            resolved[metric.__name__] = metric
        elif metric in METRICS:
            resolved[metric] = METRICS[metric]
        else:
            raise ValueError('unknown metric: %r' % (metric,))
    return resolved


class _FitAndScore:
    def __init__(self, dtm, config, metrics):
        self.dtm = dtm
        self.config = config
        self.metrics = metrics

    def __call__(self, n_topic):
        result = GibbsLDA(self.config.replace(n_topic=n_topic)).fit(self.dtm)
        scores = dict((name, metric(result, self.dtm)) for name, metric in self.metrics.items())
        logger.info('[SWEEP] n_topic=%d,\t%s', n_topic,
                    ',\t'.join('%s:%.4f' % (name, score) for name, score in sorted(scores.items())))
        return SweepRow(n_topic, scores)


def sweep(dtm, topic_counts, metrics=None, config=None, executor=None, **kwargs):
    """ Fit one model per topic count and score each fit

    Parameters
    ----------
    dtm: DocumentTermMatrix
    topic_counts: list
        candidate numbers of topics, evaluated in the given order
    metrics: list or dict, optional
        metric names from METRICS, callables metric(result, dtm), or a
        name -> callable dict. All of METRICS when omitted.
    config: LDAConfig, optional
        options shared by every fit; n_topic is replaced per candidate
    executor: object with a `map` method, optional
        e.g. a concurrent.futures executor, to run the fits concurrently
    kwargs:
        LDAConfig options used when `config` is omitted

    Returns
    -------
    rows: list of SweepRow
        (n_topic, {metric name: score}) in the order of `topic_counts`
    """
    topic_counts = list(topic_counts)
    if not topic_counts:
        raise ValueError('topic_counts is empty')
    if config is None:
        config = LDAConfig(topic_counts[0], **kwargs)
    elif kwargs:
        config = config.replace(**kwargs)

    # fail fast on every candidate before any fit starts
    for n_topic in topic_counts:
        config.replace(n_topic=n_topic)
    dtm.check_documents()

    task = _FitAndScore(dtm, config, _resolve_metrics(metrics))
    if executor is None:
        return [task(n_topic) for n_topic in topic_counts]
    return list(executor.map(task, topic_counts))


def select_topic_count(rows, metric):
    """ topic count of the best row for `metric`; the first one wins on ties """
    if metric not in METRIC_DIRECTIONS:
        raise ValueError('no known direction for metric %r' % (metric,))
    if METRIC_DIRECTIONS[metric] == MAXIMIZE:
        best = max(rows, key=lambda row: row.scores[metric])
    else:
        best = min(rows, key=lambda row: row.scores[metric])
    return best.n_topic
