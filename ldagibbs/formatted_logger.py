import logging
import os

_levels = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARN,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


def formatted_logger(label, level=None, format=None, date_format=None, file_path=None):
    """ Return a logger named `label` with a formatted stream handler

    A file handler is attached as well when `file_path` is given.
    Calling this twice with the same label reuses the handlers already attached.
    """
    log = logging.getLogger(label)
    if level is None:
        level = logging.INFO
    elif isinstance(level, str):
        if level.lower() not in _levels:
            raise ValueError('unknown log level: %s' % level)
        level = _levels[level.lower()]
    log.setLevel(level)

    if format is None:
        format = '%(asctime)s %(levelname)s:%(name)s:%(message)s'
    if date_format is None:
        date_format = '%Y-%m-%d %H:%M:%S'
    formatter = logging.Formatter(format, date_format)

    if not any(type(h) is logging.StreamHandler for h in log.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        log.addHandler(stream_handler)

    if file_path is not None:
        file_path = os.path.abspath(file_path)
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == file_path for h in log.handlers):
            log_dir = os.path.dirname(file_path)
            if not os.path.exists(log_dir):
                os.makedirs(log_dir)
            file_handler = logging.FileHandler(file_path)
            file_handler.setFormatter(formatter)
            log.addHandler(file_handler)
    return log
