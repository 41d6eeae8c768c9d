"""Unit tests for ldagibbs/config.py and ldagibbs/formatted_logger.py."""

import logging

import pytest

from ldagibbs import InvalidHyperparameter, LDAConfig
from ldagibbs.formatted_logger import formatted_logger


class TestLDAConfig:
    def test_defaults(self):
        config = LDAConfig(5)
        assert config.alpha == 0.1
        assert config.beta == 0.01
        assert config.n_iter == 100
        assert config.seed is None
        assert config.verbose is False

    def test_single_topic_allowed(self):
        assert LDAConfig(1).n_topic == 1

    @pytest.mark.parametrize("options", [
        {"n_topic": 0},
        {"n_topic": -2},
        {"n_topic": 2.5},
        {"n_topic": True},
        {"n_topic": 2, "alpha": 0},
        {"n_topic": 2, "alpha": -0.1},
        {"n_topic": 2, "beta": 0},
        {"n_topic": 2, "n_iter": 0},
        {"n_topic": 2, "n_iter": 1.5},
        {"n_topic": 2, "seed": "abc"},
        {"n_topic": 2, "alpha": "asymmetric"},
        {"n_topic": 2, "alpha": float("inf")},
        {"n_topic": 2, "alpha": float("nan")},
        {"n_topic": 2, "beta": float("inf")},
        {"n_topic": 2, "beta": float("nan")},
    ])
    def test_invalid_values(self, options):
        with pytest.raises(InvalidHyperparameter):
            LDAConfig(**options)

    def test_symmetric_alpha(self):
        assert LDAConfig(10, alpha="symmetric").alpha == pytest.approx(5.0)

    def test_symmetric_alpha_follows_replace(self):
        config = LDAConfig(10, alpha="symmetric").replace(n_topic=25)
        assert config.alpha == pytest.approx(2.0)

    def test_dict_round_trip(self):
        config = LDAConfig(4, alpha=0.5, seed=3)
        assert LDAConfig.from_dict(config.to_dict()) == config

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            LDAConfig.from_dict({"n_topic": 2, "gamma": 1.0})

    def test_replace_keeps_original(self):
        config = LDAConfig(4, seed=3)
        other = config.replace(n_topic=6)
        assert other.n_topic == 6
        assert other.seed == 3
        assert config.n_topic == 4

    def test_is_invalid_hyperparameter_a_value_error(self):
        with pytest.raises(ValueError):
            LDAConfig(0)


class TestFormattedLogger:
    def test_handlers_not_duplicated(self):
        log = formatted_logger('ldagibbs.test.dup')
        n_handler = len(log.handlers)
        formatted_logger('ldagibbs.test.dup')
        assert len(log.handlers) == n_handler

    def test_level_by_name(self):
        assert formatted_logger('ldagibbs.test.level', 'debug').level == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            formatted_logger('ldagibbs.test.bad', 'loud')

    def test_file_handler(self, tmp_path):
        path = tmp_path / 'logs' / 'run.log.txt'
        log = formatted_logger('ldagibbs.test.file', file_path=str(path))
        log.info('hello %d', 1)
        for handler in log.handlers:
            handler.flush()
        assert 'hello 1' in path.read_text()
        for handler in list(log.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                log.removeHandler(handler)
