"""Test logging, seeding and timing utilities."""

import logging
import random

import numpy as np

from hashviz import Timer, get_logger, seed_everything
from hashviz.probing import RESOLUTION_CATALOG, ResolutionStrategy
from hashviz.utils import ops_per_second


def test_get_logger_reuses_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    logger = get_logger("hashviz.test_utils", log_file=log_file)
    again = get_logger("hashviz.test_utils", log_file=log_file)

    assert logger is again
    assert len(logger.handlers) == 2, "One stream handler and one file handler"

    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()


def test_get_logger_level_by_name():
    logger = get_logger("hashviz.test_utils.level", level="WARNING")
    assert logger.level == logging.WARNING


def test_seed_everything():
    seed_everything(7)
    first = (random.random(), np.random.rand())
    seed_everything(7)
    assert (random.random(), np.random.rand()) == first


def test_timer():
    with Timer("noop") as t:
        sum(range(100))
    assert t.elapsed >= 0.0
    assert ops_per_second(10, 0.0) == 0.0
    assert ops_per_second(10, 2.0) == 5.0


def test_resolution_catalog_covers_strategies():
    assert set(RESOLUTION_CATALOG) == set(ResolutionStrategy)
    assert RESOLUTION_CATALOG[ResolutionStrategy.DOUBLE]["name"] == "Double Hashing"
