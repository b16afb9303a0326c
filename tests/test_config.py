"""Tests for treecanon.config module."""
import logging

import pytest

from treecanon.config.settings import (
    TREECANON_MAX_DEPTH,
    TREECANON_MAX_NODES,
    TraversalLimits,
    _env_limit,
    default_limits,
)
from treecanon.config.logging import configure_logging


# --- limits ---

def test_default_limits_follow_module_constants():
    limits = default_limits()
    assert limits.max_depth == TREECANON_MAX_DEPTH
    assert limits.max_nodes == TREECANON_MAX_NODES


def test_limits_frozen():
    limits = TraversalLimits(max_depth=3)
    with pytest.raises(AttributeError):
        limits.max_depth = 4


def test_env_limit_default(monkeypatch):
    monkeypatch.delenv("TREECANON_TEST_LIMIT", raising=False)
    assert _env_limit("TREECANON_TEST_LIMIT", 42) == 42


def test_env_limit_value(monkeypatch):
    monkeypatch.setenv("TREECANON_TEST_LIMIT", " 17 ")
    assert _env_limit("TREECANON_TEST_LIMIT", 42) == 17


@pytest.mark.parametrize("raw", ["none", "None", "0", ""])
def test_env_limit_disabled(monkeypatch, raw):
    monkeypatch.setenv("TREECANON_TEST_LIMIT", raw)
    assert _env_limit("TREECANON_TEST_LIMIT", 42) is None


def test_env_limit_negative(monkeypatch):
    monkeypatch.setenv("TREECANON_TEST_LIMIT", "-3")
    with pytest.raises(ValueError):
        _env_limit("TREECANON_TEST_LIMIT", 42)


# --- logging ---

@pytest.fixture
def pkg_logger():
    logger = logging.getLogger("treecanon")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_configure_logging_verbose(pkg_logger):
    root_handlers = list(logging.getLogger().handlers)
    handler = configure_logging(verbose=True)
    assert pkg_logger.level == logging.DEBUG
    assert handler in pkg_logger.handlers
    assert pkg_logger.propagate is False
    assert logging.getLogger().handlers == root_handlers


def test_configure_logging_replaces_previous_handler(pkg_logger):
    first = configure_logging()
    second = configure_logging(log_json=True)
    assert first not in pkg_logger.handlers
    assert pkg_logger.handlers.count(second) == 1
    assert pkg_logger.level == logging.WARNING


def test_configure_logging_json_output(pkg_logger, capsys):
    configure_logging(verbose=True, log_json=True)
    logging.getLogger("treecanon.tree.traverse").debug("depth ceiling %d exceeded", 3)
    err = capsys.readouterr().err
    assert '"event": "depth ceiling 3 exceeded"' in err
    assert '"level": "debug"' in err
