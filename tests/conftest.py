import logging

import pytest

from lisparse.interpreter import evaluate, global_environment


@pytest.fixture
def env():
    """Fresh root environment with builtins and keywords loaded."""
    return global_environment()


@pytest.fixture
def run(env):
    """Evaluate source text in the shared fixture environment."""
    def _run(source):
        return evaluate(source, env)
    return _run


@pytest.fixture
def reported(caplog):
    """Messages sent to the error-reporting channel during the test."""
    caplog.set_level(logging.WARNING, logger="lisparse")

    def _reported():
        return [r.getMessage() for r in caplog.records if r.name == "lisparse"]
    return _reported
