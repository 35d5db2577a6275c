import io

import pytest

import nanolog
from nanolog import Logger, Mode


@pytest.fixture(autouse=True)
def _fresh_default():
    nanolog.reset_default()
    yield
    nanolog.reset_default()


@pytest.fixture
def daemon_logger():
    def _make(prefix="", threshold=0):
        out = io.StringIO()
        return Logger(prefix, threshold, stream=out, mode=Mode.DAEMON), out

    return _make


@pytest.fixture
def tty_logger():
    def _make(prefix="", threshold=0):
        out = io.StringIO()
        return Logger(prefix, threshold, stream=out, mode=Mode.INTERACTIVE), out

    return _make
