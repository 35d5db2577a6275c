import pytest

from nanolog import Fatal, Level


def test_fatal_raises_with_composed_line(tty_logger):
    logger, out = tty_logger("[x] ")
    with pytest.raises(Fatal) as exc:
        logger.fatal("cannot open %s", "/etc/app.conf")
    assert exc.value.line == "\x1b[1;31m[x] cannot open /etc/app.conf\x1b[m\n"
    assert str(exc.value) == "\x1b[1;31m[x] cannot open /etc/app.conf\x1b[m"
    # nothing is written to the stream; the payload is the only output
    assert out.getvalue() == ""


def test_fatal_daemon_line_is_undecorated(daemon_logger):
    logger, _ = daemon_logger()
    with pytest.raises(Fatal) as exc:
        logger.fatal("a\nb")
    assert exc.value.line == "a\nb\n"


def test_fatal_ignores_threshold(daemon_logger):
    logger, _ = daemon_logger(threshold=Level.CRIT)
    logger.set_threshold(0)
    with pytest.raises(Fatal):
        logger.fatal("always")


def test_fatal_is_not_an_exception(daemon_logger):
    logger, _ = daemon_logger()
    reached = []

    def run():
        try:
            logger.fatal("stop")
        except Exception:  # noqa: BLE001 - must not catch Fatal
            reached.append("swallowed")
        reached.append("continued")

    with pytest.raises(Fatal):
        run()
    assert reached == []
