import pytest

from nanolog import Level

EMITTERS = [("error", Level.ERROR), ("warn", Level.WARN), ("info", Level.INFO), ("debug", Level.DEBUG)]


@pytest.mark.parametrize("threshold", [3, 4, 5, 6, 7])
@pytest.mark.parametrize("method,rank", EMITTERS)
def test_emits_iff_rank_within_threshold(daemon_logger, threshold, method, rank):
    logger, out = daemon_logger(threshold=threshold)
    getattr(logger, method)("msg")
    assert bool(out.getvalue()) == (rank <= threshold)
    assert logger.enabled_for(rank) == (rank <= threshold)


def test_disabled_level_does_no_formatting(daemon_logger):
    class Exploding:
        def __str__(self):
            raise AssertionError("formatted a filtered message")

    logger, out = daemon_logger(threshold=Level.WARN)
    logger.debug("%s", Exploding())
    logger.info(Exploding())
    assert out.getvalue() == ""


def test_warn_threshold_scenario(tty_logger, daemon_logger):
    for make, deco in ((tty_logger, ("\x1b[1;33m", "\x1b[m")), (daemon_logger, ("<4>", ""))):
        logger, out = make("[x] ", Level.WARN)
        logger.debug("hidden")
        assert out.getvalue() == ""
        logger.warn("shown %s", "y")
        assert out.getvalue() == deco[0] + "[x] shown y" + deco[1] + "\n"


def test_set_threshold_is_unvalidated(daemon_logger):
    logger, out = daemon_logger()
    logger.set_threshold(0)
    logger.error("nothing passes")
    assert out.getvalue() == ""
    logger.set_threshold(42)
    logger.debug("everything passes")
    assert out.getvalue() == "<7>everything passes\n"


def test_set_threshold_by_name(daemon_logger):
    logger, out = daemon_logger()
    logger.set_threshold_by_name("warn")
    assert logger.threshold == Level.WARN
    logger.info("quiet")
    logger.warn("loud")
    assert out.getvalue() == "<4>loud\n"


def test_set_threshold_by_unknown_name_keeps_threshold(daemon_logger):
    from nanolog import UnknownLevelName

    logger, _ = daemon_logger(threshold=Level.ERROR)
    with pytest.raises(UnknownLevelName):
        logger.set_threshold_by_name("bogus")
    assert logger.threshold == Level.ERROR
