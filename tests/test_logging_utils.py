"""Tests for shared logging helpers."""

import argparse
import logging

import pytest

from bitmap import decode_bytes
from logging_utils import (
    PROJECT_LOGGERS,
    add_logging_args,
    configure_logging,
    resolve_log_level,
    resolve_root_level,
)


class TestResolveLogLevel:
    def test_default_is_info(self):
        assert resolve_log_level() == logging.INFO

    @pytest.mark.parametrize(
        "verbose, quiet, expected",
        [
            (1, 0, logging.DEBUG),
            (2, 0, logging.DEBUG),
            (0, 1, logging.WARNING),
            (0, 2, logging.ERROR),
            (1, 1, logging.INFO),
        ],
    )
    def test_verbose_quiet_offsets(self, verbose, quiet, expected):
        assert resolve_log_level(verbose=verbose, quiet=quiet) == expected

    def test_explicit_level_wins(self):
        assert resolve_log_level("ERROR", verbose=2) == logging.ERROR


def test_add_logging_args():
    parser = argparse.ArgumentParser()
    add_logging_args(parser)
    args = parser.parse_args(["-vv", "--log-level", "debug"])
    assert args.verbose == 2
    assert args.quiet == 0
    assert args.log_level == "debug"


class TestResolveRootLevel:
    def test_single_verbose_keeps_libraries_at_info(self):
        assert resolve_root_level(verbose=1) == logging.INFO

    def test_double_verbose_opens_everything(self):
        assert resolve_root_level(verbose=2) == logging.DEBUG

    def test_explicit_level_applies_everywhere(self):
        assert resolve_root_level("debug") == logging.DEBUG

    def test_quiet_applies_everywhere(self):
        assert resolve_root_level(quiet=2) == logging.ERROR


@pytest.fixture
def restore_levels():
    names = ("", *PROJECT_LOGGERS)
    saved = {name: logging.getLogger(name).level for name in names}
    handler_levels = [(h, h.level) for h in logging.getLogger().handlers]
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    for handler, level in handler_levels:
        handler.setLevel(level)


class TestConfigureLogging:
    def test_verbose_enables_codec_debug_only(self, restore_levels):
        assert configure_logging(verbose=1) == logging.DEBUG
        assert logging.getLogger("bitmap.decoder").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("transforms.steps").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("PIL.Image").getEffectiveLevel() == logging.INFO

    def test_codec_debug_reaches_handlers(self, restore_levels, caplog, make_bitmap, two_by_two_rows):
        configure_logging(verbose=1)
        decode_bytes(make_bitmap(two_by_two_rows))
        assert "Decoding 2x2 bitmap" in caplog.text

    def test_default_hides_codec_debug(self, restore_levels, caplog, make_bitmap, two_by_two_rows):
        configure_logging()
        decode_bytes(make_bitmap(two_by_two_rows))
        assert "Decoding" not in caplog.text
