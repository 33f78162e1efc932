"""Tests for the logging helpers."""

import logging

import pytest

from randref.utils.logging import get_logger


@pytest.fixture
def restore_level():
    logger = logging.getLogger("randref")
    previous = logger.level
    yield
    logger.setLevel(previous)


def test_package_logger_has_handler(restore_level):
    logger = get_logger()
    assert logger.name == "randref"
    assert logger.handlers


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)],
)
def test_level_argument_sets_level(restore_level, level, expected):
    assert get_logger(level=level).level == expected


def test_component_logger_is_child():
    assert get_logger("pipeline").name == "randref.pipeline"


def test_cli_log_level_reaches_package_logger(restore_level, output_paths):
    from randref.cli.cli import main

    main(
        [
            "-l", "5",
            "--sequence-out", str(output_paths["sequence_out"]),
            "--log-level", "WARNING",
        ]
    )
    assert logging.getLogger("randref").level == logging.WARNING
