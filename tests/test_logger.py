"""Tests for the package logger."""

import logging

from bdaddress.utils.logger import get_logger, set_log_level


def test_child_logger_namespace():
    assert get_logger("core.reconciler").name == "bdaddress.core.reconciler"
    assert get_logger().name == "bdaddress"


def test_package_logger_does_not_propagate():
    assert get_logger().propagate is False
    assert get_logger().handlers


def test_set_log_level():
    root = get_logger()
    previous = root.level
    try:
        set_log_level("debug")
        assert root.level == logging.DEBUG
        assert get_logger("core.form").isEnabledFor(logging.DEBUG)
    finally:
        root.setLevel(previous)
