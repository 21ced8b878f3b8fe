import io
import json
import logging

import pytest

from pattern_catalog.application.examples import example_of
from pattern_catalog.config.schemas import LogFormat, LoggingConfig, LogLevel
from pattern_catalog.domain.base.exceptions import ExampleExecutionError
from pattern_catalog.domain.organization import Directory
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging


def test_setup_logging_sets_root_level():
    setup_logging(LoggingConfig(level=LogLevel.DEBUG))

    assert logging.getLogger().level == logging.DEBUG


def test_logs_go_to_stderr_not_stdout(capsys):
    setup_logging(LoggingConfig(level=LogLevel.INFO))

    get_logger("tests").info("hello from tests", answer=42)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hello from tests" in captured.err
    assert "answer" in captured.err


def test_json_format_renders_json(capsys):
    setup_logging(LoggingConfig(level=LogLevel.INFO, format=LogFormat.JSON))

    get_logger("tests").info("structured", answer=42)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "structured"
    assert record["answer"] == 42
    assert record["level"] == "info"


def test_level_filters_debug(capsys):
    setup_logging(LoggingConfig(level=LogLevel.WARNING))

    get_logger("tests").debug("too quiet")

    assert "too quiet" not in capsys.readouterr().err


def test_directory_and_runner_log_at_debug(capsys):
    # Arrange
    setup_logging(LoggingConfig(level=LogLevel.DEBUG))
    directory = Directory()

    # Act
    directory.add_department("Marketing")
    directory.hire_employee("John", 24, "Sales")
    example_of("Quiet", lambda: None, io.StringIO())
    with pytest.raises(ExampleExecutionError):
        example_of("Broken", lambda: 1 / 0, io.StringIO())

    # Assert
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Department added" in captured.err
    assert "Employee hired" in captured.err
    assert "Running example" in captured.err
    assert "Example finished" in captured.err
    assert "Example failed" in captured.err
    assert "ZeroDivisionError" in captured.err
