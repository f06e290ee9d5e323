"""
Tests for the exception hierarchy and colored logging helpers.
"""

import logging
from unittest import TestCase

from doctrine_generator.colored_logging import (
    ColoredFormatter,
    log_highlight,
    log_progress,
    log_success,
    setup_colored_logging,
)
from doctrine_generator.exceptions import (
    ConfigurationError,
    DoctrineGeneratorError,
    FileSystemError,
    UserCancelledError,
)


class TestExceptions(TestCase):
    """Test cases for the exception hierarchy"""

    def test_formatted_message(self):
        error = DoctrineGeneratorError(
            "Something failed",
            context={"node": "Customer"},
            suggestions=["Try again"],
            error_code="X",
        )
        assert str(error) == (
            "Something failed\nError Code: X\nContext:\n  node: Customer\nSuggestions:\n  • Try again"
        )

    def test_filesystem_error(self):
        error = FileSystemError("Could not write", path="/tmp/x.php", operation="write_file")
        assert isinstance(error, DoctrineGeneratorError)
        assert error.error_code == "FILESYSTEM_ERROR"
        assert error.path == "/tmp/x.php"
        assert error.context == {"path": "/tmp/x.php", "operation": "write_file"}
        assert error.suggestions

    def test_configuration_error(self):
        error = ConfigurationError("Bad option", config_file="gen.yaml")
        assert error.error_code == "CONFIG_ERROR"
        assert error.context["config_file"] == "gen.yaml"

    def test_user_cancelled_is_distinguishable(self):
        error = UserCancelledError()
        assert error.error_code == "USER_CANCELED"
        assert not isinstance(error, FileSystemError)
        assert error.message == "Generation cancelled by user"


class TestColoredFormatter(TestCase):
    """Test cases for ColoredFormatter"""

    def _record(self, level: int, message: str) -> logging.LogRecord:
        return logging.LogRecord("test", level, __file__, 1, message, None, None)

    def test_plain_when_colors_disabled(self):
        formatter = ColoredFormatter(use_colors=False)
        assert formatter.format(self._record(logging.INFO, "hello")) == "INFO: hello"

    def test_colors(self):
        formatter = ColoredFormatter()
        formatter.use_colors = True
        error = formatter.format(self._record(logging.ERROR, "boom"))
        assert error.startswith(ColoredFormatter.COLORS["ERROR"])
        assert error.endswith(ColoredFormatter.RESET)

        success = formatter.format(self._record(logging.INFO, "✓ done"))
        assert success.startswith(ColoredFormatter.SPECIAL_COLORS["success"])

        plain = formatter.format(self._record(logging.INFO, "nothing special"))
        assert plain == "INFO: nothing special"


class TestLogHelpers(TestCase):
    """Test cases for the message helpers"""

    def test_prefixes(self):
        logger = logging.getLogger("doctrine_generator.tests")
        with self.assertLogs(logger, level="INFO") as cm:
            log_success(logger, "done")
            log_progress(logger, "working")
            log_highlight(logger, "note")
        assert [record.getMessage() for record in cm.records] == ["✓ done", "→ working", "• note"]


class TestSetupColoredLogging(TestCase):
    """Test cases for setup_colored_logging"""

    def setUp(self):
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def tearDown(self):
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_installs_single_colored_handler(self):
        setup_colored_logging(level=logging.DEBUG, use_colors=False)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)
        assert root.level == logging.DEBUG
