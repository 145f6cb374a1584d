import logging
from io import StringIO

from rich.console import Console
from rich.logging import RichHandler

from parkinglot.utils import configure_logging, get_logger
from parkinglot.utils.logger_config import ROOT_LOGGER_NAME


class TestLoggerConfig:
    """Tests for logging setup."""

    def setup_method(self):
        self.root = logging.getLogger(ROOT_LOGGER_NAME)
        self.saved_level = self.root.level
        self.saved_propagate = self.root.propagate

    def teardown_method(self):
        for handler in list(self.root.handlers):
            self.root.removeHandler(handler)
            handler.close()
        self.root.setLevel(self.saved_level)
        self.root.propagate = self.saved_propagate

    def test_get_logger_nests_under_package(self):
        assert get_logger("parkinglot.console.menu").name == "parkinglot.console.menu"
        assert get_logger("scripts").name == "parkinglot.scripts"
        assert get_logger("parkinglot").name == "parkinglot"

    def test_configure_logging_installs_rich_handler(self):
        output = StringIO()
        logger = configure_logging(
            "info", console=Console(file=output, width=120, color_system=None))

        get_logger("parkinglot.allocation").info("Parked vehicle %s", "A1")

        assert logger.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in logger.handlers)
        assert "Parked vehicle A1" in output.getvalue()

    def test_configure_logging_is_idempotent(self):
        console = Console(file=StringIO())
        configure_logging("WARNING", console=console)
        configure_logging("DEBUG", console=console)

        assert len(self.root.handlers) == 1
        assert self.root.level == logging.DEBUG

    def test_configure_logging_with_file(self, tmp_path):
        log_file = tmp_path / "parkinglot.log"
        configure_logging("INFO", log_file=str(log_file),
                          console=Console(file=StringIO()))

        get_logger("parkinglot.console").warning("Vehicle %s not found", "R")
        for handler in self.root.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "WARNING" in content
        assert "parkinglot.console - Vehicle R not found" in content
