import logging
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from credential_api.app.core.logging_config import LOG_FORMAT, resolve_level, setup_logging


class TestResolveLevel(unittest.TestCase):
    def test_names_are_case_insensitive(self) -> None:
        self.assertEqual(resolve_level("warning"), logging.WARNING)
        self.assertEqual(resolve_level("ERROR"), logging.ERROR)

    def test_unknown_name_falls_back_to_info(self) -> None:
        self.assertEqual(resolve_level("chatty"), logging.INFO)

    def test_debug_flag_wins(self) -> None:
        self.assertEqual(resolve_level("ERROR", debug=True), logging.DEBUG)


class TestSetupLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger(f"credential_api.tests.{self.id()}")
        self.logger.propagate = False

    def tearDown(self) -> None:
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def test_attaches_console_handler(self) -> None:
        setup_logging("WARNING", logger=self.logger)
        self.assertEqual(self.logger.level, logging.WARNING)
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertEqual(self.logger.handlers[0].formatter._fmt, LOG_FORMAT)

    def test_debug_setting_lowers_level(self) -> None:
        setup_logging("INFO", debug=True, logger=self.logger)
        self.assertEqual(self.logger.level, logging.DEBUG)

    def test_second_call_only_updates_level(self) -> None:
        setup_logging("INFO", logger=self.logger)
        setup_logging("ERROR", logger=self.logger)
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertEqual(self.logger.level, logging.ERROR)

    def test_file_handler(self) -> None:
        with TemporaryDirectory() as td:
            logfile = Path(td) / "api.log"
            setup_logging("INFO", logfile=str(logfile), logger=self.logger)
            self.assertEqual(len(self.logger.handlers), 2)
            self.logger.info("record written")
            for handler in self.logger.handlers:
                handler.flush()
            self.assertIn("[INFO]", logfile.read_text(encoding="utf-8"))
            self.assertIn("record written", logfile.read_text(encoding="utf-8"))
            self.tearDown()


if __name__ == "__main__":
    unittest.main()
