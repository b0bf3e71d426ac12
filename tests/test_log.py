"""Test structured logging setup."""

import json

from centum import make
from centum.log import get_logger, setup_logging


class TestSetupLogging:

    def test_json_lines_on_stdout(self, capsys):
        setup_logging("DEBUG")
        get_logger("centum.test").info("budget_split", parts=12)

        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "budget_split"
        assert record["parts"] == 12
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self, capsys):
        setup_logging("WARNING")
        make(None)

        assert capsys.readouterr().out == ""

    def test_library_events_at_debug(self, capsys):
        setup_logging("debug")
        make(None)

        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "unsupported_input_zeroed"
        assert record["input_type"] == "NoneType"
