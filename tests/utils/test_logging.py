import json
import logging

import structlog

from liteid.config import LoggingSettings
from liteid.utils.logging import JsonFormatter, configure_logging


def test_json_formatter_scrubs_fields():
    formatter = JsonFormatter(scrub_fields=["token"])
    record = logging.LogRecord("liteid", logging.INFO, __file__, 1, "generated", (), None)
    record.token = "secret"
    record.details = {"token": "nested", "variant": "short"}
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "generated"
    assert payload["token"] == "***"
    assert payload["details"] == {"token": "***", "variant": "short"}


def test_structlog_events_are_rendered_as_json(capsys):
    configure_logging(settings=LoggingSettings(level="DEBUG", scrub_fields=["seed"]))
    logger = structlog.get_logger("liteid.test")
    logger.info("identifier.generated", variant="short", seed="1700000000.1-abc")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "identifier.generated"
    assert payload["level"] == "info"
    assert payload["seed"] == "***"


def test_configure_logging_filters_below_level(capsys):
    configure_logging(level="WARNING")
    structlog.get_logger("liteid.test").debug("identifier.generated")
    assert capsys.readouterr().err == ""
    assert logging.getLogger().level == logging.WARNING
