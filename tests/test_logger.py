import json
import logging
from ssi_crypto.logger import get_logger


def test_logger_writes_json_lines_to_file(tmp_path):
    log_file = tmp_path / "logs" / "ssi_crypto.log"
    logger = get_logger("ssi_crypto.test_file", level=logging.DEBUG, to_file=str(log_file))
    logger.debug("key created")
    for handler in logger.handlers:
        handler.flush()

    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["level"] == "DEBUG"
    assert record["name"] == "ssi_crypto.test_file"
    assert record["msg"] == "key created"


def test_logger_level_from_env(monkeypatch):
    monkeypatch.setenv("SSI_CRYPTO_LOG_LEVEL", "warning")
    logger = get_logger("ssi_crypto.test_env")
    assert logger.level == logging.WARNING


def test_logger_escapes_quotes_in_messages(tmp_path):
    log_file = tmp_path / "quotes.log"
    logger = get_logger("ssi_crypto.test_quotes", level=logging.INFO, to_file=str(log_file))
    logger.error('verkey "abc" rejected')
    for handler in logger.handlers:
        handler.flush()

    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["msg"] == 'verkey "abc" rejected'
