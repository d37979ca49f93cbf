import logging, json, sys, time, os

LOG_LEVEL_ENV = "SSI_CRYPTO_LOG_LEVEL"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record; the message is escaped, never spliced into a template."""

    converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def get_logger(name="ssi_crypto", level=None, to_file=None):
    """JSON-lines logger shared by every ssi_crypto module; level falls back to $SSI_CRYPTO_LOG_LEVEL."""
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else os.getenv(LOG_LEVEL_ENV, "INFO").upper())

    if logger.handlers:
        return logger

    formatter = JsonLineFormatter()
    handlers = [logging.StreamHandler(sys.stdout)]
    if to_file:
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(to_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
