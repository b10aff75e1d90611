"""Key=value configuration files and the loggers every module writes to."""

import logging
import sys
from dataclasses import dataclass, field


@dataclass
class Config:
    """Configuration values read from a ``KEY=VALUE`` file."""

    values: dict = field(default_factory=dict)

    def get_string(self, key):
        """Return the raw value of ``key``; raise KeyError if it is absent."""
        try:
            return self.values[key]
        except KeyError:
            raise KeyError(f"missing configuration key: {key}") from None

    def get_int(self, key):
        """Return the value of ``key`` as an integer."""
        return int(self.get_string(key))

    def get_float(self, key):
        """Return the value of ``key`` as a float."""
        return float(self.get_string(key))


def load_config(path):
    """Read a configuration file.

    Blank lines and lines starting with ``#`` are ignored; every other line
    holding ``=`` is split at its first ``=`` into key and value.
    Raises OSError when the file cannot be read.
    """
    values = {}
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if sep:
                values[key.strip()] = value.strip()
    return Config(values)


def _create_logger(name, path):
    """Return an INFO logger writing both to ``path`` and to the console."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.INFO)
    logger.propagate = False
    formatter = logging.Formatter(
        "[%(levelname)s] %(asctime)s %(name)s/(%(process)d:%(thread)d): %(message)s"
    )
    for handler in (logging.FileHandler(path, encoding="utf-8"), logging.StreamHandler(sys.stdout)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger