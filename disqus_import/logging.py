"""Log output of an import run.

What shows up at each level:
- ERROR: the traceback of the error that aborted the import
- WARNING: comment files that could not be read back
- INFO: where the includes went, which export is read, the final
  "Wrote N comments for M threads" summary
- DEBUG: indexed/seen thread counts and one line per saved comment

The progress line on the console is separate and not a log record. Set
logging.level / logging.format in config.yaml or LOGGING_LEVEL /
LOGGING_FORMAT in the environment.
"""

import logging

from disqus_import.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# requests logs every connection of the include fetch through urllib3
QUIET_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Level constant for a name from config; INFO for names not in LEVELS."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class ImportLogging:
    """Root logger setup done once by the CLI before the import starts."""

    def __init__(self, config: LoggingConfig) -> None:
        self.level = _resolve_level(config.level)
        self.format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Replace any existing root handlers; keep urllib3 at WARNING unless debugging."""
        logging.basicConfig(level=self.level, format=self.format, force=True)
        quiet_level = logging.DEBUG if self.level <= logging.DEBUG else logging.WARNING
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(quiet_level)
