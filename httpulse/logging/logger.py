import logging
import sys

_CONTEXT_FIELDS = ("command", "category")


class _CommandContextFilter(logging.Filter):
    """Renders the command/category attributes of a record as a suffix."""

    def filter(self, record: logging.LogRecord) -> bool:
        pairs = [
            f"{field}={getattr(record, field)}"
            for field in _CONTEXT_FIELDS
            if hasattr(record, field)
        ]
        record.context = f" ({', '.join(pairs)})" if pairs else ""
        return True


class Log:
    """Backend logging facade.

    Keyword arguments are attached to the record as attributes, so a
    failure can carry its ``command`` and ``category`` alongside the text.
    """

    _logger: logging.Logger = logging.getLogger("httpulse")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.addFilter(_CommandContextFilter())
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s%(context)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
