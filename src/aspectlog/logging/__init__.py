"""aspectlog logging — hexagonal logging port and adapters."""

from aspectlog.logging.port import LoggingPort
from aspectlog.logging.settings import LoggingSettings
from aspectlog.logging.stdlib_adapter import StdlibLoggingAdapter
from aspectlog.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "LoggingSettings", "StdlibLoggingAdapter", "StructlogAdapter"]
