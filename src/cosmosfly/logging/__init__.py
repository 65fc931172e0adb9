"""cosmosfly Logging — hexagonal logging port and adapters."""

from cosmosfly.logging.port import LoggingPort
from cosmosfly.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
