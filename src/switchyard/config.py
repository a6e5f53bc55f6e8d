"""Dispatcher configuration.

DispatcherConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DispatcherConfig:
    """Dispatcher configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DispatcherConfig(log_level="debug", log_format="json")
    """

    # Logging
    logger_name: str = "switchyard.routing"
    log_level: str = "info"
    log_format: str = "text"  # "text" or "json"

    # Joins methods in the Allow header
    allow_separator: str = ", "
