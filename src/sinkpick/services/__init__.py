"""Services for sinkpick."""

from sinkpick.services.parser import (
    MalformedSinkLineError,
    SectionNotFoundError,
    SinkParseError,
    parse_sinks,
    retrieve_sinks,
)
from sinkpick.services.wpctl import CommandExecutionError, WpctlClient

__all__ = [
    "CommandExecutionError",
    "MalformedSinkLineError",
    "SectionNotFoundError",
    "SinkParseError",
    "WpctlClient",
    "parse_sinks",
    "retrieve_sinks",
]
