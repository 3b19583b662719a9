"""Parser for ``wpctl status`` output.

Extracts the audio sinks from the tree-formatted status report:

    Audio
     ├─ Devices:
     │      42. Built-in Audio                      [alsa]
     │
     ├─ Sinks:
     │  *   47. Built-in Audio Analog Stereo        [vol: 0.40]
     │      53. HDMI / DisplayPort 1 Output         [vol: 1.00]
     │
     ├─ Sources:
"""

import re
from typing import Protocol

from sinkpick.logging_config import get_logger
from sinkpick.models import SinkRecord

logger = get_logger(__name__)

TREE_GLYPHS = re.compile(r"├|─|│|└")
SINKS_HEADER = "Sinks:"
SINK_LINE = re.compile(
    r"(?P<current>\*?)\s*(?P<num>[0-9]*)\. (?P<name>.*)\[(?P<vol>.*)\]"
)


class StatusSource(Protocol):
    """Anything that can produce `wpctl status` output."""

    def status(self) -> str: ...


class SinkParseError(Exception):
    """Status output could not be turned into a sink list."""

    pass


class SectionNotFoundError(SinkParseError):
    """The status output has no "Sinks:" section."""

    def __init__(self, message: str = f"No '{SINKS_HEADER}' section in wpctl status output"):
        super().__init__(message)


class MalformedSinkLineError(SinkParseError):
    """A line inside the sinks section does not look like a sink."""

    def __init__(self, line: str, position: int):
        super().__init__(f"Malformed sink line {position}: {line!r}")
        self.line = line
        self.position = position


def strip_tree_glyphs(text: str) -> str:
    """Remove the box-drawing characters wpctl uses to indent its tree."""
    return TREE_GLYPHS.sub("", text)


def _sinks_block(lines: list[str]) -> list[str]:
    """Return the stripped lines between the sinks header and the next blank line."""
    start = next(
        (i for i, line in enumerate(lines) if SINKS_HEADER in line), None
    )
    if start is None:
        raise SectionNotFoundError()

    block = []
    for line in lines[start + 1:]:
        line = line.strip()
        # A blank line closes the section; the Video section follows later
        if not line:
            break
        block.append(line)
    return block


def parse_sink_line(line: str, position: int = 1) -> SinkRecord:
    """Parse a single line of the sinks section.

    Args:
        line: Stripped sink line, e.g. "* 47. Speakers [vol: 0.40]"
        position: 1-based position of the line in the section (for errors)

    Returns:
        Parsed sink record

    Raises:
        MalformedSinkLineError: If the line does not match the sink pattern
    """
    match = SINK_LINE.search(line)
    if match is None:
        raise MalformedSinkLineError(line, position)

    return SinkRecord(
        display_name=match.group("current") + match.group("name").strip(),
        identifier=match.group("num"),
        volume=match.group("vol").strip(),
    )


def parse_sinks(raw_output: str) -> tuple[SinkRecord, ...]:
    """Parse the audio sinks out of ``wpctl status`` output.

    Args:
        raw_output: Full stdout of ``wpctl status``

    Returns:
        Sinks in the order wpctl lists them (possibly empty)

    Raises:
        SectionNotFoundError: If there is no "Sinks:" header
        MalformedSinkLineError: If any line of the section is not a sink
    """
    lines = strip_tree_glyphs(raw_output).split("\n")
    block = _sinks_block(lines)
    return tuple(
        parse_sink_line(line, position)
        for position, line in enumerate(block, start=1)
    )


def retrieve_sinks(client: StatusSource) -> tuple[SinkRecord, ...]:
    """Query wpctl and parse the current sinks.

    Args:
        client: WpctlClient or another source of status output

    Returns:
        Parsed sinks
    """
    sinks = parse_sinks(client.status())
    logger.info(f"Found {len(sinks)} sink(s)")
    for sink in sinks:
        logger.debug(f"Sink {sink.identifier or '?'}: {sink.display_name} [{sink.volume}]")
    return sinks
