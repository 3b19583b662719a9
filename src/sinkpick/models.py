"""Data models for sinkpick."""

from dataclasses import dataclass

DEFAULT_MARKER = "*"


@dataclass(frozen=True)
class SinkRecord:
    """One audio sink as reported by ``wpctl status``.

    Attributes:
        display_name: Sink name, prefixed with the default marker when the
            sink is the current default (e.g. "*Speakers")
        identifier: WirePlumber object id used by ``wpctl set-default``,
            empty when the status line carries no index
        volume: Contents of the trailing "[...]" field (e.g. "vol: 0.50")
    """

    display_name: str
    identifier: str
    volume: str = ""

    @property
    def is_default(self) -> bool:
        """Whether this sink is the current default."""
        return self.display_name.startswith(DEFAULT_MARKER)

    @property
    def name(self) -> str:
        """Sink name without the default marker."""
        if self.is_default:
            return self.display_name[len(DEFAULT_MARKER):]
        return self.display_name
