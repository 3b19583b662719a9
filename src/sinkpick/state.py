"""Selection state for the sink picker.

The picker is a small finite-state machine: it starts in BROWSING, where
navigation moves the cursor, and ends in either CONFIRMED (a sink was chosen)
or CANCELLED. Terminal phases ignore all further input.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Sequence

from sinkpick.logging_config import get_logger
from sinkpick.models import SinkRecord

logger = get_logger(__name__)


class Phase(Enum):
    """Phases of a picker session."""

    BROWSING = auto()
    CONFIRMED = auto()
    CANCELLED = auto()


class SelectorInput(Enum):
    """Logical inputs the selector understands."""

    UP = auto()
    DOWN = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    CONFIRM = auto()
    CANCEL = auto()
    RESIZE = auto()


@dataclass
class SelectionState:
    """Transient UI state of one picker session.

    Attributes:
        cursor: Index of the highlighted sink
        chosen: Sink chosen on confirm
        cancelled: Whether the user quit without choosing
    """

    cursor: int = 0
    chosen: Optional[SinkRecord] = None
    cancelled: bool = False

    @property
    def phase(self) -> Phase:
        if self.chosen is not None:
            return Phase.CONFIRMED
        if self.cancelled:
            return Phase.CANCELLED
        return Phase.BROWSING


class Selector:
    """Drives a SelectionState from selector inputs.

    Args:
        sinks: Sinks to choose from (never modified)
        page_size: Cursor step for PAGE_UP/PAGE_DOWN
        on_confirm: Called once with the chosen sink when entering CONFIRMED.
            Exceptions it raises propagate out of dispatch().
    """

    def __init__(
        self,
        sinks: Sequence[SinkRecord],
        page_size: int = 1,
        on_confirm: Optional[Callable[[SinkRecord], None]] = None,
    ):
        self.sinks = tuple(sinks)
        self.page_size = max(1, page_size)
        self.on_confirm = on_confirm
        self.state = SelectionState()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def current(self) -> Optional[SinkRecord]:
        """Sink under the cursor, None when there are no sinks."""
        if not self.sinks:
            return None
        return self.sinks[self.state.cursor]

    def _move_to(self, index: int) -> None:
        last = max(len(self.sinks) - 1, 0)
        self.state.cursor = min(max(index, 0), last)

    def dispatch(self, event: SelectorInput) -> Phase:
        """Apply one input and return the resulting phase."""
        if self.phase is not Phase.BROWSING:
            return self.phase

        cursor = self.state.cursor
        if event is SelectorInput.UP:
            self._move_to(cursor - 1)
        elif event is SelectorInput.DOWN:
            self._move_to(cursor + 1)
        elif event is SelectorInput.PAGE_UP:
            self._move_to(cursor - self.page_size)
        elif event is SelectorInput.PAGE_DOWN:
            self._move_to(cursor + self.page_size)
        elif event is SelectorInput.HOME:
            self._move_to(0)
        elif event is SelectorInput.END:
            self._move_to(len(self.sinks) - 1)
        elif event is SelectorInput.CONFIRM:
            self._confirm()
        elif event is SelectorInput.CANCEL:
            self.state.cancelled = True
            logger.info("Selection cancelled")

        return self.phase

    def _confirm(self) -> None:
        record = self.current
        if record is None:
            logger.debug("Confirm ignored: no sinks to choose from")
            return

        self.state.chosen = record
        logger.info(f"Selected sink {record.identifier or '?'}: {record.display_name}")
        if self.on_confirm is not None:
            self.on_confirm(record)
