"""Rendering of the picker.

render_menu() is a pure function of the selection state, the sinks and the
config; the screen calls it again after every event.
"""

from typing import Optional, Sequence

from rich.text import Text

from sinkpick.config import PickerConfig
from sinkpick.models import SinkRecord
from sinkpick.state import Phase, SelectionState

ELLIPSIS = "…"
DOT = "•"
ITEM_INDENT = "    "
SELECTED_PREFIX = "  > "


def outcome_message(state: SelectionState) -> Optional[str]:
    """Message shown once the session has ended, None while browsing."""
    if state.phase is Phase.CONFIRMED:
        return f"Setting {state.chosen.display_name}."
    if state.phase is Phase.CANCELLED:
        return "Skipping for now..."
    return None


def page_bounds(cursor: int, total: int, rows: int) -> tuple[int, int]:
    """Return the [start, end) slice of the page holding the cursor."""
    if total == 0:
        return 0, 0
    start = (cursor // rows) * rows
    return start, min(start + rows, total)


def truncate(text: str, width: int) -> str:
    """Cut text to width cells, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    if width <= 1:
        return ELLIPSIS[:width]
    return text[: width - 1] + ELLIPSIS


def render_menu(
    state: SelectionState,
    sinks: Sequence[SinkRecord],
    config: PickerConfig,
    width: Optional[int] = None,
) -> Text:
    """Render the picker for the given state.

    Args:
        state: Current selection state
        sinks: Sinks being chosen from
        config: Picker configuration (page size, width, colors)
        width: Available terminal width; rows are cut to the smaller of this
            and config.item_width

    Returns:
        Styled text for the whole picker
    """
    theme = config.theme
    background = f"on {theme.background}"

    message = outcome_message(state)
    if message is not None:
        return Text(message, style=f"{theme.message} {background}")

    width = min(width, config.item_width) if width else config.item_width
    rows = config.visible_row_count
    text = Text()
    text.append(f"  {config.title}", style=f"{theme.title} {background}")
    text.append("\n\n")

    if not sinks:
        text.append(f"{ITEM_INDENT}No items.", style=f"{theme.item} {background}")
        return text

    start, end = page_bounds(state.cursor, len(sinks), rows)
    for index in range(start, end):
        label = f"{index + 1}. {sinks[index].display_name}"
        if index == state.cursor:
            line = SELECTED_PREFIX + label
            style = f"{theme.selected} {background}"
        else:
            line = ITEM_INDENT + label
            style = f"{theme.item} {background}"
        text.append(truncate(line, width), style=style)
        text.append("\n")

    pages = -(-len(sinks) // rows)
    if pages > 1:
        current_page = state.cursor // rows
        text.append("\n" + ITEM_INDENT)
        for page in range(pages):
            color = theme.active_dot if page == current_page else theme.inactive_dot
            text.append(DOT, style=color)

    text.rstrip()
    return text
