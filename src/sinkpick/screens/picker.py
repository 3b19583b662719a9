"""Picker screen.

Shows the sink list and turns key presses into selector inputs.
"""

from typing import Optional

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Static

from sinkpick.config import PickerConfig
from sinkpick.logging_config import get_logger
from sinkpick.state import Phase, Selector, SelectorInput
from sinkpick.view import outcome_message, render_menu

logger = get_logger(__name__)


class PickerScreen(Screen):
    """Screen listing the audio sinks."""

    BINDINGS = [
        ("up,k", "cursor_up", "Up"),
        ("down,j", "cursor_down", "Down"),
        ("pageup,left,h", "page_up", "Prev page"),
        ("pagedown,right,l", "page_down", "Next page"),
        Binding("home,g", "first", "First", show=False),
        Binding("end,G", "last", "Last", show=False),
        ("enter", "select", "Select"),
        ("q,escape", "cancel", "Quit"),
        Binding("ctrl+c", "cancel", "Quit", show=False, priority=True),
    ]

    def __init__(self, selector: Selector, config: PickerConfig):
        """Initialize the screen.

        Args:
            selector: Selection state machine over the sinks
            config: Picker configuration
        """
        super().__init__()
        self.selector = selector
        self.config = config
        self._width: Optional[int] = None

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Static(id="menu")
        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event."""
        self.styles.background = self.config.theme.background
        self._refresh_menu()

    def on_resize(self, event: events.Resize) -> None:
        """Re-layout for the new terminal width."""
        self._width = event.size.width
        self._dispatch(SelectorInput.RESIZE)

    def _refresh_menu(self) -> None:
        menu = self.query_one("#menu", Static)
        menu.update(
            render_menu(
                self.selector.state, self.selector.sinks, self.config, self._width
            )
        )

    def _dispatch(self, event: SelectorInput) -> None:
        """Feed one input to the selector, re-render and exit on a terminal phase."""
        if self.selector.phase is not Phase.BROWSING:
            return

        try:
            phase = self.selector.dispatch(event)
        except Exception as e:
            self.app.fail(e)
            return

        self._refresh_menu()
        if phase is not Phase.BROWSING:
            self.app.exit(result=outcome_message(self.selector.state))

    def action_cursor_up(self) -> None:
        self._dispatch(SelectorInput.UP)

    def action_cursor_down(self) -> None:
        self._dispatch(SelectorInput.DOWN)

    def action_page_up(self) -> None:
        self._dispatch(SelectorInput.PAGE_UP)

    def action_page_down(self) -> None:
        self._dispatch(SelectorInput.PAGE_DOWN)

    def action_first(self) -> None:
        self._dispatch(SelectorInput.HOME)

    def action_last(self) -> None:
        self._dispatch(SelectorInput.END)

    def action_select(self) -> None:
        """Make the highlighted sink the default."""
        self._dispatch(SelectorInput.CONFIRM)

    def action_cancel(self) -> None:
        """Quit without changing the default sink."""
        self._dispatch(SelectorInput.CANCEL)
