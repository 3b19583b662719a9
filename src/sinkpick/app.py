"""Main TUI application for sinkpick.

Textual-based picker that makes the chosen audio sink the default.
"""

from typing import Optional, Sequence

from textual.app import App

from sinkpick.config import PickerConfig
from sinkpick.logging_config import get_logger
from sinkpick.models import SinkRecord
from sinkpick.screens.picker import PickerScreen
from sinkpick.services.wpctl import WpctlClient
from sinkpick.state import Selector, SelectorInput
from sinkpick.view import outcome_message

logger = get_logger(__name__)


class SinkPickApp(App):
    """Audio sink picker.

    The app exits with the outcome message as its return value
    ("Setting <sink>." or "Skipping for now..."). If applying the selection
    fails, the error is kept in ``error`` and the return code is 1.
    """

    CSS_PATH = "screens/app.tcss"
    TITLE = "sinkpick"

    def __init__(
        self,
        sinks: Sequence[SinkRecord],
        client: WpctlClient,
        config: PickerConfig,
        *args,
        **kwargs,
    ):
        """Initialize the application.

        Args:
            sinks: Parsed sinks to choose from
            client: wpctl client used to apply the selection
            config: Picker configuration
        """
        super().__init__(*args, **kwargs)
        self.config = config
        self.client = client
        self.error: Optional[Exception] = None
        self.selector = Selector(
            sinks,
            page_size=config.visible_row_count,
            on_confirm=self.apply_selection,
        )

    def on_mount(self) -> None:
        """Handle app mount event."""
        logger.info(f"App mounted with {len(self.selector.sinks)} sink(s)")
        self.push_screen(PickerScreen(self.selector, self.config))

    def apply_selection(self, record: SinkRecord) -> None:
        """Make the chosen sink the default."""
        logger.info(f"Applying default sink {record.identifier}: {record.display_name}")
        self.client.set_default(record.identifier)

    def fail(self, error: Exception) -> None:
        """Stop the app after a fatal error (a failed wpctl call or a bug)."""
        logger.error(f"Fatal: {error}", exc_info=error)
        self.error = error
        self.exit(return_code=1)

    def action_quit(self) -> None:
        """Quit without changing the default sink."""
        self.selector.dispatch(SelectorInput.CANCEL)
        self.exit(result=outcome_message(self.selector.state))
