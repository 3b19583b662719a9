"""Configuration for the sink picker.

Defaults reproduce the zenburn-like look of the original picker. A TOML file
can override them, but only when passed explicitly with ``--config``; the
picker never writes configuration.

Example file::

    [picker]
    visible_row_count = 6
    item_width = 40

    [theme]
    selected = "#8cd0d3"
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import tomllib


@dataclass
class Theme:
    """Colors used to render the picker.

    Attributes:
        background: Background of every styled element
        title: List title
        item: Unselected rows
        selected: Row under the cursor
        message: Final "Setting ..." / "Skipping ..." message
        active_dot: Pagination dot of the current page
        inactive_dot: Pagination dots of the other pages
    """

    background: str = "#3f3f3f"
    title: str = "#efef8f"
    item: str = "#dcdccc"
    selected: str = "#7f9f7f"
    message: str = "#efef8f"
    active_dot: str = "#cc9393"
    inactive_dot: str = "#dfdfdf"


@dataclass
class PickerConfig:
    """Presentation and command settings for the picker.

    Attributes:
        visible_row_count: Number of sinks shown per page
        item_width: Maximum row width; narrower terminals cut rows to their
            own width
        title: Title shown above the list
        wpctl_path: Name or path of the wpctl binary
        theme: Color scheme
    """

    visible_row_count: int = 9
    item_width: int = 60
    title: str = "Select an audio sink"
    wpctl_path: str = "wpctl"
    theme: Theme = field(default_factory=Theme)

    @classmethod
    def load(cls, path: Path) -> "PickerConfig":
        """Load configuration from a TOML file.

        Args:
            path: Path to the config file

        Returns:
            PickerConfig with file values over the defaults

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file has unknown keys or invalid values
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls(theme=Theme(**_known(Theme, data.get("theme", {}))))
        for key, value in _known(cls, data.get("picker", {})).items():
            if key == "theme":
                raise ValueError("Theme colors belong in the [theme] table")
            setattr(config, key, value)

        config.validate()
        return config

    def override(self, **values: Any) -> "PickerConfig":
        """Apply non-None values (e.g. CLI options) on top of this config."""
        for key, value in values.items():
            if value is not None:
                setattr(self, key, value)
        self.validate()
        return self

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ValueError: If a size is not positive
        """
        if self.visible_row_count < 1:
            raise ValueError(f"visible_row_count must be at least 1, got {self.visible_row_count}")
        if self.item_width < 1:
            raise ValueError(f"item_width must be at least 1, got {self.item_width}")


def _known(cls: type, table: dict[str, Any]) -> dict[str, Any]:
    """Return the table, rejecting keys the dataclass doesn't define."""
    names = {f.name for f in fields(cls)}
    unknown = sorted(set(table) - names)
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} setting(s): {', '.join(unknown)}")
    return table
