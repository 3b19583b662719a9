"""Screens for sinkpick."""

from sinkpick.screens.picker import PickerScreen

__all__ = ["PickerScreen"]
