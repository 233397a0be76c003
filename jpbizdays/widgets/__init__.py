"""Textual widgets for the TUI."""

from jpbizdays.widgets.calendar_table import CalendarTable
from jpbizdays.widgets.override_dialog import OverrideDialog
from jpbizdays.widgets.stats_panel import StatsPanel

__all__ = ["CalendarTable", "OverrideDialog", "StatsPanel"]
