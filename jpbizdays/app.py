"""Main Textual application."""

from datetime import date
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.widgets import Footer, Header

from jpbizdays.business_calendar import BusinessCalendar
from jpbizdays.config import DEFAULT_CONFIG_PATH, Configuration
from jpbizdays.dates import WEEKDAY_NAMES
from jpbizdays.errors import JapaneseBusinessDaysError, suggestions_for
from jpbizdays.models import DayInfo
from jpbizdays.widgets import CalendarTable, OverrideDialog, StatsPanel


class BusinessCalendarApp(App):
    """Month-by-month Japanese business calendar."""

    CSS = """
    #main-container {
        height: 100%;
    }

    Vertical {
        height: 100%;
    }

    #stats-panel {
        height: 1fr;
        padding: 1;
        background: $panel;
        border: solid $primary;
    }

    #stats-row {
        height: 100%;
        width: 100%;
    }

    .stat-box {
        width: 1fr;
        padding: 0 1;
    }

    #calendar-table {
        height: 4fr;
        border: solid $primary;
        width: 100%;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("o", "override", "Override Day"),
        ("c", "current_month", "Current Month"),
        ("n", "next_month", "Next Month"),
        ("b", "prev_month", "Prev Month"),
        ("?", "help", "Help"),
    ]

    def __init__(self, configuration: Configuration | None = None) -> None:
        super().__init__()
        self.today = date.today()
        self.current_year = self.today.year
        self.current_month = self.today.month
        self.configuration = (
            configuration or Configuration.from_env() or Configuration.load() or Configuration()
        )
        self.calendar = BusinessCalendar(self.configuration)
        self.days: list[DayInfo] = []

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header(show_clock=True)
        with Container(id="main-container"), Vertical():
            yield StatsPanel(id="stats-panel")
            yield CalendarTable(id="calendar-table")
        yield Footer()

    def on_mount(self) -> None:
        """Show the current month when the app starts."""
        self.show_month()

    def show_month(self) -> None:
        """Recompute and display the selected month."""
        self.title = f"jpbizdays - {self.current_year}/{self.current_month:02d}"
        try:
            self.days = self.calendar.month_calendar(self.current_year, self.current_month)
        except JapaneseBusinessDaysError as e:
            hints = "; ".join(suggestions_for(e))
            self.notify(f"{e}. {hints}", severity="error")
            return

        weekend = ", ".join(
            WEEKDAY_NAMES[day][:3] for day in sorted(self.configuration.weekend_days)
        )
        stats_panel = self.query_one("#stats-panel", StatsPanel)
        stats_panel.update_stats(self.days, self.calendar.cache.stats(), weekend)

        calendar_table = self.query_one("#calendar-table", CalendarTable)
        calendar_table.load_days(self.days, self.today)
        calendar_table.focus()

    def action_next_month(self) -> None:
        """Navigate to next month."""
        self.current_month += 1
        if self.current_month > 12:
            self.current_month = 1
            self.current_year += 1
        self.show_month()

    def action_prev_month(self) -> None:
        """Navigate to previous month."""
        self.current_month -= 1
        if self.current_month < 1:
            self.current_month = 12
            self.current_year -= 1
        self.show_month()

    def action_current_month(self) -> None:
        """Navigate to the current month."""
        self.current_year = self.today.year
        self.current_month = self.today.month
        self.show_month()

    def action_override(self) -> None:
        """Open the override dialog for the selected date."""
        calendar_table = self.query_one("#calendar-table", CalendarTable)

        if calendar_table.cursor_coordinate is None:
            self.notify("Please select a date first", severity="warning")
            return

        try:
            row_key, _ = calendar_table.coordinate_to_cell_key(calendar_table.cursor_coordinate)
            # Row keys are ISO date strings
            target_date = date.fromisoformat(row_key.value or "")
        except (AttributeError, ValueError, IndexError) as e:
            self.notify(f"Invalid row selected: {e}", severity="warning")
            return

        day = next((d for d in self.days if d.date == target_date), None)
        current = day.day_type.value.replace("_", " ") if day else "unknown"
        self.push_screen(OverrideDialog(target_date, current), self.handle_override_result)

    def handle_override_result(self, result: dict | None) -> None:
        """Apply the choice made in the override dialog and persist it."""
        if result is None:
            return

        target_date = result["date"]
        if result["action"] == "holiday":
            self.configuration.add_holiday(target_date)
        elif result["action"] == "business_day":
            self.configuration.add_business_day(target_date)
        else:
            self.configuration.remove_override(target_date)

        self.configuration.save()
        self.notify(f"Saved override for {target_date}", severity="information")
        self.show_month()

    def action_help(self) -> None:
        """Show help message."""
        help_text = f"""
        [bold]jpbizdays - Keyboard Shortcuts[/bold]

        [cyan]q[/cyan] - Quit application
        [cyan]n[/cyan] / [cyan]b[/cyan] - Next / previous month
        [cyan]c[/cyan] - Current month
        [cyan]o[/cyan] - Override the selected day
        [cyan]?[/cyan] - Show this help

        [bold]Colours:[/bold]
        • [red]red[/red] public holiday, [blue]blue[/blue] weekend
        • [magenta]magenta[/magenta] company holiday, [cyan]cyan[/cyan] business day override

        Overrides are saved to {DEFAULT_CONFIG_PATH}
        """
        self.notify(help_text, title="Help", timeout=10)
