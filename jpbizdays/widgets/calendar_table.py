"""Calendar table widget showing the days of a month."""

from datetime import date

from rich.text import Text
from textual.widgets import DataTable

from jpbizdays.models import DayInfo, DayType

DAY_STYLES: dict[DayType, str] = {
    DayType.WEEKEND: "blue",
    DayType.HOLIDAY: "red",
    DayType.CUSTOM_HOLIDAY: "magenta",
    DayType.CUSTOM_BUSINESS_DAY: "cyan",
}


class CalendarTable(DataTable):
    """Table displaying the monthly calendar with business day status."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cursor_type = "row"
        self.show_cursor = True
        self.zebra_stripes = True
        self.can_focus = True

    def on_mount(self) -> None:
        """Set up the table columns."""
        # "MM/DD (Day)" = 13 chars
        self.add_column("Date", width=13)
        self.add_column("Status", width=14)
        self.add_column("Business Day #", width=16)
        self.add_column("Note")

    def load_days(self, days: list[DayInfo], today: date | None = None) -> None:
        """Load the month's days into the table."""
        self.clear()
        if today is None:
            today = date.today()

        business_day_number = 0
        today_row_index = None

        for idx, day in enumerate(days):
            if day.is_business_day:
                business_day_number += 1

            date_display = f"{day.date.strftime('%m/%d')} {day.date.strftime('(%a)')}"
            status = "Business day" if day.is_business_day else "Closed"
            number = str(business_day_number) if day.is_business_day else "--"

            if day.date == today:
                style = "bold yellow"
                today_row_index = idx
            else:
                style = DAY_STYLES.get(day.day_type)

            cells = (date_display, status, number, day.label)
            if style:
                self.add_row(*(Text(cell, style=style) for cell in cells), key=day.date.isoformat())
            else:
                self.add_row(*cells, key=day.date.isoformat())

        if today_row_index is not None and len(self.rows) > 0:
            self.move_cursor(row=today_row_index)
