"""Main entry point for jpbizdays."""

import logging
import os
import sys

from rich.console import Console
from rich.table import Table

from jpbizdays.app import BusinessCalendarApp
from jpbizdays.business_calendar import BusinessCalendar
from jpbizdays.config import DEFAULT_CONFIG_PATH, Configuration
from jpbizdays.dates import WEEKDAY_NAMES
from jpbizdays.errors import JapaneseBusinessDaysError, suggestions_for

LOG_LEVEL_ENV = "JPBIZDAYS_LOG_LEVEL"


def configure() -> None:
    """Interactive configuration setup."""
    # Using sys.stdout.write for interactive prompts is allowed
    sys.stdout.write("jpbizdays Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    sys.stdout.write(
        "Weekdays: " + ", ".join(f"{i}={name}" for i, name in enumerate(WEEKDAY_NAMES)) + "\n"
    )
    raw = input("Weekend days [0,6]: ") or "0,6"

    config = Configuration.load() or Configuration()
    config.set_weekend_days(int(part) for part in raw.split(",") if part.strip())
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def print_holidays(year: int) -> None:
    """Print the public holidays of a year as a table."""
    calendar = BusinessCalendar(Configuration.from_env() or Configuration.load())
    table = Table(title=f"Japanese public holidays {year}")
    table.add_column("Date")
    table.add_column("Day")
    table.add_column("Name")
    table.add_column("Kind")

    for holiday in calendar.holidays_in_year(year):
        table.add_row(
            holiday.date.isoformat(),
            holiday.date.strftime("%a"),
            holiday.name,
            holiday.kind.value,
        )

    Console().print(table)


def main() -> None:
    """Main entry point."""
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if len(sys.argv) > 1 and sys.argv[1] == "config":
            configure()
            return

        if len(sys.argv) > 2 and sys.argv[1] == "holidays":
            print_holidays(int(sys.argv[2]))
            return
    except JapaneseBusinessDaysError as e:
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {e}")
        for suggestion in suggestions_for(e):
            console.print(f"  • {suggestion}")
        sys.exit(1)
    except ValueError as e:
        Console(stderr=True).print(f"[red]Error:[/red] expected integers: {e}")
        sys.exit(1)

    # Run the TUI
    app = BusinessCalendarApp()
    app.run()


if __name__ == "__main__":
    main()
