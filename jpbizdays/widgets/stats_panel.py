"""Stats panel widget showing monthly figures."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Static

from jpbizdays.models import CacheStats, DayInfo, DayType


class StatsPanel(Container):
    """Panel displaying business day counts and cache usage."""

    def compose(self) -> ComposeResult:
        """Compose the stats panel."""
        with Horizontal(id="stats-row"):
            with Vertical(classes="stat-box"):
                yield Static("Loading...", id="stat-business-days")
                yield Static("", id="stat-closed-days")
                yield Static("", id="stat-holidays")

            with Vertical(classes="stat-box"):
                yield Static("", id="stat-custom-holidays")
                yield Static("", id="stat-custom-business-days")
                yield Static("", id="stat-weekend")

            with Vertical(classes="stat-box"):
                yield Static("", id="stat-cache-size")
                yield Static("", id="stat-cache-hits")
                yield Static("", id="stat-cache-memory")

    def update_stats(self, days: list[DayInfo], cache_stats: CacheStats, weekend: str) -> None:
        """Update the displayed statistics."""

        def count(day_type: DayType) -> int:
            return sum(1 for day in days if day.day_type == day_type)

        business_days = sum(1 for day in days if day.is_business_day)

        self.query_one("#stat-business-days", Static).update(
            f"[bold]Business Days:[/bold] {business_days}"
        )
        self.query_one("#stat-closed-days", Static).update(
            f"[bold]Closed Days:[/bold] {len(days) - business_days}"
        )
        self.query_one("#stat-holidays", Static).update(
            f"[red][bold]Public Holidays:[/bold] {count(DayType.HOLIDAY)}[/red]"
        )

        self.query_one("#stat-custom-holidays", Static).update(
            f"[magenta][bold]Company Holidays:[/bold] {count(DayType.CUSTOM_HOLIDAY)}[/magenta]"
        )
        self.query_one("#stat-custom-business-days", Static).update(
            f"[cyan][bold]Overrides:[/bold] {count(DayType.CUSTOM_BUSINESS_DAY)}[/cyan]"
        )
        self.query_one("#stat-weekend", Static).update(f"[bold]Weekend:[/bold] {weekend}")

        self.query_one("#stat-cache-size", Static).update(
            f"[bold]Cached Years:[/bold] {cache_stats.size}/{cache_stats.max_size}"
        )
        self.query_one("#stat-cache-hits", Static).update(
            f"[bold]Hit Rate:[/bold] {cache_stats.hit_rate:.0%}"
        )
        self.query_one("#stat-cache-memory", Static).update(
            f"[bold]Memory:[/bold] {cache_stats.memory_usage}"
        )

        self.refresh()
