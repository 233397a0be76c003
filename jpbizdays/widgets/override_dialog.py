"""Dialog for overriding a single date."""

from datetime import date
from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class OverrideDialog(ModalScreen):
    """Modal dialog for marking a date as a company holiday or business day."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("escape", "dismiss", "Cancel"),
    ]

    CSS = """
    OverrideDialog {
        align: center middle;
    }

    #dialog {
        width: 60;
        height: auto;
        background: $panel;
        border: thick $primary;
        padding: 1 2;
    }

    #dialog-title {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
    }

    #button-row {
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    Button {
        margin: 0 1;
    }
    """

    def __init__(self, target_date: date, current: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.target_date = target_date
        self.current = current

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        with Vertical(id="dialog"):
            yield Static(
                f"Override {self.target_date.strftime('%Y-%m-%d (%a)')}", id="dialog-title"
            )
            yield Static(f"Currently: {self.current}")

            with Grid(id="button-row"):
                yield Button("Holiday", id="holiday-button", variant="error")
                yield Button("Business day", id="business-day-button", variant="primary")
                yield Button("Clear", id="clear-button", variant="default")
                yield Button("Cancel", id="cancel-button", variant="default")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        actions = {
            "holiday-button": "holiday",
            "business-day-button": "business_day",
            "clear-button": "clear",
        }
        action = actions.get(event.button.id or "")
        if action is None:
            self.dismiss(None)
        else:
            self.dismiss({"action": action, "date": self.target_date})
