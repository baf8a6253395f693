"""Pytest configuration and fixtures.

Widget trees are built from MockComponent, so no UI toolkit is needed.
"""

import pytest

from widgetmatch.config import reset_settings
from widgetmatch.logging import setup_logging
from widgetmatch.mock import MockComponent


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Install log handlers before any test installs its capture handlers."""
    setup_logging(level="INFO", structured=True, colorize=False)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Give every test settings read from a clean environment."""
    for name in ("WIDGETMATCH_STRICT_ROW_MATCH", "WIDGETMATCH_COMMIT_KEY", "WIDGETMATCH_ALIGNMENT_TOLERANCE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def text_field(x, y, text=None, label=None, width=100, height=29, editable=True, **kwargs):
    """Create a text field component."""
    return MockComponent(
        "forms.ui.TextField",
        x,
        y,
        width,
        height,
        text=text,
        accessible_description=label,
        editable=editable,
        **kwargs,
    )


@pytest.fixture
def form_window():
    """A window with two standalone fields, a button and a three-row table.

    Table layout (rows 30px apart, fields 29px high, 5px column gaps):

        y=100  Name=Alice  Age=42  Comment=first   [ ]
        y=130  Name=Bob    Age=42  Comment=second  [ ]
        y=160  Name=Alice  Age=37  Comment=third   [ ]
    """
    window = MockComponent("Window", 0, 0, 800, 600, name="main")

    header = window.add(MockComponent("Panel", 0, 0, 800, 60, container=True))
    header.add(text_field(10, 10, text="ACME", label="Customer"))
    header.add(text_field(10, 40, text="Berlin", label="City:", editable=False, width=150, height=15))
    header.add(MockComponent("forms.ui.Button", 200, 10, 60, 20, label="OK"))

    table = window.add(MockComponent("Panel", 0, 90, 800, 200, container=True))
    rows = [("Alice", "42", "first"), ("Bob", "42", "second"), ("Alice", "37", "third")]
    for index, (name, age, comment) in enumerate(rows):
        y = 100 + index * 30
        table.add(text_field(10, y, text=name, label="Name"))
        table.add(text_field(115, y, text=age, label="Age", width=50))
        table.add(text_field(170, y, text=comment, label="Comment"))
        table.add(MockComponent("forms.ui.CheckBox", 280, y, 15, 15, checked=False))

    return window


def _find_by_text(root, text):
    stack = [root]
    while stack:
        component = stack.pop(0)
        if component.properties.get("text") == text:
            return component
        stack[0:0] = component.children
    raise LookupError(text)


@pytest.fixture
def make_field():
    """Factory for text field components."""
    return text_field


@pytest.fixture
def field_at(form_window):
    """Look up a field of the form window by its text."""
    return lambda text: _find_by_text(form_window, text)

