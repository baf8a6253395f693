"""Unit tests for the in-memory widget tree."""

import pytest

from widgetmatch.exceptions import AdapterAccessError
from widgetmatch.hal.interfaces.widget_tree import CHECKED, TEXT, TOOLTIP, MouseButton
from widgetmatch.mock import MockComponent, MockTreeItem
from widgetmatch.model import Bounds


class TestStructure:
    """Test parent links, containers and visibility."""

    def test_add_links_parent(self) -> None:
        panel = MockComponent("Panel")
        child = panel.add(MockComponent("Label"))
        assert child.get_parent() is panel
        assert panel.get_children() == [child]
        assert panel.is_container()

    def test_children_argument(self) -> None:
        label = MockComponent("Label")
        panel = MockComponent("Panel", children=[label])
        assert label.parent is panel

    def test_explicit_container_flag(self) -> None:
        assert MockComponent("Panel", container=True).is_container()
        assert not MockComponent("Label").is_container()

    def test_visibility_follows_parent(self) -> None:
        panel = MockComponent("Panel")
        child = panel.add(MockComponent("Label"))
        assert child.is_showing()
        panel.visible = False
        assert not child.is_showing()

    def test_geometry(self) -> None:
        c = MockComponent("forms.ui.TextField", 10, 20, 100, 29)
        assert c.get_bounds() == Bounds(10, 20, 100, 29)
        assert (c.x, c.y, c.width, c.height) == (10, 20, 100, 29)
        assert c.base_type == "TextField"


class TestProperties:
    """Test property reads and failures."""

    def test_optional_string(self) -> None:
        c = MockComponent("TextField", text="42")
        assert c.optional_string(TEXT) == "42"
        assert c.optional_string(TOOLTIP) is None

    def test_failing_property_raises_on_raw_read(self) -> None:
        c = MockComponent("TextField", text="42", failing_properties={TEXT})
        with pytest.raises(AdapterAccessError) as exc_info:
            c.read_property(TEXT)
        assert exc_info.value.property_name == TEXT

    def test_failing_property_reads_as_absent(self) -> None:
        c = MockComponent("CheckBox", checked=True, failing_properties={CHECKED})
        assert c.optional_bool(CHECKED) is None


class TestEvents:
    """Test recording of dispatched events."""

    def test_click_is_recorded(self) -> None:
        c = MockComponent("Button")
        c.dispatch_mouse_click()
        assert c.events == [{"type": "click", "button": "left", "x": 5, "y": 5}]

    def test_left_click_toggles_checkbox(self) -> None:
        box = MockComponent("CheckBox", checked=False)
        box.dispatch_mouse_click()
        assert box.properties[CHECKED] is True
        box.dispatch_mouse_click(MouseButton.RIGHT)
        assert box.properties[CHECKED] is True

    def test_set_text_and_key(self) -> None:
        c = MockComponent("TextField", text="old")
        c.set_text("new")
        c.dispatch_key("TAB")
        assert c.properties[TEXT] == "new"
        assert c.events == [{"type": "set_text", "value": "new"}, {"type": "key", "key": "TAB"}]


class TestMockTreeItem:
    """Test the in-memory tree item."""

    def test_expand_and_select(self) -> None:
        leaf = MockTreeItem("Open")
        item = MockTreeItem("Orders", [leaf])
        assert item.get_items() == [leaf]
        assert not item.is_expanded()
        item.set_expanded(True)
        leaf.select()
        assert item.is_expanded()
        assert leaf.selected
