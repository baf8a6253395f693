"""Unit tests for component choosers."""

import pytest

from widgetmatch.choosers import (
    UNLIMITED_DEPTH,
    ByClassChooser,
    ByComponentTypeChooser,
    ByNameChooser,
    ByRowChooser,
)
from widgetmatch.config import configure
from widgetmatch.model import ALL_TEXTFIELD_TYPES, ComponentType
from widgetmatch.mock import MockComponent


class TestDepth:
    """Test the depth cutoff shared by all choosers."""

    def test_default_is_unlimited(self) -> None:
        chooser = ByComponentTypeChooser()
        assert chooser.max_depth == UNLIMITED_DEPTH
        assert chooser.allows_descent(100)

    def test_limited_descent(self) -> None:
        chooser = ByComponentTypeChooser(ComponentType.PANEL, max_depth=2)
        assert chooser.allows_descent(1)
        assert not chooser.allows_descent(2)

    def test_invalid_depth(self) -> None:
        with pytest.raises(ValueError):
            ByComponentTypeChooser(ComponentType.PANEL, max_depth=-2)

    def test_depth_is_keyword_for_every_chooser(self) -> None:
        key = MockComponent("TextField", 10, 100, 100, 29)
        choosers = [
            ByComponentTypeChooser(ComponentType.PANEL, max_depth=2),
            ByClassChooser("forms.ui.Panel", max_depth=2),
            ByNameChooser("Save", max_depth=2),
            ByRowChooser(key, None, max_depth=2),
        ]
        assert [c.max_depth for c in choosers] == [2, 2, 2, 2]

    def test_repr_names_the_criteria(self) -> None:
        chooser = ByComponentTypeChooser(ComponentType.TEXT_FIELD, max_depth=1)
        assert repr(chooser) == "ByComponentTypeChooser(type in TextField, max_depth=1)"


class TestTypeChoosers:
    """Test selection by type tag."""

    def test_type_chooser_ignores_namespace(self) -> None:
        chooser = ByComponentTypeChooser(ComponentType.TEXT_FIELD)
        assert chooser.check_component(MockComponent("oracle.forms.ui.TextField"))
        assert chooser.check_component(MockComponent("TextField"))
        assert not chooser.check_component(MockComponent("TextArea"))

    def test_type_chooser_accepts_type_groups(self) -> None:
        chooser = ByComponentTypeChooser(ALL_TEXTFIELD_TYPES, "Label")
        assert chooser.types == frozenset({"TextField", "TextArea", "Label"})
        assert chooser.check_component(MockComponent("TextArea"))

    def test_class_chooser_compares_full_tag(self) -> None:
        chooser = ByClassChooser("forms.ui.TextField")
        assert chooser.check_component(MockComponent("forms.ui.TextField"))
        assert not chooser.check_component(MockComponent("other.TextField"))
        assert not chooser.check_component(MockComponent("TextField"))


class TestByNameChooser:
    """Test selection by display name."""

    def test_wildcard_name(self) -> None:
        chooser = ByNameChooser("Cust*")
        assert chooser.check_component(MockComponent("TextField", accessible_description="Customer"))
        assert not chooser.check_component(MockComponent("TextField", accessible_description="City"))

    def test_restricted_types(self) -> None:
        chooser = ByNameChooser("Save", ComponentType.PUSH_BUTTON)
        assert chooser.check_component(MockComponent("Button", label="Save"))
        assert not chooser.check_component(MockComponent("Label", accessible_description="Save"))

    def test_unrestricted_types(self) -> None:
        assert ByNameChooser("Save").check_component(MockComponent("Label", accessible_description="Save"))

    def test_description(self) -> None:
        chooser = ByNameChooser("Save", ComponentType.PUSH_BUTTON, max_depth=3)
        assert chooser.name == "Save"
        assert chooser.max_depth == 3
        assert chooser.get_description() == "name 'Save' and type in Button"


class TestByRowChooser:
    """Test selection within the row of a reference component."""

    def test_same_row_any_name(self) -> None:
        key = MockComponent("TextField", 10, 100, 100, 29)
        chooser = ByRowChooser(key, None, ComponentType.CHECK_BOX)
        assert chooser.reference is key
        assert chooser.check_component(MockComponent("CheckBox", 280, 101, 15, 15))
        assert not chooser.check_component(MockComponent("CheckBox", 280, 130, 15, 15))
        assert not chooser.check_component(MockComponent("TextField", 280, 100, 15, 15))

    def test_same_row_named(self) -> None:
        key = MockComponent("TextField", 10, 100, 100, 29)
        chooser = ByRowChooser(key, "Comment", ALL_TEXTFIELD_TYPES)
        assert chooser.check_component(MockComponent("TextField", 170, 100, accessible_description="Comment"))
        assert not chooser.check_component(MockComponent("TextField", 170, 100, accessible_description="Age"))

    def test_row_band_from_settings(self) -> None:
        configure(row_band_tolerance=35)
        key = MockComponent("TextField", 10, 100, 100, 29)
        assert ByRowChooser(key, None).check_component(MockComponent("CheckBox", 280, 130))

    def test_explicit_row_band(self) -> None:
        key = MockComponent("TextField", 10, 100, 100, 29)
        chooser = ByRowChooser(key, None, tolerance=1)
        assert chooser.check_component(MockComponent("CheckBox", 280, 100))
        assert not chooser.check_component(MockComponent("CheckBox", 280, 101))

    def test_description(self) -> None:
        key = MockComponent("TextField", 10, 100, 100, 29)
        chooser = ByRowChooser(key, "Comment", ComponentType.TEXT_FIELD)
        assert chooser.get_description() == "row at y=100 and name 'Comment' and type in TextField"
