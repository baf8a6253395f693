"""Unit tests for table cell classification."""

from widgetmatch.config import configure
from widgetmatch.geometry import TableFieldClassifier
from widgetmatch.hal.interfaces.widget_tree import ACCESSIBLE_DESCRIPTION
from widgetmatch.mock import MockComponent


def field(x: int, y: int, label: str | None, height: int = 29, **kwargs) -> MockComponent:
    return MockComponent("TextField", x, y, 100, height, accessible_description=label, **kwargs)


class TestIsTableCell:
    """Test the repeating column signature."""

    def test_stacked_fields_with_same_label(self) -> None:
        fields = [field(10, 100, "Name"), field(10, 130, "Name")]
        classifier = TableFieldClassifier()
        assert classifier.is_table_cell(fields[0], fields)
        assert classifier.is_table_cell(fields[1], fields)

    def test_different_labels(self) -> None:
        fields = [field(10, 100, "Name"), field(10, 130, "City")]
        assert not TableFieldClassifier().is_table_cell(fields[0], fields)

    def test_different_columns(self) -> None:
        fields = [field(10, 100, "Name"), field(11, 130, "Name")]
        assert not TableFieldClassifier().is_table_cell(fields[0], fields)

    def test_distant_fields(self) -> None:
        """Two equal forms far apart on one page are not a table."""
        fields = [field(10, 100, "Name"), field(10, 400, "Name")]
        assert not TableFieldClassifier().is_table_cell(fields[0], fields)

    def test_unlabeled_field_is_never_a_cell(self) -> None:
        fields = [field(10, 100, None), field(10, 130, None)]
        assert not TableFieldClassifier().is_table_cell(fields[0], fields)

    def test_unreadable_label_is_never_a_cell(self) -> None:
        fields = [field(10, 100, "Name", failing_properties={ACCESSIBLE_DESCRIPTION}), field(10, 130, "Name")]
        assert not TableFieldClassifier().is_table_cell(fields[0], fields)

    def test_single_field_is_not_a_cell(self) -> None:
        only = field(10, 100, "Name")
        assert not TableFieldClassifier().is_table_cell(only, [only])

    def test_row_spacing_larger_than_threshold(self) -> None:
        """Rows 30 apart with 25 high fields leave a 5 pixel gap."""
        fields = [field(10, 100, "Name", height=25), field(10, 130, "Name", height=25)]
        assert not TableFieldClassifier().is_table_cell(fields[0], fields)
        assert TableFieldClassifier(threshold=6).is_table_cell(fields[0], fields)

    def test_threshold_from_settings(self) -> None:
        configure(table_cell_threshold=6)
        fields = [field(10, 100, "Name", height=25), field(10, 130, "Name", height=25)]
        assert TableFieldClassifier().is_table_cell(fields[0], fields)


class TestPartition:
    """Test splitting a field list into standalone fields and cells."""

    def _fields(self) -> list[MockComponent]:
        return [
            field(10, 10, "Customer"),
            field(200, 130, "Age"),
            field(10, 130, "Name"),
            field(10, 100, "Name"),
            field(200, 100, "Age"),
            field(10, 40, "City"),
        ]

    def test_purge_keeps_standalone_fields_in_order(self) -> None:
        fields = self._fields()
        plain = TableFieldClassifier().purge_table_fields(fields)
        assert [f.properties["accessible_description"] for f in plain] == ["Customer", "City"]

    def test_purge_is_idempotent(self) -> None:
        classifier = TableFieldClassifier()
        once = classifier.purge_table_fields(self._fields())
        assert classifier.purge_table_fields(once) == once

    def test_table_fields_in_reading_order(self) -> None:
        fields = self._fields()
        cells = TableFieldClassifier().table_fields(fields)
        assert [(c.x, c.y) for c in cells] == [(10, 100), (200, 100), (10, 130), (200, 130)]

    def test_partition_is_complete(self) -> None:
        fields = self._fields()
        classifier = TableFieldClassifier()
        plain = classifier.purge_table_fields(fields)
        cells = classifier.table_fields(fields)
        assert len(plain) + len(cells) == len(fields)
        assert not {id(c) for c in plain} & {id(c) for c in cells}
