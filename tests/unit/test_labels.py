"""Tests for display labels."""

import pytest

from playable_catalog.catalog.contracts import Entry, FlatManagement, Instance, LayeredManagement
from playable_catalog.catalog.labels import FLAT_LABEL, LAYERED_LABEL, label_for


def _layered(instance_count: int) -> Entry:
    instances = tuple(Instance(id=f"i{n}", index=str(n)) for n in range(instance_count))
    return Entry(id="g2", name="Demo", manage=LayeredManagement(SugarCube=instances))


class TestLabelFor:
    """Tests for label_for."""

    def test_flat_label(self) -> None:
        """Test flat entries are tagged as plain HTML."""
        entry = Entry(id="g1", manage=FlatManagement(Plain="main.html"))

        assert label_for(entry) == "Plain HTML"
        assert FLAT_LABEL == "Plain HTML"

    @pytest.mark.parametrize("instance_count", [0, 1, 5])
    def test_layered_label_any_instance_count(self, instance_count: int) -> None:
        """Test layered entries are tagged regardless of instance count."""
        assert label_for(_layered(instance_count)) == LAYERED_LABEL == "SugarCube ML"

    def test_unknown_variant_fails_loudly(self) -> None:
        """Test a variant outside the union is never silently labeled."""
        entry = Entry.model_construct(id="g9", name=None, manage=object())

        with pytest.raises(AssertionError):
            label_for(entry)
