"""Tests for the Item value model."""

import pytest
from pydantic import ValidationError

from models import Item


def test_item_exposes_fields() -> None:
    """Test all three fields are readable after construction."""
    item = Item(id="ITEM001", description="LED Light", location="Aisle 3, Shelf 1")

    assert item.id == "ITEM001"
    assert item.description == "LED Light"
    assert item.location == "Aisle 3, Shelf 1"


def test_item_is_immutable() -> None:
    """Test assigning to a field is rejected."""
    item = Item(id="ITEM001", description="LED Light", location="Aisle 3, Shelf 1")

    with pytest.raises(ValidationError):
        item.location = "Aisle 9"

    assert item.location == "Aisle 3, Shelf 1"


def test_item_allows_empty_strings() -> None:
    """Test emptiness is not validated."""
    item = Item(id="", description="", location="")

    assert item.id == ""


def test_item_requires_all_fields() -> None:
    """Test a missing field fails construction."""
    with pytest.raises(ValidationError):
        Item(id="ITEM001", description="LED Light")


def test_items_compare_by_value() -> None:
    """Test equal fields give equal, hashable items."""
    first = Item(id="A", description="Apple", location="L1")
    second = Item(id="A", description="Apple", location="L1")

    assert first == second
    assert len({first, second}) == 1
