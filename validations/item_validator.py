from typing import Any, Dict

from pydantic import ValidationError

from models import Item
from registry import DuplicateItemError, Registry


def _validate_against_registry(item: Item, registry: Registry) -> Item:
    if item.id in registry:
        raise DuplicateItemError(item.id)
    return item


def parse_and_validate_item(payload: Dict[str, Any], registry: Registry | None = None) -> Item:
    """
    Convert a raw payload (dict) into an Item and, when a registry is given,
    check that its id is not already taken. The registry is never modified.
    Raises ValidationError or DuplicateItemError on failure.
    """
    item = Item.model_validate(payload)
    if registry is None:
        return item
    return _validate_against_registry(item, registry)
