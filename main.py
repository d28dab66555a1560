from typing import Any, Dict

from models import Item
from presentation import format_listing
from registry import Registry
from validations import parse_and_validate_item


def orchestrate_item_intake(payload: Dict[str, Any], registry: Registry) -> str:
    """
    Orchestrate the intake of a raw item payload:
    1. Validate against the Item schema and the registry's existing ids.
    2. Add to the registry.

    Returns the registered item id.
    """
    item: Item = parse_and_validate_item(payload, registry)
    registry.add(item)
    return item.id


def orchestrate_listing(registry: Registry) -> str:
    """Render the registry contents in description order."""
    return format_listing(registry.list_by_description())
