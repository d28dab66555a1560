from typing import Iterable, Tuple

from models import Item
from registry import RegistryError

LISTING_HEADING = "Items in Description Order:"


def format_listing(entries: Iterable[Tuple[str, str]]) -> str:
    """Render (description, location) pairs as a bulleted block under a heading."""
    lines = [LISTING_HEADING]
    for description, location in entries:
        lines.append(f"- {description}: {location}")
    return "\n".join(lines)


def format_item(item: Item) -> str:
    return f"Found: {item.description} at {item.location}"


def format_error(error: RegistryError) -> str:
    return f"Error: {error}"
