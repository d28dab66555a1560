import logging
from bisect import bisect_left, insort
from typing import Dict, List, Tuple

from models import Item

from .errors import DuplicateItemError, ItemNotFoundError

logger = logging.getLogger(__name__)


class Registry:
    """
    In-memory store of items with two indexes:

    - by id: dict owning every item, the authority for existence and uniqueness.
    - by description: sorted list of (description, id) keys into the id index.
      Items sharing a description coexist and are ordered by id.

    Both indexes always hold the same set of ids. Every mutation checks its
    precondition before touching either index, so a rejected call leaves the
    registry unchanged.
    """

    def __init__(self, name: str = "inventory") -> None:
        self.name = name
        self._items_by_id: Dict[str, Item] = {}
        self._description_keys: List[Tuple[str, str]] = []

    def add(self, item: Item) -> None:
        """Insert the item into both indexes. Raises DuplicateItemError if the id is taken."""
        if item.id in self._items_by_id:
            logger.info("Registry %s rejected duplicate id %s", self.name, item.id)
            raise DuplicateItemError(item.id)

        self._items_by_id[item.id] = item
        insort(self._description_keys, (item.description, item.id))
        logger.debug("Registry %s added %s (%s)", self.name, item.id, item.description)

    def find_by_id(self, item_id: str) -> Item:
        item = self._items_by_id.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def get(self, item_id: str) -> Item | None:
        return self._items_by_id.get(item_id)

    def remove(self, item_id: str) -> Item:
        """Remove the item from both indexes and return it. Raises ItemNotFoundError if absent."""
        item = self._items_by_id.get(item_id)
        if item is None:
            logger.info("Registry %s cannot remove unknown id %s", self.name, item_id)
            raise ItemNotFoundError(item_id)

        key = (item.description, item.id)
        position = bisect_left(self._description_keys, key)
        # Both indexes hold the same ids, so the key sits at the bisect position.
        del self._description_keys[position]
        del self._items_by_id[item_id]
        logger.debug("Registry %s removed %s (%s)", self.name, item.id, item.description)
        return item

    def list_by_description(self) -> List[Tuple[str, str]]:
        """Snapshot of (description, location) pairs, ascending by description then id."""
        return [(item.description, item.location) for item in self.all()]

    def all(self) -> List[Item]:
        return [self._items_by_id[item_id] for _, item_id in self._description_keys]

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items_by_id

    def __len__(self) -> int:
        return len(self._items_by_id)
