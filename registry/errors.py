class RegistryError(Exception):
    """Base class for rejected registry operations."""

    def __init__(self, item_id: str, message: str) -> None:
        super().__init__(message)
        self.item_id = item_id
        self.message = message

    def __str__(self) -> str:
        return self.message


class DuplicateItemError(RegistryError):
    """Raised when an item is added under an id that is already registered."""

    def __init__(self, item_id: str) -> None:
        super().__init__(item_id, f"Item with ID {item_id} already exists!")


class ItemNotFoundError(RegistryError, KeyError):
    """Raised when looking up or removing an id that is not registered."""

    def __init__(self, item_id: str) -> None:
        super().__init__(item_id, f"Item with ID {item_id} not found!")
