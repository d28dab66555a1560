from .errors import DuplicateItemError, ItemNotFoundError, RegistryError
from .registry import Registry

__all__ = ["Registry", "RegistryError", "DuplicateItemError", "ItemNotFoundError"]
