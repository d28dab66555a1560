from .item_validator import parse_and_validate_item

__all__ = ["parse_and_validate_item"]
