from .formatting import LISTING_HEADING, format_error, format_item, format_listing

__all__ = ["LISTING_HEADING", "format_error", "format_item", "format_listing"]
