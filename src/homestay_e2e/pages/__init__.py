"""Page objects."""

from .search_page import PlaywrightSearchPage, SearchPage

__all__ = ["PlaywrightSearchPage", "SearchPage"]
