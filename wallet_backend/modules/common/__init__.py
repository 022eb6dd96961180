"""Building blocks shared by the domain modules."""

from .pagination import Page, Pageable, SortOrder, ensure_sortable
from .results import ensure_not_empty

__all__ = ["Page", "Pageable", "SortOrder", "ensure_not_empty", "ensure_sortable"]
