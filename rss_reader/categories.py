"""Fixed table of feed categories offered in the menu."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Tuple

from .exceptions import CategoryNotFound
from .models import Category

logger = logging.getLogger(__name__)

EXIT_SELECTION = 0

MENU_HEADING = "Adnkronos RSS Reader"

DEFAULT_CATEGORIES = (
    Category(1, "Prima Pagina", "https://www.adnkronos.com/RSS_PrimaPagina.xml"),
    Category(2, "Ultim'ora", "https://www.adnkronos.com/RSS_Ultimora.xml"),
    Category(3, "Politica", "https://www.adnkronos.com/RSS_Politica.xml"),
    Category(4, "Esteri", "https://www.adnkronos.com/RSS_Esteri.xml"),
    Category(5, "Cronaca", "https://www.adnkronos.com/RSS_Cronaca.xml"),
    Category(6, "Economia", "https://www.adnkronos.com/RSS_Economia.xml"),
    Category(7, "Finanza", "https://www.adnkronos.com/RSS_Finanza.xml"),
    Category(8, "Sport", "https://www.adnkronos.com/RSS_Sport.xml"),
)


class CategoryRegistry:
    """Read-only lookup from category id to feed URL.

    The display order is the order in which categories were given, not the
    order of the underlying mapping.
    """

    def __init__(self, categories: Iterable[Category]) -> None:
        ordered: List[Category] = []
        by_id = {}
        for category in categories:
            if category.id <= EXIT_SELECTION:
                raise ValueError(
                    f"Category id must be positive, got {category.id}"
                )
            if category.id in by_id:
                raise ValueError(f"Duplicate category id: {category.id}")
            if not category.url or not category.label:
                raise ValueError(
                    f"Category {category.id} needs both a URL and a label"
                )
            by_id[category.id] = category
            ordered.append(category)

        self._by_id = MappingProxyType(by_id)
        self._ordered: Tuple[Category, ...] = tuple(ordered)
        logger.debug("Registered %d categories", len(self._ordered))

    def lookup(self, category_id: int) -> str:
        """Return the feed URL for ``category_id``."""
        category = self._by_id.get(category_id)
        if category is None:
            raise CategoryNotFound(category_id)
        return category.url

    def labels(self) -> List[Tuple[int, str]]:
        """Return ``(id, label)`` pairs in menu order."""
        return [(category.id, category.label) for category in self._ordered]

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def __len__(self) -> int:
        return len(self._ordered)


DEFAULT_REGISTRY = CategoryRegistry(DEFAULT_CATEGORIES)
