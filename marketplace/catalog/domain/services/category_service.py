"""
Category name lookups for purchase responses.

A cart usually repeats the same few categories, so one resolver instance is
created per request and remembers every name it has already read.
"""

from typing import Dict, Optional

from marketplace.catalog.domain.models import Category


class CategoryNameResolver:
    def __init__(self):
        self._cache: Dict[int, str] = {}

    def name_for(self, category_id: Optional[int]) -> str:
        if category_id is None:
            return ""
        if category_id not in self._cache:
            name = Category.objects.filter(pk=category_id).values_list("name", flat=True).first()
            self._cache[category_id] = name or ""
        return self._cache[category_id]

    def preload(self, category_ids) -> None:
        """Fetch every uncached category of ``category_ids`` with a single query."""
        wanted = {category_id for category_id in category_ids if category_id is not None} - self._cache.keys()
        if not wanted:
            return
        for category_id, name in Category.objects.filter(pk__in=wanted).values_list("id", "name"):
            self._cache[category_id] = name
        for category_id in wanted - self._cache.keys():
            self._cache[category_id] = ""
