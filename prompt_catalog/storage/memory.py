from __future__ import annotations

from typing import Iterable, Optional

from prompt_catalog.schemas import PromptCreate

from .base import (
    CategoryDetail,
    CategoryRecord,
    ComponentRecord,
    DuplicateRecordError,
    PromptRecord,
    PromptView,
    Storage,
    matches_search,
)


class InMemoryStorage(Storage):
    """Process-local store with the same contract as DatabaseStorage.

    Used by tests and for running the API without a database. Ids start at 1
    and increase by one per insert.
    """

    def __init__(self, components: Iterable[ComponentRecord] = ()):
        self._components: list[ComponentRecord] = list(components)
        self._categories: list[CategoryRecord] = []
        self._prompts: list[PromptRecord] = []

    @staticmethod
    def _next_id(rows) -> int:
        return max((row.id for row in rows), default=0) + 1

    def _component_by_id(self, component_id: Optional[int]) -> Optional[ComponentRecord]:
        if not component_id:
            return None
        return next((c for c in self._components if c.id == component_id), None)

    def _category_by_id(self, category_id: int) -> Optional[CategoryRecord]:
        return next((c for c in self._categories if c.id == category_id), None)

    def _view(self, prompt: PromptRecord) -> PromptView:
        return PromptView(
            prompt=prompt,
            category=self._category_by_id(prompt.category_id),
            component=self._component_by_id(prompt.component_id),
        )

    # ---- components ----
    def list_components(self) -> list[ComponentRecord]:
        return sorted(self._components, key=lambda c: c.id)

    def create_component(self, name: str) -> ComponentRecord:
        if any(c.name == name for c in self._components):
            raise DuplicateRecordError(f"component name already exists: {name}")
        component = ComponentRecord(id=self._next_id(self._components), name=name)
        self._components.append(component)
        return component

    # ---- categories ----
    def list_categories(self) -> list[CategoryRecord]:
        return list(self._categories)

    def get_category(self, category_id: int) -> Optional[CategoryDetail]:
        category = self._category_by_id(category_id)
        if category is None:
            return None
        prompts = [p for p in self._prompts if p.category_id == category_id]
        return CategoryDetail(category=category, prompts=prompts)

    def get_category_by_slug(self, slug: str) -> Optional[CategoryRecord]:
        return next((c for c in self._categories if c.slug == slug), None)

    def create_category(
        self, *, name: str, slug: str, description: str, icon: str, color: str
    ) -> CategoryRecord:
        if self.get_category_by_slug(slug) is not None:
            raise DuplicateRecordError(f"category slug already exists: {slug}")
        category = CategoryRecord(
            id=self._next_id(self._categories),
            name=name,
            slug=slug,
            description=description,
            icon=icon,
            color=color,
        )
        self._categories.append(category)
        return category

    def count_categories(self) -> int:
        return len(self._categories)

    # ---- prompts ----
    def list_prompts(
        self, search: Optional[str] = None, category_id: Optional[int] = None
    ) -> list[PromptView]:
        prompts: Iterable[PromptRecord] = self._prompts
        if category_id is not None:
            prompts = [p for p in prompts if p.category_id == category_id]
        if search:
            prompts = [p for p in prompts if matches_search(p, search)]
        return [self._view(p) for p in prompts]

    def get_prompt(self, prompt_id: int) -> Optional[PromptView]:
        prompt = next((p for p in self._prompts if p.id == prompt_id), None)
        if prompt is None:
            return None
        return self._view(prompt)

    def create_prompt(self, data: PromptCreate) -> PromptRecord:
        prompt = PromptRecord(
            id=self._next_id(self._prompts),
            category_id=data.category_id,
            component_id=data.component_id or None,
            title=data.title,
            description=data.description,
            content=data.content,
            is_favorite=bool(data.is_favorite),
            metadata=data.metadata,
        )
        self._prompts.append(prompt)
        return prompt

    def count_prompts(self) -> int:
        return len(self._prompts)
