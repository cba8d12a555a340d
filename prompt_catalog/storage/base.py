"""Storage interface shared by the SQL-backed store and the in-memory double.

Both implementations return the plain records defined here, never ORM rows, so
the HTTP layer sees a single shape whatever store is plugged into the app. An
unresolved relation on a ``PromptView`` is always ``None``.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Optional

from prompt_catalog.schemas import PromptCreate

SEARCH_FIELDS = ("title", "description", "content")


class DuplicateRecordError(ValueError):
    """A unique column (component name, category slug) already holds the value."""


@dataclass(frozen=True)
class ComponentRecord:
    id: int
    name: str


@dataclass(frozen=True)
class CategoryRecord:
    id: int
    name: str
    slug: str
    description: str
    icon: str
    color: str


@dataclass(frozen=True)
class PromptRecord:
    id: int
    category_id: int
    component_id: Optional[int]
    title: str
    description: str
    content: str
    is_favorite: bool = False
    metadata: Optional[str] = None


@dataclass(frozen=True)
class PromptView:
    """A prompt joined with its category and (optional) component."""

    prompt: PromptRecord
    category: Optional[CategoryRecord] = None
    component: Optional[ComponentRecord] = None


@dataclass(frozen=True)
class CategoryDetail:
    category: CategoryRecord
    prompts: list[PromptRecord] = field(default_factory=list)


def matches_search(prompt: PromptRecord, search: str) -> bool:
    """Case-insensitive substring match against title, description or content."""
    needle = search.lower()
    return any(needle in getattr(prompt, name).lower() for name in SEARCH_FIELDS)


class Storage(abc.ABC):
    """Read/write operations the API needs from a prompt store."""

    # Components
    @abc.abstractmethod
    def list_components(self) -> list[ComponentRecord]: ...

    @abc.abstractmethod
    def create_component(self, name: str) -> ComponentRecord: ...

    # Categories
    @abc.abstractmethod
    def list_categories(self) -> list[CategoryRecord]: ...

    @abc.abstractmethod
    def get_category(self, category_id: int) -> Optional[CategoryDetail]: ...

    @abc.abstractmethod
    def get_category_by_slug(self, slug: str) -> Optional[CategoryRecord]: ...

    @abc.abstractmethod
    def create_category(
        self, *, name: str, slug: str, description: str, icon: str, color: str
    ) -> CategoryRecord: ...

    @abc.abstractmethod
    def count_categories(self) -> int: ...

    # Prompts
    @abc.abstractmethod
    def list_prompts(
        self, search: Optional[str] = None, category_id: Optional[int] = None
    ) -> list[PromptView]:
        """Return prompts matching every given filter, ordered by id.

        ``category_id`` keeps prompts of that category; ``search`` keeps
        prompts whose title, description or content contains it
        (case-insensitive). Both filters must hold when both are given.
        """

    @abc.abstractmethod
    def get_prompt(self, prompt_id: int) -> Optional[PromptView]: ...

    @abc.abstractmethod
    def create_prompt(self, data: PromptCreate) -> PromptRecord: ...

    @abc.abstractmethod
    def count_prompts(self) -> int: ...
