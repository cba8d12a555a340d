from __future__ import annotations

from typing import Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError

from prompt_catalog.models import Category, Component, Prompt
from prompt_catalog.schemas import PromptCreate

from .base import (
    CategoryDetail,
    CategoryRecord,
    ComponentRecord,
    DuplicateRecordError,
    PromptRecord,
    PromptView,
    Storage,
)

LIKE_ESCAPE = "\\"


def _like_pattern(search: str) -> str:
    """Substring LIKE pattern with the user's text matched literally."""
    escaped = (
        search.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _component(row: Optional[Component]) -> Optional[ComponentRecord]:
    if row is None:
        return None
    return ComponentRecord(id=row.id, name=row.name)


def _category(row: Optional[Category]) -> Optional[CategoryRecord]:
    if row is None:
        return None
    return CategoryRecord(
        id=row.id,
        name=row.name,
        slug=row.slug,
        description=row.description,
        icon=row.icon,
        color=row.color,
    )


def _prompt(row: Prompt) -> PromptRecord:
    return PromptRecord(
        id=row.id,
        category_id=row.category_id,
        component_id=row.component_id,
        title=row.title,
        description=row.description,
        content=row.content,
        is_favorite=bool(row.is_favorite),
        metadata=row.metadata_,
    )


class DatabaseStorage(Storage):
    """Storage backed by the Flask-SQLAlchemy session of the current app."""

    def __init__(self, database: SQLAlchemy):
        self.db = database

    @property
    def session(self):
        return self.db.session

    def _joined_prompts(self):
        # Outer joins: a prompt without component (or with a dangling
        # category id) still comes back, with that side as None.
        return (
            select(Prompt, Category, Component)
            .outerjoin(Category, Prompt.category_id == Category.id)
            .outerjoin(Component, Prompt.component_id == Component.id)
        )

    # ---- components ----
    def list_components(self) -> list[ComponentRecord]:
        rows = self.session.scalars(select(Component).order_by(Component.id)).all()
        return [_component(row) for row in rows]

    def create_component(self, name: str) -> ComponentRecord:
        row = Component(name=name)
        try:
            self._insert(row)
        except IntegrityError as exc:
            raise DuplicateRecordError(f"component name already exists: {name}") from exc
        return _component(row)

    # ---- categories ----
    def list_categories(self) -> list[CategoryRecord]:
        rows = self.session.scalars(select(Category).order_by(Category.id)).all()
        return [_category(row) for row in rows]

    def get_category(self, category_id: int) -> Optional[CategoryDetail]:
        row = self.session.get(Category, category_id)
        if row is None:
            return None
        prompts = self.session.scalars(
            select(Prompt).where(Prompt.category_id == category_id).order_by(Prompt.id)
        ).all()
        return CategoryDetail(
            category=_category(row), prompts=[_prompt(p) for p in prompts]
        )

    def get_category_by_slug(self, slug: str) -> Optional[CategoryRecord]:
        row = self.session.scalars(
            select(Category).where(Category.slug == slug)
        ).one_or_none()
        return _category(row)

    def create_category(
        self, *, name: str, slug: str, description: str, icon: str, color: str
    ) -> CategoryRecord:
        row = Category(
            name=name, slug=slug, description=description, icon=icon, color=color
        )
        try:
            self._insert(row)
        except IntegrityError as exc:
            raise DuplicateRecordError(f"category slug already exists: {slug}") from exc
        return _category(row)

    def count_categories(self) -> int:
        return self.session.scalar(select(func.count()).select_from(Category))

    # ---- prompts ----
    def list_prompts(
        self, search: Optional[str] = None, category_id: Optional[int] = None
    ) -> list[PromptView]:
        stmt = self._joined_prompts()
        if category_id is not None:
            stmt = stmt.where(Prompt.category_id == category_id)
        if search:
            pattern = _like_pattern(search)
            stmt = stmt.where(
                or_(
                    Prompt.title.ilike(pattern, escape=LIKE_ESCAPE),
                    Prompt.description.ilike(pattern, escape=LIKE_ESCAPE),
                    Prompt.content.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        rows = self.session.execute(stmt.order_by(Prompt.id)).all()
        return [
            PromptView(
                prompt=_prompt(prompt),
                category=_category(category),
                component=_component(component),
            )
            for prompt, category, component in rows
        ]

    def get_prompt(self, prompt_id: int) -> Optional[PromptView]:
        row = self.session.execute(
            self._joined_prompts().where(Prompt.id == prompt_id)
        ).first()
        if row is None:
            return None
        prompt, category, component = row
        return PromptView(
            prompt=_prompt(prompt),
            category=_category(category),
            component=_component(component),
        )

    def create_prompt(self, data: PromptCreate) -> PromptRecord:
        row = Prompt(
            category_id=data.category_id,
            component_id=data.component_id or None,
            title=data.title,
            description=data.description,
            content=data.content,
            is_favorite=bool(data.is_favorite),
            metadata_=data.metadata,
        )
        self._insert(row)
        return _prompt(row)

    def count_prompts(self) -> int:
        return self.session.scalar(select(func.count()).select_from(Prompt))

    def _insert(self, row) -> None:
        try:
            self.session.add(row)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
