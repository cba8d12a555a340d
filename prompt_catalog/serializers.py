"""JSON shapes returned by the API (camelCase keys)."""

from __future__ import annotations

from prompt_catalog.storage import (
    CategoryDetail,
    CategoryRecord,
    ComponentRecord,
    PromptRecord,
    PromptView,
)


def component_to_dict(component: ComponentRecord) -> dict:
    return {"id": component.id, "name": component.name}


def category_to_dict(category: CategoryRecord) -> dict:
    return {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "icon": category.icon,
        "color": category.color,
    }


def prompt_to_dict(prompt: PromptRecord) -> dict:
    return {
        "id": prompt.id,
        "categoryId": prompt.category_id,
        "componentId": prompt.component_id,
        "title": prompt.title,
        "description": prompt.description,
        "content": prompt.content,
        "isFavorite": bool(prompt.is_favorite),
        "metadata": prompt.metadata,
    }


def prompt_view_to_dict(view: PromptView) -> dict:
    """Prompt plus its resolved relations.

    A relation that did not resolve is left out of the object entirely, so
    clients never see a ``category``/``component`` made of nulls.
    """
    body = prompt_to_dict(view.prompt)
    if view.category is not None:
        body["category"] = category_to_dict(view.category)
    if view.component is not None:
        body["component"] = component_to_dict(view.component)
    return body


def category_detail_to_dict(detail: CategoryDetail) -> dict:
    body = category_to_dict(detail.category)
    body["prompts"] = [prompt_to_dict(p) for p in detail.prompts]
    return body
