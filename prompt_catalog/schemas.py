"""Request schemas and query-parameter coercion for the API."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Largest id the integer primary key columns can hold (Postgres INTEGER).
MAX_ID = 2**31 - 1


@dataclass(frozen=True)
class ValidationIssue:
    """First failing check of a request body: message plus dotted field path."""

    message: str
    field: Optional[str] = None

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.field:
            body["field"] = self.field
        return body


class PromptCreate(BaseModel):
    """Body of ``POST /api/prompts``.

    Field names are camelCase on the wire (``categoryId``, ``isFavorite``...)
    and snake_case in Python.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    category_id: int = Field(
        gt=0, le=MAX_ID, description="Category the prompt belongs to"
    )
    component_id: Optional[int] = Field(
        default=None, ge=0, le=MAX_ID, description="Optional component; 0 means none"
    )
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    content: str = Field(min_length=1)
    is_favorite: Optional[StrictBool] = False
    metadata: Optional[str] = None

    @field_validator("category_id", "component_id", mode="before")
    @classmethod
    def reject_boolean_id(cls, v: Any) -> Any:
        # bool is an int subclass; true would otherwise become id 1.
        if isinstance(v, bool):
            raise ValueError("Input should be a valid integer, not a boolean")
        return v

    @field_validator("component_id")
    @classmethod
    def normalize_component_id(cls, v: Optional[int]) -> Optional[int]:
        """Store a falsy component id as absence, never as 0."""
        return v or None

    @field_validator("is_favorite")
    @classmethod
    def normalize_is_favorite(cls, v: Optional[bool]) -> bool:
        return bool(v)


def validate_prompt_create(
    payload: Any,
) -> Tuple[Optional[PromptCreate], Optional[ValidationIssue]]:
    """Validate a decoded JSON body.

    Returns ``(data, None)`` on success and ``(None, issue)`` describing the
    first failing field otherwise.
    """
    if not isinstance(payload, dict):
        return None, ValidationIssue("Request body must be a JSON object")
    try:
        return PromptCreate.model_validate(payload), None
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        return None, ValidationIssue(first.get("msg", "Invalid input"), field=field)


def parse_id(raw: Optional[str]) -> Optional[int]:
    """Positive decimal id that fits the id columns, else None."""
    if raw is None:
        return None
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    return value if 0 < value <= MAX_ID else None


def parse_category_filter(raw: Optional[str]) -> Optional[int]:
    """Lenient ``categoryId`` query parameter coercion.

    Anything that is not a positive decimal integer within the id range means
    "no filter".
    """
    return parse_id(raw)
