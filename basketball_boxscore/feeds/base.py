"""Shared plumbing for provider input schemas.

Each provider describes its raw JSON with pydantic models derived from
``RawSchema``. ``validate_at`` runs that validation and turns any pydantic
``ValidationError`` into a ``MalformedFeedError`` carrying the dotted path of
the first offending field, prefixed with where the fragment sits inside the
full payload.

Example:
    >>> stats = validate_at(NbaPlayerRecord, raw, "sports_content.game.home.stats")
"""
from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError

from basketball_boxscore.types import FieldPath, MalformedFeedError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as missing."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _strip(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def _reject_bool(value: Any) -> Any:
    """JSON booleans are not counts; lax int parsing would read true as 1."""
    if isinstance(value, bool):
        raise ValueError("Input should be an integer, not a boolean")
    return value


def _stat(value: Any) -> Any:
    return _strip(_reject_bool(value))


def _optional_stat(value: Any) -> Any:
    return _blank_to_none(_reject_bool(value))


def _text_or_none(value: Any) -> Any:
    """Jersey numbers and similar labels may arrive as JSON numbers."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return _blank_to_none(value)


# Counting stats arrive as strings in some feeds ("12") and as numbers in
# others. Lax int parsing accepts both and rejects "abc", "1.5" and booleans.
StatInt = Annotated[int, BeforeValidator(_stat)]
OptionalStatInt = Annotated[int | None, BeforeValidator(_optional_stat)]
OptionalStr = Annotated[str | None, BeforeValidator(_text_or_none)]


class RawSchema(BaseModel):
    """Base for provider input schemas.

    Unknown provider fields are ignored; the schemas only name what the
    mappers read.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


def join_path(*parts: object) -> FieldPath:
    """Join path segments with dots, skipping empty ones."""
    return ".".join(str(part) for part in parts if part not in (None, ""))


def error_from_validation(exc: ValidationError, prefix: FieldPath = "") -> MalformedFeedError:
    """Build a MalformedFeedError from the first pydantic error."""
    first = exc.errors(include_url=False)[0]
    path = join_path(prefix, *first["loc"])
    reason = first["msg"]
    if len(exc.errors()) > 1:
        reason = f"{reason} (and {len(exc.errors()) - 1} more)"
    return MalformedFeedError(path, reason)


def validate_at(schema: type[SchemaT], data: Any, path: FieldPath = "") -> SchemaT:
    """Validate ``data`` against ``schema`` and report errors at ``path``.

    Args:
        schema: Pydantic model class describing the fragment.
        data: Decoded JSON fragment.
        path: Location of the fragment inside the full payload.

    Returns:
        Validated schema instance.

    Raises:
        MalformedFeedError: If the fragment does not match the schema.
    """
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise error_from_validation(exc, path) from exc


def require(value: Any, path: FieldPath) -> Any:
    """Return ``value`` or raise MalformedFeedError if it is missing."""
    if value is None:
        raise MalformedFeedError(path, "Field required")
    return value
