"""Field types shared by the catalog models."""

from typing import Annotated, Any, Tuple

from pydantic import BeforeValidator, Field

# Taste dimensions shared by preference profiles and tracks
ATTRIBUTE_NAMES = (
    "energy",
    "acoustics",
    "popularity",
    "mood",
    "instrumental",
    "experimental",
)

ATTRIBUTE_MIN = 1
ATTRIBUTE_MAX = 10


def _coerce_genres(value: Any) -> Any:
    """Treat missing genres as empty and strip surrounding whitespace."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(g.strip() if isinstance(g, str) else g for g in value)
    return value


Attribute = Annotated[int, Field(ge=ATTRIBUTE_MIN, le=ATTRIBUTE_MAX)]
# Tuples so genres of stored entities cannot be changed in place
Genres = Annotated[Tuple[str, ...], BeforeValidator(_coerce_genres)]
