"""Resolvers map raw input to the version it claims to be."""

from collections.abc import Callable, Mapping

# Returns None when no version can be extracted. Must never raise.
Resolver = Callable[[object], int | None]


def field_resolver(field: str = "v") -> Resolver:
    """Build a resolver that reads a numeric version tag from a field.

    Works on mappings and on objects with the field as an attribute, so
    already-validated model instances resolve the same way as raw dicts.
    Bools and non-numbers resolve to None.
    """

    def resolve(data: object) -> int | None:
        if isinstance(data, Mapping):
            value = data.get(field)
        else:
            value = getattr(data, field, None)
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        return value  # type: ignore[return-value]

    resolve.__name__ = f"resolve_{field}"
    return resolve
