"""
Field validation errors.

Flattens a request validation failure into one FieldError per invalid
field, in the order the validator reported them. Two violated
constraints on the same field give two FieldErrors.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from fastapi.exceptions import RequestValidationError


@dataclass(frozen=True)
class FieldError:
    """A single validation failure attached to one request field.

    Attributes:
        object_name: Part of the request that was validated (``body``,
            ``query``, ``path``...).
        field: Dotted path of the field inside that object. Empty when
            the object as a whole was rejected.
        rejected_value: The value the client sent.
        code: Validator error type, e.g. ``string_too_short``.
        arguments: Constraint parameters, e.g. ``{"min_length": 5}``.
        default_message: The validator's own (English) message.
    """

    object_name: str
    field: str
    rejected_value: Any
    code: str
    arguments: Mapping[str, Any]
    default_message: str | None

    @property
    def codes(self) -> tuple[str, ...]:
        """Message codes for this error, most specific first."""
        if not self.field:
            return (self.code,)
        return (
            f"{self.code}.{self.object_name}.{self.field}",
            f"{self.code}.{self.field}",
            self.code,
        )

    def __str__(self) -> str:
        arguments = ", ".join(f"{key}={value!r}" for key, value in self.arguments.items())
        return (
            f"Field error in object '{self.object_name}' on field '{self.field}': "
            f"rejected value [{self.rejected_value!r}]; "
            f"codes [{','.join(self.codes)}]; "
            f"arguments [{arguments}]; "
            f"default message [{self.default_message}]"
        )


def field_errors_from(exc: RequestValidationError) -> list[FieldError]:
    """Return the field errors of a validation failure in reported order."""
    return [_to_field_error(error) for error in exc.errors()]


def _to_field_error(error: Mapping[str, Any]) -> FieldError:
    loc = tuple(str(part) for part in error.get("loc", ()))
    return FieldError(
        object_name=loc[0] if loc else "request",
        field=".".join(loc[1:]),
        rejected_value=error.get("input"),
        code=str(error.get("type", "value_error")),
        arguments=MappingProxyType(dict(error.get("ctx") or {})),
        default_message=error.get("msg"),
    )
