"""
Error normalization.

Translates exceptions raised while handling a request into an HTTP
status code plus an ordered list of error entries. Each entry pairs a
localized message meant for end users with a developer diagnostic.

The mapping is a fixed table from ErrorKind to HandlingRule. The
locale and message source are passed in by the caller, so normalizing
has no hidden dependencies, does no IO and does not log.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.finance.errors import PersonNonexistentOrInactiveError
from app.shared.errors.causes import (
    describe,
    describe_cause_or_self,
    root_cause_message,
)
from app.shared.errors.field_errors import field_errors_from
from app.shared.i18n.message_source import MessageSource

HTTP_400 = 400
HTTP_404 = 404

MALFORMED_BODY_ERROR_TYPE = "json_invalid"
BODY_LOCATION = ("body",)
BODY_PARSE_ERROR_DETAIL = "There was an error parsing the body"


class ErrorKind(Enum):
    """Closed set of failures the API answers with a custom error body."""

    MALFORMED_REQUEST = "malformed_request"
    FIELD_VALIDATION = "field_validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTEGRITY_VIOLATION = "integrity_violation"
    DOMAIN_ENTITY_INVALID = "domain_entity_invalid"


@dataclass(frozen=True)
class ErrorEntry:
    """One error in a response body.

    Attributes:
        user_message: Localized text that is safe to show end users.
        developer_message: Technical detail, never localized.
    """

    user_message: str
    developer_message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "userMessage": self.user_message,
            "developerMessage": self.developer_message,
        }


@dataclass(frozen=True)
class NormalizedError:
    """Status code and non-empty entry list for one failed request."""

    kind: ErrorKind
    status_code: int
    entries: tuple[ErrorEntry, ...]

    def to_content(self) -> list[dict[str, str]]:
        """Return the JSON-serializable response body."""
        return [entry.to_dict() for entry in self.entries]


EntryBuilder = Callable[[BaseException, MessageSource, str], list[ErrorEntry]]


@dataclass(frozen=True)
class HandlingRule:
    """How one ErrorKind is answered."""

    status_code: int
    build_entries: EntryBuilder


def _keyed_entry(message_key: str, developer_message: Callable[[BaseException], str]) -> EntryBuilder:
    """Single entry: catalog message for the user, extracted text for developers."""

    def build(exc: BaseException, messages: MessageSource, locale: str) -> list[ErrorEntry]:
        return [
            ErrorEntry(
                user_message=messages.get_message(message_key, locale=locale),
                developer_message=developer_message(exc),
            )
        ]

    return build


def _field_entries(exc: BaseException, messages: MessageSource, locale: str) -> list[ErrorEntry]:
    """One entry per field error, in the order the validator reported them."""
    entries = [
        ErrorEntry(
            user_message=messages.get_field_message(field_error, locale),
            developer_message=str(field_error),
        )
        for field_error in field_errors_from(exc)
    ]
    if not entries:
        # a validation failure with no field errors still needs a body
        return _keyed_entry("invalid.message", describe)(exc, messages, locale)
    return entries


RULES: Mapping[ErrorKind, HandlingRule] = MappingProxyType(
    {
        ErrorKind.MALFORMED_REQUEST: HandlingRule(
            HTTP_400, _keyed_entry("invalid.message", describe_cause_or_self)
        ),
        ErrorKind.FIELD_VALIDATION: HandlingRule(HTTP_400, _field_entries),
        ErrorKind.RESOURCE_NOT_FOUND: HandlingRule(
            HTTP_404, _keyed_entry("resource.not.found", describe_cause_or_self)
        ),
        ErrorKind.INTEGRITY_VIOLATION: HandlingRule(
            HTTP_400, _keyed_entry("resource.operation.not.allowed", root_cause_message)
        ),
        ErrorKind.DOMAIN_ENTITY_INVALID: HandlingRule(
            HTTP_400, _keyed_entry("person.nonexistent.or.inactive", describe_cause_or_self)
        ),
    }
)

# Exception types with a fixed kind. RequestValidationError is split
# between two kinds and classified separately.
_KIND_BY_TYPE: tuple[tuple[type[BaseException], ErrorKind], ...] = (
    (NoResultFound, ErrorKind.RESOURCE_NOT_FOUND),
    (IntegrityError, ErrorKind.INTEGRITY_VIOLATION),
    (PersonNonexistentOrInactiveError, ErrorKind.DOMAIN_ENTITY_INVALID),
)

# HTTPException is only partly ours: the body parser raises it for
# undecodable bodies, every other status keeps the framework's handler.
HANDLED_EXCEPTIONS: tuple[type[BaseException], ...] = (
    RequestValidationError,
    StarletteHTTPException,
    *(exc_type for exc_type, _ in _KIND_BY_TYPE),
)


def _is_unreadable_body(error: Mapping) -> bool:
    """True for a JSON syntax error or a body rejected as a whole (empty, not an object)."""
    if error.get("type") == MALFORMED_BODY_ERROR_TYPE:
        return True
    return tuple(error.get("loc", ())) == BODY_LOCATION


def classify(exc: BaseException) -> Optional[ErrorKind]:
    """Return the ErrorKind of an exception, or None if it is not handled here."""
    if isinstance(exc, RequestValidationError):
        if any(_is_unreadable_body(error) for error in exc.errors()):
            return ErrorKind.MALFORMED_REQUEST
        return ErrorKind.FIELD_VALIDATION
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == HTTP_400 and exc.detail == BODY_PARSE_ERROR_DETAIL:
            return ErrorKind.MALFORMED_REQUEST
        return None
    for exc_type, kind in _KIND_BY_TYPE:
        if isinstance(exc, exc_type):
            return kind
    return None


def normalize(
    exc: BaseException,
    messages: MessageSource,
    locale: str,
) -> Optional[NormalizedError]:
    """Translate an exception into a status code and error entries.

    Args:
        exc: The exception raised while handling the request.
        messages: Source of localized user messages.
        locale: Locale negotiated for the request.

    Returns:
        The normalized error, or None when the exception is of a kind this
        layer does not handle and the framework's default handling applies.

    Raises:
        NoSuchMessageError: If the catalog lacks a required message.
    """
    kind = classify(exc)
    if kind is None:
        return None
    rule = RULES[kind]
    return NormalizedError(
        kind=kind,
        status_code=rule.status_code,
        entries=tuple(rule.build_entries(exc, messages, locale)),
    )
