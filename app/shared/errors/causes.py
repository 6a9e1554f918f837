"""
Exception cause chains.

Helpers that read the error an exception wraps and turn exceptions
into developer-facing diagnostic text.
"""

import traceback
from typing import Optional

MAX_CAUSE_DEPTH = 100


def cause_of(exc: BaseException) -> Optional[BaseException]:
    """Return the originating error wrapped by ``exc``, if any.

    The explicit ``raise ... from`` cause wins. DB-API wrappers that only
    carry the driver error in ``orig`` fall back to it. The implicit
    ``__context__`` is not a wrapped cause.
    """
    if exc.__cause__ is not None:
        return exc.__cause__
    orig = getattr(exc, "orig", None)
    if isinstance(orig, BaseException) and orig is not exc:
        return orig
    return None


def describe(exc: BaseException) -> str:
    """Return the kind-qualified description, e.g. ``json.decoder.JSONDecodeError: ...``."""
    return "".join(traceback.format_exception_only(type(exc), exc)).strip()


def describe_cause_or_self(exc: BaseException) -> str:
    """Describe the wrapped cause when there is one, else ``exc`` itself."""
    cause = cause_of(exc)
    return describe(cause if cause is not None else exc)


def root_cause(exc: BaseException) -> BaseException:
    """Follow the cause chain to its last error.

    The walk stops after MAX_CAUSE_DEPTH hops or when an error shows up
    twice, so self-referential chains terminate.
    """
    current = exc
    seen = {id(exc)}
    for _ in range(MAX_CAUSE_DEPTH):
        cause = cause_of(current)
        if cause is None or id(cause) in seen:
            break
        seen.add(id(cause))
        current = cause
    return current


def root_cause_message(exc: BaseException) -> str:
    """Return the message text (no kind) of the deepest cause of ``exc``."""
    return str(root_cause(exc))
