"""
Locale negotiation.

Picks the response locale from the request's Accept-Language header,
restricted to the locales the message catalogs are offered in.
"""

from collections.abc import Iterable

from starlette.requests import Request


def normalize_locale(tag: str) -> str:
    """Turn a language tag into catalog form: ``pt-br`` -> ``pt_BR``."""
    parts = tag.strip().replace("-", "_").split("_")
    language = parts[0].lower()
    if len(parts) > 1 and parts[1]:
        return f"{language}_{parts[1].upper()}"
    return language


def parse_accept_language(header: str | None) -> list[str]:
    """Return the locales of an Accept-Language header, best first.

    Entries with ``q=0``, the ``*`` wildcard and unparseable weights are
    dropped. Entries of equal weight keep their header order.
    """
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, item in enumerate(header.split(",")):
        tag, _, params = item.partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.replace(" ", "")
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality <= 0:
            continue
        weighted.append((-quality, index, normalize_locale(tag)))

    return [locale for _, _, locale in sorted(weighted)]


def negotiate_locale(
    accept_language: str | None,
    supported: Iterable[str],
    default: str,
) -> str:
    """Choose the best supported locale for a client.

    An exact match wins; otherwise the first supported locale sharing
    the requested language is used (``pt`` picks ``pt_BR``).

    Args:
        accept_language: Raw Accept-Language header value, if any.
        supported: Locales the application can answer in.
        default: Locale returned when nothing matches.

    Returns:
        A locale in catalog form.
    """
    offered = [normalize_locale(locale) for locale in supported]
    for candidate in parse_accept_language(accept_language):
        if candidate in offered:
            return candidate
        language = candidate.split("_")[0]
        for locale in offered:
            if locale.split("_")[0] == language:
                return locale
    return normalize_locale(default)


def request_locale(request: Request) -> str:
    """Negotiate the locale of a request using the app's settings."""
    settings = request.app.state.settings
    return negotiate_locale(
        request.headers.get("accept-language"),
        settings.supported_locales,
        settings.default_locale,
    )
