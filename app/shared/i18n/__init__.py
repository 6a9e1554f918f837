"""
Localization support.

YAML message catalogs and Accept-Language negotiation.
"""

from app.shared.i18n.locale import negotiate_locale, request_locale
from app.shared.i18n.message_source import MessageSource, NoSuchMessageError

__all__ = ["MessageSource", "NoSuchMessageError", "negotiate_locale", "request_locale"]
