"""
Localized message catalogs.

Loads ``messages.yml`` (base bundle) and ``messages_<locale>.yml``
variants from a directory and resolves message codes for a locale.
All catalogs are read once at construction; lookups never touch disk.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml

from app.shared.errors.field_errors import FieldError
from app.shared.i18n.locale import normalize_locale

logger = logging.getLogger(__name__)

BASE_NAME = "messages"
DEFAULT_MESSAGES_DIR = Path(__file__).parent / "messages"


class NoSuchMessageError(LookupError):
    """Raised when no catalog defines a message code."""

    def __init__(self, code: str, locale: str) -> None:
        super().__init__(f"No message found under code '{code}' for locale '{locale}'")
        self.code = code
        self.locale = locale


class MessageSource:
    """Resolve message codes against per-locale YAML catalogs.

    Lookup for ``pt_BR`` tries ``messages_pt_BR``, ``messages_pt``, the
    default locale's bundles, then the base ``messages`` bundle. Message
    templates use ``str.format`` named fields.
    """

    def __init__(
        self,
        messages_dir: Optional[str | Path] = None,
        default_locale: str = "en",
    ) -> None:
        self.messages_dir = Path(messages_dir) if messages_dir else DEFAULT_MESSAGES_DIR
        self.default_locale = normalize_locale(default_locale)
        self._bundles = self._load_bundles()

    def _load_bundles(self) -> dict[str, dict[str, str]]:
        bundles: dict[str, dict[str, str]] = {}
        for path in sorted(self.messages_dir.glob(f"{BASE_NAME}*.yml")):
            with open(path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f) or {}
            if not isinstance(content, dict):
                raise ValueError(f"Message catalog {path} must be a mapping")
            bundles[path.stem] = {str(key): str(value) for key, value in content.items()}

        if not bundles:
            raise FileNotFoundError(f"No {BASE_NAME}*.yml catalogs in {self.messages_dir}")
        logger.info(
            "Loaded message bundles %s from %s", sorted(bundles), self.messages_dir
        )
        return bundles

    @property
    def bundle_names(self) -> list[str]:
        return sorted(self._bundles)

    def _candidates(self, locale: str) -> list[str]:
        names: list[str] = []
        for tag in (locale, self.default_locale):
            language, _, region = tag.partition("_")
            if region:
                names.append(f"{BASE_NAME}_{language}_{region}")
            names.append(f"{BASE_NAME}_{language}")
        names.append(BASE_NAME)
        return list(dict.fromkeys(names))

    def _lookup(self, code: str, locale: str) -> Optional[str]:
        for name in self._candidates(locale):
            bundle = self._bundles.get(name)
            if bundle is not None and code in bundle:
                return bundle[code]
        return None

    def get_message(
        self,
        code: str,
        args: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Resolve a message code.

        Args:
            code: Catalog key, e.g. ``resource.not.found``.
            args: Named values substituted into the template.
            locale: Target locale. Defaults to the source's default locale.

        Returns:
            The localized message.

        Raises:
            NoSuchMessageError: If no bundle defines the code.
        """
        locale = normalize_locale(locale) if locale else self.default_locale
        template = self._lookup(code, locale)
        if template is None:
            raise NoSuchMessageError(code, locale)
        return template.format_map(args) if args else template

    def get_field_message(self, field_error: FieldError, locale: Optional[str] = None) -> str:
        """Resolve the user message for one field validation failure.

        The field error's codes are tried most specific first. Templates
        receive the error's arguments plus ``field``, the field's display
        name (``field.<name>`` in the catalog, else the raw name). When no
        code matches, the validator's own default message is used.

        Raises:
            NoSuchMessageError: If nothing matches and there is no default message.
        """
        locale = normalize_locale(locale) if locale else self.default_locale
        arguments = {**field_error.arguments, "field": self._field_label(field_error, locale)}
        for code in field_error.codes:
            template = self._lookup(code, locale)
            if template is not None:
                return template.format_map(arguments)
        if field_error.default_message is not None:
            return field_error.default_message
        raise NoSuchMessageError(field_error.code, locale)

    def _field_label(self, field_error: FieldError, locale: str) -> str:
        name = field_error.field or field_error.object_name
        label = self._lookup(f"field.{name}", locale)
        return label if label is not None else name
