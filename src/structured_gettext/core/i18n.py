"""Translation lookups backed by gettext catalogs."""

from __future__ import annotations

import gettext
import json
import logging
import os
from pathlib import Path
from typing import Any, Literal, Mapping, Protocol

from .errors import CatalogError
from .values import LocaleCategory

logger = logging.getLogger(__name__)

CatalogFormat = Literal["mo", "json"]

DEFAULT_DOMAIN = "messages"
DEFAULT_PLURAL_FORMS = "nplurals=2; plural=(n != 1);"

# Directory (and environment variable) name of each locale category.
CATEGORY_NAMES: dict[LocaleCategory, str] = {
    LocaleCategory.CTYPE: "LC_CTYPE",
    LocaleCategory.NUMERIC: "LC_NUMERIC",
    LocaleCategory.TIME: "LC_TIME",
    LocaleCategory.COLLATE: "LC_COLLATE",
    LocaleCategory.MONETARY: "LC_MONETARY",
    LocaleCategory.MESSAGES: "LC_MESSAGES",
    LocaleCategory.ALL: "LC_ALL",
    LocaleCategory.PAPER: "LC_PAPER",
    LocaleCategory.NAME: "LC_NAME",
    LocaleCategory.ADDRESS: "LC_ADDRESS",
    LocaleCategory.TELEPHONE: "LC_TELEPHONE",
    LocaleCategory.MEASUREMENT: "LC_MEASUREMENT",
    LocaleCategory.IDENTIFICATION: "LC_IDENTIFICATION",
}


class TranslationOracle(Protocol):
    """Protocol implemented by translation backends."""

    def gettext(self, msgid: str) -> str:  # pragma: no cover - protocol signature
        ...

    def ngettext(self, singular: str, plural: str, n: int) -> str:  # pragma: no cover
        ...

    def pgettext(self, context: str, msgid: str) -> str:  # pragma: no cover
        ...

    def dgettext(self, domain: str, msgid: str) -> str:  # pragma: no cover
        ...

    def dngettext(self, domain: str, singular: str, plural: str, n: int) -> str:  # pragma: no cover
        ...

    def npgettext(self, context: str, singular: str, plural: str, n: int) -> str:  # pragma: no cover
        ...

    def dcngettext(
        self,
        domain: str,
        singular: str,
        plural: str,
        n: int,
        category: LocaleCategory,
    ) -> str:  # pragma: no cover
        ...


class JsonTranslations(gettext.GNUTranslations):
    """GNU translations read from a JSON catalog instead of a ``.mo`` file.

    The catalog root is an object::

        {
            "plural_forms": "nplurals=2; plural=(n != 1);",
            "messages": {"Hello!": "Bonjour !", "%(n)s file": ["%(n)s fichier", "%(n)s fichiers"]},
            "contexts": {"menu": {"Open": "Ouvrir"}}
        }

    Lists hold the plural forms indexed by the plural expression.
    """

    def _parse(self, fp: Any) -> None:
        try:
            data = json.load(fp)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Failed to parse catalog '{getattr(fp, 'name', fp)}'") from exc
        if not isinstance(data, Mapping):
            raise CatalogError("Catalog must contain an object at the root")

        plural_forms = data.get("plural_forms") or DEFAULT_PLURAL_FORMS
        try:
            expression = plural_forms.split("plural=", 1)[1]
            self.plural = gettext.c2py(expression.strip().rstrip(";"))
        except (IndexError, ValueError) as exc:
            raise CatalogError(f"Invalid plural forms: {plural_forms!r}") from exc

        self._info = {"plural-forms": plural_forms}
        self._charset = "utf-8"
        self._catalog = {}
        self._add_entries(data.get("messages") or {}, prefix=None)
        for context, entries in (data.get("contexts") or {}).items():
            self._add_entries(entries, prefix=context)

    def _add_entries(self, entries: Mapping[str, Any], *, prefix: str | None) -> None:
        if not isinstance(entries, Mapping):
            raise CatalogError("Catalog entries must be an object")
        for msgid, translation in entries.items():
            key = self.CONTEXT % (prefix, msgid) if prefix is not None else msgid
            if isinstance(translation, str):
                self._catalog[key] = translation
            elif isinstance(translation, list) and all(isinstance(form, str) for form in translation):
                for index, form in enumerate(translation):
                    self._catalog[(key, index)] = form
            else:
                raise CatalogError(f"Invalid translation for {msgid!r}")


class GettextOracle:
    """Translation oracle resolving catalogs the way GNU gettext lays them out.

    Catalogs live in ``<localedir>/<language>/<LC_CATEGORY>/<domain>.<format>``.
    When no catalog is found the lookup falls back to the message identifiers.
    """

    def __init__(
        self,
        localedir: Path | str | None = None,
        *,
        domain: str = DEFAULT_DOMAIN,
        languages: tuple[str, ...] | list[str] | None = None,
        catalog_format: CatalogFormat = "mo",
    ) -> None:
        if catalog_format not in ("mo", "json"):
            raise ValueError(f"Unsupported catalog format: {catalog_format}")
        self._localedir = Path(localedir) if localedir is not None else None
        self._domain = domain
        self._languages = tuple(languages) if languages else None
        self._catalog_format = catalog_format
        self._translations: dict[tuple[str, LocaleCategory], gettext.NullTranslations] = {}

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def localedir(self) -> Path | None:
        return self._localedir

    def reload(self) -> None:
        """Forget loaded catalogs so they are read again on next use."""

        self._translations = {}

    def languages(self, category: LocaleCategory = LocaleCategory.MESSAGES) -> tuple[str, ...]:
        """Return the languages searched for *category*, most specific first."""

        if self._languages is not None:
            requested: list[str] = list(self._languages)
        else:
            requested = []
            for envar in ("LANGUAGE", "LC_ALL", CATEGORY_NAMES[category], "LANG"):
                value = os.environ.get(envar)
                if value:
                    requested = value.split(":")
                    break
        expanded: list[str] = []
        for language in requested:
            if language == "C":
                break
            for candidate in _expand_language(language):
                if candidate not in expanded:
                    expanded.append(candidate)
        return tuple(expanded)

    def translation(
        self,
        domain: str | None = None,
        category: LocaleCategory = LocaleCategory.MESSAGES,
    ) -> gettext.NullTranslations:
        """Return the translations for *domain* and *category*."""

        key = (domain or self._domain, category)
        translation = self._translations.get(key)
        if translation is None:
            translation = self._load(*key)
            self._translations[key] = translation
        return translation

    def find(self, domain: str, category: LocaleCategory = LocaleCategory.MESSAGES) -> Path | None:
        """Locate the catalog file for *domain* and *category*."""

        if self._localedir is None:
            return None
        if not self._localedir.exists():
            logger.warning("Locale directory missing", extra={"path": str(self._localedir)})
            return None
        filename = f"{domain}.{self._catalog_format}"
        for language in self.languages(category):
            path = self._localedir / language / CATEGORY_NAMES[category] / filename
            if path.is_file():
                return path
        return None

    def _load(self, domain: str, category: LocaleCategory) -> gettext.NullTranslations:
        path = self.find(domain, category)
        if path is None:
            logger.debug(
                "Catalog not found; using message identifiers",
                extra={"domain": domain, "category": CATEGORY_NAMES[category]},
            )
            return gettext.NullTranslations()
        translations_class = JsonTranslations if self._catalog_format == "json" else gettext.GNUTranslations
        mode = "r" if self._catalog_format == "json" else "rb"
        encoding = "utf-8" if mode == "r" else None
        with path.open(mode, encoding=encoding) as fp:
            return translations_class(fp)

    def gettext(self, msgid: str) -> str:
        return self.translation().gettext(msgid)

    def ngettext(self, singular: str, plural: str, n: int) -> str:
        return self.translation().ngettext(singular, plural, n)

    def pgettext(self, context: str, msgid: str) -> str:
        return self.translation().pgettext(context, msgid)

    def dgettext(self, domain: str, msgid: str) -> str:
        return self.translation(domain).gettext(msgid)

    def dngettext(self, domain: str, singular: str, plural: str, n: int) -> str:
        return self.translation(domain).ngettext(singular, plural, n)

    def npgettext(self, context: str, singular: str, plural: str, n: int) -> str:
        return self.translation().npgettext(context, singular, plural, n)

    def dcngettext(
        self,
        domain: str,
        singular: str,
        plural: str,
        n: int,
        category: LocaleCategory,
    ) -> str:
        return self.translation(domain, category).ngettext(singular, plural, n)


def _expand_language(language: str) -> list[str]:
    """Expand ``fr_BE.UTF-8@euro`` into progressively less specific names."""

    normalized = language.strip().replace("-", "_")
    if not normalized:
        return []
    candidates = [normalized]
    base, _, _modifier = normalized.partition("@")
    if base != normalized:
        candidates.append(base)
    without_codeset = base.partition(".")[0]
    if without_codeset != base:
        candidates.append(without_codeset)
    territory_free = without_codeset.partition("_")[0]
    if territory_free != without_codeset:
        candidates.append(territory_free)
    return candidates


__all__ = [
    "CATEGORY_NAMES",
    "CatalogFormat",
    "DEFAULT_DOMAIN",
    "GettextOracle",
    "JsonTranslations",
    "TranslationOracle",
]
