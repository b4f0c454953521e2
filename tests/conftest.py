"""Pytest configuration for shared fixtures and path setup."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for candidate in (ROOT, SRC):
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from structured_gettext.core.i18n import GettextOracle  # noqa: E402
from structured_gettext.core.resolver import Resolver  # noqa: E402
from structured_gettext.core.utils.time_ import DatetimeRenderer  # noqa: E402

FRENCH_MESSAGES = {
    "plural_forms": "nplurals=2; plural=(n > 1);",
    "messages": {
        "Hello!": "Bonjour !",
        "Hello %(name)s!": "Bonjour %(name)s !",
        "yes": "oui",
        "no": "non",
        "n/a": "n.d.",
        "%(n)s element": ["%(n)s élément", "%(n)s éléments"],
        "%s file": ["%s fichier", "%s fichiers"],
    },
    "contexts": {
        "menu": {
            "Open": "Ouvrir",
            "%(n)s item": ["%(n)s entrée", "%(n)s entrées"],
        },
    },
}

FRENCH_ERRORS = {
    "plural_forms": "nplurals=2; plural=(n > 1);",
    "messages": {
        "Not found": "Introuvable",
        "%(n)s error": ["%(n)s erreur", "%(n)s erreurs"],
    },
}

FRENCH_TIME_ERRORS = {
    "plural_forms": "nplurals=2; plural=(n > 1);",
    "messages": {
        "%(n)s day": ["%(n)s jour", "%(n)s jours"],
    },
}


def write_catalog(root: Path, language: str, category: str, domain: str, data: dict) -> Path:
    path = root / language / category / f"{domain}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def resolver() -> Resolver:
    """Resolver whose oracle returns message identifiers unchanged."""

    return Resolver(GettextOracle(), render_datetime=DatetimeRenderer("UTC"))


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    write_catalog(tmp_path, "fr", "LC_MESSAGES", "messages", FRENCH_MESSAGES)
    write_catalog(tmp_path, "fr", "LC_MESSAGES", "errors", FRENCH_ERRORS)
    write_catalog(tmp_path, "fr", "LC_TIME", "errors", FRENCH_TIME_ERRORS)
    return tmp_path


@pytest.fixture
def french_oracle(locale_dir: Path) -> GettextOracle:
    return GettextOracle(locale_dir, languages=["fr_BE.UTF-8"], catalog_format="json")


@pytest.fixture
def french_resolver(french_oracle: GettextOracle) -> Resolver:
    return Resolver(french_oracle, render_datetime=DatetimeRenderer("UTC"))
