import logging

import structlog

from structured_gettext import bootstrap
from structured_gettext.config import AppConfig, CatalogConfig, DatetimeConfig, LoggingConfig
from structured_gettext.core.values import Datetime, GetText, NGetText


def _config(locale_dir=None, *, timezone="UTC", level=logging.INFO) -> AppConfig:
    return AppConfig(
        catalog=CatalogConfig(locale_dir=locale_dir, domain="messages", languages=("fr",), format="json"),
        datetime=DatetimeConfig(timezone=timezone),
        logging=LoggingConfig(level=level),
    )


def test_build_resolver_uses_catalogs(locale_dir):
    resolver = bootstrap.build_resolver(_config(locale_dir))
    assert resolver.resolve(GetText("Hello!")) == "Bonjour !"
    assert resolver.resolve(NGetText("%(n)s element", "%(n)s elements", 3)) == "3 éléments"


def test_build_resolver_uses_timezone():
    resolver = bootstrap.build_resolver(_config(timezone="Europe/Brussels"))
    assert resolver.resolve(Datetime("%H:%M %Z", 1565854615)) == "09:36 CEST"


def test_build_resolver_loads_settings(monkeypatch, locale_dir):
    monkeypatch.setenv("LOCALE_DIR", str(locale_dir))
    monkeypatch.setenv("LANGUAGES", "fr")
    monkeypatch.setenv("CATALOG_FORMAT", "json")
    resolver = bootstrap.build_resolver()
    assert resolver.resolve(GetText("Hello!")) == "Bonjour !"


def test_configure_logging_sets_level():
    root_logger = logging.getLogger()
    previous_handlers = list(root_logger.handlers)
    previous_level = root_logger.level
    try:
        bootstrap.configure_logging(_config(level=logging.WARNING))
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    finally:
        root_logger.handlers[:] = previous_handlers
        root_logger.setLevel(previous_level)
        structlog.reset_defaults()
