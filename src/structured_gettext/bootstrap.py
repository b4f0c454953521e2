"""Wiring of logging and resolvers from configuration."""

from __future__ import annotations

import logging

import structlog

from .config import AppConfig, load_settings
from .core.i18n import GettextOracle
from .core.resolver import Resolver
from .core.utils.time_ import DatetimeRenderer


def configure_logging(config: AppConfig) -> None:
    """Configure structured logging with JSON output."""

    level = config.logging.level
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        timestamper,
    ]

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=shared_processors,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_oracle(config: AppConfig) -> GettextOracle:
    """Create the translation oracle described by *config*."""

    catalog = config.catalog
    return GettextOracle(
        catalog.locale_dir,
        domain=catalog.domain,
        languages=catalog.languages or None,
        catalog_format=catalog.format,
    )


def build_resolver(config: AppConfig | None = None) -> Resolver:
    """Create a :class:`Resolver` from *config*, loading settings when omitted."""

    if config is None:
        config = load_settings()
    logger = structlog.get_logger("structured_gettext").bind(component="bootstrap")
    resolver = Resolver(
        build_oracle(config),
        render_datetime=DatetimeRenderer(config.datetime.timezone),
    )
    logger.debug(
        "resolver_ready",
        locale_dir=str(config.catalog.locale_dir) if config.catalog.locale_dir else None,
        domain=config.catalog.domain,
        catalog_format=config.catalog.format,
        timezone=config.datetime.timezone,
    )
    return resolver


__all__ = [
    "build_oracle",
    "build_resolver",
    "configure_logging",
]
