"""Structlog configuration for the resolver.

Importing this module configures structlog once, so module-level loggers
created with get_module_logger() are bound to a working configuration.
Applications embedding the resolver can call configure_logging() again at
startup to override the level or the renderer.

Usage:
    from i18n_resolver.logging import get_module_logger

    logger = get_module_logger()
    logger.info("catalog_loaded", language="fr", messages=12)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from i18n_resolver.configuration import Settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _apply(processors: List[Processor], level: int, force: bool = False) -> None:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Under pytest all output is suppressed. Otherwise events are rendered as
    JSON in production and with the console renderer elsewhere.

    Args:
        settings: Settings to read LOG_LEVEL and is_production from.
            Defaults to settings read from the environment.
        log_level: Overrides settings.LOG_LEVEL (DEBUG, INFO, WARNING, ...).
        is_production: Overrides settings.is_production.

    Returns:
        The root structlog logger.
    """
    if _is_test_environment():
        logging.root.setLevel(SILENT_LEVEL)
        _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT_LEVEL,
            force=True,
        )
        return structlog.stdlib.get_logger()

    if settings is None:
        settings = Settings()
    if is_production is None:
        is_production = settings.is_production

    processors = _shared_processors()
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    level_name = (log_level or settings.LOG_LEVEL).upper()
    _apply(processors, getattr(logging, level_name, logging.INFO))

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    The last dotted segment of the module name is bound as ``component``
    and the full name as ``module_path``, e.g. ``loader`` and
    ``i18n_resolver.i18n.loader``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    name = module.__name__
    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
