"""Structlog configuration for translatable records.

Every log line carries the bound locale context (see ``bind_locale_context``)
and the configured default locale, so a save can be traced back to the
locale tiers it resolved against.

Usage:
    from translatable.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translation_saved", table="product_translations", locale="de")
"""

import logging
import sys
from typing import Any, List, MutableMapping, Optional

import structlog
from structlog.stdlib import BoundLogger

from translatable.configuration import settings

PACKAGE = "translatable"


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def add_locale_defaults(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Add the configured default locale unless the event already names one."""
    event_dict.setdefault("default_locale", settings.locale.DEFAULT_LOCALE)
    return event_dict


def _processors(prod_mode: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_locale_defaults,
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
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog over the standard library logging module.

    Args:
        log_level: Level name; defaults to ``settings.LOG_LEVEL``.
        is_production: JSON output when True, console output otherwise;
            defaults to ``settings.is_production``.

    Returns:
        The package logger.

    Under pytest nothing is emitted: the root level is raised above CRITICAL.
    """
    if _is_test_environment():
        processors: List[Any] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = logging.CRITICAL + 1
    else:
        prod_mode = settings.is_production if is_production is None else is_production
        processors = _processors(prod_mode)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger(PACKAGE)


logger: BoundLogger = configure_logging()


def _caller_module(depth: int = 2) -> str:
    return sys._getframe(depth).f_globals.get("__name__", "unknown")


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Return the package logger bound to ``name`` (default: the calling module)."""
    return logger.bind(logger_name=name or _caller_module())


def get_module_logger() -> BoundLogger:
    """Return the package logger bound to the calling module.

    Binds ``component`` (module path below the package, e.g. "records.record")
    and ``module_path``.
    """
    module_path = _caller_module()
    component = module_path
    if module_path.startswith(f"{PACKAGE}."):
        component = module_path[len(PACKAGE) + 1 :]
    return logger.bind(component=component, module_path=module_path)
