"""
Structured logging configuration for SurfKit.

Uses structlog (https://www.structlog.org/) so that every surface operation
can emit event-style messages with key/value context. Supports both JSON
output (production) and colored console output (development).

Surface types can be logged as they are; a processor renders every
``SurfaceType`` value in the event by its role name (``INTERNAL_BRIDGE``,
``POS_TOP|MOD_BRIDGE``) so console and JSON output agree.

Usage::

    from surfkit.core.logging import configure_logging, get_logger

    configure_logging(json_output=False)  # Call once at startup
    logger = get_logger(__name__)
    logger.debug("surface_simplified_away", surface_type=SurfaceType.TOP)

A settings profile can drive the same setup with ``configure_from_settings``.
"""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, MutableMapping, Optional

import structlog

if TYPE_CHECKING:
    from surfkit.core.config import SurfaceSettings


def render_surface_types(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor replacing SurfaceType values by their role names."""
    # imported here: surfkit.surfaces depends on this module
    from surfkit.surfaces.surface_type import SurfaceType, role_name

    for key, value in event_dict.items():
        if isinstance(value, SurfaceType):
            event_dict[key] = role_name(value)
    return event_dict


def _handlers(log_file: Optional[str]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path))
    return handlers


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure structured logging for the entire application.

    Call this once at startup. The CLI does it from ``--log-level`` and
    ``--log-file``, or from a settings profile.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Unknown names fall back to INFO.
        json_output: If True, output JSON lines.
                     If False, output colored console-friendly lines.
        log_file: Optional path that also receives every record; missing
                  parent directories are created.
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=_handlers(log_file),
        force=True,
    )

    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            render_surface_types,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Third-party records (stdlib logging) go through the same renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.add_log_level, structlog.stdlib.add_logger_name],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger for the given module name.

    Args:
        name: Module name, typically ``__name__``.

    Returns:
        A bound structlog logger instance.
    """
    return structlog.get_logger(name)


def configure_from_settings(
    settings: "SurfaceSettings", log_file: Optional[str] = None
) -> None:
    """
    Configure logging from a settings profile.

    Uses the profile's ``log_level``, ``json_logs`` and ``log_file``. An
    explicit ``log_file`` argument (e.g. from the command line) takes
    precedence over the profile's.
    """
    configure_logging(
        level=settings.log_level,
        json_output=settings.json_logs,
        log_file=log_file or settings.log_file,
    )
