"""Structured logging via structlog.

Configures structlog once per process, from the CLI entry point. Library
modules keep using ``logging.getLogger(__name__)``. A handler with a
structlog ``ProcessorFormatter`` on the ``sonic_uploader`` and ``httpx``
loggers renders their records like structlog events on the same stream.

Renderer selection:
  debug=True  — `ConsoleRenderer` with colours for local runs.
  debug=False — `JSONRenderer` for CI log collectors.

ContextVar injection:
  The `build_tag` field is injected into every structlog line from
  `_build_tag_var`, so messages from one upload invocation can be grouped
  even when several builds share a log sink.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar, Token

import structlog

_build_tag_var: ContextVar[str] = ContextVar("build_tag", default="")

HEADER_RULE = "=" * 19

HANDLER_NAME = "sonic_uploader.console"
_BRIDGED_LOGGERS = ("sonic_uploader", "httpx")


def get_build_tag() -> str:
    """Return the current build tag, or empty string if not set."""
    return _build_tag_var.get()


def set_build_tag(build_tag: str) -> Token:
    """Bind a build tag for the current context. Returns the reset token."""
    return _build_tag_var.set(build_tag)


def reset_build_tag(token: Token) -> None:
    _build_tag_var.reset(token)


def _inject_context_vars(
    logger: logging.Logger,
    method: str,
    event_dict: dict,
) -> dict:
    """Structlog processor: inject build_tag from the ContextVar."""
    build_tag = get_build_tag()
    if build_tag:
        event_dict["build_tag"] = build_tag
    return event_dict


def configure_structlog(debug: bool = False) -> None:
    """Configure structlog for the process lifetime.

    structlog loggers render straight to stdout. Records from the stdlib
    loggers in _BRIDGED_LOGGERS go through a ProcessorFormatter running
    the same processors, so they carry the timestamp, level and build_tag
    and use the same renderer.

    Calling multiple times is safe; the last call wins.
    """
    level = logging.DEBUG if debug else logging.INFO
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _inject_context_vars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for name in _BRIDGED_LOGGERS:
        _install_handler(logging.getLogger(name), formatter, level)


def _install_handler(
    target: logging.Logger,
    formatter: logging.Formatter,
    level: int,
) -> None:
    for existing in list(target.handlers):
        if existing.get_name() == HANDLER_NAME:
            target.removeHandler(existing)
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    target.addHandler(handler)
    target.setLevel(level)


def print_header(logger: logging.Logger) -> None:
    """Log the framed banner that precedes the upload output."""
    logger.info(HEADER_RULE)
    logger.info("Sonic package upload")
    logger.info(HEADER_RULE)
