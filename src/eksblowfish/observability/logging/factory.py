"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from eksblowfish.observability.logging.filters import SensitiveFieldsFilter


def _shared_processors(redactor: SensitiveFieldsFilter) -> list[Any]:
    # redaction runs first so no later processor sees the raw values
    return [
        redactor,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


class JsonLoggerFactory:
    """One JSON line per event through the stdlib root logger.

    The default sensitive keys (password, salt, hash, digest, ...) are always
    redacted; ``sensitive_fields`` adds to them.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        fields = SensitiveFieldsFilter().fields | (sensitive_fields or frozenset())
        redactor = SensitiveFieldsFilter(fields)

        structlog.configure(
            processors=[
                *_shared_processors(redactor),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(sort_keys=True),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
