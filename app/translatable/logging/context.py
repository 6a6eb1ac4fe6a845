"""Locale-scoped context binding for structured logging.

Usage:
    from translatable.logging import bind_locale_context

    with bind_locale_context(locale="de", model="product"):
        record.save()  # every log line inside carries locale/model
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_locale_context(
    locale: Optional[str] = None,
    model: Optional[str] = None,
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind locale context to all logs within the block.

    Args:
        locale: Active locale of the operation.
        model: Translatable model name.
        correlation_id: Operation identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if locale is not None:
        context["locale"] = locale

    if model is not None:
        context["model"] = model

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
