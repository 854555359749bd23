"""Request-scoped logging context.

Every event logged while a request is handled carries the negotiated
language and the request path, so lookups can be traced back to a request.

Usage:
    from i18n_resolver.logging import bind_request_context

    with bind_request_context(language="fr", request_path="/greet"):
        logger.info("message_resolved", key="greet")
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_request_context(
    language: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra: Any,
) -> Iterator[None]:
    """Bind request fields to structlog's context vars for the block.

    None values are not bound. Only the keys bound here are removed on exit,
    so context bound by an outer caller survives.
    """
    fields = {
        "language": language,
        "request_path": request_path,
        "request_method": request_method,
        **extra,
    }
    context = {key: value for key, value in fields.items() if value is not None}

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context)
