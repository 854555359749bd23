import pytest
import structlog


@pytest.fixture(autouse=True)
def clear_logging_context():
    """Keep request-scoped logging context from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
