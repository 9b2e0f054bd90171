import pytest
import structlog

from mqtt_service.infrastructure.observability import clear_context


@pytest.fixture(autouse=True)
def reset_log_context():
    yield
    clear_context()
    structlog.reset_defaults()
