"""
Test Configuration and Fixtures

- Environment variables are set before any application module is imported
  (settings and the loguru sinks read them at import time)
- Unit tests (test/**/unit/) build their own collaborators and never start the app
- Integration tests drive the FastAPI app through TestClient, with the DI
  container reset between tests
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Long enough that the background sweeper never fires during a test
    os.environ.setdefault('HOLD_SWEEP_INTERVAL_SECONDS', '3600')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402


class FakeClock:
    """Deterministic clock; tests move time forward explicitly"""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> datetime:
        self.now += timedelta(**delta)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 6, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """App client with a fresh container; the lifespan wires DI and starts the sweeper"""
    from ride_reservation.main import app
    from ride_reservation.platform.config.di import container

    container.reset_singletons()
    with TestClient(app) as test_client:
        yield test_client
    container.reset_override()
    container.reset_singletons()
