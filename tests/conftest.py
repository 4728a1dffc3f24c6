import os
import tempfile

# Keep test log files out of the working tree; must be set before the package is imported.
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='daily_wordle_logs_'))

from datetime import date

import pytest

from daily_wordle import create_app
from daily_wordle.config import TestingConfig
from daily_wordle.services import game_service as game_service_module
from daily_wordle.services.game_service import initialize_game_service
from daily_wordle.services.word_source import WordSource

SOLUTIONS = ["crane", "level", "sissy", "abbey", "tiger"]
ALLOWED = ["eerie", "adieu", "roate"]


class FakeClock:
    """Callable returning a settable calendar date."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def word_source():
    return WordSource.from_document({"solutions": SOLUTIONS, "allowed": ALLOWED})


@pytest.fixture
def clock():
    # Epoch day: the puzzle is SOLUTIONS[0]
    return FakeClock(TestingConfig.EPOCH_DATE)


@pytest.fixture
def game_service(word_source, clock):
    service = initialize_game_service(word_source, TestingConfig, clock)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(game_service):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
