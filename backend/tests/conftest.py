import os
import sys
import pytest

# Ensure the backend root (containing the `cryptoquiz` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from cryptoquiz import create_app, get_session_controller, socketio
from cryptoquiz.questions import build_question_bank
from cryptoquiz.services.session import SessionController


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    PUBLIC_DIR = os.path.join(CURRENT_DIR, 'public-missing')
    HEALTH_TEXT = 'Running SoloOS | Version 9.3.2'
    CORS_ORIGINS = '*'
    QUESTIONS_FILE = None
    MIN_PLAYERS = 2
    HACK_SEED = 'tests'


TWO_QUESTIONS = [
    {'question': 'What is 0.6 × 0.2?', 'choices': ['0.12', '0.08', '0.18', '1.2'], 'answer': '0.12'},
    {'question': 'What is 3.6 ÷ 0.6?', 'choices': ['6', '0.6', '0.12', '2'], 'answer': '6'},
]


class FixedRoll:
    """Random stand-in that always rolls the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        assert low <= self.value <= high
        return self.value


@pytest.fixture()
def bank():
    return build_question_bank(TWO_QUESTIONS)


@pytest.fixture()
def roll():
    return FixedRoll(8)


@pytest.fixture()
def controller(bank, roll):
    return SessionController(bank, rng=roll)


@pytest.fixture()
def flask_app(bank, roll):
    application = create_app(TestConfig)
    # Short bank and fixed rolls keep socket flows deterministic
    get_session_controller(application).bank = bank
    get_session_controller(application).rng = roll
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except RuntimeError:
            pass
