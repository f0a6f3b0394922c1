"""Shared fixtures for the sign-up form test suite."""

import pytest

from signup_form.config import get_settings
from signup_form.engine import ValidationEngine
from signup_form.logging_config import configure_logging
from signup_form.presenter import SignupPresenter


class Recorder:
    """Listener that remembers every value it receives."""

    def __init__(self):
        self.values = []

    def __call__(self, value):
        self.values.append(value)

    @property
    def calls(self) -> int:
        return len(self.values)

    @property
    def last(self):
        return self.values[-1] if self.values else None


@pytest.fixture(scope="session", autouse=True)
def structured_logging():
    """Log everything so debug events can be captured."""
    configure_logging(debug=False, level="debug")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; make every test read the environment again."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine()


@pytest.fixture
def valid_engine(engine) -> ValidationEngine:
    """Engine in a fully valid state."""
    engine.set_email("a@b.c")
    engine.set_password("Secret12")
    engine.set_password_confirmation("Secret12")
    engine.set_agree_terms(True)
    return engine


@pytest.fixture
def presenter(engine) -> SignupPresenter:
    p = SignupPresenter(engine)
    yield p
    p.close()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder
