"""
Shared pytest fixtures: a fake session, an API client pointed at a mocked base URL,
and an isolated environment so tests never touch the real API or the user's session file.
"""

from collections.abc import Generator

import pytest

from api.client import API_URL_ENV, ApiClient
from app.config import LOG_LEVEL_ENV, TIMEOUT_ENV
from data.models.agent import Agent, Session
from data.storage import SESSION_DIR_ENV, SessionStore
from tests.payloads import BASE_URL, FAKE_TOKEN, agent_payload


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Point the session dir at a temp dir and clear any API URL, timeout or log level override."""
    monkeypatch.delenv(API_URL_ENV, raising=False)
    monkeypatch.delenv(TIMEOUT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.setenv(SESSION_DIR_ENV, str(tmp_path / "session"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def session() -> Session:
    return Session(token=FAKE_TOKEN, agent=Agent.from_dict(agent_payload()))


@pytest.fixture
def store(tmp_path) -> SessionStore:
    return SessionStore(str(tmp_path / "store"))


@pytest.fixture
def client(session: Session) -> Generator[ApiClient, None, None]:
    with ApiClient(session, api_url=BASE_URL) as api:
        yield api


@pytest.fixture
def anonymous_client() -> Generator[ApiClient, None, None]:
    with ApiClient(None, api_url=BASE_URL) as api:
        yield api
