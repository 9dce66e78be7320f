import logging
from dataclasses import dataclass

from api.client import ApiClient
from app.config import Settings
from data.models.agent import Session
from data.storage import SessionStore


@dataclass
class AppContext:
    settings: Settings
    store: SessionStore
    session: Session | None
    client: ApiClient


def build_app(settings: Settings) -> AppContext:
    """Load the cached session once and hand it to the API client. A corrupt session file propagates."""
    store = SessionStore(settings.session_dir)
    session = store.load()
    if session:
        logging.debug(f"Loaded session for {session.agent.symbol}")
    client = ApiClient(session, api_url=settings.api_url, timeout=settings.timeout)
    return AppContext(settings=settings, store=store, session=session, client=client)
