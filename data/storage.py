"""
JSON-file persistence for the authenticated session (token + agent profile).
Exactly one session is stored; saving replaces the whole file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile

from data.models.agent import Session
from utils.serialize import to_jsonable

APP_DIR_NAME = ".spacetraders"
SESSION_FILE_NAME = "current_user.json"
SESSION_DIR_ENV = "SPACETRADERS_SESSION_DIR"


class SessionFileError(Exception):
    """The session file exists but cannot be decoded."""


def default_session_dir() -> str:
    override = os.getenv(SESSION_DIR_ENV)
    if override:
        return override
    return os.path.join(os.path.expanduser("~"), APP_DIR_NAME, "current-user")


class SessionStore:
    def __init__(self, directory: str | None = None):
        self.directory = directory or default_session_dir()
        self.path = os.path.join(self.directory, SESSION_FILE_NAME)

    def load(self) -> Session | None:
        if not os.path.isfile(self.path):
            logging.debug(f"No session file at {self.path}")
            return None
        try:
            with open(self.path, encoding="utf-8") as fh:
                payload = json.load(fh)
            return Session.from_dict(payload)
        except (ValueError, KeyError, TypeError) as e:
            raise SessionFileError(f"Unreadable session file {self.path}: {e}") from e

    def save(self, session: Session) -> None:
        os.makedirs(self.directory, exist_ok=True)
        # Write next to the target then swap it in, so the file never holds a mix of two sessions
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=".session-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(to_jsonable(session), fh)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logging.info(f"Saved session for {session.agent.symbol} to {self.path}")

    def clear(self) -> bool:
        if os.path.isfile(self.path):
            os.remove(self.path)
            return True
        return False
