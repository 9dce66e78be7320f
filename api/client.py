"""
API Client module providing centralized access to SpaceTraders API endpoints.
Orchestrates sub-API modules for agent, contracts, waypoints, and fleet operations.
"""

import os

from api.agent import AgentAPI
from api.contracts import ContractsAPI
from api.errors import NotAuthenticated
from api.fleet import FleetAPI
from api.handle_requests import RequestHandler
from api.waypoints import WaypointsAPI
from data.models.agent import Session

DEFAULT_API_URL = "https://api.spacetraders.io/v2"
API_URL_ENV = "SPACETRADERS_API_URL"


class ApiClient:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(self, session: Session | None = None, api_url: str | None = None, timeout: float = 30.0):
        self.session = session
        self.api_url = api_url or os.getenv(API_URL_ENV) or DEFAULT_API_URL
        self.http = RequestHandler(self.api_url, timeout=timeout)
        self.agent = AgentAPI(self)
        self.contracts = ContractsAPI(self)
        self.waypoints = WaypointsAPI(self)
        self.fleet = FleetAPI(self)

    @property
    def agent_key(self) -> str:
        """Bearer token for authenticated endpoints."""
        if self.session is None:
            raise NotAuthenticated("No session: register an agent first")
        return self.session.token

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
