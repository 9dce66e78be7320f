"""
Agent API module for registration and player account information.
"""
from typing import TYPE_CHECKING

from data.models.agent import Agent
from data.models.common import ApiResponse
from data.models.results import RegisterResult

if TYPE_CHECKING:
    from api.client import ApiClient

class AgentAPI:
    """Agent endpoints."""

    def __init__(self, client: 'ApiClient'):
        self.client = client

    def register(self, symbol: str, faction: str) -> ApiResponse[RegisterResult]:
        """Register a new agent (POST /register). Sent without a bearer token."""
        body = {"symbol": symbol, "faction": faction}
        return self.client.http.post_json("register", None, RegisterResult.from_dict, json=body)

    def get(self) -> ApiResponse[Agent]:
        """Fetch current agent details (GET /my/agent)."""
        return self.client.http.get_json("my/agent", self.client.agent_key, Agent.from_dict)
