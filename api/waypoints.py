from functools import partial
from typing import TYPE_CHECKING

from api.handle_requests import page_params
from data.enums import WaypointTraitSymbol
from data.models.common import ApiResponse, decode_list
from data.models.market import Market
from data.models.shipyard import Shipyard
from data.models.waypoints import Waypoint

if TYPE_CHECKING:
    from api.client import ApiClient


class WaypointsAPI:
    """Waypoints endpoints."""

    def __init__(self, client: 'ApiClient'):
        self.client = client

    def list(
        self,
        system_symbol: str,
        trait: WaypointTraitSymbol | None = None,
        *,
        page: int | None = None,
        limit: int | None = None,
    ) -> ApiResponse[list[Waypoint]]:
        """
        Fetch a page of waypoints for a system.
        GET /systems/{systemSymbol}/waypoints
        The trait filter is applied locally to the page the server returned;
        meta still describes the unfiltered page.
        """
        response = self.client.http.get_json(
            f"systems/{system_symbol}/waypoints",
            self.client.agent_key,
            partial(decode_list, Waypoint.from_dict),
            params=page_params(page, limit),
        )
        if trait is None:
            return response
        return ApiResponse(data=[wp for wp in response.data if wp.has_trait(trait)], meta=response.meta)

    def get(self, system_symbol: str, waypoint_symbol: str) -> ApiResponse[Waypoint]:
        """
        Fetch waypoint details for a single waypoint.
        GET /systems/{systemSymbol}/waypoints/{waypointSymbol}
        """
        return self.client.http.get_json(
            f"systems/{system_symbol}/waypoints/{waypoint_symbol}",
            self.client.agent_key,
            Waypoint.from_dict,
        )

    def get_market(self, system_symbol: str, waypoint_symbol: str) -> ApiResponse[Market]:
        """GET /systems/{systemSymbol}/waypoints/{waypointSymbol}/market"""
        return self.client.http.get_json(
            f"systems/{system_symbol}/waypoints/{waypoint_symbol}/market",
            self.client.agent_key,
            Market.from_dict,
        )

    def get_shipyard(self, system_symbol: str, waypoint_symbol: str) -> ApiResponse[Shipyard]:
        """GET /systems/{systemSymbol}/waypoints/{waypointSymbol}/shipyard"""
        return self.client.http.get_json(
            f"systems/{system_symbol}/waypoints/{waypoint_symbol}/shipyard",
            self.client.agent_key,
            Shipyard.from_dict,
        )
