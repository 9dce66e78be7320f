"""
Fleet API module for ship control operations including navigation, extraction, and trading.
"""

from functools import partial
from typing import TYPE_CHECKING

from api.handle_requests import page_params
from data.enums import ShipType, TradeSymbol
from data.models.common import ApiResponse, decode_list
from data.models.results import (
    ExtractResult,
    NavigateResult,
    NavResult,
    PurchaseShipResult,
    RefuelResult,
    SurveyResult,
    TradeResult,
)
from data.models.ship import Ship, ShipCargo, ShipNav
from data.models.survey import Survey
from utils.serialize import to_jsonable

if TYPE_CHECKING:
    from api.client import ApiClient


class FleetAPI:
    """Fleet endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def list_ships(self, page: int | None = None, limit: int | None = None) -> ApiResponse[list[Ship]]:
        """Fetch fleet list (GET /my/ships) with optional pagination."""
        return self.client.http.get_json(
            "my/ships",
            self.client.agent_key,
            partial(decode_list, Ship.from_dict),
            params=page_params(page, limit),
        )

    def purchase_ship(self, ship_type: ShipType, waypoint_symbol: str) -> ApiResponse[PurchaseShipResult]:
        """Buy a ship at a shipyard (POST /my/ships)."""
        body = {"shipType": ship_type.value, "waypointSymbol": waypoint_symbol}
        return self.client.http.post_json("my/ships", self.client.agent_key, PurchaseShipResult.from_dict, json=body)

    def get_ship(self, ship_symbol: str) -> ApiResponse[Ship]:
        """Fetch a single ship (GET /my/ships/{shipSymbol})."""
        return self.client.http.get_json(f"my/ships/{ship_symbol}", self.client.agent_key, Ship.from_dict)

    def get_nav(self, ship_symbol: str) -> ApiResponse[ShipNav]:
        """Fetch navigation status (GET /my/ships/{shipSymbol}/nav)."""
        return self.client.http.get_json(f"my/ships/{ship_symbol}/nav", self.client.agent_key, ShipNav.from_dict)

    def orbit_ship(self, ship_symbol: str) -> ApiResponse[NavResult]:
        """Orbit a ship (POST /my/ships/{shipSymbol}/orbit)."""
        return self.client.http.post_json(f"my/ships/{ship_symbol}/orbit", self.client.agent_key, NavResult.from_dict)

    def dock_ship(self, ship_symbol: str) -> ApiResponse[NavResult]:
        """Dock a ship (POST /my/ships/{shipSymbol}/dock)."""
        return self.client.http.post_json(f"my/ships/{ship_symbol}/dock", self.client.agent_key, NavResult.from_dict)

    def navigate_ship(self, ship_symbol: str, waypoint_symbol: str) -> ApiResponse[NavigateResult]:
        """Navigate a ship to a waypoint (POST /my/ships/{shipSymbol}/navigate)."""
        body = {"waypointSymbol": waypoint_symbol}
        return self.client.http.post_json(
            f"my/ships/{ship_symbol}/navigate", self.client.agent_key, NavigateResult.from_dict, json=body
        )

    def refuel_ship(self, ship_symbol: str, units: int | None = None) -> ApiResponse[RefuelResult]:
        """Refuel a ship (POST /my/ships/{shipSymbol}/refuel); fills the tank when units is omitted."""
        body = {"units": units} if units is not None else None
        return self.client.http.post_json(
            f"my/ships/{ship_symbol}/refuel", self.client.agent_key, RefuelResult.from_dict, json=body
        )

    def extract(self, ship_symbol: str, survey: Survey | None = None) -> ApiResponse[ExtractResult]:
        """Extract resources (POST /my/ships/{shipSymbol}/extract), optionally targeting a survey."""
        body = {"survey": to_jsonable(survey)} if survey is not None else None
        return self.client.http.post_json(
            f"my/ships/{ship_symbol}/extract", self.client.agent_key, ExtractResult.from_dict, json=body
        )

    def survey(self, ship_symbol: str) -> ApiResponse[SurveyResult]:
        """Survey the current waypoint (POST /my/ships/{shipSymbol}/survey)."""
        return self.client.http.post_json(f"my/ships/{ship_symbol}/survey", self.client.agent_key, SurveyResult.from_dict)

    def get_cargo(self, ship_symbol: str) -> ApiResponse[ShipCargo]:
        """Get ship cargo (GET /my/ships/{shipSymbol}/cargo)."""
        return self.client.http.get_json(f"my/ships/{ship_symbol}/cargo", self.client.agent_key, ShipCargo.from_dict)

    def sell(self, ship_symbol: str, symbol: TradeSymbol, units: int) -> ApiResponse[TradeResult]:
        """Sell cargo (POST /my/ships/{shipSymbol}/sell)."""
        body = {"symbol": symbol.value, "units": units}
        return self.client.http.post_json(f"my/ships/{ship_symbol}/sell", self.client.agent_key, TradeResult.from_dict, json=body)

    def purchase(self, ship_symbol: str, symbol: TradeSymbol, units: int) -> ApiResponse[TradeResult]:
        """Buy cargo at the docked market (POST /my/ships/{shipSymbol}/purchase)."""
        body = {"symbol": symbol.value, "units": units}
        return self.client.http.post_json(
            f"my/ships/{ship_symbol}/purchase", self.client.agent_key, TradeResult.from_dict, json=body
        )
