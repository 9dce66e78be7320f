"""
Tests for ApiClient and its sub-APIs against a mocked SpaceTraders server.

Uses the responses library to intercept requests made through requests.Session.
"""

import json

import pytest
import requests
import responses
from responses import matchers

from api.client import DEFAULT_API_URL, ApiClient
from api.errors import NotAuthenticated, ParseError, ServiceError, UnknownError
from data.enums import ShipNavStatus, ShipType, TradeSymbol, WaypointTraitSymbol
from data.models.survey import Survey
from tests.payloads import (
    BASE_URL,
    agent_payload,
    cargo_payload,
    contract_payload,
    cooldown_payload,
    fuel_payload,
    market_payload,
    market_transaction_payload,
    nav_payload,
    ship_payload,
    shipyard_payload,
    survey_payload,
    waypoint_payload,
)

AUTH = {"Authorization": "Bearer fake_token"}


# ===========================================================================
# Configuration
# ===========================================================================


class TestClientConfig:
    def test_default_base_url(self):
        with ApiClient() as client:
            assert client.api_url == DEFAULT_API_URL

    def test_env_overrides_base_url(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPACETRADERS_API_URL", "http://env.spacetraders.test/v2")

        with ApiClient() as client:
            assert client.http.base_url == "http://env.spacetraders.test/v2"

    def test_explicit_url_wins_over_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPACETRADERS_API_URL", "http://env.spacetraders.test/v2")

        with ApiClient(api_url=BASE_URL + "/") as client:
            assert client.http.base_url == BASE_URL

    def test_authenticated_call_without_session(self, anonymous_client: ApiClient):
        """No request is sent when an authenticated endpoint has no token to send."""
        with pytest.raises(NotAuthenticated):
            anonymous_client.agent.get()


# ===========================================================================
# Response handling
# ===========================================================================


class TestResponseHandling:
    @responses.activate
    def test_success_sends_bearer_token(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/my/agent",
            json={"data": agent_payload()},
            match=[matchers.header_matcher(AUTH)],
        )

        resp = client.agent.get()

        assert resp.data.symbol == "FAKE_AGENT"
        assert resp.data.credits == 1000
        assert resp.meta is None

    @pytest.mark.parametrize("action", ["accept", "fulfill"])
    @responses.activate
    def test_error_envelope_becomes_service_error(self, client: ApiClient, action: str):
        """{"error": {...}} with a non-2xx status surfaces status, code and message."""
        responses.post(
            f"{BASE_URL}/my/contracts/contract-1/{action}",
            status=409,
            json={"error": {"message": "conflict", "code": 4000, "data": {"contractId": "contract-1"}}},
        )

        with pytest.raises(ServiceError) as excinfo:
            getattr(client.contracts, action)("contract-1")

        err = excinfo.value
        assert err.status == 409
        assert err.code == 4000
        assert err.message == "conflict"
        assert err.data == {"contractId": "contract-1"}
        assert str(err) == "409 [4000] conflict"

    @responses.activate
    def test_redirect_status_is_not_success(self, client: ApiClient):
        """Only 2xx bodies are decoded as data; a 3xx envelope without an error is unreadable."""
        responses.get(f"{BASE_URL}/my/agent", status=300, json={"data": agent_payload()})

        with pytest.raises(ParseError):
            client.agent.get()

    @responses.activate
    def test_unparseable_error_body(self, client: ApiClient):
        responses.get(f"{BASE_URL}/my/agent", status=502, body="<html>Bad Gateway</html>")

        with pytest.raises(ParseError):
            client.agent.get()

    @responses.activate
    def test_invalid_json_on_success(self, client: ApiClient):
        responses.get(f"{BASE_URL}/my/agent", body="not json", content_type="application/json")

        with pytest.raises(ParseError):
            client.agent.get()

    @responses.activate
    def test_schema_mismatch_on_success(self, client: ApiClient):
        """A 2xx body that lacks required fields is a parse failure, not a crash."""
        responses.get(f"{BASE_URL}/my/agent", json={"data": {"symbol": "FAKE_AGENT"}})

        with pytest.raises(ParseError):
            client.agent.get()

    @responses.activate
    def test_missing_data_field(self, client: ApiClient):
        responses.get(f"{BASE_URL}/my/agent", json={"agent": agent_payload()})

        with pytest.raises(ParseError):
            client.agent.get()

    @responses.activate
    def test_transport_failure(self, client: ApiClient):
        responses.get(f"{BASE_URL}/my/agent", body=requests.ConnectionError("connection refused"))

        with pytest.raises(UnknownError) as excinfo:
            client.agent.get()

        assert "connection refused" in excinfo.value.message

    @responses.activate
    def test_meta_is_decoded(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/my/contracts",
            json={"data": [contract_payload()], "meta": {"total": 11, "page": 2, "limit": 10}},
            match=[matchers.query_param_matcher({"page": "2", "limit": "10"})],
        )

        resp = client.contracts.list(page=2, limit=10)

        assert resp.data[0].id == "contract-1"
        assert (resp.meta.total, resp.meta.page, resp.meta.limit) == (11, 2, 10)


# ===========================================================================
# Agent
# ===========================================================================


class TestAgentEndpoints:
    @responses.activate
    def test_register_sends_no_token(self, anonymous_client: ApiClient):
        responses.post(
            f"{BASE_URL}/register",
            status=201,
            json={"data": {"token": "new_token", "agent": agent_payload(), "contract": contract_payload()}},
            match=[matchers.json_params_matcher({"symbol": "FAKE_AGENT", "faction": "COSMIC"})],
        )

        resp = anonymous_client.agent.register("FAKE_AGENT", "COSMIC")

        assert "Authorization" not in responses.calls[0].request.headers
        session = resp.data.session()
        assert session.token == "new_token"
        assert session.agent.symbol == "FAKE_AGENT"
        assert resp.data.contract.id == "contract-1"


# ===========================================================================
# Waypoints
# ===========================================================================


class TestWaypointEndpoints:
    @responses.activate
    def test_trait_filter_keeps_order_and_meta(self, client: ApiClient):
        """Filtering is local to the returned page; meta describes the unfiltered page."""
        responses.get(
            f"{BASE_URL}/systems/X1-AB23/waypoints",
            json={
                "data": [
                    waypoint_payload("X1-AB23-A1", ["MARKETPLACE"]),
                    waypoint_payload("X1-AB23-B2", ["SHIPYARD"]),
                    waypoint_payload("X1-AB23-C4", ["SHIPYARD", "MARKETPLACE"]),
                ],
                "meta": {"total": 3, "page": 1, "limit": 10},
            },
        )

        resp = client.waypoints.list("X1-AB23", WaypointTraitSymbol.MARKETPLACE)

        assert [wp.symbol for wp in resp.data] == ["X1-AB23-A1", "X1-AB23-C4"]
        assert resp.meta.total == 3

    @responses.activate
    def test_no_trait_returns_everything(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/systems/X1-AB23/waypoints",
            json={"data": [waypoint_payload("X1-AB23-A1"), waypoint_payload("X1-AB23-B2", ["SHIPYARD"])]},
        )

        resp = client.waypoints.list("X1-AB23")

        assert len(resp.data) == 2
        assert responses.calls[0].request.url == f"{BASE_URL}/systems/X1-AB23/waypoints"

    @responses.activate
    def test_get_market(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/systems/X1-AB23/waypoints/X1-AB23-C4/market",
            json={"data": market_payload()},
            match=[matchers.header_matcher(AUTH)],
        )

        market = client.waypoints.get_market("X1-AB23", "X1-AB23-C4").data

        assert market.imports[0].symbol == TradeSymbol.IRON_ORE
        assert market.tradeGoods[0].sellPrice == 40
        assert market.transactions[0].type.value == "SELL"

    @responses.activate
    def test_get_waypoint(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/systems/X1-AB23/waypoints/X1-AB23-C4",
            json={"data": waypoint_payload("X1-AB23-C4", ["MARKETPLACE", "SHIPYARD"])},
        )

        wp = client.waypoints.get("X1-AB23", "X1-AB23-C4").data

        assert responses.calls[0].request.method == "GET"
        assert wp.symbol == "X1-AB23-C4"
        assert wp.has_trait(WaypointTraitSymbol.SHIPYARD)

    @responses.activate
    def test_get_shipyard(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/systems/X1-AB23/waypoints/X1-AB23-C4/shipyard",
            json={"data": shipyard_payload()},
            match=[matchers.header_matcher(AUTH)],
        )

        shipyard = client.waypoints.get_shipyard("X1-AB23", "X1-AB23-C4").data

        assert shipyard.shipTypes[0] == ShipType.SHIP_MINING_DRONE
        assert shipyard.ships[0].name == "Mining Drone"


# ===========================================================================
# Fleet
# ===========================================================================


class TestNavStateChanges:
    @pytest.mark.parametrize(
        "action, status",
        [("orbit", "IN_ORBIT"), ("dock", "DOCKED")],
    )
    @responses.activate
    def test_bodiless_post_declares_zero_length(self, client: ApiClient, action: str, status: str):
        """orbit and dock send no body but an explicit Content-Length of 0."""
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/{action}",
            json={"data": {"nav": nav_payload(status=status)}},
        )

        call = client.fleet.orbit_ship if action == "orbit" else client.fleet.dock_ship
        resp = call("FAKE_AGENT-1")

        request = responses.calls[0].request
        assert request.headers["Content-Length"] == "0"
        assert request.headers["Authorization"] == "Bearer fake_token"
        assert not request.body
        assert resp.data.nav.status == ShipNavStatus(status)

    @responses.activate
    def test_navigate(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/navigate",
            json={"data": {"fuel": fuel_payload(current=380), "nav": nav_payload("IN_TRANSIT", "X1-AB23-B2")}},
            match=[matchers.json_params_matcher({"waypointSymbol": "X1-AB23-B2"})],
        )

        resp = client.fleet.navigate_ship("FAKE_AGENT-1", "X1-AB23-B2")

        assert resp.data.fuel.current == 380
        assert resp.data.nav.route.destination.symbol == "X1-AB23-B2"


class TestRefuel:
    def _refuel_data(self) -> dict:
        return {
            "agent": agent_payload(credits=900),
            "fuel": fuel_payload(),
            "transaction": market_transaction_payload("FUEL", "PURCHASE", 1),
        }

    @responses.activate
    def test_full_tank_sends_no_body(self, client: ApiClient):
        responses.post(f"{BASE_URL}/my/ships/FAKE_AGENT-1/refuel", json={"data": self._refuel_data()})

        resp = client.fleet.refuel_ship("FAKE_AGENT-1")

        assert responses.calls[0].request.headers["Content-Length"] == "0"
        assert resp.data.agent.credits == 900

    @responses.activate
    def test_partial_refuel_sends_units(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/refuel",
            json={"data": self._refuel_data()},
            match=[matchers.json_params_matcher({"units": 100})],
        )

        resp = client.fleet.refuel_ship("FAKE_AGENT-1", 100)

        assert resp.data.transaction.tradeSymbol == TradeSymbol.FUEL


class TestExtraction:
    def _extract_data(self) -> dict:
        return {
            "cooldown": cooldown_payload(),
            "extraction": {"shipSymbol": "FAKE_AGENT-1", "yield": {"symbol": "IRON_ORE", "units": 7}},
            "cargo": cargo_payload(units=7, inventory=[
                {"symbol": "IRON_ORE", "name": "Iron Ore", "description": "Ore.", "units": 7}
            ]),
        }

    @responses.activate
    def test_extract_without_survey(self, client: ApiClient):
        responses.post(f"{BASE_URL}/my/ships/FAKE_AGENT-1/extract", status=201, json={"data": self._extract_data()})

        resp = client.fleet.extract("FAKE_AGENT-1")

        assert not responses.calls[0].request.body
        assert resp.data.extraction.yield_.units == 7
        assert resp.data.cargo.inventory[0].symbol == TradeSymbol.IRON_ORE

    @responses.activate
    def test_extract_with_survey_sends_it_verbatim(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/extract",
            status=201,
            json={"data": self._extract_data()},
            match=[matchers.json_params_matcher({"survey": survey_payload()})],
        )

        resp = client.fleet.extract("FAKE_AGENT-1", Survey.from_dict(survey_payload()))

        assert resp.data.cooldown.totalSeconds == 70

    @responses.activate
    def test_cooldown_error(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/extract",
            status=409,
            json={"error": {"message": "Ship is on cooldown", "code": 4000, "data": {"cooldown": cooldown_payload()}}},
        )

        with pytest.raises(ServiceError) as excinfo:
            client.fleet.extract("FAKE_AGENT-1")

        assert excinfo.value.data["cooldown"]["remainingSeconds"] == 70


class TestTradingAndPurchases:
    @responses.activate
    def test_sell(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/sell",
            status=201,
            json={
                "data": {
                    "agent": agent_payload(credits=1400),
                    "cargo": cargo_payload(),
                    "transaction": market_transaction_payload("IRON_ORE", "SELL", 10),
                }
            },
            match=[matchers.json_params_matcher({"symbol": "IRON_ORE", "units": 10})],
        )

        resp = client.fleet.sell("FAKE_AGENT-1", TradeSymbol.IRON_ORE, 10)

        assert resp.data.agent.credits == 1400
        assert resp.data.transaction.totalPrice == 400

    @responses.activate
    def test_purchase_ship(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships",
            status=201,
            json={
                "data": {
                    "agent": agent_payload(credits=0),
                    "ship": ship_payload("FAKE_AGENT-3"),
                    "transaction": {
                        "waypointSymbol": "X1-AB23-C4",
                        "shipSymbol": "FAKE_AGENT-3",
                        "shipType": "SHIP_MINING_DRONE",
                        "price": 1000,
                        "agentSymbol": "FAKE_AGENT",
                        "timestamp": "2023-06-01T12:00:00.000Z",
                    },
                }
            },
            match=[matchers.json_params_matcher({"shipType": "SHIP_MINING_DRONE", "waypointSymbol": "X1-AB23-C4"})],
        )

        resp = client.fleet.purchase_ship(ShipType.SHIP_MINING_DRONE, "X1-AB23-C4")

        assert resp.data.ship.symbol == "FAKE_AGENT-3"
        assert resp.data.transaction.price == 1000

    @responses.activate
    def test_deliver_contract(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/contracts/contract-1/deliver",
            json={"data": {"contract": contract_payload(accepted=True), "cargo": cargo_payload()}},
            match=[
                matchers.json_params_matcher(
                    {"shipSymbol": "FAKE_AGENT-1", "tradeSymbol": "IRON_ORE", "units": 20}
                )
            ],
        )

        resp = client.contracts.deliver("contract-1", "FAKE_AGENT-1", TradeSymbol.IRON_ORE, 20)

        assert resp.data.contract.accepted is True
        assert json.loads(responses.calls[0].request.body)["units"] == 20


class TestFleetQueries:
    @responses.activate
    def test_list_ships_page(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/my/ships",
            json={
                "data": [ship_payload("FAKE_AGENT-1"), ship_payload("FAKE_AGENT-2")],
                "meta": {"total": 2, "page": 1, "limit": 20},
            },
            match=[matchers.query_param_matcher({"page": "1", "limit": "20"}), matchers.header_matcher(AUTH)],
        )

        resp = client.fleet.list_ships(page=1, limit=20)

        assert [ship.symbol for ship in resp.data] == ["FAKE_AGENT-1", "FAKE_AGENT-2"]
        assert resp.meta.limit == 20

    @responses.activate
    def test_get_ship(self, client: ApiClient):
        responses.get(f"{BASE_URL}/my/ships/FAKE_AGENT-1", json={"data": ship_payload()})

        ship = client.fleet.get_ship("FAKE_AGENT-1").data

        assert responses.calls[0].request.method == "GET"
        assert ship.registration.factionSymbol == "COSMIC"
        assert ship.frame.fuelCapacity == 400

    @responses.activate
    def test_get_nav(self, client: ApiClient):
        responses.get(f"{BASE_URL}/my/ships/FAKE_AGENT-1/nav", json={"data": nav_payload("DOCKED")})

        nav = client.fleet.get_nav("FAKE_AGENT-1").data

        assert nav.status == ShipNavStatus.DOCKED
        assert nav.route.arrival == "2023-06-01T12:05:00.000Z"

    @responses.activate
    def test_get_cargo(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/cargo",
            json={
                "data": cargo_payload(
                    units=12, inventory=[{"symbol": "QUARTZ_SAND", "name": "Quartz Sand", "description": "Sand.", "units": 12}]
                )
            },
        )

        cargo = client.fleet.get_cargo("FAKE_AGENT-1").data

        assert cargo.units == 12
        assert cargo.inventory[0].symbol == TradeSymbol.QUARTZ_SAND


class TestSurvey:
    @responses.activate
    def test_survey_is_bodiless_post(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/survey",
            status=201,
            json={"data": {"cooldown": cooldown_payload(), "surveys": [survey_payload(), survey_payload()]}},
        )

        resp = client.fleet.survey("FAKE_AGENT-1")

        request = responses.calls[0].request
        assert request.method == "POST"
        assert request.headers["Content-Length"] == "0"
        assert not request.body
        assert len(resp.data.surveys) == 2
        assert resp.data.surveys[0].signature == "X1-AB23-C4-BD8C9A"


class TestPurchaseCargo:
    @responses.activate
    def test_purchase(self, client: ApiClient):
        responses.post(
            f"{BASE_URL}/my/ships/FAKE_AGENT-1/purchase",
            status=201,
            json={
                "data": {
                    "agent": agent_payload(credits=500),
                    "cargo": cargo_payload(
                        units=10, inventory=[{"symbol": "FUEL", "name": "Fuel", "description": "Fuel.", "units": 10}]
                    ),
                    "transaction": market_transaction_payload("FUEL", "PURCHASE", 10),
                }
            },
            match=[matchers.json_params_matcher({"symbol": "FUEL", "units": 10})],
        )

        resp = client.fleet.purchase("FAKE_AGENT-1", TradeSymbol.FUEL, 10)

        assert resp.data.agent.credits == 500
        assert resp.data.cargo.inventory[0].symbol == TradeSymbol.FUEL
        assert resp.data.transaction.type.value == "PURCHASE"


# ===========================================================================
# Contracts
# ===========================================================================


class TestContractEndpoints:
    @responses.activate
    def test_get_contract(self, client: ApiClient):
        responses.get(
            f"{BASE_URL}/my/contracts/contract-1",
            json={"data": contract_payload()},
            match=[matchers.header_matcher(AUTH)],
        )

        contract = client.contracts.get("contract-1").data

        assert contract.id == "contract-1"
        assert contract.terms.deliver[0].tradeSymbol == TradeSymbol.IRON_ORE

    @responses.activate
    def test_fulfill_is_bodiless_post(self, client: ApiClient):
        fulfilled = contract_payload(accepted=True)
        fulfilled["fulfilled"] = True
        responses.post(
            f"{BASE_URL}/my/contracts/contract-1/fulfill",
            json={"data": {"agent": agent_payload(credits=6000), "contract": fulfilled}},
        )

        resp = client.contracts.fulfill("contract-1")

        request = responses.calls[0].request
        assert request.method == "POST"
        assert request.headers["Content-Length"] == "0"
        assert not request.body
        assert resp.data.contract.fulfilled is True
        assert resp.data.agent.credits == 6000
