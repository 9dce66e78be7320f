"""
Payloads of the write-oriented endpoints, each wrapping the entities the server updated.
"""

from dataclasses import dataclass
from typing import Any

from data.models.agent import Agent, Session
from data.models.contract import Contract
from data.models.market import MarketTransaction
from data.models.ship import ShipCargo, ShipCooldown, ShipFuel, ShipNav, Ship
from data.models.shipyard import ShipyardTransaction
from data.models.survey import Extraction, Survey


@dataclass
class RegisterResult:
    token: str
    agent: Agent
    contract: Contract | None = None
    ship: Ship | None = None

    def session(self) -> Session:
        return Session(token=self.token, agent=self.agent)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "RegisterResult":
        return RegisterResult(
            token=d["token"],
            agent=Agent.from_dict(d["agent"]),
            contract=Contract.from_dict(d["contract"]) if d.get("contract") else None,
            ship=Ship.from_dict(d["ship"]) if d.get("ship") else None,
        )


@dataclass
class AgentContract:
    agent: Agent
    contract: Contract

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "AgentContract":
        return AgentContract(agent=Agent.from_dict(d["agent"]), contract=Contract.from_dict(d["contract"]))


@dataclass
class ContractDelivery:
    contract: Contract
    cargo: ShipCargo

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ContractDelivery":
        return ContractDelivery(contract=Contract.from_dict(d["contract"]), cargo=ShipCargo.from_dict(d["cargo"]))


@dataclass
class PurchaseShipResult:
    agent: Agent
    ship: Ship
    transaction: ShipyardTransaction

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "PurchaseShipResult":
        return PurchaseShipResult(
            agent=Agent.from_dict(d["agent"]),
            ship=Ship.from_dict(d["ship"]),
            transaction=ShipyardTransaction.from_dict(d["transaction"]),
        )


@dataclass
class NavResult:
    nav: ShipNav

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "NavResult":
        return NavResult(nav=ShipNav.from_dict(d["nav"]))


@dataclass
class NavigateResult:
    fuel: ShipFuel
    nav: ShipNav

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "NavigateResult":
        return NavigateResult(fuel=ShipFuel.from_dict(d["fuel"]), nav=ShipNav.from_dict(d["nav"]))


@dataclass
class RefuelResult:
    agent: Agent
    fuel: ShipFuel
    transaction: MarketTransaction

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "RefuelResult":
        return RefuelResult(
            agent=Agent.from_dict(d["agent"]),
            fuel=ShipFuel.from_dict(d["fuel"]),
            transaction=MarketTransaction.from_dict(d["transaction"]),
        )


@dataclass
class ExtractResult:
    cooldown: ShipCooldown
    extraction: Extraction
    cargo: ShipCargo

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ExtractResult":
        return ExtractResult(
            cooldown=ShipCooldown.from_dict(d["cooldown"]),
            extraction=Extraction.from_dict(d["extraction"]),
            cargo=ShipCargo.from_dict(d["cargo"]),
        )


@dataclass
class SurveyResult:
    cooldown: ShipCooldown
    surveys: list[Survey]

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "SurveyResult":
        return SurveyResult(
            cooldown=ShipCooldown.from_dict(d["cooldown"]),
            surveys=[Survey.from_dict(s) for s in d["surveys"]],
        )


@dataclass
class TradeResult:
    agent: Agent
    cargo: ShipCargo
    transaction: MarketTransaction

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "TradeResult":
        return TradeResult(
            agent=Agent.from_dict(d["agent"]),
            cargo=ShipCargo.from_dict(d["cargo"]),
            transaction=MarketTransaction.from_dict(d["transaction"]),
        )
