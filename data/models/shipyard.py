from dataclasses import dataclass, field
from typing import Any

from data.enums import ShipType
from data.models.common import decode_list, optional_enum
from data.models.ship import ShipEngine, ShipFrame, ShipModule, ShipMount, ShipReactor


@dataclass
class ShipyardTransaction:
    waypointSymbol: str
    shipSymbol: str | None
    price: int
    agentSymbol: str
    timestamp: str
    shipType: ShipType | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipyardTransaction":
        return ShipyardTransaction(
            waypointSymbol=d["waypointSymbol"],
            shipSymbol=d.get("shipSymbol"),
            price=d["price"],
            agentSymbol=d["agentSymbol"],
            timestamp=d["timestamp"],
            shipType=optional_enum(ShipType, d.get("shipType")),
        )


@dataclass
class ShipyardShip:
    type: ShipType
    name: str
    description: str
    purchasePrice: int
    frame: ShipFrame
    reactor: ShipReactor
    engine: ShipEngine
    modules: list[ShipModule] = field(default_factory=list)
    mounts: list[ShipMount] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipyardShip":
        return ShipyardShip(
            type=ShipType(d["type"]),
            name=d["name"],
            description=d["description"],
            purchasePrice=d["purchasePrice"],
            frame=ShipFrame.from_dict(d["frame"]),
            reactor=ShipReactor.from_dict(d["reactor"]),
            engine=ShipEngine.from_dict(d["engine"]),
            modules=decode_list(ShipModule.from_dict, d.get("modules")),
            mounts=decode_list(ShipMount.from_dict, d.get("mounts")),
        )


@dataclass
class Shipyard:
    symbol: str
    shipTypes: list[ShipType] = field(default_factory=list)
    transactions: list[ShipyardTransaction] | None = None
    ships: list[ShipyardShip] | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Shipyard":
        transactions = d.get("transactions")
        ships = d.get("ships")
        return Shipyard(
            symbol=d["symbol"],
            shipTypes=[ShipType(t["type"]) for t in d.get("shipTypes", [])],
            transactions=decode_list(ShipyardTransaction.from_dict, transactions) if transactions is not None else None,
            ships=decode_list(ShipyardShip.from_dict, ships) if ships is not None else None,
        )
