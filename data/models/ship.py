from dataclasses import dataclass, field
from typing import Any

from data.enums import (
    DepositSymbol,
    ShipCrewRotation,
    ShipEngineSymbol,
    ShipFrameSymbol,
    ShipModuleSymbol,
    ShipMountSymbol,
    ShipNavFlightMode,
    ShipNavStatus,
    ShipReactorSymbol,
    ShipRole,
    TradeSymbol,
    WaypointType,
)
from data.models.common import decode_list, optional_enum


@dataclass
class ShipRegistration:
    name: str
    factionSymbol: str
    role: ShipRole


@dataclass
class ShipNavRouteWaypoint:
    symbol: str
    type: WaypointType
    systemSymbol: str
    x: int
    y: int

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipNavRouteWaypoint":
        return ShipNavRouteWaypoint(
            symbol=d["symbol"],
            type=WaypointType(d["type"]),
            systemSymbol=d["systemSymbol"],
            x=d["x"],
            y=d["y"],
        )


@dataclass
class ShipNavRoute:
    destination: ShipNavRouteWaypoint
    origin: ShipNavRouteWaypoint | None
    departureTime: str
    arrival: str


@dataclass
class ShipNav:
    systemSymbol: str
    waypointSymbol: str
    route: ShipNavRoute
    status: ShipNavStatus
    flightMode: ShipNavFlightMode | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipNav":
        route_dict = d["route"]
        # older payloads call the origin "departure"
        origin_dict = route_dict.get("origin") or route_dict.get("departure")
        route = ShipNavRoute(
            destination=ShipNavRouteWaypoint.from_dict(route_dict["destination"]),
            origin=ShipNavRouteWaypoint.from_dict(origin_dict) if origin_dict else None,
            departureTime=route_dict["departureTime"],
            arrival=route_dict["arrival"],
        )
        return ShipNav(
            systemSymbol=d["systemSymbol"],
            waypointSymbol=d["waypointSymbol"],
            route=route,
            status=ShipNavStatus(d["status"]),
            flightMode=optional_enum(ShipNavFlightMode, d.get("flightMode")),
        )


@dataclass
class ShipCrew:
    current: int
    required: int
    capacity: int
    rotation: ShipCrewRotation | None
    morale: int
    wages: int


@dataclass
class ShipRequirements:
    power: int | None = None
    crew: int | None = None
    slots: int | None = None

    @staticmethod
    def from_dict(d: dict[str, Any] | None) -> "ShipRequirements":
        d = d or {}
        return ShipRequirements(power=d.get("power"), crew=d.get("crew"), slots=d.get("slots"))


@dataclass
class ShipFrame:
    symbol: ShipFrameSymbol
    name: str
    description: str
    moduleSlots: int
    mountingPoints: int
    fuelCapacity: int
    requirements: ShipRequirements
    condition: float | None = None
    integrity: float | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipFrame":
        return ShipFrame(
            symbol=ShipFrameSymbol(d["symbol"]),
            name=d["name"],
            description=d["description"],
            moduleSlots=d["moduleSlots"],
            mountingPoints=d["mountingPoints"],
            fuelCapacity=d["fuelCapacity"],
            requirements=ShipRequirements.from_dict(d.get("requirements")),
            condition=d.get("condition"),
            integrity=d.get("integrity"),
        )


@dataclass
class ShipReactor:
    symbol: ShipReactorSymbol
    name: str
    description: str
    powerOutput: int
    requirements: ShipRequirements
    condition: float | None = None
    integrity: float | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipReactor":
        return ShipReactor(
            symbol=ShipReactorSymbol(d["symbol"]),
            name=d["name"],
            description=d["description"],
            powerOutput=d["powerOutput"],
            requirements=ShipRequirements.from_dict(d.get("requirements")),
            condition=d.get("condition"),
            integrity=d.get("integrity"),
        )


@dataclass
class ShipEngine:
    symbol: ShipEngineSymbol
    name: str
    description: str
    speed: int
    requirements: ShipRequirements
    condition: float | None = None
    integrity: float | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipEngine":
        return ShipEngine(
            symbol=ShipEngineSymbol(d["symbol"]),
            name=d["name"],
            description=d["description"],
            speed=d["speed"],
            requirements=ShipRequirements.from_dict(d.get("requirements")),
            condition=d.get("condition"),
            integrity=d.get("integrity"),
        )


@dataclass
class ShipModule:
    symbol: ShipModuleSymbol
    name: str
    description: str | None
    requirements: ShipRequirements
    capacity: int | None = None
    range: int | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipModule":
        return ShipModule(
            symbol=ShipModuleSymbol(d["symbol"]),
            name=d["name"],
            description=d.get("description"),
            requirements=ShipRequirements.from_dict(d.get("requirements")),
            capacity=d.get("capacity"),
            range=d.get("range"),
        )


@dataclass
class ShipMount:
    symbol: ShipMountSymbol
    name: str
    requirements: ShipRequirements
    description: str | None = None
    strength: int | None = None
    deposits: list[DepositSymbol] | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipMount":
        deposits = d.get("deposits")
        return ShipMount(
            symbol=ShipMountSymbol(d["symbol"]),
            name=d["name"],
            requirements=ShipRequirements.from_dict(d.get("requirements")),
            description=d.get("description"),
            strength=d.get("strength"),
            deposits=[DepositSymbol(s) for s in deposits] if deposits is not None else None,
        )


@dataclass
class ShipCargoItem:
    symbol: TradeSymbol
    name: str
    description: str
    units: int


@dataclass
class ShipCargo:
    capacity: int = 0
    units: int = 0
    inventory: list[ShipCargoItem] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipCargo":
        return ShipCargo(
            capacity=d["capacity"],
            units=d["units"],
            inventory=[
                ShipCargoItem(symbol=TradeSymbol(i["symbol"]), name=i["name"], description=i["description"], units=i["units"])
                for i in d.get("inventory", [])
            ],
        )


@dataclass
class ShipFuelConsumed:
    amount: int
    timestamp: str


@dataclass
class ShipFuel:
    current: int = 0
    capacity: int = 0
    consumed: ShipFuelConsumed | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipFuel":
        consumed = d.get("consumed")
        return ShipFuel(
            current=d["current"],
            capacity=d["capacity"],
            consumed=ShipFuelConsumed(amount=consumed["amount"], timestamp=consumed["timestamp"]) if consumed else None,
        )


@dataclass
class ShipCooldown:
    shipSymbol: str
    totalSeconds: int = 0
    remainingSeconds: int = 0
    expiration: str | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ShipCooldown":
        return ShipCooldown(
            shipSymbol=d["shipSymbol"],
            totalSeconds=d["totalSeconds"],
            remainingSeconds=d["remainingSeconds"],
            expiration=d.get("expiration"),
        )


@dataclass
class Ship:
    symbol: str
    registration: ShipRegistration
    nav: ShipNav
    crew: ShipCrew | None
    frame: ShipFrame
    reactor: ShipReactor
    engine: ShipEngine
    modules: list[ShipModule] = field(default_factory=list)
    mounts: list[ShipMount] = field(default_factory=list)
    cargo: ShipCargo = field(default_factory=ShipCargo)
    fuel: ShipFuel = field(default_factory=ShipFuel)
    cooldown: ShipCooldown | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Ship":
        registration_dict = d["registration"]
        registration = ShipRegistration(
            name=registration_dict["name"],
            factionSymbol=registration_dict["factionSymbol"],
            role=ShipRole(registration_dict["role"]),
        )

        crew_dict = d.get("crew")
        crew = None
        if crew_dict:
            crew = ShipCrew(
                current=crew_dict["current"],
                required=crew_dict["required"],
                capacity=crew_dict["capacity"],
                rotation=optional_enum(ShipCrewRotation, crew_dict.get("rotation")),
                morale=crew_dict["morale"],
                wages=crew_dict["wages"],
            )

        return Ship(
            symbol=d["symbol"],
            registration=registration,
            nav=ShipNav.from_dict(d["nav"]),
            crew=crew,
            frame=ShipFrame.from_dict(d["frame"]),
            reactor=ShipReactor.from_dict(d["reactor"]),
            engine=ShipEngine.from_dict(d["engine"]),
            modules=decode_list(ShipModule.from_dict, d.get("modules")),
            mounts=decode_list(ShipMount.from_dict, d.get("mounts")),
            cargo=ShipCargo.from_dict(d["cargo"]),
            fuel=ShipFuel.from_dict(d["fuel"]),
            cooldown=ShipCooldown.from_dict(d["cooldown"]) if d.get("cooldown") else None,
        )
