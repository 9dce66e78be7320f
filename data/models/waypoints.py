from dataclasses import dataclass, field

from data.enums import WaypointTraitSymbol, WaypointType


@dataclass
class WaypointTrait:
    symbol: WaypointTraitSymbol
    name: str | None = None
    description: str | None = None


@dataclass
class WaypointFactionRef:
    symbol: str


@dataclass
class WaypointChart:
    waypointSymbol: str | None = None
    submittedBy: str | None = None
    submittedOn: str | None = None


@dataclass
class Waypoint:
    symbol: str
    systemSymbol: str
    type: WaypointType
    x: int
    y: int
    orbitals: list[str] = field(default_factory=list)
    orbits: str | None = None
    faction: WaypointFactionRef | None = None
    traits: list[WaypointTrait] = field(default_factory=list)
    chart: WaypointChart | None = None
    isUnderConstruction: bool | None = None

    def has_trait(self, trait: WaypointTraitSymbol) -> bool:
        return any(t.symbol == trait for t in self.traits)

    @staticmethod
    def from_dict(d: dict) -> "Waypoint":
        return Waypoint(
            symbol=d["symbol"],
            systemSymbol=d["systemSymbol"],
            type=WaypointType(d["type"]),
            x=d["x"],
            y=d["y"],
            orbitals=[o["symbol"] for o in d.get("orbitals", [])],
            orbits=d.get("orbits"),
            faction=WaypointFactionRef(symbol=d["faction"]["symbol"]) if d.get("faction") else None,
            traits=[
                WaypointTrait(
                    symbol=WaypointTraitSymbol(t["symbol"]),
                    name=t.get("name"),
                    description=t.get("description"),
                )
                for t in d.get("traits", [])
            ],
            chart=(
                WaypointChart(
                    waypointSymbol=d["chart"].get("waypointSymbol"),
                    submittedBy=d["chart"].get("submittedBy"),
                    submittedOn=d["chart"].get("submittedOn"),
                )
                if isinstance(d.get("chart"), dict)
                else None
            ),
            isUnderConstruction=d.get("isUnderConstruction"),
        )


def system_symbol_of(waypoint_symbol: str) -> str:
    """X1-DF55-20250Z -> X1-DF55"""
    return "-".join(waypoint_symbol.split("-")[:2])
