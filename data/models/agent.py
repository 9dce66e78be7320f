from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Agent:
    symbol: str
    headquarters: str
    credits: int
    startingFaction: str
    shipCount: int | None = None
    accountId: str | None = None

    # headquarters is always SECTOR-SYSTEM-WAYPOINT, e.g. X1-AB23-C4
    @property
    def sector(self) -> str:
        return self.headquarters.split("-")[0]

    @property
    def system(self) -> str:
        parts = self.headquarters.split("-")
        return f"{parts[0]}-{parts[1]}"

    @property
    def location(self) -> str:
        return self.headquarters.split("-")[2]

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Agent":
        return Agent(
            symbol=d["symbol"],
            headquarters=d["headquarters"],
            credits=d["credits"],
            startingFaction=d["startingFaction"],
            shipCount=d.get("shipCount"),
            accountId=d.get("accountId"),
        )


@dataclass(frozen=True)
class Session:
    """Authenticated player: the bearer token plus the agent it was issued for."""

    token: str
    agent: Agent

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Session":
        return Session(token=d["token"], agent=Agent.from_dict(d["agent"]))
