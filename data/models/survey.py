from dataclasses import dataclass, field
from typing import Any

from data.enums import DepositSymbol, SurveySize, TradeSymbol


@dataclass
class SurveyDeposit:
    symbol: DepositSymbol


@dataclass
class Survey:
    """Time-limited hint of the deposits at a waypoint; pass back verbatim to target an extraction."""

    signature: str
    symbol: str
    deposits: list[SurveyDeposit]
    expiration: str
    size: SurveySize

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Survey":
        return Survey(
            signature=d["signature"],
            symbol=d["symbol"],
            deposits=[SurveyDeposit(symbol=DepositSymbol(dep["symbol"])) for dep in d["deposits"]],
            expiration=d["expiration"],
            size=SurveySize(d["size"]),
        )


@dataclass
class ExtractionYield:
    symbol: TradeSymbol
    units: int


@dataclass
class Extraction:
    shipSymbol: str
    yield_: ExtractionYield = field(metadata={"name": "yield"})

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Extraction":
        y = d["yield"]
        return Extraction(
            shipSymbol=d["shipSymbol"],
            yield_=ExtractionYield(symbol=TradeSymbol(y["symbol"]), units=y["units"]),
        )
