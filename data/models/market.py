from dataclasses import dataclass, field
from typing import Any

from data.enums import MarketTransactionType, SupplyLevel, TradeSymbol
from data.models.common import decode_list


@dataclass
class TradeGood:
    symbol: TradeSymbol
    name: str
    description: str

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "TradeGood":
        return TradeGood(symbol=TradeSymbol(d["symbol"]), name=d["name"], description=d["description"])


@dataclass
class MarketTradeGood:
    symbol: TradeSymbol
    tradeVolume: int
    supply: SupplyLevel
    purchasePrice: int
    sellPrice: int
    type: str | None = None
    activity: str | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "MarketTradeGood":
        return MarketTradeGood(
            symbol=TradeSymbol(d["symbol"]),
            tradeVolume=d["tradeVolume"],
            supply=SupplyLevel(d["supply"]),
            purchasePrice=d["purchasePrice"],
            sellPrice=d["sellPrice"],
            type=d.get("type"),
            activity=d.get("activity"),
        )


@dataclass
class MarketTransaction:
    waypointSymbol: str
    shipSymbol: str
    tradeSymbol: TradeSymbol
    type: MarketTransactionType
    units: int
    pricePerUnit: int
    totalPrice: int
    timestamp: str

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "MarketTransaction":
        return MarketTransaction(
            waypointSymbol=d["waypointSymbol"],
            shipSymbol=d["shipSymbol"],
            tradeSymbol=TradeSymbol(d["tradeSymbol"]),
            type=MarketTransactionType(d["type"]),
            units=d["units"],
            pricePerUnit=d["pricePerUnit"],
            totalPrice=d["totalPrice"],
            timestamp=d["timestamp"],
        )


@dataclass
class Market:
    """Prices and transactions are only reported while a ship is present."""

    symbol: str
    exports: list[TradeGood] = field(default_factory=list)
    imports: list[TradeGood] = field(default_factory=list)
    exchange: list[TradeGood] = field(default_factory=list)
    transactions: list[MarketTransaction] | None = None
    tradeGoods: list[MarketTradeGood] | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Market":
        transactions = d.get("transactions")
        trade_goods = d.get("tradeGoods")
        return Market(
            symbol=d["symbol"],
            exports=decode_list(TradeGood.from_dict, d.get("exports")),
            imports=decode_list(TradeGood.from_dict, d.get("imports")),
            exchange=decode_list(TradeGood.from_dict, d.get("exchange")),
            transactions=decode_list(MarketTransaction.from_dict, transactions) if transactions is not None else None,
            tradeGoods=decode_list(MarketTradeGood.from_dict, trade_goods) if trade_goods is not None else None,
        )
