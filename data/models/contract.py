from dataclasses import dataclass, field
from typing import Any

from data.enums import ContractType, TradeSymbol
from data.models.common import decode_list


@dataclass
class ContractPayment:
    onAccepted: int
    onFulfilled: int


@dataclass
class ContractDeliverGood:
    tradeSymbol: TradeSymbol
    destinationSymbol: str
    unitsRequired: int
    unitsFulfilled: int

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ContractDeliverGood":
        return ContractDeliverGood(
            tradeSymbol=TradeSymbol(d["tradeSymbol"]),
            destinationSymbol=d["destinationSymbol"],
            unitsRequired=d["unitsRequired"],
            unitsFulfilled=d["unitsFulfilled"],
        )


@dataclass
class ContractTerms:
    deadline: str
    payment: ContractPayment
    deliver: list[ContractDeliverGood] = field(default_factory=list)


@dataclass
class Contract:
    id: str
    factionSymbol: str
    type: ContractType
    terms: ContractTerms
    accepted: bool
    fulfilled: bool
    deadlineToAccept: str | None = None
    expiration: str | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Contract":
        terms = d["terms"]
        payment = terms["payment"]
        return Contract(
            id=d["id"],
            factionSymbol=d["factionSymbol"],
            type=ContractType(d["type"]),
            terms=ContractTerms(
                deadline=terms["deadline"],
                payment=ContractPayment(onAccepted=payment["onAccepted"], onFulfilled=payment["onFulfilled"]),
                deliver=decode_list(ContractDeliverGood.from_dict, terms.get("deliver")),
            ),
            accepted=d["accepted"],
            fulfilled=d["fulfilled"],
            deadlineToAccept=d.get("deadlineToAccept"),
            expiration=d.get("expiration"),
        )
