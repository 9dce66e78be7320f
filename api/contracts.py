"""
Contracts API module for listing, accepting, delivering on and fulfilling contracts.
"""
from functools import partial
from typing import TYPE_CHECKING

from api.handle_requests import page_params
from data.enums import TradeSymbol
from data.models.common import ApiResponse, decode_list
from data.models.contract import Contract
from data.models.results import AgentContract, ContractDelivery

if TYPE_CHECKING:
    from api.client import ApiClient


class ContractsAPI:
    """Contract endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def list(self, page: int | None = None, limit: int | None = None) -> ApiResponse[list[Contract]]:
        """Fetch one page of contracts (GET /my/contracts)."""
        return self.client.http.get_json(
            "my/contracts",
            self.client.agent_key,
            partial(decode_list, Contract.from_dict),
            params=page_params(page, limit),
        )

    def get(self, contract_id: str) -> ApiResponse[Contract]:
        """Fetch a single contract (GET /my/contracts/{contractId})."""
        return self.client.http.get_json(f"my/contracts/{contract_id}", self.client.agent_key, Contract.from_dict)

    def accept(self, contract_id: str) -> ApiResponse[AgentContract]:
        """Accept a contract (POST /my/contracts/{contractId}/accept)."""
        return self.client.http.post_json(
            f"my/contracts/{contract_id}/accept", self.client.agent_key, AgentContract.from_dict
        )

    def deliver(self, contract_id: str, ship_symbol: str, trade_symbol: TradeSymbol, units: int) -> ApiResponse[ContractDelivery]:
        """Deliver cargo towards a contract (POST /my/contracts/{contractId}/deliver)."""
        body = {"shipSymbol": ship_symbol, "tradeSymbol": trade_symbol.value, "units": units}
        return self.client.http.post_json(
            f"my/contracts/{contract_id}/deliver", self.client.agent_key, ContractDelivery.from_dict, json=body
        )

    def fulfill(self, contract_id: str) -> ApiResponse[AgentContract]:
        """Fulfill a contract once every delivery is complete (POST /my/contracts/{contractId}/fulfill)."""
        return self.client.http.post_json(
            f"my/contracts/{contract_id}/fulfill", self.client.agent_key, AgentContract.from_dict
        )
