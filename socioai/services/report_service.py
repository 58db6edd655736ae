"""Read-only report endpoints"""

from datetime import date
from typing import List

from ..api.client import ApiClient
from ..models.report import FluxoCaixa, TotalCategoria
from .resource_client import parse_records, path_segment


class ReportClient:
    def __init__(self, api: ApiClient):
        self.api = api

    def totals_by_owner(self, identity: str) -> List[TotalCategoria]:
        """Per-category totals for one user"""
        data = self.api.get(f"{self.api.api_path}/categorias/u/{path_segment(identity)}/total")
        return parse_records(TotalCategoria, data)

    def cash_flow_history(self, identity: str) -> List[FluxoCaixa]:
        data = self.api.get(f"{self.api.api_path}/lancamentos/fluxo-caixa/historico/{path_segment(identity)}")
        return parse_records(FluxoCaixa, data)

    def cash_flow_period(self, identity: str, start: date, end: date) -> List[FluxoCaixa]:
        """Monthly cash flow between two dates, both inclusive"""
        data = self.api.get(
            f"{self.api.api_path}/lancamentos/fluxo-caixa/periodo/{path_segment(identity)}",
            params={"inicio": start.isoformat(), "fim": end.isoformat()},
        )
        return parse_records(FluxoCaixa, data)
