"""Report page: totals per category and monthly cash flow"""

from datetime import date
from typing import Dict, List, Optional, Union

from ..auth.session_store import SessionStore
from ..core.resource_list import ResourceList
from ..models.report import FluxoCaixa, TotalCategoria
from ..services.report_service import ReportClient
from .base import Notifier, ViewController


class ReportController(ViewController):
    def __init__(self, client: ReportClient, session: SessionStore, notifier: Notifier, **ports):
        super().__init__(session, notifier, **ports)
        self.client = client
        self.totals: ResourceList[TotalCategoria] = ResourceList("totais")
        self.cash_flow: ResourceList[FluxoCaixa] = ResourceList("fluxo-caixa")

    @property
    def loading(self) -> bool:
        return self.totals.is_loading

    def load_totals(self) -> bool:
        identity = self._identity()
        if identity is None:
            return False
        return self._reload(
            self.totals,
            lambda: self.client.totals_by_owner(identity),
            "Erro ao carregar o relatório de totais!",
        )

    def load_cash_flow(self, start: Optional[date] = None, end: Optional[date] = None) -> bool:
        """Whole history, or only the months between start and end when both are given"""
        identity = self._identity()
        if identity is None:
            return False
        if start is not None and end is not None:
            fetch = lambda: self.client.cash_flow_period(identity, start, end)
        else:
            fetch = lambda: self.client.cash_flow_history(identity)
        return self._reload(self.cash_flow, fetch, "Erro ao carregar o fluxo de caixa!")

    def on_init(self) -> None:
        self.load_totals()

    def chart_data(self) -> Dict[str, List[Union[str, float]]]:
        return {
            "labels": [item.categoria for item in self.totals.items],
            "values": [item.valor for item in self.totals.items],
        }
