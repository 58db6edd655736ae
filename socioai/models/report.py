"""Report data models"""

from .base import ApiModel


class TotalCategoria(ApiModel):
    """Sum of entries for one category"""
    categoria: str
    valor: float


class FluxoCaixa(ApiModel):
    """One month of the cash-flow pivot (periodo like "2023-11")"""
    periodo: str
    total_receitas: float = 0.0
    total_despesas: float = 0.0
    saldo_liquido: float = 0.0
