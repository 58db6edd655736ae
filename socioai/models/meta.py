"""Goal (meta) data models"""

from datetime import date
from typing import List, Optional

from pydantic import Field

from .base import ApiModel, Draft


class Meta(ApiModel):
    """Goal as returned by the backend. Dates stay as yyyy-MM-dd strings."""
    id: int
    descricao: str
    valor_atual: Optional[float] = None
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None
    categoria: Optional[int] = None
    lancamentos: List[int] = Field(default_factory=list)


class MetaDraft(Draft):
    descricao: Optional[str] = Field(default=None, max_length=45)
    valor_atual: Optional[float] = Field(default=None, ge=0)
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    categoria: Optional[int] = None
    username: Optional[str] = None

    @classmethod
    def from_record(cls, record: Meta) -> "MetaDraft":
        values = {"descricao": record.descricao}
        if record.valor_atual is not None:
            values["valor_atual"] = record.valor_atual
        if record.data_inicio:
            values["data_inicio"] = date.fromisoformat(record.data_inicio)
        if record.data_fim:
            values["data_fim"] = date.fromisoformat(record.data_fim)
        if record.categoria is not None:
            values["categoria"] = record.categoria
        return cls(**values)
