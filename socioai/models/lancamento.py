"""Financial entry (lançamento) data models"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import field_serializer

from .base import ApiModel, Draft


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime the way the backend parses LocalDateTime.

    Aware values are converted to UTC first; sub-second precision and the
    zone designator are dropped: ``2024-03-01T14:05:09``.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0).isoformat(timespec="seconds")


def parse_timestamp(value: str) -> datetime:
    """Inverse of format_timestamp, tolerant of fractions and a trailing Z"""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


class Lancamento(ApiModel):
    """Entry as returned by the backend. data_criacao stays a display string."""
    id: int
    descricao: str
    valor: float
    tipo_lancamento: Optional[str] = None
    data_criacao: Optional[str] = None
    meta: Optional[int] = None
    micro_categoria_id: Optional[int] = None


class LancamentoDraft(Draft):
    descricao: Optional[str] = None
    valor: Optional[float] = None
    data_criacao: Optional[datetime] = None
    tipo_lancamento: Optional[str] = None
    meta: Optional[int] = None

    @field_serializer("data_criacao")
    def _serialize_data_criacao(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        return format_timestamp(value)

    @classmethod
    def from_record(cls, record: Lancamento) -> "LancamentoDraft":
        """Stage a fetched entry for editing; the date string becomes a datetime again"""
        values = {
            "descricao": record.descricao,
            "valor": record.valor,
        }
        if record.data_criacao:
            values["data_criacao"] = parse_timestamp(record.data_criacao)
        if record.tipo_lancamento is not None:
            values["tipo_lancamento"] = record.tipo_lancamento
        if record.meta is not None:
            values["meta"] = record.meta
        return cls(**values)
