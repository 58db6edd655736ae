"""Category data models"""

from typing import List, Optional

from pydantic import Field

from .base import ApiModel, Draft


class Categoria(ApiModel):
    """Category as returned by the backend"""
    id: int
    nome: str
    user: Optional[str] = None
    metas: List[int] = Field(default_factory=list)


class CategoriaDraft(Draft):
    nome: Optional[str] = Field(default=None, max_length=45)
    username: Optional[str] = None

    @classmethod
    def from_record(cls, record: Categoria) -> "CategoriaDraft":
        return cls(nome=record.nome)
