"""Financial entry page"""

from datetime import datetime
from typing import Callable, List, Optional

from ..core.resource_list import ResourceList
from ..models.lancamento import Lancamento, LancamentoDraft
from ..models.meta import Meta
from ..services.lancamento_service import LancamentoClient
from ..services.meta_service import MetaClient
from ..utils.exceptions import ValidationError
from .base import CrudController

NO_GOAL = "Sem meta"


class LancamentoController(CrudController[Lancamento, LancamentoDraft]):
    draft_type = LancamentoDraft
    load_error = "Erro ao carregar lançamentos!"
    create_success = "Lançamento criado com sucesso!"
    create_error = "Erro ao criar lançamento!"
    update_success = "Lançamento atualizado!"
    update_error = "Erro ao atualizar lançamento!"
    delete_success = "Lançamento deletado!"
    delete_error = "Erro ao deletar lançamento!"

    def __init__(
        self,
        client: LancamentoClient,
        metas: MetaClient,
        *args,
        clock: Callable[[], datetime] = datetime.now,
        **kwargs,
    ):
        super().__init__(client, *args, **kwargs)
        self.meta_client = metas
        self.metas: ResourceList[Meta] = ResourceList("metas")
        self.clock = clock

    def load_metas(self) -> bool:
        identity = self._identity()
        if identity is None:
            return False
        return self._reload(self.metas, lambda: self.meta_client.list_by_owner(identity), "Erro ao carregar metas!")

    def on_init(self) -> None:
        self.load()
        self.load_metas()

    def create(
        self,
        descricao: Optional[str],
        valor: Optional[float],
        meta: Optional[int],
        tipo_lancamento: Optional[str] = None,
    ) -> bool:
        try:
            if not descricao or not valor or not meta:
                raise ValidationError(["Preencha todos os campos!"])
            values = {
                "descricao": descricao,
                "valor": valor,
                "data_criacao": self.clock(),
                "meta": meta,
            }
            if tipo_lancamento:
                values["tipo_lancamento"] = tipo_lancamento
            draft = self.build_draft(**values)
        except ValidationError as e:
            self._report(self.create_error, e)
            return False
        return self._create(draft)

    def meta_name(self, meta_id: Optional[int]) -> str:
        for meta in self.metas.items:
            if meta.id == meta_id:
                return meta.descricao or NO_GOAL
        return NO_GOAL

