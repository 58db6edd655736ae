"""Goal page"""

from datetime import date
from typing import Optional

from ..core.resource_list import ResourceList
from ..models.categoria import Categoria
from ..models.meta import Meta, MetaDraft
from ..services.categoria_service import CategoriaClient
from ..services.meta_service import MetaClient
from ..utils.exceptions import ValidationError
from .base import CrudController


class MetaController(CrudController[Meta, MetaDraft]):
    draft_type = MetaDraft
    load_error = "Erro ao carregar metas!"
    create_success = "Meta criada com sucesso!"
    create_error = "Erro ao criar meta!"
    update_success = "Meta atualizada!"
    update_error = "Erro ao atualizar meta!"
    delete_success = "Meta deletada!"
    delete_error = "Erro ao deletar meta!"
    delete_question = "Deseja realmente excluir esta meta?"

    def __init__(self, client: MetaClient, categorias: CategoriaClient, *args, **kwargs):
        super().__init__(client, *args, **kwargs)
        self.categoria_client = categorias
        self.categorias: ResourceList[Categoria] = ResourceList("categorias")

    def load_categorias(self) -> bool:
        identity = self._identity()
        if identity is None:
            return False
        return self._reload(
            self.categorias,
            lambda: self.categoria_client.list_by_owner(identity),
            "Erro ao carregar categorias!",
        )

    def on_init(self) -> None:
        self.load()
        self.load_categorias()

    def create(
        self,
        descricao: Optional[str],
        categoria: Optional[int],
        valor_atual: float = 0.0,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
    ) -> bool:
        try:
            if not descricao or not categoria:
                raise ValidationError(["Descrição e categoria são obrigatórias!"])
            values = {"descricao": descricao, "categoria": categoria, "valor_atual": valor_atual}
            if data_inicio is not None:
                values["data_inicio"] = data_inicio
            if data_fim is not None:
                values["data_fim"] = data_fim
            draft = self.build_draft(**values)
        except ValidationError as e:
            self._report(self.create_error, e)
            return False
        return self._create(draft)

    def category_name(self, categoria_id: Optional[int]) -> str:
        if not categoria_id:
            return ""
        for categoria in self.categorias.items:
            if categoria.id == categoria_id:
                return categoria.nome
        return ""
