"""Category page"""

from typing import Optional

from ..models.categoria import Categoria, CategoriaDraft
from ..utils.exceptions import ValidationError
from .base import CrudController


class CategoriaController(CrudController[Categoria, CategoriaDraft]):
    draft_type = CategoriaDraft
    load_error = "Erro ao carregar categorias!"
    create_success = "Categoria criada com sucesso!"
    create_error = "Erro ao criar categoria!"
    update_success = "Categoria atualizada!"
    update_error = "Erro ao atualizar categoria!"
    delete_success = "Categoria deletada!"
    delete_error = "Erro ao deletar categoria!"

    def create(self, nome: Optional[str]) -> bool:
        # Names are not unique per owner; duplicates are accepted
        try:
            if not nome or not nome.strip():
                raise ValidationError(["O nome da categoria é obrigatório"])
            draft = self.build_draft(nome=nome.strip())
        except ValidationError as e:
            self._report(self.create_error, e)
            return False
        return self._create(draft)

    def delete_question_for(self, record: Categoria) -> str:
        return f'Deseja realmente deletar "{record.nome}"?'
