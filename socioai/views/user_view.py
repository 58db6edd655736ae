"""User administration page"""

from typing import List, Optional

from ..core.resource_list import ResourceList
from ..models.user import Role, User, UserDraft
from ..services.user_service import RoleClient, UserClient
from .base import CrudController


class UserController(CrudController[User, UserDraft]):
    draft_type = UserDraft
    load_error = "Erro ao carregar usuários!"
    update_success = "Usuário atualizado!"
    update_error = "Erro ao salvar edição do usuário!"
    delete_success = "Usuário deletado!"
    delete_error = "Erro ao deletar usuário!"
    delete_question = "Deseja realmente excluir este usuário?"

    def __init__(self, client: UserClient, roles: Optional[RoleClient], *args, **kwargs):
        super().__init__(client, *args, **kwargs)
        self.role_client = roles
        self.roles: ResourceList[Role] = ResourceList("roles")

    def fetch(self, identity: str) -> List[User]:
        # Administration page: every account, not just the logged-in one
        return self.client.list_all()

    def load_roles(self) -> bool:
        if self.role_client is None or self._identity() is None:
            return False
        return self._reload(self.roles, self.role_client.list_all, "Erro ao carregar papéis!")

    def on_init(self) -> None:
        self.load()
        self.load_roles()

    def record_key(self, record: User) -> str:
        return record.username

    def role_name(self, role_id: Optional[int]) -> str:
        for role in self.roles.items:
            if role.id == role_id:
                return role.description
        return f"Role ID: {role_id}"
