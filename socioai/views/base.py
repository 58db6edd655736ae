"""
Shared plumbing for the page controllers.

Controllers never render anything. They talk to the outside through three
small ports: a Notifier for transient messages, a Confirmer for destructive
actions and a Navigator for page changes.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Protocol, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..auth.session_store import SessionStore
from ..core.resource_list import ResourceList
from ..models.base import ApiModel, Draft
from ..services.resource_client import ResourceClient
from ..utils.exceptions import AuthError, SocioAIError, ValidationError
from ..utils.logger import get_logger
from .forms import from_pydantic

logger = get_logger(__name__)

R = TypeVar("R", bound=ApiModel)
D = TypeVar("D", bound=Draft)
T = TypeVar("T")


class Notifier(Protocol):
    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class Confirmer(Protocol):
    def confirm(self, message: str) -> bool:
        ...


class Navigator(Protocol):
    def navigate(self, view: str) -> None:
        ...


@dataclass
class EditDraft(Generic[D]):
    """Detached working copy of one record; at most one per controller"""
    record_key: Any
    draft: D


class ViewController:
    def __init__(
        self,
        session: SessionStore,
        notifier: Notifier,
        navigator: Optional[Navigator] = None,
        confirmer: Optional[Confirmer] = None,
    ):
        self.session = session
        self.notifier = notifier
        self.navigator = navigator
        self.confirmer = confirmer

    def _identity(self) -> Optional[str]:
        """Current username, or None after reporting that nobody is logged in"""
        try:
            return self.session.require_identity()
        except AuthError as e:
            logger.error("Operation refused without a session", view=type(self).__name__)
            self.notifier.error(str(e))
            return None

    def _report(self, message: str, error: Exception) -> None:
        logger.error(message, view=type(self).__name__, error=str(error), error_type=type(error).__name__)
        if isinstance(error, ValidationError):
            for item in error.messages:
                self.notifier.error(item)
        else:
            self.notifier.error(message)

    def _reload(self, slot: ResourceList[T], fetch: Callable[[], List[T]], message: str) -> bool:
        """Replace a list with a fresh fetch; on failure the old items stay"""
        try:
            slot.load(fetch)
        except SocioAIError as e:
            self._report(message, e)
            return False
        return True

    def _confirm(self, message: str) -> bool:
        if self.confirmer is None:
            return False
        return self.confirmer.confirm(message)


class CrudController(ViewController, Generic[R, D]):
    """
    List/create/edit/delete page over one resource client.

    Every successful mutation reloads the whole list from the backend.
    """

    draft_type: Type[D]
    load_error = "Erro ao carregar registros!"
    create_success = "Registro criado com sucesso!"
    create_error = "Erro ao criar registro!"
    update_success = "Registro atualizado!"
    update_error = "Erro ao atualizar registro!"
    delete_success = "Registro deletado!"
    delete_error = "Erro ao deletar registro!"
    delete_question = "Tem certeza que deseja excluir?"

    def __init__(self, client: ResourceClient[R, D], session: SessionStore, notifier: Notifier, **ports):
        super().__init__(session, notifier, **ports)
        self.client = client
        self.records: ResourceList[R] = ResourceList(client.endpoint)
        self.editing: Optional[EditDraft[D]] = None

    @property
    def items(self) -> List[R]:
        return self.records.items

    def fetch(self, identity: str) -> List[R]:
        return self.client.list_by_owner(identity)

    def load(self) -> bool:
        identity = self._identity()
        if identity is None:
            return False
        return self._reload(self.records, lambda: self.fetch(identity), self.load_error)

    def on_init(self) -> None:
        self.load()

    def build_draft(self, **values) -> D:
        try:
            return self.draft_type(**values)
        except PydanticValidationError as e:
            raise from_pydantic(e) from e

    def _create(self, draft: D) -> bool:
        identity = self._identity()
        if identity is None:
            return False
        try:
            self.client.create(draft, identity)
        except SocioAIError as e:
            self._report(self.create_error, e)
            return False
        self.notifier.success(self.create_success)
        self.load()
        return True

    def record_key(self, record: R) -> Any:
        """Path parameter used to update a record"""
        return record.id

    def start_edit(self, record: R) -> D:
        """Stage a copy of record; an unsaved previous draft is dropped"""
        self.editing = EditDraft(self.record_key(record), self.draft_type.from_record(record))
        return self.editing.draft

    def cancel_edit(self) -> None:
        self.editing = None

    def save_edit(self) -> bool:
        if self.editing is None:
            return False
        try:
            self.client.update(self.editing.record_key, self.editing.draft)
        except SocioAIError as e:
            self._report(self.update_error, e)
            return False
        self.editing = None
        self.notifier.success(self.update_success)
        self.load()
        return True

    def delete_question_for(self, record: R) -> str:
        return self.delete_question

    def delete(self, record: R) -> bool:
        """Delete after explicit confirmation; declining sends nothing"""
        if not self._confirm(self.delete_question_for(record)):
            return False
        try:
            self.client.delete(record.id)
        except SocioAIError as e:
            self._report(self.delete_error, e)
            return False
        self.notifier.success(self.delete_success)
        self.load()
        return True
