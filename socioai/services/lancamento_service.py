"""Financial entry client"""

from ..models.lancamento import Lancamento, LancamentoDraft
from .resource_client import ResourceClient


class LancamentoClient(ResourceClient[Lancamento, LancamentoDraft]):
    # Entries are owned through their goal, so no username is sent
    endpoint = "lancamentos"
    record_type = Lancamento
