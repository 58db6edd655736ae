"""Resource clients, one per backend collection"""

from .resource_client import ResourceClient
from .categoria_service import CategoriaClient
from .lancamento_service import LancamentoClient
from .meta_service import MetaClient
from .user_service import RoleClient, UserClient
from .report_service import ReportClient

__all__ = [
    "ResourceClient",
    "CategoriaClient",
    "LancamentoClient",
    "MetaClient",
    "UserClient",
    "RoleClient",
    "ReportClient",
]
