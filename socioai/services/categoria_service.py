"""Category client"""

from ..models.categoria import Categoria, CategoriaDraft
from .resource_client import BatchMixin, ResourceClient


class CategoriaClient(BatchMixin, ResourceClient[Categoria, CategoriaDraft]):
    endpoint = "categorias"
    record_type = Categoria
    owner_field = "username"
