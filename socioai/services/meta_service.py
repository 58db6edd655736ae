"""Goal client"""

from ..models.meta import Meta, MetaDraft
from .resource_client import BatchMixin, ResourceClient


class MetaClient(BatchMixin, ResourceClient[Meta, MetaDraft]):
    endpoint = "metas"
    record_type = Meta
    owner_field = "username"
