"""Metafield model and key index helper."""

from datetime import datetime
from typing import Dict, Iterable, Optional

from bc_rest.models.common import BigCommerceModel


class Metafield(BigCommerceModel):
    """Namespaced key/value annotation attached to a resource."""

    id: int = 0
    key: str = ""
    value: str = ""
    resource_id: int = 0
    resource_type: str = ""
    description: str = ""
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    namespace: str = ""
    permission_set: str = ""


def index_metafields(metafields: Iterable[Metafield]) -> Dict[str, Metafield]:
    """Re-index metafields by key.

    Keys are unique per resource on the API side; if a duplicate slips
    through, the last one wins.
    """
    return {metafield.key: metafield for metafield in metafields}
