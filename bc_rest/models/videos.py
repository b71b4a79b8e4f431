"""Product video model."""

from typing import Optional

from bc_rest.models.common import BigCommerceModel


class Video(BigCommerceModel):
    """A video attached to a product."""

    id: Optional[int] = None
    product_id: Optional[int] = None
    title: str = ""
    description: str = ""
    sort_order: int = 0
    type: str = "youtube"
    video_id: str = ""
    length: str = ""
