"""GIF catalog entry."""

from feed.domain.model.common import DomainModel


class Gif(DomainModel):
    """A GIF offered by the comment form's picker.

    Picking a GIF stores only its ``url`` on the comment.
    """

    id: str
    name: str
    url: str
