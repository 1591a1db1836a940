"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel, ConfigDict


class MessageResponse(BaseModel):
    """Simple message response."""

    msg: str


class DocumentModel(BaseModel):
    """Base for response documents keyed by ``_id`` and dated by ``date``.

    Fields carry their wire names as aliases and stay constructible by
    attribute name.
    """

    model_config = ConfigDict(populate_by_name=True)
