"""Pydantic schemas for uploads."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Location of a stored file."""

    url: str
