"""API payload models for directory listings and file reads"""

from typing import Literal, Optional

from pydantic import BaseModel


class DirEntry(BaseModel):
    """One entry of a directory listing."""
    name: str
    type: Literal["dir", "file"]
    modified: str                   # ISO-8601, UTC
    hidden: bool = False
    size: Optional[int] = None      # files only


class DirListing(BaseModel):
    path: str
    parent: Optional[str] = None    # None at the root
    items: list[DirEntry] = []


class FileContent(BaseModel):
    """A file read for preview; content is None when the file cannot be previewed."""
    path: str
    name: str
    ext: str
    size: int
    content: Optional[str] = None
    error: Optional[str] = None
    html: Optional[str] = None      # rendered markup, filled by the render endpoint
