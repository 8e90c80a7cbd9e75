from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

"""
Core Entity Models
"""
class Author(BaseModel):

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: Optional[str] = None # assigned on first save
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None # caller-supplied, stored as given


class SearchRequest(BaseModel):
    """Filter criteria for a search; every field is optional and an empty list means no filter."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    title_prefixes: Optional[List[str]] = Field(default=None, description="Case-insensitive title prefixes")
    contains_contents: Optional[List[str]] = Field(default=None, description="Case-insensitive content keywords")
    author_ids: Optional[List[str]] = Field(default=None, description="Accepted author ids, exact match")
    created_from: Optional[datetime] = Field(default=None, description="Inclusive lower bound on created")
    created_to: Optional[datetime] = Field(default=None, description="Inclusive upper bound on created")
