"""
Pydantic model for article metadata documents.

Articles live in the ``metadatas`` collection and are written by the
ingestion side of the project; this API only references them by id
from ``visitHistory`` and exposes no article endpoints.
"""

from typing import List

from pydantic import BaseModel, Field

from .user import MAX_TEXT_LENGTH


class Article(BaseModel):
    title: str = Field(..., max_length=MAX_TEXT_LENGTH)
    abstract: str
    publication_year: str = Field(..., examples=["2021"])
    end_page: int
    doi: str = Field(..., max_length=MAX_TEXT_LENGTH, examples=["10.1000/xyz123"])
    affiliation: str = Field(..., max_length=MAX_TEXT_LENGTH)
    pubtype: str = Field(..., max_length=MAX_TEXT_LENGTH, examples=["Journal Article"])
    keywords: List[str]
    author: List[str]
