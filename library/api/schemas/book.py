# library/api/schemas/book.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

class BookBase(BaseModel):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    publisher: Optional[str] = None
    genre: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class BookCreate(BookBase):
    pass

class BookUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = Field(default=None, min_length=1)
    publisher: Optional[str] = None
    genre: Optional[str] = None

class Book(BookBase):
    id: int
    created_at: datetime
    updated_at: datetime

class BookList(BaseModel):
    items: List[Book]
    total: int
    page: int
    size: int
    pages: int
