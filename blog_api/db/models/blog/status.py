# blog_api/db/models/blog/status.py
from typing import Optional
from sqlmodel import SQLModel, Field

class Status(SQLModel, table=True):
    __tablename__ = "statuses"
    id: Optional[int] = Field(default=None, primary_key=True)
    status: str = Field(max_length=50)
