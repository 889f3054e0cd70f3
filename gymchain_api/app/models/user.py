from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass
class User:
    """A gym member account as stored in the ``users`` table."""

    name: str
    email: str
    password: str
    creation_date: datetime
    active: bool = True
    phone: Optional[str] = None
    birth_date: Optional[date] = None
    id: Optional[int] = None
