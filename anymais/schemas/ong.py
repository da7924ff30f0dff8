from pydantic import BaseModel, Field
from typing import Optional

from .user import Coordinates


class BankInfo(BaseModel):
    bank: str
    agency: str
    account: str


class OngIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str = ""
    location: str = ""
    coordinates: Optional[Coordinates] = None
    phone: str = ""
    email: Optional[str] = None
    website: Optional[str] = None
    image: str = ""
    pixKey: Optional[str] = None
    bankInfo: Optional[BankInfo] = None


class OngOut(OngIn):
    id: str
    ownerId: Optional[str] = None
