from pydantic import BaseModel, Field
from typing import Optional, List, Literal

from .user import Coordinates

PetType = Literal["dog", "cat", "bird", "other"]


class VaccineIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    date: str
    nextDueDate: str = ""


class Vaccine(VaccineIn):
    id: Optional[str] = None


class PetIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    breed: str = ""
    age: float = 0
    weight: Optional[float] = None
    type: PetType = "other"
    image: str = ""
    bio: str = ""
    vaccines: List[Vaccine] = []
    availableForDating: bool = False
    location: Optional[Coordinates] = None
    ongId: Optional[str] = None


class PetOut(PetIn):
    id: str
    ownerId: Optional[str] = None
