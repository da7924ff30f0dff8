from pydantic import BaseModel, Field
from typing import Optional, List, Literal

PlanType = Literal["basic", "start", "premium"]


class Coordinates(BaseModel):
    lat: float
    lng: float


class LoginIn(BaseModel):
    email: str
    password: str


class SignupIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str
    password: str = Field(..., min_length=1)
    phone: str = ""
    image: str = ""
    plan: PlanType = "basic"
    location: Optional[Coordinates] = None


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: Optional[str] = None
    phone: Optional[str] = None
    image: Optional[str] = None
    location: Optional[Coordinates] = None
    favorites: Optional[List[str]] = None


class PlanIn(BaseModel):
    plan: PlanType


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    phone: str = ""
    image: str = ""
    plan: PlanType = "basic"
    location: Optional[Coordinates] = None
    favorites: List[str] = []
