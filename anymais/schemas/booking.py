from pydantic import BaseModel, Field
from typing import Literal

AppointmentStatus = Literal["scheduled", "confirmed", "completed", "cancelled"]
InterestStatus = Literal["pending", "approved", "rejected"]


class AppointmentIn(BaseModel):
    petId: str
    providerId: str
    providerName: str = ""
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$")


class AppointmentOut(AppointmentIn):
    id: str
    userId: str
    status: str


class AppointmentStatusPatch(BaseModel):
    status: AppointmentStatus


class AdoptionInterestIn(BaseModel):
    petId: str


class AdoptionInterestOut(AdoptionInterestIn):
    id: str
    userId: str
    date: str
    status: str


class InterestStatusPatch(BaseModel):
    status: InterestStatus
