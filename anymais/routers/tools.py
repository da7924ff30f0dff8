from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from anymais.core.utils import calculate_distance, check_password_strength

router = APIRouter(prefix="/utils", tags=["utils"])


class PasswordIn(BaseModel):
    password: str


@router.post("/password-strength")
def password_strength(payload: PasswordIn):
    return {"strength": check_password_strength(payload.password)}


@router.get("/distance")
def distance(lat1: float, lng1: float, lat2: float, lng2: float):
    return {"km": calculate_distance(lat1, lng1, lat2, lng2)}
