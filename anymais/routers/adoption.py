from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from anymais.routers.deps import get_database, require_user
from anymais.schemas.booking import AdoptionInterestIn, AdoptionInterestOut, InterestStatusPatch

router = APIRouter(prefix="/adoption", tags=["adoption"])


@router.get("/interests", response_model=list[AdoptionInterestOut])
def my_interests(request: Request):
    database = get_database(request)
    user = require_user(database)
    return database.adoption_interests.list_by_user(user["id"])


@router.post("/interests", response_model=AdoptionInterestOut, status_code=status.HTTP_201_CREATED)
def register_interest(payload: AdoptionInterestIn, request: Request):
    database = get_database(request)
    user = require_user(database)
    return database.adoption_interests.create({"userId": user["id"], "petId": payload.petId})


@router.patch("/interests/{interest_id}/status", response_model=AdoptionInterestOut)
def update_status(interest_id: str, payload: InterestStatusPatch, request: Request):
    database = get_database(request)
    user = require_user(database)
    interest = database.adoption_interests.get(interest_id)
    if not interest or interest.get("userId") != user["id"]:
        raise HTTPException(404, "Interesse nao encontrado")
    database.adoption_interests.update_status(interest_id, payload.status)
    return database.adoption_interests.get(interest_id)
