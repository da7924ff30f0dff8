from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from anymais.database import Database
from anymais.domain.plans import can_enable_dating, check_plan_access
from anymais.routers.deps import get_database, require_user
from anymais.schemas.pet import PetIn, PetOut, VaccineIn

router = APIRouter(prefix="/pets", tags=["pets"])


def _owned_pet(database: Database, user: dict, pet_id: str) -> dict:
    pet = database.pets.get(pet_id)
    if not pet or pet.get("ownerId") != user["id"]:
        raise HTTPException(404, "Pet nao encontrado")
    return pet


def _check_dating(user: dict, payload: PetIn) -> None:
    if payload.availableForDating and not can_enable_dating(user.get("plan")):
        raise HTTPException(403, "Disponivel apenas no plano Premium.")


@router.get("", response_model=list[PetOut])
def my_pets(request: Request):
    database = get_database(request)
    user = require_user(database)
    return database.pets.list_by_owner(user["id"])


@router.get("/dating", response_model=list[PetOut])
def dating_pets(request: Request):
    database = get_database(request)
    user = require_user(database)
    if not check_plan_access(user.get("plan"), "dating"):
        raise HTTPException(403, "Disponivel apenas no plano Premium.")
    return database.pets.list_available_for_dating(exclude_owner_id=user["id"])


@router.post("", response_model=PetOut, status_code=status.HTTP_201_CREATED)
def create_pet(payload: PetIn, request: Request):
    database = get_database(request)
    user = require_user(database)
    _check_dating(user, payload)
    doc = payload.model_dump(exclude_none=True)
    doc["ownerId"] = user["id"]
    return database.pets.create(doc)


@router.put("/{pet_id}", response_model=PetOut)
def update_pet(pet_id: str, payload: PetIn, request: Request):
    database = get_database(request)
    user = require_user(database)
    _owned_pet(database, user, pet_id)
    _check_dating(user, payload)
    doc = payload.model_dump(exclude_none=True)
    doc["id"] = pet_id
    doc["ownerId"] = user["id"]
    if not database.pets.update(doc):
        raise HTTPException(404, "Pet nao encontrado")
    return doc


@router.delete("/{pet_id}")
def delete_pet(pet_id: str, request: Request):
    database = get_database(request)
    user = require_user(database)
    _owned_pet(database, user, pet_id)
    database.pets.delete(pet_id)
    return {"ok": True}


@router.post("/{pet_id}/vaccines", response_model=PetOut, status_code=status.HTTP_201_CREATED)
def add_vaccine(pet_id: str, payload: VaccineIn, request: Request):
    database = get_database(request)
    user = require_user(database)
    _owned_pet(database, user, pet_id)
    pet = database.pets.add_vaccine(pet_id, payload.model_dump())
    if not pet:
        raise HTTPException(404, "Pet nao encontrado")
    return pet
