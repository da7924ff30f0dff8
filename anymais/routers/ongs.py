from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from anymais.routers.deps import get_database, require_user
from anymais.schemas.ong import OngIn, OngOut

router = APIRouter(prefix="/ongs", tags=["ongs"])


@router.get("", response_model=list[OngOut])
def list_ongs(request: Request, q: str = ""):
    return get_database(request).ongs.search(q)


@router.get("/mine", response_model=list[OngOut])
def my_ongs(request: Request):
    database = get_database(request)
    user = require_user(database)
    return database.ongs.list_by_owner(user["id"])


@router.get("/{ong_id}", response_model=OngOut)
def get_ong(ong_id: str, request: Request):
    ong = get_database(request).ongs.get(ong_id)
    if not ong:
        raise HTTPException(404, "ONG nao encontrada")
    return ong


@router.post("", response_model=OngOut, status_code=status.HTTP_201_CREATED)
def register_ong(payload: OngIn, request: Request):
    database = get_database(request)
    doc = payload.model_dump(exclude_none=True)
    # anonymous registrations stay without an owner
    user = database.auth.current_user()
    if user:
        doc["ownerId"] = user["id"]
    return database.ongs.create(doc)


@router.put("/{ong_id}", response_model=OngOut)
def update_ong(ong_id: str, payload: OngIn, request: Request):
    database = get_database(request)
    user = require_user(database)
    ong = database.ongs.get(ong_id)
    if not ong:
        raise HTTPException(404, "ONG nao encontrada")
    if ong.get("ownerId") != user["id"]:
        raise HTTPException(403, "Apenas o responsavel pode editar esta ONG.")
    doc = payload.model_dump(exclude_none=True)
    doc["id"] = ong_id
    doc["ownerId"] = user["id"]
    if not database.ongs.update(doc):
        raise HTTPException(404, "ONG nao encontrada")
    return doc
