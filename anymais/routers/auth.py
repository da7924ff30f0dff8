from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from anymais.core.utils import validate_email
from anymais.routers.deps import get_database, require_user
from anymais.schemas.user import LoginIn, PlanIn, SignupIn, UserOut, UserUpdate

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserOut)
def login(payload: LoginIn, request: Request):
    database = get_database(request)
    user = database.auth.login(payload.email, payload.password)
    if not user:
        raise HTTPException(401, "E-mail ou senha invalidos.")
    return user


@router.post("/signup", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupIn, request: Request):
    if not validate_email(payload.email):
        raise HTTPException(422, "E-mail invalido.")
    database = get_database(request)
    user = database.auth.signup(payload.model_dump(exclude_none=True))
    if not user:
        raise HTTPException(409, "E-mail ja cadastrado.")
    return user


@router.post("/logout")
def logout(request: Request):
    get_database(request).auth.logout()
    return {"ok": True}


@router.get("/session", response_model=UserOut)
def session(request: Request):
    user = get_database(request).auth.get_session()
    if not user:
        raise HTTPException(401, "Nenhuma sessao ativa.")
    return user


@router.put("/me", response_model=UserOut)
def update_me(payload: UserUpdate, request: Request):
    database = get_database(request)
    current = require_user(database)
    changes = payload.model_dump(exclude_unset=True)
    # only the location can be cleared with an explicit null
    clear_location = "location" in changes and changes["location"] is None
    changes = {field: value for field, value in changes.items() if value is not None}
    if "email" in changes:
        if not validate_email(changes["email"]):
            raise HTTPException(422, "E-mail invalido.")
        owner = database.users.find_by_email(changes["email"])
        if owner and owner["id"] != current["id"]:
            raise HTTPException(409, "E-mail ja cadastrado.")
    updated = {**current, **changes, "id": current["id"], "plan": current.get("plan")}
    if clear_location:
        updated.pop("location", None)
    if not database.auth.update_user(updated):
        raise HTTPException(404, "Usuario nao encontrado.")
    return database.auth.get_session()


@router.put("/me/plan", response_model=UserOut)
def change_plan(payload: PlanIn, request: Request):
    database = get_database(request)
    require_user(database)
    user = database.auth.change_plan(payload.plan)
    if not user:
        raise HTTPException(404, "Usuario nao encontrado.")
    return user


@router.post("/me/favorites/{pet_id}", response_model=UserOut)
def toggle_favorite(pet_id: str, request: Request):
    database = get_database(request)
    require_user(database)
    user = database.auth.toggle_favorite(pet_id)
    if not user:
        raise HTTPException(404, "Usuario nao encontrado.")
    return user
