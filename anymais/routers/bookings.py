from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from anymais.domain.plans import check_plan_access
from anymais.routers.deps import get_database, require_user
from anymais.schemas.booking import AppointmentIn, AppointmentOut, AppointmentStatusPatch

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.get("", response_model=list[AppointmentOut])
def my_appointments(request: Request):
    database = get_database(request)
    user = require_user(database)
    return database.appointments.list_by_user(user["id"])


@router.post("", response_model=AppointmentOut, status_code=status.HTTP_201_CREATED)
def book(payload: AppointmentIn, request: Request):
    database = get_database(request)
    user = require_user(database)
    if not check_plan_access(user.get("plan"), "services"):
        raise HTTPException(403, "Agendamentos exigem o plano Start ou Premium.")
    pet = database.pets.get(payload.petId)
    if not pet or pet.get("ownerId") != user["id"]:
        raise HTTPException(404, "Pet nao encontrado")
    doc = payload.model_dump()
    doc["userId"] = user["id"]
    return database.appointments.create(doc)


@router.patch("/{appointment_id}/status", response_model=AppointmentOut)
def update_status(appointment_id: str, payload: AppointmentStatusPatch, request: Request):
    database = get_database(request)
    user = require_user(database)
    appointment = database.appointments.get(appointment_id)
    if not appointment or appointment.get("userId") != user["id"]:
        raise HTTPException(404, "Agendamento nao encontrado")
    database.appointments.update_status(appointment_id, payload.status)
    return database.appointments.get(appointment_id)
