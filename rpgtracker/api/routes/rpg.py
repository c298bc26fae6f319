"""
rpgtracker.api.routes.rpg — Progression endpoints
==================================================

Thin controllers: parse the request, call
:mod:`rpgtracker.services.progression_service`, shape the JSON.
Domain errors become 404 (missing user) or 400 (unmet precondition).
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from rpgtracker.api.deps import get_config, get_store
from rpgtracker.config import RpgConfig
from rpgtracker.database.models import Pet
from rpgtracker.engine.progression import xp_to_next_level
from rpgtracker.services import progression_service
from rpgtracker.services.errors import PreconditionFailedError, UserNotFoundError
from rpgtracker.services.store import SqlStore

router = APIRouter(prefix="/rpg", tags=["rpg"])

# Awards are 32-bit signed integers; larger values are rejected with 422
XP_MIN = -(2**31)
XP_MAX = 2**31 - 1

ENDPOINTS = [
    "/rpg/ganhar_xp/{id}",
    "/rpg/sugerir/{id}",
    "/rpg/criar_pet/{id}",
    "/rpg/dungeon/{id}",
]


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------
class PetCreate(BaseModel):
    name: str
    type: str


def _pet_dict(pet: Pet) -> dict:
    return {
        "id": pet.id,
        "name": pet.name,
        "type": pet.type,
        "userId": pet.user_id,
    }


# ---------------------------------------------------------------------------
# GET /rpg/
# ---------------------------------------------------------------------------
@router.get("/")
def index():
    """Service banner listing the progression endpoints."""
    return {"status": "API running", "endpoints": ENDPOINTS}


# ---------------------------------------------------------------------------
# POST /rpg/ganhar_xp/{user_id}
# ---------------------------------------------------------------------------
@router.post("/ganhar_xp/{user_id}")
def gain_xp(
    user_id: int,
    xp: int = Body(..., ge=XP_MIN, le=XP_MAX),
    store: SqlStore = Depends(get_store),
    cfg: RpgConfig = Depends(get_config),
):
    """Award XP (raw JSON integer body); non-positive values award the default."""
    try:
        result = progression_service.award_xp(store, user_id, xp, config=cfg)
    except UserNotFoundError as exc:
        raise HTTPException(404, str(exc))
    return {
        "level": result.level,
        "experience": result.experience,
        "hasPet": result.has_pet,
        "levelsGained": result.levels_gained,
        "xpToNextLevel": xp_to_next_level(result),
    }


# ---------------------------------------------------------------------------
# GET /rpg/sugerir/{user_id}
# ---------------------------------------------------------------------------
@router.get("/sugerir/{user_id}")
def suggest(
    user_id: int,
    store: SqlStore = Depends(get_store),
    cfg: RpgConfig = Depends(get_config),
):
    return {"suggestions": progression_service.get_suggestions(store, user_id, config=cfg)}


# ---------------------------------------------------------------------------
# POST /rpg/criar_pet/{user_id}
# ---------------------------------------------------------------------------
@router.post("/criar_pet/{user_id}")
def create_pet(
    user_id: int,
    body: PetCreate,
    store: SqlStore = Depends(get_store),
    cfg: RpgConfig = Depends(get_config),
):
    try:
        pet = progression_service.create_pet(
            store, user_id, body.name, body.type, config=cfg
        )
    except UserNotFoundError as exc:
        raise HTTPException(404, str(exc))
    except PreconditionFailedError as exc:
        raise HTTPException(400, str(exc))
    return _pet_dict(pet)


# ---------------------------------------------------------------------------
# GET /rpg/dungeon/{user_id}
# ---------------------------------------------------------------------------
@router.get("/dungeon/{user_id}")
def enter_dungeon(
    user_id: int,
    store: SqlStore = Depends(get_store),
    cfg: RpgConfig = Depends(get_config),
):
    access = progression_service.check_dungeon(store, user_id, config=cfg)
    if not access.granted:
        raise HTTPException(400, access.message)
    return {"message": access.message, "completedToday": access.completed_today}
