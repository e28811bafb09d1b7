"""Roll routes: main roll, bonus dice, single-die reroll, and toggles."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from starlette.requests import Request

from ringroll.config import settings
from ringroll.dependencies import (
    get_preferences,
    get_roll_result,
    save_preferences,
    save_roll_result,
)
from ringroll.rolls import Pool, RollRequest, RollResult, add_bonus_die, reroll_at, roll_main
from ringroll.schemas import BonusBody, Preferences, RollBody, RollState

router = APIRouter()


def _state(result: RollResult, preferences: Preferences, *, rolled: bool) -> RollState:
    return RollState(**result.to_dict(), play_sound=rolled and preferences.sound)


@router.get("/rolls", response_model=RollState)
async def current_rolls(
    result: RollResult = Depends(get_roll_result),
    preferences: Preferences = Depends(get_preferences),
) -> RollState:
    return _state(result, preferences, rolled=False)


@router.post("/rolls", response_model=RollState)
async def roll(
    request: Request,
    body: RollBody,
    result: RollResult = Depends(get_roll_result),
    preferences: Preferences = Depends(get_preferences),
) -> RollState:
    await roll_main(
        result,
        RollRequest(
            ring_count=body.ring_count,
            skill_count=body.skill_count,
            networked=preferences.online,
        ),
    )
    save_roll_result(request, result)
    return _state(result, preferences, rolled=True)


@router.post("/rolls/bonus", response_model=RollState)
async def add_bonus(
    request: Request,
    body: BonusBody,
    result: RollResult = Depends(get_roll_result),
    preferences: Preferences = Depends(get_preferences),
) -> RollState:
    if len(result.bonus) >= settings.max_bonus_dice:
        raise HTTPException(
            status_code=400, detail=f"At most {settings.max_bonus_dice} bonus dice per roll"
        )
    await add_bonus_die(result, body.die_type, networked=preferences.online)
    save_roll_result(request, result)
    return _state(result, preferences, rolled=True)


@router.post("/rolls/{pool}/{index}/reroll", response_model=RollState)
async def reroll(
    request: Request,
    pool: Pool,
    index: int,
    result: RollResult = Depends(get_roll_result),
    preferences: Preferences = Depends(get_preferences),
) -> RollState:
    await reroll_at(result, pool, index, networked=preferences.online)
    save_roll_result(request, result)
    return _state(result, preferences, rolled=True)


@router.get("/preferences", response_model=Preferences)
async def read_preferences(preferences: Preferences = Depends(get_preferences)) -> Preferences:
    return preferences


@router.put("/preferences", response_model=Preferences)
async def update_preferences(request: Request, body: Preferences) -> Preferences:
    save_preferences(request, body)
    return body
