"""FastAPI dependencies for Ringroll.

The caller's dice and toggles live in the signed session cookie; the server
keeps nothing between requests.
"""

from __future__ import annotations

from starlette.requests import Request

from ringroll.rolls import RollResult
from ringroll.schemas import Preferences

_RESULT_KEY = "dice"
_PREFERENCES_KEY = "preferences"


def get_roll_result(request: Request) -> RollResult:
    """Return the dice stored in the session, or an empty result."""
    return RollResult.from_dict(request.session.get(_RESULT_KEY, {}))


def save_roll_result(request: Request, result: RollResult) -> None:
    request.session[_RESULT_KEY] = result.to_dict()


def get_preferences(request: Request) -> Preferences:
    return Preferences.model_validate(request.session.get(_PREFERENCES_KEY, {}))


def save_preferences(request: Request, preferences: Preferences) -> None:
    request.session[_PREFERENCES_KEY] = preferences.model_dump()
