from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request

from ringroll.config import settings
from ringroll.dice import DiceError
from ringroll.routers import rolls

app = FastAPI(title="Ringroll")

app.add_middleware(SessionMiddleware, secret_key=settings.session_secret_key)

app.include_router(rolls.router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.exception_handler(DiceError)
async def dice_error_handler(request: Request, exc: DiceError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})
