from __future__ import annotations

import os

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.core.store import CharacterStore
from app.modules.characters.router import get_store

from .schemas import HealthOut, StoreHealthOut

GREETING = "Hello, World!"

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return GREETING


@router.get("/health", response_model=HealthOut)
async def health(store: CharacterStore = Depends(get_store)) -> HealthOut:
    # Contract keys: status, version, store, last_error_summary
    return HealthOut(
        status="ok",
        version=os.getenv("APP_VERSION", "0.1.0"),
        store=StoreHealthOut(status="ok", kind="memory", count=await store.count()),
        last_error_summary=None,
    )
