from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from app.core.store import CharacterStore

from .schemas import Character, CharacterIn
from .service import (
    create_character,
    delete_character,
    get_character,
    list_characters,
    update_character,
)

router = APIRouter(prefix="/char", tags=["characters"])


def get_store(request: Request) -> CharacterStore:
    return request.app.state.store


def _request_id(request: Request) -> Optional[str]:
    return getattr(getattr(request, "state", None), "request_id", None)


@router.get("", response_model=List[Character])
async def api_list_characters(store: CharacterStore = Depends(get_store)) -> List[Character]:
    return await list_characters(store)


@router.post("", response_model=Character)
async def api_create_character(
    body: CharacterIn, request: Request, store: CharacterStore = Depends(get_store)
) -> Character:
    return await create_character(store, body, request_id=_request_id(request))


@router.get("/{character_id}", response_model=Character)
async def api_get_character(character_id: str, store: CharacterStore = Depends(get_store)) -> Character:
    return await get_character(store, character_id)


@router.put("/{character_id}", response_model=Character)
async def api_update_character(
    character_id: str, body: CharacterIn, request: Request, store: CharacterStore = Depends(get_store)
) -> Character:
    return await update_character(store, character_id, body, request_id=_request_id(request))


@router.delete("/{character_id}")
async def api_delete_character(
    character_id: str, request: Request, store: CharacterStore = Depends(get_store)
) -> Response:
    await delete_character(store, character_id, request_id=_request_id(request))
    return Response(status_code=200)
