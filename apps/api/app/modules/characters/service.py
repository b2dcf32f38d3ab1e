from __future__ import annotations

from typing import List, Optional

from fastapi import HTTPException

from app.core.ids import new_character_id
from app.core.observability import emit
from app.core.store import CharacterStore

from .schemas import Character, CharacterIn

NOT_FOUND_MESSAGE = "Character not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)


async def list_characters(store: CharacterStore) -> List[Character]:
    return await store.list()


async def create_character(store: CharacterStore, body: CharacterIn, request_id: Optional[str] = None) -> Character:
    c = Character(id=new_character_id(), name=body.name, abilities=list(body.abilities), bio=body.bio)
    await store.insert(c)
    emit("info", "character.created", f"created {c.id}", request_id, __name__, character_id=c.id)
    return c


async def get_character(store: CharacterStore, character_id: str) -> Character:
    c = await store.find(character_id)
    if c is None:
        raise _not_found()
    return c


async def update_character(
    store: CharacterStore, character_id: str, body: CharacterIn, request_id: Optional[str] = None
) -> Character:
    c = await store.update(character_id, body.model_dump())
    if c is None:
        raise _not_found()
    emit("info", "character.updated", f"updated {character_id}", request_id, __name__, character_id=character_id)
    return c


async def delete_character(store: CharacterStore, character_id: str, request_id: Optional[str] = None) -> None:
    if not await store.remove(character_id):
        raise _not_found()
    emit("info", "character.deleted", f"deleted {character_id}", request_id, __name__, character_id=character_id)
