"""
In-memory character store.

One ordered list, one asyncio.Lock. Every operation holds the lock for its
whole duration, so read-then-mutate is atomic with respect to other requests.
Records handed out are copies; the store keeps the only live references.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from app.modules.characters.schemas import Character

from .ids import new_character_id

SEED_CHARACTERS: List[Dict[str, Any]] = [
    {"name": "Harry", "abilities": ["Parcel Tongue"], "bio": "Orphaned by Voldemort"},
]

_UPDATABLE = ("name", "abilities", "bio")


class CharacterStore:
    def __init__(self, characters: Optional[List[Character]] = None) -> None:
        self._characters: List[Character] = list(characters or [])
        self._lock = asyncio.Lock()

    @classmethod
    def seeded(cls) -> "CharacterStore":
        return cls([Character(id=new_character_id(), **seed) for seed in SEED_CHARACTERS])

    async def list(self) -> List[Character]:
        async with self._lock:
            return [c.model_copy(deep=True) for c in self._characters]

    async def count(self) -> int:
        async with self._lock:
            return len(self._characters)

    async def insert(self, record: Character) -> None:
        async with self._lock:
            self._characters.append(record.model_copy(deep=True))

    async def find(self, character_id: str) -> Optional[Character]:
        async with self._lock:
            for c in self._characters:
                if c.id == character_id:
                    return c.model_copy(deep=True)
            return None

    async def update(self, character_id: str, fields: Dict[str, Any]) -> Optional[Character]:
        async with self._lock:
            for c in self._characters:
                if c.id != character_id:
                    continue
                # id is never overwritten
                for k in _UPDATABLE:
                    if k in fields:
                        setattr(c, k, list(fields[k]) if k == "abilities" else fields[k])
                return c.model_copy(deep=True)
            return None

    async def remove(self, character_id: str) -> bool:
        async with self._lock:
            for i, c in enumerate(self._characters):
                if c.id == character_id:
                    del self._characters[i]
                    return True
            return False
