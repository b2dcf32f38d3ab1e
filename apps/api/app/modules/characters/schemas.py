from __future__ import annotations

from typing import List
from pydantic import BaseModel, Field


class CharacterIn(BaseModel):
    # create/update body; a client-sent "id" is ignored
    name: str
    abilities: List[str]
    bio: str


class Character(BaseModel):
    name: str
    id: str
    abilities: List[str] = Field(default_factory=list)
    bio: str
