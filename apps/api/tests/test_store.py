"""Tests for the lock-guarded in-memory store."""
import asyncio

import pytest

from app.core.ids import new_character_id
from app.core.store import CharacterStore
from app.modules.characters.schemas import Character


def _char(name: str) -> Character:
    return Character(id=new_character_id(), name=name, abilities=[], bio="")


@pytest.mark.asyncio
async def test_seeded_store_holds_harry() -> None:
    store = CharacterStore.seeded()
    items = await store.list()
    assert len(items) == 1
    assert items[0].name == "Harry"
    assert items[0].abilities == ["Parcel Tongue"]
    assert items[0].bio == "Orphaned by Voldemort"
    assert items[0].id


@pytest.mark.asyncio
async def test_list_preserves_insertion_order() -> None:
    store = CharacterStore()
    names = ["a", "b", "c", "d"]
    for n in names:
        await store.insert(_char(n))
    assert [c.name for c in await store.list()] == names


@pytest.mark.asyncio
async def test_returned_records_are_copies() -> None:
    store = CharacterStore()
    c = _char("Ron")
    await store.insert(c)
    c.name = "changed after insert"

    found = await store.find(c.id)
    assert found is not None
    assert found.name == "Ron"

    found.abilities.append("Chess")
    listed = await store.list()
    listed[0].bio = "mutated"

    again = await store.find(c.id)
    assert again.abilities == []
    assert again.bio == ""


@pytest.mark.asyncio
async def test_update_keeps_id() -> None:
    store = CharacterStore()
    c = _char("Ron")
    await store.insert(c)

    updated = await store.update(c.id, {"id": "other", "name": "Ronald", "abilities": ["Chess"], "bio": "Weasley"})
    assert updated is not None
    assert updated.id == c.id
    assert updated.name == "Ronald"
    assert (await store.find(c.id)).abilities == ["Chess"]
    assert await store.find("other") is None


@pytest.mark.asyncio
async def test_missing_id_leaves_store_untouched() -> None:
    store = CharacterStore()
    await store.insert(_char("Ron"))
    before = await store.list()

    assert await store.find("nope") is None
    assert await store.update("nope", {"name": "x", "abilities": [], "bio": ""}) is None
    assert await store.remove("nope") is False
    assert await store.list() == before


@pytest.mark.asyncio
async def test_remove_deletes_exactly_one() -> None:
    store = CharacterStore()
    a, b = _char("a"), _char("b")
    await store.insert(a)
    await store.insert(b)

    assert await store.remove(a.id) is True
    assert [c.id for c in await store.list()] == [b.id]
    assert await store.count() == 1


@pytest.mark.asyncio
async def test_concurrent_inserts_are_all_kept() -> None:
    store = CharacterStore()
    records = [_char(str(i)) for i in range(200)]
    await asyncio.gather(*(store.insert(r) for r in records))

    items = await store.list()
    assert len(items) == 200
    assert {c.id for c in items} == {r.id for r in records}
