from __future__ import annotations

import pytest
from pydantic import ValidationError

from perfumery.catalog.errors import AromaNotFoundError, DuplicateAromaSlugError, PerfumeNotFoundError
from perfumery.catalog.models import AromaRequest, AromaTag, NoteRequest, NoteType, Perfume, PerfumeRequest
from perfumery.catalog.store import CatalogStore
from perfumery.recommendations.models import AromaRecommendationRequest
from perfumery.recommendations.retrieval import recommend_by_aromas


def _store() -> CatalogStore:
    store = CatalogStore()
    store.create_aroma(AromaRequest(slug="citrus", name="Citrus"))
    store.create_aroma(AromaRequest(slug="woody", name="Woody"))
    return store


def _perfume_request(**overrides) -> PerfumeRequest:
    data = {
        "name": "Cedar Night",
        "brand": "Boreal",
        "longevity": "Long",
        "sillage": "Heavy",
        "price": 120.0,
        "aroma_slugs": ["woody", "citrus"],
        "notes": [NoteRequest(type=NoteType.base, note_name="Cedar", intensity=7)],
    }
    data.update(overrides)
    return PerfumeRequest(**data)


# ── Aroma tags ───────────────────────────────────────────────────────────


def test_create_aroma_assigns_ids():
    store = _store()
    assert [(a.id, a.slug) for a in store.list_aromas()] == [(1, "citrus"), (2, "woody")]
    assert store.get_aroma_by_slug("woody").name == "Woody"


def test_create_aroma_rejects_duplicate_slug():
    store = _store()
    with pytest.raises(DuplicateAromaSlugError, match="aroma with slug 'citrus' already exists"):
        store.create_aroma(AromaRequest(slug="citrus", name="Lemon"))
    assert len(store.list_aromas()) == 2


def test_update_aroma_rejects_slug_of_another_aroma():
    store = _store()
    with pytest.raises(DuplicateAromaSlugError):
        store.update_aroma(2, AromaRequest(slug="citrus", name="Woody"))
    assert store.get_aroma(2).slug == "woody"


def test_update_aroma_keeps_own_slug_and_retags_perfumes():
    store = _store()
    perfume = store.create_perfume(_perfume_request())
    updated = store.update_aroma(2, AromaRequest(slug="woody", name="Woods"))
    assert updated == AromaTag(id=2, slug="woody", name="Woods")
    assert store.get_perfume(perfume.id).aroma_tags[0].name == "Woods"


def test_delete_aroma_removes_it_from_perfumes():
    store = _store()
    perfume = store.create_perfume(_perfume_request())
    store.delete_aroma(2)
    assert store.get_perfume(perfume.id).aroma_slugs == {"citrus"}
    with pytest.raises(AromaNotFoundError):
        store.get_aroma(2)
    with pytest.raises(AromaNotFoundError):
        store.delete_aroma(2)


# ── Perfumes ─────────────────────────────────────────────────────────────


def test_create_perfume_resolves_aromas_and_notes():
    store = _store()
    perfume = store.create_perfume(_perfume_request())
    assert perfume.id == 1
    assert [t.slug for t in perfume.aroma_tags] == ["woody", "citrus"]
    assert perfume.notes[0].perfume_id == 1
    assert perfume.notes[0].note_name == "Cedar"
    assert store.get_all_with_relations() == [perfume]


def test_create_perfume_with_unknown_aroma():
    store = _store()
    with pytest.raises(AromaNotFoundError):
        store.create_perfume(_perfume_request(aroma_slugs=["amber"]))
    assert store.get_all_with_relations() == []


def test_perfume_request_validation():
    with pytest.raises(ValidationError):
        _perfume_request(price=-1.0)
    with pytest.raises(ValidationError):
        NoteRequest(type=NoteType.top, note_name="Bergamot", intensity=0)


def test_update_perfume():
    store = _store()
    perfume = store.create_perfume(_perfume_request())
    updated = store.update_perfume(perfume.id, _perfume_request(price=99.0, aroma_slugs=["citrus"]))
    assert updated.id == perfume.id
    assert updated.price == 99.0
    assert store.get_perfume(perfume.id).aroma_slugs == {"citrus"}
    with pytest.raises(PerfumeNotFoundError):
        store.update_perfume(42, _perfume_request())


def test_delete_perfume():
    store = _store()
    first = store.create_perfume(_perfume_request())
    second = store.create_perfume(_perfume_request(name="Citrus Dawn"))
    store.delete_perfume(first.id)
    assert [p.id for p in store.get_all_with_relations()] == [second.id]
    with pytest.raises(PerfumeNotFoundError):
        store.delete_perfume(first.id)


def test_seeded_store_continues_ids():
    seeded = Perfume(
        id=7, name="Seeded", brand="Aurora",
        aroma_tags=[AromaTag(id=4, slug="rose", name="Rose")],
    )
    store = CatalogStore([seeded])
    assert store.get_aroma_by_slug("rose").id == 4
    assert store.create_aroma(AromaRequest(slug="musk", name="Musk")).id == 5
    assert store.create_perfume(_perfume_request(aroma_slugs=["rose"])).id == 8


def test_store_feeds_aroma_recommender():
    store = _store()
    store.create_perfume(_perfume_request(name="Citrus Dawn", aroma_slugs=["citrus"]))
    store.create_perfume(_perfume_request())
    response = recommend_by_aromas(AromaRecommendationRequest(aromas=["woody"]), store)
    assert [item.perfume.name for item in response.results] == ["Cedar Night", "Citrus Dawn"]
