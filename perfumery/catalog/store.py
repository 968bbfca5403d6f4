from __future__ import annotations

import logging
from typing import Iterable

from .errors import AromaNotFoundError, DuplicateAromaSlugError, PerfumeNotFoundError
from .models import AromaRequest, AromaTag, Note, Perfume, PerfumeRequest

logger = logging.getLogger(__name__)


class CatalogStore:
    """In-process catalog with create, update and delete for perfumes and aroma tags.

    Perfumes hold copies of their aroma tags, so renaming or deleting a tag is
    propagated to every perfume that carries it. The store also satisfies
    ``CatalogSource`` and can feed the recommenders directly.
    """

    def __init__(
        self,
        perfumes: Iterable[Perfume] = (),
        aromas: Iterable[AromaTag] = (),
    ) -> None:
        self._aromas: dict[int, AromaTag] = {a.id: a for a in aromas}
        self._perfumes: dict[int, Perfume] = {}
        for perfume in perfumes:
            self._perfumes[perfume.id] = perfume
            for tag in perfume.aroma_tags:
                self._aromas.setdefault(tag.id, tag)

        self._next_perfume_id = max(self._perfumes, default=0) + 1
        self._next_aroma_id = max(self._aromas, default=0) + 1
        note_ids = [n.id for p in self._perfumes.values() for n in p.notes]
        self._next_note_id = max(note_ids, default=0) + 1

    # ── Aroma tags ───────────────────────────────────────────────────────

    def _aroma_with_slug(self, slug: str) -> AromaTag | None:
        for aroma in self._aromas.values():
            if aroma.slug == slug:
                return aroma
        return None

    def get_aroma(self, aroma_id: int) -> AromaTag:
        try:
            return self._aromas[aroma_id]
        except KeyError:
            raise AromaNotFoundError(aroma_id) from None

    def get_aroma_by_slug(self, slug: str) -> AromaTag:
        aroma = self._aroma_with_slug(slug)
        if aroma is None:
            raise AromaNotFoundError(slug)
        return aroma

    def list_aromas(self) -> list[AromaTag]:
        return list(self._aromas.values())

    def create_aroma(self, request: AromaRequest) -> AromaTag:
        if self._aroma_with_slug(request.slug) is not None:
            raise DuplicateAromaSlugError(request.slug)
        aroma = AromaTag(id=self._next_aroma_id, **request.model_dump())
        self._aromas[aroma.id] = aroma
        self._next_aroma_id += 1
        logger.info("Created aroma %r (%d)", aroma.slug, aroma.id)
        return aroma

    def update_aroma(self, aroma_id: int, request: AromaRequest) -> AromaTag:
        self.get_aroma(aroma_id)
        owner = self._aroma_with_slug(request.slug)
        if owner is not None and owner.id != aroma_id:
            raise DuplicateAromaSlugError(request.slug)
        aroma = AromaTag(id=aroma_id, **request.model_dump())
        self._aromas[aroma_id] = aroma
        self._retag(aroma_id, aroma)
        return aroma

    def delete_aroma(self, aroma_id: int) -> None:
        self.get_aroma(aroma_id)
        del self._aromas[aroma_id]
        self._retag(aroma_id, None)
        logger.info("Deleted aroma %d", aroma_id)

    def _retag(self, aroma_id: int, replacement: AromaTag | None) -> None:
        for perfume in list(self._perfumes.values()):
            if not any(tag.id == aroma_id for tag in perfume.aroma_tags):
                continue
            tags = [
                replacement if tag.id == aroma_id else tag
                for tag in perfume.aroma_tags
            ]
            self._perfumes[perfume.id] = perfume.model_copy(
                update={"aroma_tags": [t for t in tags if t is not None]}
            )

    # ── Perfumes ─────────────────────────────────────────────────────────

    def get_perfume(self, perfume_id: int) -> Perfume:
        try:
            return self._perfumes[perfume_id]
        except KeyError:
            raise PerfumeNotFoundError(perfume_id) from None

    def get_all_with_relations(self) -> list[Perfume]:
        return list(self._perfumes.values())

    def _build(self, perfume_id: int, request: PerfumeRequest) -> Perfume:
        tags = [self.get_aroma_by_slug(slug) for slug in dict.fromkeys(request.aroma_slugs)]
        notes = []
        for note in request.notes:
            notes.append(Note(id=self._next_note_id, perfume_id=perfume_id, **note.model_dump()))
            self._next_note_id += 1
        fields = request.model_dump(exclude={"aroma_slugs", "notes"})
        return Perfume(id=perfume_id, aroma_tags=tags, notes=notes, **fields)

    def create_perfume(self, request: PerfumeRequest) -> Perfume:
        perfume = self._build(self._next_perfume_id, request)
        self._perfumes[perfume.id] = perfume
        self._next_perfume_id += 1
        logger.info("Created perfume %r (%d)", perfume.name, perfume.id)
        return perfume

    def update_perfume(self, perfume_id: int, request: PerfumeRequest) -> Perfume:
        self.get_perfume(perfume_id)
        perfume = self._build(perfume_id, request)
        self._perfumes[perfume_id] = perfume
        return perfume

    def delete_perfume(self, perfume_id: int) -> None:
        self.get_perfume(perfume_id)
        del self._perfumes[perfume_id]
        logger.info("Deleted perfume %d", perfume_id)
