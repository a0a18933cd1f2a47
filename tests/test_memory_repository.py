"""Tests for InMemoryContactRepository: ordering, pending slot, id issuance."""

from contactbook.application import NothingPending, NotFound
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository


def _c(cid: str, name: str, fav: bool = False) -> Contact:
    return Contact(id=cid, name=name, email=f"{cid}@x.io", phone=cid, is_favorite=fav)


def test_add_prepends_and_clears_favorite() -> None:
    repo = InMemoryContactRepository([_c("1", "Old")])
    stored = repo.add(_c("2", "New", fav=True))
    assert stored.is_favorite is False
    assert [c.name for c in repo.list_active()] == ["New", "Old"]


def test_add_never_reuses_an_issued_id() -> None:
    repo = InMemoryContactRepository([_c("1", "Old")])
    stored = repo.add(_c("1", "Clash"))
    assert stored.id != "1"
    assert repo.get_by_id("1").name == "Old"


def test_seed_with_duplicate_ids_gets_fresh_ids() -> None:
    repo = InMemoryContactRepository([_c("1", "A"), _c("1", "B")])
    ids = [c.id for c in repo.list_active()]
    assert len(set(ids)) == 2
    assert ids[0] == "1"


def test_update_replaces_in_place() -> None:
    repo = InMemoryContactRepository([_c("1", "A"), _c("2", "B")])
    updated = repo.update(Contact(id="2", name="Bea", email="b@x.io", phone="2"))
    assert updated.name == "Bea"
    assert [c.name for c in repo.list_active()] == ["A", "Bea"]
    assert isinstance(repo.update(_c("9", "Ghost")), NotFound)


def test_toggle_favorite() -> None:
    repo = InMemoryContactRepository([_c("1", "A")])
    assert repo.toggle_favorite("1").is_favorite is True
    assert repo.toggle_favorite("1").is_favorite is False
    assert repo.toggle_favorite("9") == NotFound(contact_id="9")


def test_begin_delete_moves_to_pending_and_supersedes() -> None:
    repo = InMemoryContactRepository([_c("1", "A"), _c("2", "B"), _c("3", "C")])
    repo.begin_delete("1")
    assert repo.pending.id == "1"
    repo.begin_delete("2")
    assert repo.pending.id == "2"
    assert [c.id for c in repo.list_active()] == ["3"]
    assert repo.get_by_id("1") is None
    assert isinstance(repo.begin_delete("1"), NotFound)


def test_undo_appends_pending_record() -> None:
    repo = InMemoryContactRepository([_c("1", "A", fav=True), _c("2", "B")])
    repo.begin_delete("1")
    restored = repo.undo_delete()
    assert restored == _c("1", "A", fav=True)
    assert [c.id for c in repo.list_active()] == ["2", "1"]
    assert repo.pending is None
    assert isinstance(repo.undo_delete(), NothingPending)


def test_finalize_delete() -> None:
    repo = InMemoryContactRepository([_c("1", "A"), _c("2", "B")])
    assert repo.finalize_delete() is None
    repo.begin_delete("1")
    assert repo.finalize_delete(contact_id="2") is None
    assert repo.pending.id == "1"
    assert repo.finalize_delete(contact_id="1").id == "1"
    assert repo.pending is None
    assert isinstance(repo.undo_delete(), NothingPending)


def test_discarded_id_is_not_reissued() -> None:
    repo = InMemoryContactRepository([_c("1", "A")])
    repo.begin_delete("1")
    repo.finalize_delete()
    assert repo.add(_c("1", "Again")).id != "1"
