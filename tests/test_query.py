"""Tests for the derived view: name filter, favorites first, case-insensitive name order."""

from contactbook.application import derive
from contactbook.domain import Contact


def _c(cid: str, name: str, fav: bool = False) -> Contact:
    return Contact(id=cid, name=name, email=f"{cid}@x.io", phone=cid, is_favorite=fav)


def _names(contacts) -> list[str]:
    return [c.name for c in contacts]


def test_favorites_first_then_name_case_insensitive() -> None:
    active = [_c("1", "bob"), _c("2", "Carl", fav=True), _c("3", "amy"), _c("4", "Alan", fav=True)]
    assert _names(derive(active, "")) == ["Alan", "Carl", "amy", "bob"]


def test_empty_or_blank_search_includes_everyone() -> None:
    active = [_c("1", "Bob"), _c("2", "Amy")]
    assert _names(derive(active, "")) == ["Amy", "Bob"]
    assert _names(derive(active, "   ")) == ["Amy", "Bob"]
    assert _names(derive(active, None)) == ["Amy", "Bob"]


def test_substring_match_is_case_insensitive() -> None:
    active = [_c("1", "Samantha"), _c("2", "Amy"), _c("3", "Bob")]
    assert _names(derive(active, "AM")) == ["Amy", "Samantha"]
    assert _names(derive(active, "x")) == []


def test_search_text_is_not_trimmed_when_matching() -> None:
    active = [_c("1", "Mary Ann"), _c("2", "Ann")]
    assert _names(derive(active, "y A")) == ["Mary Ann"]
    assert _names(derive(active, " Ann")) == ["Mary Ann"]


def test_equal_names_keep_storage_order() -> None:
    active = [_c("first", "Sam"), _c("second", "sam"), _c("third", "SAM")]
    assert [c.id for c in derive(active, "")] == ["first", "second", "third"]


def test_returns_a_new_list_and_leaves_input_alone() -> None:
    active = [_c("1", "Bob"), _c("2", "Amy")]
    view = derive(active, "")
    view.clear()
    assert _names(active) == ["Bob", "Amy"]
