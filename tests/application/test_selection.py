from dataclasses import dataclass

import pytest

from launchbar.application.selection import SelectionState
from launchbar.domain.types import AdvanceDirection

NEXT = AdvanceDirection.NEXT
PREVIOUS = AdvanceDirection.PREVIOUS


@dataclass(frozen=True)
class Item:
    name: str

    @property
    def identity(self):
        return self.name


def make_state() -> SelectionState[Item]:
    state: SelectionState[Item] = SelectionState(["a", "b", "c"])
    state.install("a", [Item("a1"), Item("a2")])
    state.install("b", [Item("b1")])
    state.install("c", [Item("c1"), Item("c2"), Item("c3")])
    return state


def test_first_installed_group_becomes_active() -> None:
    state = make_state()
    assert state.active_key == "a"
    assert state.active == Item("a1")


def test_advance_moves_within_group_then_across() -> None:
    state = make_state()
    visited = []
    for _ in range(6):
        state.advance(NEXT)
        visited.append(state.active.name)
    assert visited == ["a2", "b1", "c1", "c2", "c3", "a1"]


def test_previous_from_group_start_lands_on_last_of_previous_group() -> None:
    state = make_state()
    state.advance(PREVIOUS)
    assert (state.active_key, state.active) == ("c", Item("c3"))


def test_cycling_closure_and_inverse() -> None:
    state = make_state()
    start = (state.active_key, state.active)
    total = len(state)
    forward = []
    for _ in range(total):
        state.advance(NEXT)
        forward.append((state.active_key, state.active))
    assert forward[-1] == start
    assert len(set(forward)) == total

    for _ in range(total):
        state.advance(PREVIOUS)
    assert (state.active_key, state.active) == start


def test_previous_is_exact_inverse_of_next() -> None:
    state = make_state()
    for _ in range(4):
        before = (state.active_key, state.active)
        state.advance(NEXT)
        state.advance(PREVIOUS)
        assert (state.active_key, state.active) == before
        state.advance(NEXT)


@pytest.mark.parametrize("item", ["c1", "c2", "c3"])
def test_group_jump_ignores_position_within_group(item: str) -> None:
    state = make_state()
    state.select("c", Item(item))
    state.advance_group(NEXT)
    assert (state.active_key, state.active) == ("a", Item("a1"))


def test_group_jump_previous_lands_on_last_item() -> None:
    state = make_state()
    state.advance_group(PREVIOUS)
    assert (state.active_key, state.active) == ("c", Item("c3"))


def test_single_group_wraps_onto_itself() -> None:
    state: SelectionState[Item] = SelectionState()
    state.install("only", [Item("x"), Item("y")])
    state.advance(NEXT)
    state.advance(NEXT)
    assert state.active == Item("x")


def test_removing_active_group_hands_over_to_adjacent_group() -> None:
    state = make_state()
    state.select("b", Item("b1"))
    state.install("b", [])
    assert "b" not in state
    assert (state.active_key, state.active) == ("c", Item("c1"))


def test_removing_last_group_clears_selection() -> None:
    state: SelectionState[Item] = SelectionState()
    state.install("only", [Item("x")])
    state.remove("only")
    assert state.active_key is None
    assert state.active is None


def test_reinstalling_keeps_registration_order() -> None:
    state = make_state()
    state.remove("a")
    state.install("a", [Item("a9")])
    assert state.keys() == ["a", "b", "c"]


def test_reinstalling_active_group_resets_to_first_item() -> None:
    state = make_state()
    state.advance(NEXT)
    assert state.active == Item("a2")
    state.install("a", [Item("a1"), Item("a2")])
    assert state.active == Item("a1")


def test_installing_other_group_keeps_active_selection() -> None:
    state = make_state()
    state.install("c", [Item("c7")])
    assert state.active_key == "a"


def test_advance_without_active_selects_first_group() -> None:
    state: SelectionState[Item] = SelectionState(["a", "b"])
    assert state.advance(NEXT) is None
    state._groups["b"] = [Item("b1")]
    assert state.advance(NEXT) == Item("b1")


def test_active_item_missing_from_group_moves_to_adjacent_group() -> None:
    state = make_state()
    state.active = Item("ghost")
    state.advance(NEXT)
    assert (state.active_key, state.active) == ("b", Item("b1"))


def test_has_alternatives() -> None:
    state = make_state()
    assert state.has_alternatives()
    state.advance_group(NEXT)
    assert not state.has_alternatives()


def test_select_rejects_foreign_item() -> None:
    state = make_state()
    with pytest.raises(KeyError):
        state.select("a", Item("b1"))
