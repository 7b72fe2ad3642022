from launchbar.application.ledger import PositionLedger
from launchbar.domain.types import BoundField


def test_bind_tracks_max_position_and_names() -> None:
    ledger = PositionLedger()
    ledger.bind(11, "pair", "EUR/USD")
    ledger.bind(15, "amount", "100", 100)

    assert ledger.max_position == 15
    assert ledger.bound_names == {"pair", "amount"}
    assert ledger.bindings()[15] == BoundField(name="amount", text="100", value=100)


def test_unbind_latest_recomputes_max() -> None:
    ledger = PositionLedger()
    ledger.bind(11, "pair", "EUR/USD")
    ledger.bind(15, "amount", "100")

    removed = ledger.unbind_latest()

    assert removed.name == "amount"
    assert ledger.max_position == 11
    assert ledger.bound_names == {"pair"}


def test_unbind_on_empty_ledger_is_noop() -> None:
    assert PositionLedger().unbind_latest() is None


def test_dangling_max_position_is_treated_as_unbound() -> None:
    ledger = PositionLedger()
    ledger.bind(11, "pair", "EUR/USD")
    ledger.max_position = 20

    assert ledger.unbind_latest() is None
    assert ledger.max_position == 11


def test_truncate_unbinds_every_crossed_position() -> None:
    ledger = PositionLedger()
    ledger.bind(11, "pair", "EUR/USD")
    ledger.bind(15, "amount", "100")
    ledger.bind(26, "settle", "05/01/2024")

    removed = ledger.truncate(12)

    assert [entry.name for entry in removed] == ["settle", "amount"]
    assert ledger.bound_names == {"pair"}


def test_binding_then_unbinding_returns_to_empty() -> None:
    ledger = PositionLedger()
    positions = [5, 9, 14]
    for index, position in enumerate(positions):
        ledger.bind(position, f"f{index}", f"t{index}")

    for position in reversed(positions):
        ledger.truncate(position)

    assert not ledger
    assert ledger.bound_names == set()
    assert ledger.max_position is None
