import pytest

from pokeduel.core.errors import InsufficientMoves
from pokeduel.data.models import Creature, MoveRef
from pokeduel.data.moves import curate_moves
from tests.fakes import BASE, move_url


def test_filters_sorts_and_reports_skips(api):
    api.add_creature(25, "pikachu", [
        ("quick-attack", 40),
        ("growl", 0, {"damage_class": "status"}),
        ("thunderbolt", 90, {"damage_class": "special", "type_": "electric"}),
        ("thunder-wave", 0, {"damage_class": "status"}),
        ("slam", 80),
        ("counter", 0),  # physical but no fixed power
    ])
    client = api.client()
    result = curate_moves(client, client.get_creature(25))
    assert [m.name for m in result.moves] == ["thunderbolt", "slam", "quick-attack"]
    reasons = {s.name: s.reason for s in result.skipped}
    assert reasons["growl"] == "status move"
    assert reasons["counter"] == "no power"


def test_unresolvable_moves_are_dropped_not_fatal(api):
    api.add_move("tackle", 40)
    api.session.add(move_url("broken"), {}, status=503)
    refs = tuple(MoveRef(n, move_url(n)) for n in ["tackle", "ghost-move", "broken"])
    creature = Creature(1, "bulbasaur", refs)
    result = curate_moves(api.client(), creature)
    assert [m.name for m in result.moves] == ["tackle"]
    skipped = {s.name for s in result.skipped}
    assert skipped == {"ghost-move", "broken"}


def test_non_object_move_payload_is_dropped_not_fatal(api):
    api.add_move("tackle", 40)
    api.session.add(move_url("scrambled"), ["not", "a", "record"])
    refs = tuple(MoveRef(n, move_url(n)) for n in ["scrambled", "tackle"])
    result = curate_moves(api.client(), Creature(1, "bulbasaur", refs))
    assert [m.name for m in result.moves] == ["tackle"]
    assert [s.name for s in result.skipped] == ["scrambled"]


def test_duplicates_keep_one_entry_and_order_is_stable(api):
    for name, power in [("a", 50), ("b", 70), ("c", 50)]:
        api.add_move(name, power)
    refs = tuple(MoveRef(n, move_url(n)) for n in ["a", "b", "a", "c"])
    result = curate_moves(api.client(), Creature(9, "dup", refs))
    names = [m.name for m in result.moves]
    assert names == ["b", "a", "c"]
    assert len(set(names)) == len(names)
    assert [s.reason for s in result.skipped] == ["duplicate"]


def test_only_first_candidates_are_resolved(api):
    moves = [(f"move-{i}", 10 + i) for i in range(8)]
    api.add_creature(3, "venusaur", moves)
    client = api.client()
    result = curate_moves(client, client.get_creature(3), max_candidates=3)
    assert sorted(m.name for m in result.moves) == ["move-0", "move-1", "move-2"]
    assert not any("move-5" in url for url in api.session.calls)


def test_power_never_increases_down_the_list(api):
    powers = [35, 120, 60, 60, 90, 15, 100]
    api.add_creature(6, "charizard", [(f"m{i}", p) for i, p in enumerate(powers)])
    client = api.client()
    result = curate_moves(client, client.get_creature(6))
    got = [m.power for m in result.moves]
    assert got == sorted(got, reverse=True)


def test_require_signals_insufficient_moves(api):
    api.add_creature(129, "magikarp", [("tackle", 40), ("splash", 0, {"damage_class": "status"})])
    client = api.client()
    result = curate_moves(client, client.get_creature(129))
    with pytest.raises(InsufficientMoves) as exc:
        result.require(5)
    assert exc.value.found == 1
    assert exc.value.name == "magikarp"


def test_require_returns_moves_when_enough(api):
    api.add_creature(25, "pikachu", [(f"m{i}", 20 + i) for i in range(6)])
    client = api.client()
    result = curate_moves(client, client.get_creature(25))
    assert len(result.require(5)) == 6
    assert len(result.top(5)) == 5
