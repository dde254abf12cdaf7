from pokebattle.domain.defs import EvolutionLink
from pokebattle.domain.entities import MISS_MOVE, BattleCreature
from pokebattle.domain.type_colors import DEFAULT_TYPE_COLOR, TYPE_COLORS


def _creature(
    max_hp: int = 100,
    types: tuple[str, ...] = ("fire",),
    evolutions: tuple[EvolutionLink, ...] = (),
) -> BattleCreature:
    return BattleCreature(
        id=4,
        name="Charmander",
        reference_key="charmander",
        types=types,
        max_hp=max_hp,
        moveset={"1": "Scratch", "2": "Ember"},
        evolutions=evolutions,
    )


def test_new_creature_starts_at_full_hp_with_single_history_entry() -> None:
    creature = _creature(max_hp=39)

    assert creature.current_hp == 39
    assert creature.hp_history == (39,)
    assert creature.active_conditions == ()
    assert creature.symbol == "●"
    assert not creature.can_undo()


def test_undo_reverts_single_damage() -> None:
    creature = _creature(max_hp=100)

    creature.take_damage(30)
    assert creature.current_hp == 70

    creature.undo_hp_change()
    assert creature.current_hp == 100


def test_undo_reverts_single_heal() -> None:
    creature = BattleCreature.with_state(
        id=4,
        name="Charmander",
        reference_key="charmander",
        types=("fire",),
        max_hp=100,
        moveset={},
        evolutions=(),
        current_hp=40,
    )

    creature.heal(30)
    assert creature.current_hp == 70

    creature.undo_hp_change()
    assert creature.current_hp == 40


def test_undo_restores_new_top_of_history_after_pop() -> None:
    creature = _creature(max_hp=100)
    creature.take_damage(30)
    creature.take_damage(20)
    assert creature.hp_history == (100, 100, 70)

    creature.undo_hp_change()

    assert creature.hp_history == (100, 100)
    assert creature.current_hp == 100


def test_undo_on_fresh_creature_is_noop() -> None:
    creature = _creature(max_hp=100)

    creature.undo_hp_change()
    creature.undo_hp_change()

    assert creature.current_hp == 100
    assert creature.hp_history == (100,)


def test_history_never_empties_under_repeated_undo() -> None:
    creature = _creature(max_hp=50)
    for amount in (5, 10, 15):
        creature.take_damage(amount)

    for _ in range(10):
        creature.undo_hp_change()

    assert creature.hp_history == (50,)
    assert creature.current_hp == 50


def test_take_damage_clamps_at_zero_and_still_records_history() -> None:
    creature = _creature(max_hp=50)
    creature.take_damage(40)
    assert creature.current_hp == 10

    creature.take_damage(999)

    assert creature.current_hp == 0
    assert creature.is_defeated()
    assert len(creature.hp_history) == 3


def test_heal_clamps_at_max_hp() -> None:
    creature = _creature(max_hp=50)
    creature.take_damage(10)

    creature.heal(999)

    assert creature.current_hp == 50
    assert not creature.is_defeated()


def test_hp_stays_in_bounds_for_mixed_sequence() -> None:
    creature = _creature(max_hp=60)
    steps = [("d", 25), ("h", 5), ("d", 100), ("u", 0), ("h", 500), ("d", 0), ("u", 0), ("u", 0)]
    for op, amount in steps:
        if op == "d":
            creature.take_damage(amount)
        elif op == "h":
            creature.heal(amount)
        else:
            creature.undo_hp_change()
        assert 0 <= creature.current_hp <= creature.max_hp


def test_toggle_status_condition_twice_restores_membership() -> None:
    creature = _creature()
    creature.toggle_status_condition("burn")
    original = set(creature.active_conditions)

    creature.toggle_status_condition("poison")
    assert creature.has_condition("poison")
    creature.toggle_status_condition("poison")

    assert set(creature.active_conditions) == original
    assert not creature.has_condition("poison")


def test_get_move_returns_miss_for_empty_slot() -> None:
    creature = _creature()

    assert creature.get_move(1) == "Scratch"
    assert creature.get_move(2) == "Ember"
    assert creature.get_move(6) == MISS_MOVE
    assert creature.get_move(99) == MISS_MOVE


def test_evolution_links_resolve_names() -> None:
    creature = _creature(evolutions=(EvolutionLink(before="Charmander"), EvolutionLink(after="Charizard")))

    assert creature.has_evolution()
    assert creature.has_pre_evolution()
    assert creature.get_evolution_name() == "Charizard"
    assert creature.get_pre_evolution_name() == "Charmander"


def test_missing_evolution_links_return_none() -> None:
    creature = _creature()

    assert not creature.has_evolution()
    assert not creature.has_pre_evolution()
    assert creature.get_evolution_name() is None
    assert creature.get_pre_evolution_name() is None


def test_type_colors_known_and_secondary_absent_for_single_type() -> None:
    creature = _creature(types=("fire",))

    assert creature.get_primary_type_color() == TYPE_COLORS["fire"]
    assert creature.get_secondary_type_color() is None


def test_type_colors_dual_type_and_unknown_fallback() -> None:
    dual = _creature(types=("fire", "flying"))
    unknown = _creature(types=("cosmic", "shadow"))

    assert dual.get_secondary_type_color() == TYPE_COLORS["flying"]
    assert unknown.get_primary_type_color() == DEFAULT_TYPE_COLOR
    assert unknown.get_secondary_type_color() == DEFAULT_TYPE_COLOR


def test_with_state_starts_from_explicit_hp() -> None:
    creature = BattleCreature.with_state(
        id=5,
        name="Charmeleon",
        reference_key="charmeleon",
        types=("fire",),
        max_hp=58,
        moveset={},
        evolutions=(),
        current_hp=20,
        active_conditions=("burn", "burn", "sleep"),
    )

    assert creature.current_hp == 20
    assert creature.hp_history == (20,)
    assert creature.active_conditions == ("burn", "sleep")
    assert creature.hp_ratio == 20 / 58


def test_returned_collections_are_copies() -> None:
    creature = _creature()
    creature.toggle_status_condition("burn")

    history = creature.hp_history
    conditions = creature.active_conditions
    creature.take_damage(10)
    creature.toggle_status_condition("burn")

    assert history == (100,)
    assert conditions == ("burn",)
