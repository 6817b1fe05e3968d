import pytest

from forsaken.catalog import Catalog
from forsaken.character import SlotRef
from forsaken.config import EncounterSettings
from forsaken.domain import Biome, Weapon
from forsaken.encounter import ActionOutcome, EncounterSession
from forsaken.util import ManualClock, Rng

from conftest import make_enemy


@pytest.fixture
def clock():
    return ManualClock(1_000_000)


@pytest.fixture
def session(goblin, forest, clock):
    catalog = Catalog(enemies=(goblin,), biomes=(forest,))
    return EncounterSession(catalog, rng=Rng(3), clock=clock)


def _tick_until_spawn(session, clock, limit=40):
    for _ in range(limit):
        clock.advance_seconds(1)
        result = session.tick()
        if result.spawned is not None:
            return result
    raise AssertionError("nothing spawned")


def test_session_starts_idle(session):
    assert not session.ticking
    assert session.seconds_until_spawn() == 20
    assert session.tick().outcome == ActionOutcome.NO_EFFECT
    assert list(session.log) == ["No biome selected."]


def test_teleport_starts_ticking(session):
    result = session.teleport()
    assert result.succeeded
    assert session.ticking
    assert session.state.current_biome.id == "forest"
    assert session.log[-1] == "You arrive in Mystic Forest."


def test_twenty_ticks_spawn_a_goblin(session, clock):
    session.teleport()
    result = _tick_until_spawn(session, clock)
    assert result.spawned.template_id == "goblin"
    assert session.state.spawn_timer == 0
    assert clock() == 1_000_000 + 20_000
    assert session.log[-1] == "A Goblin appears!"


def test_attacks_loot_gold_into_character(session, clock):
    session.teleport()
    target = _tick_until_spawn(session, clock).spawned.id
    for _ in range(3):
        clock.advance(600)
        session.attack(target)
    assert session.state.active_enemies == ()
    assert 1 <= session.character.base_stats.gold <= 10
    assert "defeated" in session.log[-1]


def test_equip_changes_session_stats(session):
    assert session.stats.damage == 10
    session.equip(Weapon(id="w1", name="Sword", damage=15), SlotRef.weapon(0))
    assert session.stats.damage == 25
    session.unequip(SlotRef.weapon(0))
    assert session.stats.damage == 10


def test_leave_biome_stops_ticking(session):
    session.teleport()
    session.leave_biome()
    assert not session.ticking


def test_update_bestiary_changes_future_spawns(session, clock):
    session.teleport()
    session.update_bestiary([make_enemy("bat")])
    result = _tick_until_spawn(session, clock)
    assert result.spawned.template_id == "bat"


def test_settings_flow_into_session(goblin, forest, clock):
    settings = EncounterSettings(spawn_threshold=3, max_active_enemies=1)
    session = EncounterSession(
        Catalog(enemies=(goblin,), biomes=(forest,)),
        settings=settings,
        rng=Rng(5),
        clock=clock,
    )
    session.teleport()
    assert session.seconds_until_spawn() == 3
    _tick_until_spawn(session, clock, limit=3)
    for _ in range(10):
        clock.advance_seconds(1)
        session.tick()
    assert len(session.state.active_enemies) == 1


def test_log_is_bounded(session):
    for _ in range(80):
        session.toggle_time()
    assert len(session.log) == 50
