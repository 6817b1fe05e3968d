import pytest

from forsaken.catalog import Catalog
from forsaken.character import create_default_character
from forsaken.domain import Biome, Enemy, SpawnConditions, Weather
from forsaken.util import Rng


def make_enemy(enemy_id, time_of_day="any", biomes=("forest",), health=25):
    return Enemy(
        id=enemy_id,
        name=enemy_id.title(),
        health=health,
        max_health=health,
        spawn_conditions=SpawnConditions(time_of_day=time_of_day, biomes=list(biomes)),
    )


@pytest.fixture
def goblin():
    return make_enemy("goblin", "any", ["forest"], health=25)


@pytest.fixture
def wolf():
    return make_enemy("wolf", "night", ["forest"], health=40)


@pytest.fixture
def skeleton():
    return make_enemy("skeleton", "any", ["dungeon"], health=35)


@pytest.fixture
def forest():
    return Biome(id="forest", name="Mystic Forest", rarity=8, enemies=["goblin", "wolf"])


@pytest.fixture
def dungeon():
    return Biome(id="dungeon", name="Ancient Dungeon", rarity=2, enemies=["skeleton"])


@pytest.fixture
def catalog(goblin, wolf, skeleton, forest, dungeon):
    return Catalog(
        enemies=(goblin, wolf, skeleton),
        biomes=(forest, dungeon),
        weather=(
            Weather(id="clear", name="Clear Skies"),
            Weather(id="rain", name="Heavy Rain"),
        ),
    )


@pytest.fixture
def character():
    return create_default_character()


@pytest.fixture
def rng():
    return Rng(42)
