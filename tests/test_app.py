import asyncio

from forsaken.catalog import Catalog
from forsaken.ui.app import ForsakenApp


def test_spawn_timer_follows_biome(goblin, forest):
    app = ForsakenApp(Catalog(enemies=(goblin,), biomes=(forest,)), seed=1)

    async def scenario():
        async with app.run_test() as pilot:
            assert app._spawn_timer is None
            app._handle_command("1")
            await pilot.pause()
            assert app._spawn_timer is not None
            assert "Mystic Forest" in app._header_text()
            app._handle_command("8")
            await pilot.pause()
            assert app._spawn_timer is None

    asyncio.run(scenario())


def test_starter_equipment_shows_in_stats(goblin, forest):
    app = ForsakenApp(Catalog(enemies=(goblin,), biomes=(forest,)), seed=1)

    async def scenario():
        async with app.run_test() as pilot:
            app._handle_command("5 1")
            app._handle_command("6 chestplate")
            app._handle_command("7 9")
            await pilot.pause()
            assert app.session.stats.damage == 20
            assert app.session.stats.armor == 5
            assert "Damage: 20" in app._detail_lines()

    asyncio.run(scenario())
