from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.timer import Timer
from textual.widgets import Input, RichLog, Static

from forsaken.authoring.items import ItemDraft, build_item
from forsaken.catalog.loader import Catalog
from forsaken.character.loadout import SlotRef, all_slots, item_in_slot
from forsaken.config import DEFAULT_SETTINGS, EncounterSettings
from forsaken.domain.enums import ItemType
from forsaken.encounter.results import EncounterResult
from forsaken.encounter.session import EncounterSession
from forsaken.stats.aggregator import format_number, rarity_style
from forsaken.util.rng import Rng

STAT_LINES = [
    ("Health", "health"),
    ("Max health", "max_health"),
    ("Armor", "armor"),
    ("Damage", "damage"),
    ("Crit chance", "critical_chance"),
    ("Crit damage", "critical_damage"),
    ("Movement", "movement_speed"),
    ("Jump", "jump_height"),
    ("Lifesteal", "lifesteal"),
    ("Gold", "gold"),
]

STARTER_ITEMS = {
    ItemType.WEAPON: ItemDraft(
        type=ItemType.WEAPON, name="Rusty Sword", description="Better than fists."
    ),
    ItemType.ARMOR: ItemDraft(
        type=ItemType.ARMOR, name="Leather Cap", description="Smells of rain."
    ),
    ItemType.ACCESSORY: ItemDraft(
        type=ItemType.ACCESSORY, name="Copper Ring", description="Plain and warm."
    ),
}


class ForsakenApp(App):
    TITLE = "Forsaken"
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f7", "focus_detail", "Focus detail"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #log {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #detail_view {
        width: 100%;
    }
    #menu {
        height: auto;
        padding: 1 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        catalog: Catalog,
        settings: EncounterSettings = DEFAULT_SETTINGS,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        self.session = EncounterSession(catalog, settings=settings, rng=Rng(seed))
        self._spawn_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("", id="header")
            yield RichLog(id="log", wrap=True, markup=True)
            yield VerticalScroll(Static("", id="detail_view", expand=True), id="detail")
            yield Static(self._menu_text(), id="menu")
            yield Input(placeholder="Enter command (1-8 or q)...", id="command")

    def on_mount(self) -> None:
        self._refresh()
        self._write("Type a number to choose an action. Type 'q' to quit.")
        self.query_one("#command", Input).focus()

    def on_unmount(self) -> None:
        self._stop_spawn_timer()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        event.input.value = ""
        if not value:
            return
        if value.lower() == "q":
            self.exit()
            return
        self._handle_command(value)

    def _menu_text(self) -> str:
        return (
            "Choose action:\n"
            "1) Teleport to a random biome\n"
            "2) Toggle time of day\n"
            "3) Change weather\n"
            "4 <n>) Attack enemy n\n"
            "5 <slot>) Equip starter weapon (slot 1-3)\n"
            "6 <slot>) Equip starter armor (helmet/chestplate/leggings)\n"
            "7 <slot>) Equip starter accessory (slot 1-8)\n"
            "8) Leave biome"
        )

    def _write(self, message: str) -> None:
        self.query_one("#log", RichLog).write(message)

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_detail(self) -> None:
        self.query_one("#detail", VerticalScroll).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def _handle_command(self, value: str) -> None:
        command, _, argument = value.partition(" ")
        argument = argument.strip()
        if command == "1":
            self._report(self.session.teleport())
        elif command == "2":
            self._report(self.session.toggle_time())
        elif command == "3":
            self._report(self.session.change_weather())
        elif command == "4":
            self._attack(argument)
        elif command in {"5", "6", "7"}:
            self._equip_starter(command, argument)
        elif command == "8":
            self._report(self.session.leave_biome())
        else:
            self._write("Unknown command.")
        self._sync_spawn_timer()
        self._refresh()

    def _attack(self, argument: str) -> None:
        enemies = self.session.state.active_enemies
        if not argument.isdigit() or not 1 <= int(argument) <= len(enemies):
            self._write("Pick an enemy number from the list.")
            return
        self._report(self.session.attack(enemies[int(argument) - 1].id))

    def _equip_starter(self, command: str, argument: str) -> None:
        kind = {"5": ItemType.WEAPON, "6": ItemType.ARMOR, "7": ItemType.ACCESSORY}[command]
        if kind == ItemType.ARMOR:
            slot = next(
                (s for s in all_slots() if s.category == kind and s.index == argument),
                None,
            )
        elif argument.isdigit():
            slot = SlotRef(kind, int(argument) - 1)
        else:
            slot = None
        if slot is None or not slot.is_valid():
            self._write("That slot does not exist.")
            return
        item = build_item(STARTER_ITEMS[kind], self.session.clock())
        self.session.equip(item, slot)
        self._write(f"Equipped {item.name} in {slot.label()}.")

    def _report(self, result: EncounterResult) -> None:
        if result.summary:
            self._write(result.summary)
        for note in result.notes:
            self._write(f"- {note}")

    def _on_spawn_tick(self) -> None:
        result = self.session.tick()
        if result.spawned is not None:
            self._report(result)
        self._sync_spawn_timer()
        self._refresh()

    def _sync_spawn_timer(self) -> None:
        if self.session.ticking and self._spawn_timer is None:
            self._spawn_timer = self.set_interval(
                self.session.settings.spawn_check_interval, self._on_spawn_tick
            )
        elif not self.session.ticking:
            self._stop_spawn_timer()

    def _stop_spawn_timer(self) -> None:
        if self._spawn_timer is not None:
            self._spawn_timer.stop()
            self._spawn_timer = None

    def _refresh(self) -> None:
        self.query_one("#header", Static).update(self._header_text())
        self.query_one("#detail_view", Static).update("\n".join(self._detail_lines()))

    def _header_text(self) -> str:
        state = self.session.state
        biome = state.current_biome.name if state.current_biome else "None"
        weather = state.current_weather.name if state.current_weather else "Clear"
        parts = [
            f"Biome: {biome}",
            f"Time: {state.time_of_day.value}",
            f"Weather: {weather}",
            f"Gold: {format_number(self.session.character.base_stats.gold)}",
        ]
        if state.has_biome:
            parts.append(f"Enemy spawn in: {self.session.seconds_until_spawn()}s")
        return "  ".join(parts)

    def _detail_lines(self) -> list[str]:
        character = self.session.character
        stats = self.session.stats
        lines = [f"{character.name} (level {character.level})", ""]
        for label, field_name in STAT_LINES:
            lines.append(f"{label}: {format_number(getattr(stats, field_name))}")
        lines.append("")
        lines.append("Equipment:")
        for slot in all_slots():
            item = item_in_slot(character, slot)
            if item is None:
                lines.append(f"- {slot.label()}: (empty)")
            else:
                style = rarity_style(item.rarity)
                lines.append(f"- {slot.label()}: [{style}]{item.name}[/{style}]")
        lines.append("")
        lines.append("Active effects:")
        effects = self.session.effects
        if not effects:
            lines.append("(none)")
        for effect in effects:
            lines.append(f"- {effect.name} ({effect.kind.value}): {format_number(effect.value)}")
        lines.append("")
        lines.append("Enemies:")
        enemies = self.session.state.active_enemies
        if not enemies:
            lines.append("(none)")
        for idx, enemy in enumerate(enemies, start=1):
            lines.append(
                f"{idx}) {enemy.name} [{enemy.template.size.value}] "
                f"{format_number(enemy.health)}/{format_number(enemy.max_health)} "
                f"dmg {format_number(enemy.template.damage)}"
            )
        return lines
