"""Console-driven UI loops for pokebattle."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Literal

from pokebattle.core.rng import RNG
from pokebattle.data.images import ImageResolver
from pokebattle.data.repositories import CreaturesRepository, StatusConditionsRepository
from pokebattle.services import CreatureNotFoundError, GameController

from .config import AppConfig, configure_logging, load_config
from .render import render_battle, render_heading, render_roster

CommandName = Literal[
    "damage",
    "heal",
    "undo",
    "status",
    "info",
    "evolve",
    "devolve",
    "dice",
    "move",
    "quit",
    "help",
]

_AMOUNT_COMMANDS: Dict[str, CommandName] = {"d": "damage", "h": "heal", "m": "move"}
_ID_COMMANDS: Dict[str, CommandName] = {"s": "status", "i": "info"}
_BARE_COMMANDS: Dict[str, CommandName] = {"u": "undo", "e": "evolve", "v": "devolve", "r": "dice", "q": "quit", "?": "help"}

_HELP_TEXT = (
    "d N  deal N damage      h N  heal N HP\n"
    "u    undo last HP change\n"
    "s ID toggle a status    i ID describe a status\n"
    "e    evolve             v    devolve\n"
    "r    start/stop dice    m N  show move in slot N\n"
    "q    back to home"
)


@dataclass(slots=True)
class BattleCommand:
    """A parsed battle-screen command."""

    name: CommandName
    amount: int | None = None
    argument: str | None = None


def parse_battle_command(text: str) -> BattleCommand | None:
    """Parse one line of battle input. Returns None for anything unrecognised."""
    parts = text.strip().split(maxsplit=1)
    if not parts:
        return None
    key = parts[0].lower()
    rest = parts[1].strip() if len(parts) > 1 else ""

    if key in _AMOUNT_COMMANDS:
        if not rest.isdecimal():
            return None
        amount = int(rest)
        if key == "m" and amount < 1:
            return None
        return BattleCommand(name=_AMOUNT_COMMANDS[key], amount=amount)
    if key in _ID_COMMANDS:
        if not rest:
            return None
        return BattleCommand(name=_ID_COMMANDS[key], argument=rest)
    if key in _BARE_COMMANDS and not rest:
        return BattleCommand(name=_BARE_COMMANDS[key])
    return None


def build_controller(config: AppConfig) -> GameController:
    """Construct the GameController with concrete repositories.

    Raises DataReferenceError when an evolution link names an undefined creature.
    """
    base_path = Path(config.definitions_path) if config.definitions_path else None
    creatures_repo = CreaturesRepository(base_path=base_path)
    creatures_repo.validate_links()
    return GameController(
        creatures_repo=creatures_repo,
        status_conditions_repo=StatusConditionsRepository(base_path=base_path),
        image_resolver=ImageResolver(config.image_url_template),
        rng=RNG(config.dice_seed),
    )


def main() -> None:
    """Start the interactive CLI session."""
    config = load_config()
    configure_logging(config.log_level)
    controller = build_controller(config)
    controller.initialize()
    print("=== PokeBattle HP Tracker ===")
    while _home_loop(controller):
        _run_battle_loop(controller)
    print("Goodbye!")


def _home_loop(controller: GameController) -> bool:
    """Prompt until a battle starts. Returns False when the user quits."""
    while True:
        render_roster(controller.available_creatures)
        choice = input("Pick a number or name (q to quit): ").strip()
        if choice.lower() == "q":
            return False
        name = _resolve_roster_choice(controller, choice)
        if name is None:
            print("Invalid selection.")
            continue
        controller.select_creature(name)
        try:
            controller.start_battle()
        except CreatureNotFoundError as exc:
            print(exc)
            continue
        return True


def _resolve_roster_choice(controller: GameController, choice: str) -> str | None:
    if choice.isdecimal():
        index = int(choice) - 1
        if 0 <= index < len(controller.available_creatures):
            return controller.available_creatures[index].name
        return None
    return choice or None


def _run_battle_loop(controller: GameController) -> None:
    while controller.current_screen == "battle" and controller.current_creature is not None:
        controller.tick_dice()
        render_battle(
            controller.current_creature,
            controller.available_status_conditions,
            image_url=controller.creature_image_url,
            dice_value=controller.dice_value,
            dice_rolling=controller.is_dice_rolling,
        )
        command = parse_battle_command(input("> "))
        if command is None:
            print("Unknown command. Type ? for help.")
            continue
        handle_battle_command(controller, command)


def handle_battle_command(controller: GameController, command: BattleCommand) -> None:
    """Apply one parsed command to the controller and print any feedback."""
    creature = controller.current_creature
    if creature is None:
        return
    if command.name == "damage":
        controller.deal_damage(command.amount or 0)
        if controller.show_defeat_message:
            print(f"{creature.name} is defeated!")
            controller.hide_defeat_message()
    elif command.name == "heal":
        controller.heal(command.amount or 0)
    elif command.name == "undo":
        controller.undo_hp_change()
    elif command.name == "status":
        if controller.get_status_condition(command.argument or "") is None:
            print(f"Unknown status condition '{command.argument}'.")
            return
        controller.toggle_status_condition(command.argument or "")
    elif command.name == "info":
        condition = controller.get_status_condition(command.argument or "")
        if condition is None:
            print(f"Unknown status condition '{command.argument}'.")
            return
        controller.show_status_condition_description(condition.description)
        render_heading(condition.name)
        print(controller.selected_status_description)
        controller.hide_status_condition_description()
    elif command.name == "evolve":
        if not controller.evolve():
            print(f"{creature.name} cannot evolve.")
    elif command.name == "devolve":
        if not controller.devolve():
            print(f"{creature.name} cannot devolve.")
    elif command.name == "dice":
        controller.roll_dice()
    elif command.name == "move":
        print(f"Move {command.amount}: {creature.get_move(command.amount or 1)}")
    elif command.name == "quit":
        controller.show_quit_confirmation()
        answer = input("Return to home? (y/n): ").strip().lower()
        if answer == "y":
            controller.go_to_home()
        else:
            controller.hide_quit_confirmation()
    elif command.name == "help":
        print(_HELP_TEXT)
