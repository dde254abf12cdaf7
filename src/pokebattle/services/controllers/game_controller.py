"""UI-agnostic game controller that owns the active battle creature."""
from __future__ import annotations

import logging
from typing import List

from pokebattle.core.rng import RNG
from pokebattle.core.types import Screen
from pokebattle.data.images import ImageResolver
from pokebattle.data.repositories import CreatureLookup, StatusConditionsRepository
from pokebattle.domain.defs import CreatureDef, StatusConditionDef
from pokebattle.domain.entities import BattleCreature
from pokebattle.services.errors import CreatureNotFoundError
from pokebattle.services.factories import (
    create_battle_creature,
    devolve_creature,
    evolve_creature,
)

logger = logging.getLogger(__name__)

DICE_SIDES = 6


class GameController:
    """
    Owns one battle creature at a time and routes gameplay calls to it.

    Responsibilities:
    - Load the seeded roster and the status condition list
    - Start a battle for the selected creature and resolve its artwork URL
    - Dispatch damage, heal, undo, status toggles and stage transitions
    - Track screen, dialog and dice state for whichever front end polls it

    Non-responsibilities (handled by presentation layer):
    - Rendering, prompting, animation timing
    """

    def __init__(
        self,
        creatures_repo: CreatureLookup,
        status_conditions_repo: StatusConditionsRepository,
        image_resolver: ImageResolver,
        rng: RNG,
    ) -> None:
        self._creatures_repo = creatures_repo
        self._status_conditions_repo = status_conditions_repo
        self._image_resolver = image_resolver
        self._rng = rng

        self.current_screen: Screen = "home"
        self.available_creatures: List[CreatureDef] = []
        self.available_status_conditions: List[StatusConditionDef] = []
        self.current_creature: BattleCreature | None = None
        self.selected_creature_name = ""
        self.creature_image_url = ""

        self.show_quit_confirm = False
        self.show_defeat_message = False
        self.show_status_description = False
        self.selected_status_description = ""

        self.dice_value = 0
        self.is_dice_rolling = False

    def initialize(self) -> None:
        """Load the seeded roster and the known status conditions."""
        self.available_creatures = self._creatures_repo.get_seeded()
        self.available_status_conditions = self._status_conditions_repo.all()
        logger.info(
            "Loaded %d seeded creatures and %d status conditions",
            len(self.available_creatures),
            len(self.available_status_conditions),
        )

    def select_creature(self, name: str) -> None:
        self.selected_creature_name = name

    def start_battle(self) -> None:
        """
        Enter the battle screen with a full-HP instance of the selected creature.

        Does nothing when no creature is selected. Raises CreatureNotFoundError
        when the selected name is not defined.
        """
        if not self.selected_creature_name:
            return
        record = self._creatures_repo.get_by_name(self.selected_creature_name)
        if record is None:
            raise CreatureNotFoundError(self.selected_creature_name)

        self.current_creature = create_battle_creature(record)
        self.creature_image_url = self._image_resolver.get_image_url(record.reference_key)
        self.current_screen = "battle"
        logger.info("Battle started with %s (%d HP)", record.name, record.base_max_hp)

    def go_to_home(self) -> None:
        self.current_screen = "home"
        self.current_creature = None
        self.selected_creature_name = ""
        self.creature_image_url = ""
        self.hide_quit_confirmation()
        self.hide_defeat_message()
        self.hide_status_condition_description()
        self._reset_dice()

    def deal_damage(self, amount: int) -> None:
        if self.current_creature is None:
            return
        self.current_creature.take_damage(amount)
        if self.current_creature.is_defeated():
            self.show_defeat_message = True
            logger.info("%s was defeated", self.current_creature.name)

    def heal(self, amount: int) -> None:
        if self.current_creature is None:
            return
        self.current_creature.heal(amount)

    def undo_hp_change(self) -> None:
        if self.current_creature is None:
            return
        self.current_creature.undo_hp_change()

    def toggle_status_condition(self, condition_id: str) -> None:
        if self.current_creature is None:
            return
        self.current_creature.toggle_status_condition(condition_id)

    def evolve(self) -> bool:
        """Replace the current creature with its evolved form. Returns True on success."""
        if self.current_creature is None or not self.current_creature.has_evolution():
            return False
        evolved = evolve_creature(self.current_creature, self._creatures_repo)
        if evolved is None:
            logger.warning(
                "Evolution target %s for %s is not defined",
                self.current_creature.get_evolution_name(),
                self.current_creature.name,
            )
            return False
        self._replace_creature(evolved, "evolved")
        return True

    def devolve(self) -> bool:
        """Replace the current creature with its pre-evolved form. Returns True on success."""
        if self.current_creature is None or not self.current_creature.has_pre_evolution():
            return False
        devolved = devolve_creature(self.current_creature, self._creatures_repo)
        if devolved is None:
            logger.warning(
                "Pre-evolution target %s for %s is not defined",
                self.current_creature.get_pre_evolution_name(),
                self.current_creature.name,
            )
            return False
        self._replace_creature(devolved, "devolved")
        return True

    def _replace_creature(self, creature: BattleCreature, verb: str) -> None:
        previous = self.current_creature
        self.current_creature = creature
        self.creature_image_url = self._image_resolver.get_image_url(creature.reference_key)
        logger.info(
            "%s %s into %s (%d/%d HP)",
            previous.name if previous else "?",
            verb,
            creature.name,
            creature.current_hp,
            creature.max_hp,
        )

    def get_status_condition(self, condition_id: str) -> StatusConditionDef | None:
        for condition in self.available_status_conditions:
            if condition.id == condition_id:
                return condition
        return None

    # Dice

    def roll_dice(self) -> None:
        """Start rolling, or stop and settle on a final value if already rolling."""
        if self.is_dice_rolling:
            self._stop_dice()
        else:
            self._start_dice()

    def tick_dice(self) -> None:
        """Advance the spinning value while the dice is rolling."""
        if self.is_dice_rolling:
            self.dice_value = self._rng.roll_die(DICE_SIDES)

    def _start_dice(self) -> None:
        self.is_dice_rolling = True
        self.dice_value = self._rng.roll_die(DICE_SIDES)

    def _stop_dice(self) -> None:
        self.is_dice_rolling = False
        self.dice_value = self._rng.roll_die(DICE_SIDES)

    def _reset_dice(self) -> None:
        self.is_dice_rolling = False
        self.dice_value = 0

    # Dialogs

    def show_quit_confirmation(self) -> None:
        self.show_quit_confirm = True

    def hide_quit_confirmation(self) -> None:
        self.show_quit_confirm = False

    def hide_defeat_message(self) -> None:
        self.show_defeat_message = False

    def show_status_condition_description(self, description: str) -> None:
        self.selected_status_description = description
        self.show_status_description = True

    def hide_status_condition_description(self) -> None:
        self.show_status_description = False
        self.selected_status_description = ""
