"""Game stages, actions and the action legality state machine."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from transitions import Machine

logger = logging.getLogger(__name__)


class Stage(Enum):
    """
    Game stages, owned and advanced by the table orchestrator.

    Flow: READY → PLAYER_TURN_RIGHT → (PLAYER_TURN_LEFT) → DEALER_TURN → SHOWDOWN
    """

    READY = "STAGE_READY"
    PLAYER_TURN_RIGHT = "STAGE_PLAYER_TURN_RIGHT"
    # Hand created by a split
    PLAYER_TURN_LEFT = "STAGE_PLAYER_TURN_LEFT"
    SHOWDOWN = "SHOWDOWN"
    DEALER_TURN = "STAGE_DEALER_TURN"
    # Terminal
    INVALID = "STAGE_INVALID"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def _missing_(cls, value: object) -> "Stage | None":
        # Accept the prefixed spelling of the showdown stage as well
        if value == "STAGE_SHOWDOWN":
            return cls.SHOWDOWN
        return None


class Action(Enum):
    """Actions the orchestrator dispatches."""

    RESTORE = "RESTORE"
    DEAL = "DEAL"
    STAND = "STAND"
    HIT = "HIT"
    DOUBLE = "DOUBLE"
    SPLIT = "SPLIT"
    INSURANCE = "INSURANCE"
    SURRENDER = "SURRENDER"
    DEALER_HIT = "DEALER_HIT"
    SHOWDOWN = "SHOWDOWN"


# Actions allowed in each stage
STAGE_ACTIONS: Mapping[Stage, frozenset[Action]] = MappingProxyType({
    Stage.READY: frozenset({Action.RESTORE, Action.DEAL}),
    Stage.PLAYER_TURN_RIGHT: frozenset({
        Action.STAND,
        Action.INSURANCE,
        Action.SURRENDER,
        Action.SPLIT,
        Action.HIT,
        Action.DOUBLE,
    }),
    Stage.PLAYER_TURN_LEFT: frozenset({Action.STAND, Action.HIT, Action.DOUBLE}),
    Stage.SHOWDOWN: frozenset({Action.SHOWDOWN, Action.STAND}),
    Stage.DEALER_TURN: frozenset({Action.DEALER_HIT}),
    Stage.INVALID: frozenset(),
})

_missing = set(Stage) - set(STAGE_ACTIONS)
if _missing:
    raise RuntimeError(f"No allowed actions declared for {sorted(s.name for s in _missing)}")


def _build_machine() -> Machine:
    """
    Build the legality machine.

    Every allowed action is an internal transition (``dest=None``) of its
    stage, so triggers never move the machine; stage changes belong to the
    orchestrator.
    """
    transitions = [
        {"trigger": action.value, "source": stage.value, "dest": None}
        for stage, actions in STAGE_ACTIONS.items()
        for action in sorted(actions, key=lambda a: a.value)
    ]
    return Machine(
        model=None,
        states=[stage.value for stage in Stage],
        transitions=transitions,
        initial=Stage.READY.value,
        auto_transitions=False,
    )


_LEGALITY = _build_machine()


def _coerce(enum_cls: type[Enum], item: Enum | str | None) -> Enum | None:
    """Resolve an enum member from a member or its wire value, None if unknown."""
    if isinstance(item, enum_cls):
        return item
    try:
        return enum_cls(item)
    except ValueError:
        return None


def allowed_actions(stage: Stage | str) -> frozenset[Action]:
    """
    Return the actions allowed in a stage.

    Args:
        stage: Stage member or its wire value

    Returns:
        The allowed actions (empty for unknown stages)
    """
    resolved = _coerce(Stage, stage)
    if resolved is None:
        logger.debug("Unknown stage %r", stage)
        return frozenset()
    return frozenset(Action(trigger) for trigger in _LEGALITY.get_triggers(resolved.value))


def is_action_allowed(action: Action | str, stage: Stage | str) -> bool:
    """
    Check if an action may be dispatched in a stage.

    RESTORE is always allowed so the orchestrator can resynchronise state.

    Args:
        action: Action member or its wire value
        stage: Stage member or its wire value

    Returns:
        True if the action is allowed
    """
    resolved = _coerce(Action, action)
    if resolved is None:
        logger.debug("Unknown action %r denied", action)
        return False
    if resolved is Action.RESTORE:
        return True
    return resolved in allowed_actions(stage)
