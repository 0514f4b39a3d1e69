"""Enumerations shared by the game's components."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "BossAbility",
    "BossAnimation",
    "Direction",
    "EnemyAnimation",
    "GamepadButton",
    "MeleeIndicatorAnimation",
    "PlayerAnimation",
]


class BossAbility(IntEnum):
    """Abilities the boss can use."""

    DEFAULT = 0
    MELEE = 1
    CHARM = 2


class BossAnimation(IntEnum):
    """Rows of the boss sprite sheet."""

    IDLE = 0
    WALK = 1
    JUMP = 2
    ATTACK = 3
    TAUNT = 4
    BREATH = 5
    SCREAM = 6
    DEATH = 7


class Direction(IntEnum):
    """Eight movement directions plus none."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    UP_RIGHT = 4
    RIGHT_DOWN = 5
    DOWN_LEFT = 6
    LEFT_UP = 7
    NONE = 8


class EnemyAnimation(IntEnum):
    """Rows of an enemy sprite sheet."""

    IDLE_RIGHT = 0
    IDLE_LEFT = 1
    WALK_RIGHT = 2
    WALK_LEFT = 3
    ATTACK_RIGHT = 4
    ATTACK_LEFT = 5
    REACT_RIGHT = 6
    REACT_LEFT = 7
    HIT_RIGHT = 8
    HIT_LEFT = 9
    DIE_RIGHT = 10
    DIE_LEFT = 11
    RISE_RIGHT = 12
    RISE_LEFT = 13


class GamepadButton(IntEnum):
    """Gamepad button indices."""

    A = 0
    B = 1
    X = 2
    Y = 3
    LB = 4
    RB = 5
    BACK = 6
    START = 7
    LS = 8
    RS = 9
    DPAD_UP = 10
    DPAD_DOWN = 11
    DPAD_LEFT = 12
    DPAD_RIGHT = 13


class MeleeIndicatorAnimation(IntEnum):
    """Rows of the melee indicator sprite sheet."""

    INDICATOR_IDLE = 0


class PlayerAnimation(IntEnum):
    """Rows of the player sprite sheet."""

    RIGHT_IDLE = 0
    LEFT_IDLE = 1
    RIGHT = 2
    LEFT = 3
    RIGHT_ATTACK = 4
    LEFT_ATTACK = 5
    RIGHT_DEATH = 6
    LEFT_DEATH = 7
    RIGHT_DODGE = 8
    LEFT_DODGE = 9