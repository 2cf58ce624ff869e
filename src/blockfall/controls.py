"""Translate abstract key names into engine commands."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .engine import Direction, Engine
from .game_state import StepResult

LOGGER = logging.getLogger(__name__)

Command = Callable[[Engine], StepResult]

KEY_COMMANDS: Dict[str, Command] = {
    "left": lambda engine: engine.move(Direction.LEFT),
    "right": lambda engine: engine.move(Direction.RIGHT),
    "down": lambda engine: engine.move(Direction.DOWN),
    "up": lambda engine: engine.rotate(),
    "space": lambda engine: engine.hard_drop(),
    "p": lambda engine: engine.toggle_pause(),
    "enter": lambda engine: engine.start(),
}

# Keys still honoured when no game is in progress.
ALWAYS_ACTIVE = frozenset({"enter"})


def dispatch(engine: Engine, key: str) -> Optional[StepResult]:
    """Run the command bound to ``key``.

    Returns ``None`` for unbound keys and for gameplay keys pressed while no
    game is running.
    """

    command = KEY_COMMANDS.get(key.lower())
    if command is None:
        return None
    if key.lower() not in ALWAYS_ACTIVE and not engine.state.accepts_commands():
        LOGGER.debug("Dropping key %r outside of a running game", key)
        return None
    return command(engine)
