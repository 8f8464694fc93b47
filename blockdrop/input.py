"""
Input mapping: discrete key names -> session intents.

Key names follow the browser KeyboardEvent.key convention ("ArrowLeft",
" " for the space bar). Front-ends translate their own key codes into these
names before calling InputMapper.handle().
"""

from __future__ import annotations

from blockdrop.game.session import GameSession, Intent

KEY_MAP: dict[str, Intent] = {
    "ArrowLeft": Intent.LEFT,
    "ArrowRight": Intent.RIGHT,
    "ArrowDown": Intent.DOWN,
    "ArrowUp": Intent.ROTATE,
    " ": Intent.HARD_DROP,
    "Space": Intent.HARD_DROP,
}


class InputMapper:
    """Forwards recognised key presses to a session while it is running."""

    def __init__(self, session: GameSession, submit=None) -> None:
        """
        Args:
            session: The session whose state gates input.
            submit: Callable receiving each Intent. Defaults to
                session.apply; pass GameLoop.submit to serialize input with
                gravity ticks.
        """
        self.session = session
        self._submit = submit if submit is not None else session.apply

    def intent_for(self, key: str) -> Intent | None:
        return KEY_MAP.get(key)

    def handle(self, key: str) -> bool:
        """Dispatch the intent for a key press.

        Args:
            key: Symbolic key name.

        Returns:
            True if an intent was dispatched, False if the key is unknown or
            the session is not running.
        """
        intent = KEY_MAP.get(key)
        if intent is None or not self.session.running:
            return False
        self._submit(intent)
        return True
