from .events import KeyEvent, KeyKind, parse_keys, SUBMIT, DELETE
from .state import (
    GameState, GameStatus, GameOutcome, Cell,
    new_game, type_letter, delete_letter, submit, reduce,
    clear_expired_message, outcome,
    WORD_LENGTH, MAX_GUESSES, MESSAGE_SECONDS,
)

__all__ = [
    "KeyEvent", "KeyKind", "parse_keys", "SUBMIT", "DELETE",
    "GameState", "GameStatus", "GameOutcome", "Cell",
    "new_game", "type_letter", "delete_letter", "submit", "reduce",
    "clear_expired_message", "outcome",
    "WORD_LENGTH", "MAX_GUESSES", "MESSAGE_SECONDS",
]
