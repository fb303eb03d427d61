from .model import GameStats, record_game
from .store import StatsStore

__all__ = ["GameStats", "record_game", "StatsStore"]
