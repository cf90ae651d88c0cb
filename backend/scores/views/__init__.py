from scores.views.handlers import get_league, get_player_score, health, record_win

__all__ = ["get_league", "get_player_score", "health", "record_win"]
