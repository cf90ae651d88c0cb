from poker.tests.mocks.game_spy import GameSpy, user_sends

__all__ = ["GameSpy", "user_sends"]
