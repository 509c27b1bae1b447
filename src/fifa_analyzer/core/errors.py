"""Errors raised by the player store and the similarity engine.

Every error carries a stable ``code`` so callers (the HTTP layer) can tell
them apart without matching on messages.
"""

from typing import Any, Optional


class PlayerAnalyzerError(Exception):
    code = "player_analyzer_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(PlayerAnalyzerError):
    code = "not_found"

    def __init__(self, player_id: Any):
        super().__init__(f"Player not found: {player_id}")
        self.player_id = player_id


class InvalidAttribute(PlayerAnalyzerError):
    code = "invalid_attribute"

    def __init__(self, attribute: str, reason: Optional[str] = None):
        message = f"unknown attribute: {attribute}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.attribute = attribute
        self.reason = reason


class EmptyAttributeSet(PlayerAnalyzerError):
    code = "empty_attribute_set"

    def __init__(self, message: str = "At least one attribute is required"):
        super().__init__(message)


class InvalidWeights(PlayerAnalyzerError):
    code = "invalid_weights"


class InvalidLimit(PlayerAnalyzerError):
    code = "invalid_limit"


class DataUnavailable(PlayerAnalyzerError):
    code = "data_unavailable"

    def __init__(self, message: str = "Player data has not been loaded"):
        super().__init__(message)


class InvalidPlayerData(DataUnavailable):
    """The player source exists but cannot be turned into a population."""

    code = "invalid_player_data"


class DuplicatePlayerId(PlayerAnalyzerError):
    code = "duplicate_player_id"

    def __init__(self, player_id: Any):
        super().__init__(f"Duplicate player id: {player_id}")
        self.player_id = player_id
