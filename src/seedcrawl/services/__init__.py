"""Service layer exports."""

from .errors import SaveLoadError, SaveVersionError
from .save_service import SaveService, SaveSnapshot
from .translation_service import TranslationService
from .game import Game

__all__ = [
    "Game",
    "SaveLoadError",
    "SaveService",
    "SaveSnapshot",
    "SaveVersionError",
    "TranslationService",
]
