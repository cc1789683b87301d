from .bootstrap_use_case import BootstrapUseCase
from .flashcard_use_case import FlashcardUseCase
from .set_use_case import SetUseCase

__all__ = ["BootstrapUseCase", "FlashcardUseCase", "SetUseCase"]
