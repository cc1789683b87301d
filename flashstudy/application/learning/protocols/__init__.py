from .flashcard_repository import FlashcardRepositoryProtocol
from .id_generator import IdGeneratorProtocol
from .key_value_store import KeyValueStoreProtocol

__all__ = ["FlashcardRepositoryProtocol", "IdGeneratorProtocol", "KeyValueStoreProtocol"]
