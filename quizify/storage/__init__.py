"""Quiz Storage - Store de quizzes/tentativas e backends locais."""

from .backends import JsonFileStorage, KeyValueStorage, MemoryStorage
from .quiz_store import QuizStore

__all__ = ["JsonFileStorage", "KeyValueStorage", "MemoryStorage", "QuizStore"]
