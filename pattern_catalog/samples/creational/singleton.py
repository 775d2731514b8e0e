"""Singleton: one shared Logger instance, created lazily and thread-safely."""
import threading
from typing import List, Optional


class Logger:
    """Application-wide logger. Every ``Logger()`` call returns the same object."""

    _instance: Optional["Logger"] = None
    _lock = threading.Lock()

    def __new__(cls):
        # Lazy initialisation with double-checked locking
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance.messages = []
                    cls._instance = instance
        return cls._instance

    def log(self, message: str) -> None:
        self.messages.append(message)

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance (used by tests)."""
        with cls._lock:
            cls._instance = None


def demo() -> List[str]:
    Logger.reset()
    first = Logger()
    second = Logger()
    first.log("application started")
    second.log("configuration loaded")
    return [
        f"same instance: {first is second}",
        f"messages: {', '.join(first.messages)}",
    ]
