"""Registry holding one shared instance per class."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar("T")


class SingletonRegistry:
    """
    Thread-safe registry of process-wide singleton instances.

    Instances are created lazily on first request and reused afterwards.
    """

    _instance: Optional['SingletonRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._instances_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'SingletonRegistry':
        """Get the registry itself."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Return the shared instance of ``singleton_class``, creating it if needed."""
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._instances_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
        return instance

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register a pre-created instance."""
        with self._instances_lock:
            self._instances[singleton_class] = instance

    def has(self, singleton_class: Type) -> bool:
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Forget one instance, or all of them."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
