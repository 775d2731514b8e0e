"""Sample Registry - maps pattern slugs to their runnable sample modules.

Catalogue entries reference samples by dotted module path. The registry owns the
mapping, imports modules on first use and extracts the source of the objects a
catalogue entry shows.
"""

import importlib
import inspect
import threading
from types import ModuleType
from typing import Dict, List, Sequence

from pattern_catalog.infrastructure.exceptions import SampleLoadError, SampleNotFoundError
from pattern_catalog.infrastructure.logging.logger import get_logger


class SampleRegistry:
    """
    Registry of pattern sample modules.

    Thread-safe. Obtain the process-wide instance through
    ``get_singleton(SampleRegistry)``.
    """

    def __init__(self):
        """Initialize sample registry."""
        self._registrations: Dict[str, str] = {}
        self._modules: Dict[str, ModuleType] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    def register_sample(self, slug: str, module_path: str) -> None:
        """
        Register the sample module for a pattern.

        Args:
            slug: Pattern slug (e.g., 'singleton')
            module_path: Dotted import path of the sample module

        Registering the same slug and module again is a no-op.

        Raises:
            ValueError: If slug is already registered to another module
        """
        with self._registration_lock:
            current = self._registrations.get(slug)
            if current == module_path:
                return
            if current is not None:
                raise ValueError(f"Sample for pattern '{slug}' is already registered to {current}")
            self._registrations[slug] = module_path
            self._logger.debug("Registered sample", slug=slug, module=module_path)

    def ensure_sample(self, slug: str, module_path: str) -> None:
        """
        Point a pattern at its sample module, registering it when needed.

        A registration that names another module is replaced and its cached
        module dropped, so catalogues loaded from different data directories
        see their own samples.
        """
        with self._registration_lock:
            current = self._registrations.get(slug)
            if current == module_path:
                return
            if current is not None:
                self._modules.pop(slug, None)
                self._logger.debug("Replaced sample registration", slug=slug,
                                   previous=current, module=module_path)
            self._registrations[slug] = module_path
            self._logger.debug("Registered sample", slug=slug, module=module_path)

    def is_registered(self, slug: str) -> bool:
        """Check if a sample is registered for a pattern."""
        return slug in self._registrations

    def get_registered_slugs(self) -> List[str]:
        """Get list of all pattern slugs with a registered sample."""
        return list(self._registrations.keys())

    def get_module_path(self, slug: str) -> str:
        """Get the dotted module path registered for a pattern."""
        try:
            return self._registrations[slug]
        except KeyError:
            raise SampleNotFoundError(slug) from None

    def load_module(self, slug: str) -> ModuleType:
        """
        Import the sample module for a pattern.

        Modules are cached after the first successful import.

        Raises:
            SampleNotFoundError: If no sample is registered for the slug
            SampleLoadError: If the module cannot be imported
        """
        module_path = self.get_module_path(slug)
        with self._registration_lock:
            if slug in self._modules:
                return self._modules[slug]
            try:
                module = importlib.import_module(module_path)
            except ImportError as e:
                raise SampleLoadError(
                    f"Cannot import sample module {module_path} for pattern {slug}: {e}",
                    {"slug": slug, "module": module_path},
                ) from e
            self._modules[slug] = module
            self._logger.debug("Loaded sample module", slug=slug, module=module_path)
            return module

    def get_object(self, slug: str, name: str):
        """Get a top-level object from the sample module of a pattern."""
        module = self.load_module(slug)
        try:
            return getattr(module, name)
        except AttributeError:
            raise SampleLoadError(
                f"Sample module {module.__name__} has no object named {name}",
                {"slug": slug, "module": module.__name__, "object": name},
            ) from None

    def get_source(self, slug: str, objects: Sequence[str]) -> str:
        """
        Get the source code of the given sample objects.

        The source of each object is joined with a blank line, in the order
        given.

        Raises:
            SampleNotFoundError: If no sample is registered for the slug
            SampleLoadError: If an object is missing or has no source
        """
        parts = []
        for name in objects:
            obj = self.get_object(slug, name)
            try:
                parts.append(inspect.getsource(obj).rstrip())
            except (OSError, TypeError) as e:
                raise SampleLoadError(
                    f"Cannot read source of {name} for pattern {slug}: {e}",
                    {"slug": slug, "object": name},
                ) from e
        return "\n\n\n".join(parts) + "\n" if parts else ""

    def run_demo(self, slug: str) -> List[str]:
        """
        Run the ``demo()`` function of a sample module.

        Returns:
            The lines produced by the demo
        """
        demo = self.get_object(slug, "demo")
        lines = [str(line) for line in demo()]
        self._logger.debug("Ran sample demo", slug=slug, lines=len(lines))
        return lines

    def clear_registrations(self) -> None:
        """Clear all registrations and cached modules (mainly for testing)."""
        with self._registration_lock:
            self._registrations.clear()
            self._modules.clear()
            self._logger.debug("Cleared all sample registrations")
