"""YAML-backed pattern repository."""
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.pattern import (
    Pattern,
    PatternCategory,
    PatternRepository,
    PatternValidationError,
)
from pattern_catalog.infrastructure.exceptions import StorageError
from pattern_catalog.infrastructure.logging.logger import get_logger

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
CATALOG_FILE = "catalog.yaml"
PATTERNS_DIR = "patterns"


def format_validation_errors(error: PydanticValidationError) -> List[str]:
    """Flatten pydantic errors into 'field: message' strings."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        message = item.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return messages


class YamlPatternRepository(PatternRepository):
    """
    Loads catalogue entries from a data directory.

    Layout::

        <data_dir>/catalog.yaml        title, introduction, category descriptions
        <data_dir>/patterns/*.yaml     one pattern entry per file

    Entries are loaded once and cached; call ``reload()`` to re-read the files.
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        self.data_dir = Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR
        self._patterns: Optional[Dict[str, Pattern]] = None
        self._metadata: Optional[Dict[str, Any]] = None
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    def find_all(self) -> List[Pattern]:
        return list(self._load().values())

    def find_by_slug(self, slug: str) -> Optional[Pattern]:
        return self._load().get(slug)

    def find_by_category(self, category: PatternCategory) -> List[Pattern]:
        category = PatternCategory(category)
        return [p for p in self._load().values() if p.category == category]

    def get_catalog_metadata(self) -> Dict[str, Any]:
        """Title, introduction and category descriptions from catalog.yaml."""
        with self._lock:
            if self._metadata is None:
                path = self.data_dir / CATALOG_FILE
                data = self._read_yaml(path) if path.exists() else {}
                categories = data.get("categories") or {}
                if not isinstance(categories, dict):
                    raise StorageError(f"'categories' must be a mapping in {path}",
                                       {"path": str(path)})
                self._metadata = {
                    "title": data.get("title"),
                    "introduction": (data.get("introduction") or "").strip(),
                    "categories": {str(k): str(v).strip() for k, v in categories.items()},
                }
            return dict(self._metadata)

    def reload(self) -> None:
        """Drop cached entries so the next access re-reads the files."""
        with self._lock:
            self._patterns = None
            self._metadata = None

    def _load(self) -> Dict[str, Pattern]:
        if self._patterns is not None:
            return self._patterns

        with self._lock:
            if self._patterns is not None:
                return self._patterns

            patterns_dir = self.data_dir / PATTERNS_DIR
            if not patterns_dir.is_dir():
                raise StorageError(f"Pattern directory not found: {patterns_dir}",
                                   {"path": str(patterns_dir)})

            loaded: Dict[str, Pattern] = {}
            sources: Dict[str, Path] = {}
            for path in sorted(patterns_dir.glob("*.y*ml")):
                pattern = self._load_pattern(path)
                if pattern.slug in loaded:
                    raise PatternValidationError(
                        str(path),
                        [f"duplicate slug '{pattern.slug}', already defined in {sources[pattern.slug].name}"],
                        slug=pattern.slug,
                    )
                loaded[pattern.slug] = pattern
                sources[pattern.slug] = path

            self._logger.info("Loaded catalogue entries", count=len(loaded),
                              data_dir=str(self.data_dir))
            self._patterns = loaded
            return loaded

    def _load_pattern(self, path: Path) -> Pattern:
        data = self._read_yaml(path)
        try:
            return Pattern.model_validate(data)
        except PydanticValidationError as e:
            slug = data.get("slug") if isinstance(data.get("slug"), str) else None
            raise PatternValidationError(str(path), format_validation_errors(e), slug=slug) from e

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise StorageError(f"Invalid YAML in {path}: {e}", {"path": str(path)}) from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}", {"path": str(path)}) from e

        if not isinstance(data, dict):
            raise StorageError(f"{path} must contain a mapping", {"path": str(path)})
        return data
