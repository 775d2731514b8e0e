"""Proxy: defer loading an expensive image and guard access to it."""
from abc import ABC, abstractmethod
from typing import List, Optional


class Image(ABC):
    @abstractmethod
    def display(self) -> str:
        ...


class HighResolutionImage(Image):
    loads = 0

    def __init__(self, path: str):
        self.path = path
        HighResolutionImage.loads += 1

    def display(self) -> str:
        return f"displaying {self.path}"


class ImageProxy(Image):
    """Creates the real image on first use and checks permissions."""

    def __init__(self, path: str, allowed: bool = True):
        self.path = path
        self._allowed = allowed
        self._real: Optional[HighResolutionImage] = None

    @property
    def loaded(self) -> bool:
        return self._real is not None

    def display(self) -> str:
        if not self._allowed:
            raise PermissionError(f"access to {self.path} denied")
        if self._real is None:
            self._real = HighResolutionImage(self.path)
        return self._real.display()


def demo() -> List[str]:
    HighResolutionImage.loads = 0
    gallery = [ImageProxy("a.png"), ImageProxy("b.png")]
    lines = [f"loaded before display: {HighResolutionImage.loads}"]
    lines.append(gallery[0].display())
    lines.append(gallery[0].display())
    lines.append(f"loaded after display: {HighResolutionImage.loads}")
    return lines
