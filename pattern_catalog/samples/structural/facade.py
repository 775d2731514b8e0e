"""Facade: one call to publish a video drives several subsystems."""
from typing import List


class VideoEncoder:
    def encode(self, filename: str, codec: str) -> str:
        return f"{filename.rsplit('.', 1)[0]}.{codec}"


class ThumbnailGenerator:
    def generate(self, filename: str) -> str:
        return f"{filename}.jpg"


class StorageClient:
    def __init__(self):
        self.uploaded: List[str] = []

    def upload(self, path: str) -> str:
        self.uploaded.append(path)
        return f"https://cdn.example.com/{path}"


class VideoPublisher:
    """The facade: hides encoder, thumbnail and storage details."""

    def __init__(self, encoder=None, thumbnails=None, storage=None):
        self._encoder = encoder or VideoEncoder()
        self._thumbnails = thumbnails or ThumbnailGenerator()
        self._storage = storage or StorageClient()

    def publish(self, filename: str) -> str:
        encoded = self._encoder.encode(filename, "mp4")
        thumbnail = self._thumbnails.generate(encoded)
        self._storage.upload(thumbnail)
        return self._storage.upload(encoded)


def demo() -> List[str]:
    storage = StorageClient()
    url = VideoPublisher(storage=storage).publish("holiday.mov")
    return [f"published: {url}", f"uploads: {len(storage.uploaded)}"]
