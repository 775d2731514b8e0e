"""Decorator: wrap a data source to add compression and encoding."""
import base64
import zlib
from abc import ABC, abstractmethod
from typing import List


class DataSource(ABC):
    @abstractmethod
    def write(self, data: bytes) -> bytes:
        ...

    @abstractmethod
    def read(self, data: bytes) -> bytes:
        ...


class PlainSource(DataSource):
    def write(self, data: bytes) -> bytes:
        return data

    def read(self, data: bytes) -> bytes:
        return data


class DataSourceDecorator(DataSource):
    """Forwards to the wrapped component; subclasses add behaviour."""

    def __init__(self, wrapped: DataSource):
        self._wrapped = wrapped

    def write(self, data: bytes) -> bytes:
        return self._wrapped.write(data)

    def read(self, data: bytes) -> bytes:
        return self._wrapped.read(data)


class CompressionDecorator(DataSourceDecorator):
    def write(self, data: bytes) -> bytes:
        return super().write(zlib.compress(data))

    def read(self, data: bytes) -> bytes:
        return zlib.decompress(super().read(data))


class EncodingDecorator(DataSourceDecorator):
    def write(self, data: bytes) -> bytes:
        return super().write(base64.b64encode(data))

    def read(self, data: bytes) -> bytes:
        return base64.b64decode(super().read(data))


def demo() -> List[str]:
    source = EncodingDecorator(CompressionDecorator(PlainSource()))
    stored = source.write(b"design patterns " * 4)
    return [
        f"stored {len(stored)} bytes",
        f"restored: {source.read(stored)[:15].decode()}...",
    ]
