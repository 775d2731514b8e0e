"""State: a document's publish workflow changes with its current state."""
from abc import ABC, abstractmethod
from typing import List


class DocumentState(ABC):
    name = "base"

    @abstractmethod
    def publish(self, document: "Document") -> str:
        ...

    def reject(self, document: "Document") -> str:
        return f"cannot reject a {self.name} document"


class Draft(DocumentState):
    name = "draft"

    def publish(self, document: "Document") -> str:
        document.state = Moderation()
        return "sent to moderation"


class Moderation(DocumentState):
    name = "moderation"

    def publish(self, document: "Document") -> str:
        document.state = Published()
        return "published"

    def reject(self, document: "Document") -> str:
        document.state = Draft()
        return "returned to draft"


class Published(DocumentState):
    name = "published"

    def publish(self, document: "Document") -> str:
        return "already published"


class Document:
    """Context: delegates behaviour to its current state object."""

    def __init__(self):
        self.state: DocumentState = Draft()

    def publish(self) -> str:
        return self.state.publish(self)

    def reject(self) -> str:
        return self.state.reject(self)


def demo() -> List[str]:
    document = Document()
    lines = [document.publish(), document.reject(), document.publish(),
             document.publish(), document.publish()]
    lines.append(f"final state: {document.state.name}")
    return lines
