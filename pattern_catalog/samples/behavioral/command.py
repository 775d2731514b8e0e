"""Command: text edits as objects that can be executed and undone."""
from abc import ABC, abstractmethod
from typing import List


class TextDocument:
    """Receiver."""

    def __init__(self, text: str = ""):
        self.text = text


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        ...

    @abstractmethod
    def undo(self) -> None:
        ...


class AppendCommand(Command):
    def __init__(self, document: TextDocument, suffix: str):
        self.document = document
        self.suffix = suffix

    def execute(self) -> None:
        self.document.text += self.suffix

    def undo(self) -> None:
        self.document.text = self.document.text[:-len(self.suffix)]


class ReplaceCommand(Command):
    def __init__(self, document: TextDocument, old: str, new: str):
        self.document = document
        self.old = old
        self.new = new
        self._previous = ""

    def execute(self) -> None:
        self._previous = self.document.text
        self.document.text = self.document.text.replace(self.old, self.new)

    def undo(self) -> None:
        self.document.text = self._previous


class Editor:
    """Invoker: runs commands and keeps the undo history."""

    def __init__(self):
        self.history: List[Command] = []

    def run(self, command: Command) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> bool:
        if not self.history:
            return False
        self.history.pop().undo()
        return True


def demo() -> List[str]:
    document = TextDocument("hello")
    editor = Editor()
    editor.run(AppendCommand(document, " world"))
    editor.run(ReplaceCommand(document, "hello", "goodbye"))
    lines = [f"after edits: {document.text}"]
    editor.undo()
    lines.append(f"after undo: {document.text}")
    return lines
