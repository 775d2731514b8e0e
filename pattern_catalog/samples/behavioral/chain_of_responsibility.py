"""Chain of Responsibility: support tickets pass along a linked chain of handlers."""
from typing import List, Optional


class SupportHandler:
    """Base handler: forwards to the next link when it cannot handle a ticket."""

    def __init__(self):
        self._next: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        self._next = handler
        return handler

    def handle(self, severity: int) -> Optional[str]:
        if self._next is not None:
            return self._next.handle(severity)
        return None


class FrontDesk(SupportHandler):
    def handle(self, severity: int) -> Optional[str]:
        if severity <= 1:
            return "front desk resolved the ticket"
        return super().handle(severity)


class Engineer(SupportHandler):
    def handle(self, severity: int) -> Optional[str]:
        if severity <= 3:
            return "engineer resolved the ticket"
        return super().handle(severity)


class Manager(SupportHandler):
    def handle(self, severity: int) -> Optional[str]:
        if severity <= 5:
            return "manager resolved the ticket"
        return super().handle(severity)


def build_chain() -> SupportHandler:
    head = FrontDesk()
    head.set_next(Engineer()).set_next(Manager())
    return head


def demo() -> List[str]:
    chain = build_chain()
    return [f"severity {s}: {chain.handle(s) or 'unhandled'}" for s in (1, 3, 5, 9)]
