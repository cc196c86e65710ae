"""
責任鏈模式示範：依優先等級轉交的客服工單。
"""
from dataclasses import dataclass
from typing import Optional

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


@dataclass(frozen=True)
class SupportTicket:
    issue: str
    priority: int


class SupportHandler:
    """處理者基底 class，無法處理時交給下一個處理者。"""

    def __init__(self):
        self._next_handler: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        self._next_handler = handler
        return handler

    def handle(self, ticket: SupportTicket) -> None:
        if self._next_handler is not None:
            self._next_handler.handle(ticket)
        else:
            say("No handler available for this ticket")


class Level1Support(SupportHandler):
    def handle(self, ticket):
        if ticket.priority <= 1:
            say("Level 1 Support: Handling basic issue")
        else:
            super().handle(ticket)


class Level2Support(SupportHandler):
    def handle(self, ticket):
        if ticket.priority == 2:
            say("Level 2 Support: Handling technical issue")
        else:
            super().handle(ticket)


class Level3Support(SupportHandler):
    def handle(self, ticket):
        if ticket.priority >= 3:
            say("Level 3 Support: Handling critical issue")
        else:
            super().handle(ticket)


class ChainOfResponsibilityPatternDemo(PatternDemo):
    name = "Chain of Responsibility"
    description = "Passes requests along a chain of handlers until one handles it."
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Support Ticket Chain Example")

        chain = Level1Support()
        chain.set_next(Level2Support()).set_next(Level3Support())

        tickets = [
            SupportTicket("Password reset", 1),
            SupportTicket("Server crash", 3),
            SupportTicket("App bug", 2),
            SupportTicket("Security breach", 3),
        ]
        for ticket in tickets:
            say(f"\nProcessing: {ticket.issue} (Level {ticket.priority})")
            chain.handle(ticket)
