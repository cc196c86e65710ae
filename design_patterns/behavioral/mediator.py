"""
中介者模式示範：使用者透過聊天室互相傳訊。
"""
from typing import List

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class ChatRoom:
    def __init__(self):
        self.users: List["User"] = []

    def add_user(self, user: "User") -> None:
        self.users.append(user)
        say(f"{user.name} joined the chat")

    def send_message(self, message: str, sender: "User") -> None:
        for user in self.users:
            if user is not sender:
                user.receive(message, sender.name)


class User:
    def __init__(self, name: str, mediator: ChatRoom):
        self.name = name
        self._mediator = mediator
        mediator.add_user(self)

    def send(self, message: str) -> None:
        say(f"{self.name}: {message}")
        self._mediator.send_message(message, self)

    def receive(self, message: str, sender_name: str) -> None:
        say(f"  {self.name} received from {sender_name}: {message}")


class MediatorPatternDemo(PatternDemo):
    name = "Mediator"
    description = "Defines how objects interact with each other through a mediator."
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Chat Room Mediator Example")

        chat_room = ChatRoom()
        alice = User("Alice", chat_room)
        bob = User("Bob", chat_room)
        charlie = User("Charlie", chat_room)

        alice.send("Hello everyone!")
        bob.send("Hi Alice!")
        charlie.send("Hey there!")
