"""
備忘錄模式示範：文字編輯器的復原紀錄。
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


@dataclass(frozen=True)
class EditorMemento:
    content: str
    timestamp: datetime = field(default_factory=datetime.now)


class TextEditor:
    def __init__(self):
        self.content = ""

    def write(self, text: str) -> None:
        self.content += text

    def save(self) -> EditorMemento:
        return EditorMemento(self.content)

    def restore(self, memento: EditorMemento) -> None:
        self.content = memento.content


class EditorHistory:
    """保存備忘錄的堆疊。"""

    def __init__(self):
        self._history: List[EditorMemento] = []

    def save(self, editor: TextEditor) -> None:
        self._history.append(editor.save())

    def undo(self, editor: TextEditor) -> bool:
        if not self._history:
            say("No more states to restore")
            return False
        editor.restore(self._history.pop())
        return True


class MementoPatternDemo(PatternDemo):
    name = "Memento"
    description = "Captures and restores an object's internal state without violating encapsulation."
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Text Editor Memento Example")

        editor = TextEditor()
        history = EditorHistory()

        editor.write("Hello")
        history.save(editor)
        say(f"Current: '{editor.content}'")

        editor.write(" World")
        history.save(editor)
        say(f"Current: '{editor.content}'")

        editor.write("!!!")
        say(f"Current: '{editor.content}'")

        say("\nUndoing last change:")
        history.undo(editor)
        say(f"Current: '{editor.content}'")

        say("\nUndoing again:")
        history.undo(editor)
        say(f"Current: '{editor.content}'")
