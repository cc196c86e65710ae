"""
迭代器模式示範：書籍集合的顯式迭代器與 Python 迭代協定。
"""
from dataclasses import dataclass
from typing import Iterator, List

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


@dataclass(frozen=True)
class Book:
    title: str
    author: str


class BookIterator:
    """顯式的 has_next()/next() 迭代器。"""

    def __init__(self, books: List[Book]):
        self._books = books
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._books)

    def next(self) -> Book:
        if not self.has_next():
            raise IndexError("No more elements")
        book = self._books[self._position]
        self._position += 1
        return book


class BookCollection:
    def __init__(self):
        self._books: List[Book] = []

    def add_book(self, book: Book) -> None:
        self._books.append(book)

    def create_iterator(self) -> BookIterator:
        return BookIterator(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)


class IteratorPatternDemo(PatternDemo):
    name = "Iterator"
    description = "Provides a way to access elements of a collection sequentially."
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Book Collection Iterator Example")

        library = BookCollection()
        library.add_book(Book("Design Patterns", "GoF"))
        library.add_book(Book("Clean Code", "Robert Martin"))
        library.add_book(Book("Refactoring", "Martin Fowler"))

        say("Iterating through books:")
        iterator = library.create_iterator()
        while iterator.has_next():
            book = iterator.next()
            say(f"  {book.title} by {book.author}")

        say("\nUsing for loop (built-in iterator):")
        for book in library:
            say(f"  {book.title} by {book.author}")
