"""A book model assembled with a builder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Book:
    id: int
    name: str = ""
    price: float = 0.0

    @classmethod
    def builder(cls, book_id: int) -> BookBuilder:
        """Start building a book with the given id."""
        return BookBuilder(book_id)


class BookBuilder:
    """Collects book fields and builds a :class:`Book`."""

    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        self.price = 0.0

    def set_price(self, price: float) -> BookBuilder:
        self.price = price
        return self

    def build(self) -> Book:
        """Build the book; a price that is not positive is left at zero."""
        book = Book(id=self.book_id)
        if self.price > 0:
            book.price = self.price
        return book