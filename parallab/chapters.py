"""Lazily list the chapters of a collection of books."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass
class Book:
    title: str
    author: str
    chapters: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BookChapter:
    book_title: str
    book_author: str
    chapter_title: str

    def __str__(self) -> str:
        return f"{self.book_title} by {self.book_author} - {self.chapter_title}"


def list_book_chapters(books: Iterable[Book]) -> Iterator[BookChapter]:
    """Yield every chapter of every book, in order."""
    for book in books:
        for chapter_title in book.chapters:
            yield BookChapter(book.title, book.author, chapter_title)


_SAMPLE_BOOKS = [
    Book("The Great Gatsby", "F. Scott Fitzgerald", ["Chapter 1", "Chapter 2"]),
    Book("1984", "George Orwell", ["Chapter 1", "Chapter 2", "Chapter 3"]),
    Book("To Kill a Mockingbird", "Harper Lee", ["Chapter 1"]),
]


def main(argv: list[str] | None = None) -> int:
    """Print the chapters of a small sample library."""
    for chapter in list_book_chapters(_SAMPLE_BOOKS):
        print(chapter)
    return 0


if __name__ == "__main__":
    sys.exit(main())