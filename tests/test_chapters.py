from parallab.chapters import Book, BookChapter, list_book_chapters, main


def _books():
    return [
        Book("The Great Gatsby", "F. Scott Fitzgerald", ["Chapter 1", "Chapter 2"]),
        Book("1984", "George Orwell", ["Chapter 1", "Chapter 2", "Chapter 3"]),
        Book("To Kill a Mockingbird", "Harper Lee", ["Chapter 1"]),
    ]


def test_str_format():
    chapter = BookChapter("The Great Gatsby", "F. Scott Fitzgerald", "Chapter 1")
    assert str(chapter) == "The Great Gatsby by F. Scott Fitzgerald - Chapter 1"


def test_all_chapters_listed_in_order():
    books = _books()
    chapters = list(list_book_chapters(books))
    expected = [
        (book.title, book.author, title) for book in books for title in book.chapters
    ]
    assert [(c.book_title, c.book_author, c.chapter_title) for c in chapters] == expected


def test_empty_input_yields_nothing():
    assert list(list_book_chapters([])) == []


def test_book_without_chapters_is_skipped():
    books = [Book("Empty", "Nobody"), Book("1984", "George Orwell", ["Chapter 1"])]
    chapters = list(list_book_chapters(books))
    assert [c.book_title for c in chapters] == ["1984"]


def test_generation_is_lazy():
    books = [Book("1984", "George Orwell", ["Chapter 1"])]
    chapters = list_book_chapters(books)
    books.append(Book("To Kill a Mockingbird", "Harper Lee", ["Chapter 1"]))
    assert [c.book_title for c in chapters] == ["1984", "To Kill a Mockingbird"]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "The Great Gatsby by F. Scott Fitzgerald - Chapter 1"
    assert lines[-1] == "To Kill a Mockingbird by Harper Lee - Chapter 1"
    assert len(lines) == sum(len(b.chapters) for b in _books())