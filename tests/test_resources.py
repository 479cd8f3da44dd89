import pytest

from libraryhub.resources import (
    Article,
    Book,
    DigitalResource,
    Resource,
    Thesis,
    create_resource,
    resource_from_csv,
)

ALL_KINDS = [Book, Thesis, DigitalResource, Article]


def test_book_to_csv_format():
    book = Book("B1", "Dune", "Herbert", 1965)
    assert book.to_csv() == "Book,B1,Dune,Herbert,1965,1"


def test_unavailable_flag_in_csv():
    article = Article("A7", "Notes", "Knuth", 1974, available=False)
    assert article.to_csv().endswith(",0")


def test_digital_tag_differs_from_label():
    digital = DigitalResource("D1", "Guide", "Smith", 2020)
    assert digital.to_csv().startswith("Digital,")
    assert digital.describe() == "Digital Resource: Guide by Smith (2020)"


def test_describe_book():
    assert Book("B2", "Emma", "Austen", 1815).describe() == "Book: Emma by Austen (1815)"


def test_display_info_prints_description(capsys):
    thesis = Thesis("T1", "Graphs", "Lee", 2001)
    thesis.display_info()
    assert capsys.readouterr().out == thesis.describe() + "\n"


@pytest.mark.parametrize("kind", ALL_KINDS)
@pytest.mark.parametrize("available", [True, False])
def test_csv_round_trip(kind, available):
    original = kind("X9", "Some Title", "Some Author", 1990, available)
    line = original.to_csv()
    restored = kind.from_csv(line)
    assert restored == original
    assert restored.available is available
    assert resource_from_csv(line) == original


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_resource_from_csv_dispatches_by_tag(kind):
    original = kind("R1", "Title", "Author", 2010, False)
    restored = resource_from_csv(original.to_csv())
    assert type(restored) is kind
    assert restored == original


def test_resource_from_csv_unknown_tag_returns_none():
    assert resource_from_csv("Magazine,M1,Weekly,Staff,2020,1") is None


def test_class_from_csv_ignores_tag():
    book = Book.from_csv("Thesis,T3,Proofs,Erdos,1950,1")
    assert type(book) is Book
    assert (book.resource_id, book.title, book.author, book.year) == ("T3", "Proofs", "Erdos", 1950)


def test_from_csv_only_one_means_available():
    assert Book.from_csv("Book,B1,T,A,2000,yes").available is False
    assert Book.from_csv("Book,B1,T,A,2000,1").available is True


def test_from_csv_missing_flag_means_unavailable():
    book = Book.from_csv("Book,B1,T,A,2000")
    assert book.available is False
    assert book.year == 2000


def test_from_csv_year_reads_leading_integer():
    assert Article.from_csv("Article,A1,T,A,  1999abc,1").year == 1999


@pytest.mark.parametrize(
    "line",
    ["Book,B1,T,A,,1", "Book,B1,T,A,year,1", "Book,B1", "Book,B1,T,A,99999999999,1"],
)
def test_from_csv_bad_year_raises(line):
    with pytest.raises(ValueError):
        Book.from_csv(line)


@pytest.mark.parametrize(
    "kind_name, expected",
    [("book", Book), ("THESIS", Thesis), ("Digital", DigitalResource), ("article", Article)],
)
def test_create_resource_is_case_insensitive(kind_name, expected):
    resource = create_resource(kind_name, "I1", "Title", "Author", 2005)
    assert type(resource) is expected
    assert resource.available is True
    assert resource.year == 2005


def test_create_resource_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Invalid resource type"):
        create_resource("magazine", "M1", "T", "A", 2000)


def test_base_resource_cannot_be_created():
    with pytest.raises(TypeError):
        Resource("R1", "T", "A", 2000)


def test_different_kinds_with_same_fields_are_not_equal():
    assert (Book("X", "T", "A", 1) == Thesis("X", "T", "A", 1)) is False