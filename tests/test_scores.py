import pytest

from iksoks.scores import PlayerScore, ScoreBook, format_scores, sort_scores


@pytest.fixture
def book(tmp_path):
    return ScoreBook(tmp_path / "rezultati.txt")


def test_missing_file_reads_empty_and_names_free(book):
    assert book.read_scores() == []
    assert book.is_name_available("ana")


def test_append_writes_record_format(book):
    book.append([PlayerScore("ana", 3), PlayerScore("bob", 0)])
    assert book.path.read_text() == "-ana 3\n-bob 0\n"
    assert book.read_scores() == [PlayerScore("ana", 3), PlayerScore("bob", 0)]


def test_add_then_duplicate_is_ignored(book):
    assert book.add("ana", 2)
    assert not book.add("ana", 7)
    assert book.read_scores() == [PlayerScore("ana", 2)]
    assert not book.is_name_available("ana")
    assert book.is_name_available("bob")


def test_read_skips_non_records_and_malformed(book):
    book.path.write_text("header\n-ana 4\n-broken\n-bob x\n-cid 1\n")
    assert book.read_scores() == [PlayerScore("ana", 4), PlayerScore("cid", 1)]


def test_update_replaces_matching_record(book):
    book.append([PlayerScore("ana", 1), PlayerScore("bob", 2)])
    assert book.update("bob", 9)
    assert book.read_scores() == [PlayerScore("ana", 1), PlayerScore("bob", 9)]


def test_update_matches_substring(book):
    book.append([PlayerScore("anabel", 1), PlayerScore("bob", 2)])
    assert book.update("ana", 5)
    assert book.read_scores() == [PlayerScore("ana", 5), PlayerScore("bob", 2)]


def test_update_without_match_leaves_file(book):
    book.append([PlayerScore("ana", 1)])
    before = book.path.read_text()
    assert not book.update("zed", 5)
    assert book.path.read_text() == before
    assert list(book.path.parent.iterdir()) == [book.path]


def test_update_missing_file_raises(book):
    with pytest.raises(FileNotFoundError):
        book.update("ana", 1)


def test_delete_exact_name_only(book):
    book.append([PlayerScore("ana", 1), PlayerScore("anabel", 2), PlayerScore("ana", 3)])
    assert book.delete("ana")
    assert book.read_scores() == [PlayerScore("anabel", 2)]
    assert not book.delete("ana")


def test_delete_missing_file_raises(book):
    with pytest.raises(FileNotFoundError):
        book.delete("ana")


def test_sort_scores_descending():
    scores = [PlayerScore("a", 1), PlayerScore("b", 5), PlayerScore("c", 3), PlayerScore("d", 5)]
    ordered = sort_scores(scores)
    assert [s.score for s in ordered] == sorted((s.score for s in scores), reverse=True)
    assert sorted(s.name for s in ordered) == ["a", "b", "c", "d"]


def test_format_scores_ranks_rows():
    text = format_scores([PlayerScore("ana", 1), PlayerScore("bob", 4)])
    lines = text.splitlines()
    assert "=== REZULTATI ===" in text
    assert lines[-2].startswith(" 1. Igrac: bob ")
    assert lines[-1].endswith("| Pobjede: 1")