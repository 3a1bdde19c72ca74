import pytest

from repofetch.info.churn import (
    ChurnInfo,
    FileChurn,
    compute_file_churns,
    glob_to_regex,
    shorten_file_path,
)
from repofetch.numbers import NumberSeparator


def test_display_file_churn():
    churn = FileChurn("path/to/file.txt", 50, NumberSeparator.PLAIN)
    assert str(churn) == "\u2026/to/file.txt 50"


def test_churn_info_value_with_two_file_churns():
    info = ChurnInfo(
        [
            FileChurn("path/to/file.txt", 50, NumberSeparator.PLAIN),
            FileChurn("file_2.txt", 30, NumberSeparator.PLAIN),
        ],
        5,
    )
    assert "\u2026/to/file.txt 50" in info.value()
    assert "file_2.txt 30" in info.value()


def test_churn_info_title():
    assert ChurnInfo([], 5).title() == "Churn (5)"


def test_churn_info_value_indents_continuation_lines():
    info = ChurnInfo(
        [
            FileChurn("a.txt", 2, NumberSeparator.PLAIN),
            FileChurn("b.txt", 1, NumberSeparator.PLAIN),
        ],
        5,
    )
    first, second = info.value().split("\n")
    assert first == "a.txt 2"
    assert second == " " * (len(info.title()) + 2) + "b.txt 1"


def test_truncate_file_path():
    assert shorten_file_path("path/to/file.txt", 3) == "path/to/file.txt"
    assert shorten_file_path("another/file.txt", 2) == "another/file.txt"
    assert shorten_file_path("file.txt", 1) == "file.txt"
    assert shorten_file_path("path/to/file.txt", 2) == "\u2026/to/file.txt"
    assert shorten_file_path("another/file.txt", 1) == "\u2026/file.txt"
    assert shorten_file_path("file.txt", 0) == "file.txt"


def _counts():
    return {
        "path/to/file1.txt": 2,
        "path/to/file2.txt": 5,
        "path/to/file3.txt": 3,
        "path/to/file4.txt": 7,
        "foo/x/y/file.txt": 70,
        "foo/x/file.txt": 10,
    }


def test_compute_file_churns():
    separator = NumberSeparator.COMMA
    globs = ["foo/**/file.txt", "path/to/file2.txt"]
    actual = compute_file_churns(_counts(), 3, globs, separator)
    assert actual == [
        FileChurn("path/to/file4.txt", 7, separator),
        FileChurn("path/to/file3.txt", 3, separator),
        FileChurn("path/to/file1.txt", 2, separator),
    ]


def test_compute_file_churns_without_excludes_is_sorted():
    churns = compute_file_churns(_counts(), 10, [], NumberSeparator.PLAIN)
    counts = [c.nbr_of_commits for c in churns]
    assert counts == sorted(counts, reverse=True)
    assert len(churns) == len(_counts())


def test_from_counts_keeps_pool_size():
    info = ChurnInfo.from_counts(_counts(), 42, 1, [], NumberSeparator.PLAIN)
    assert info.churn_pool_size == 42
    assert [c.file_path for c in info.file_churns] == ["foo/x/y/file.txt"]


@pytest.mark.parametrize(
    ("glob", "path", "matches"),
    [
        ("foo/**/file.txt", "foo/x/file.txt", True),
        ("foo/**/file.txt", "foo/x/y/file.txt", True),
        ("foo/**/file.txt", "foo/file.txt", True),
        ("foo/**/file.txt", "bar/x/file.txt", False),
        ("**/file.txt", "file.txt", True),
        ("*.rs", "src/main.rs", True),
        ("*.rs", "main.py", False),
        ("file?.txt", "file1.txt", True),
        ("file[!0-9].txt", "file1.txt", False),
        ("*.{md,txt}", "notes.txt", True),
        ("*.{md,txt}", "notes.rs", False),
    ],
)
def test_glob_to_regex(glob, path, matches):
    assert (glob_to_regex(glob).fullmatch(path) is not None) is matches


@pytest.mark.parametrize("glob", ["file[abc", "{a,b", "a}", "{a,{b}}", "trailing\\"])
def test_glob_to_regex_rejects_malformed(glob):
    with pytest.raises(ValueError):
        glob_to_regex(glob)


def test_compute_file_churns_rejects_malformed_glob():
    with pytest.raises(ValueError):
        compute_file_churns(_counts(), 3, ["[oops"], NumberSeparator.PLAIN)