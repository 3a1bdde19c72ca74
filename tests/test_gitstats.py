import re

import pytest

from repofetch.gitstats import (
    DEFAULT_BOT_PATTERN,
    GitMetrics,
    Sig,
    get_no_bots_regex,
    is_bot,
    should_break,
    update_signature_counts,
)


def test_get_no_bots_regex_disabled():
    assert get_no_bots_regex(None) is None


def test_get_no_bots_regex_default():
    assert get_no_bots_regex(True).pattern == r"(?:-|\s)[Bb]ot$|\[[Bb]ot\]"


def test_get_no_bots_regex_custom():
    assert get_no_bots_regex("foo").pattern == "foo"


def test_get_no_bots_regex_invalid_pattern():
    with pytest.raises(re.error):
        get_no_bots_regex("(")


@pytest.mark.parametrize(
    "author_name, expected",
    [
        ("John Doe", False),
        ("dependabot[bot]", True),
        ("foo bot", True),
        ("foo-bot", True),
        ("bot", False),
    ],
)
def test_is_bot(author_name, expected):
    assert is_bot(author_name, get_no_bots_regex(True)) is expected


def test_is_bot_accepts_bytes():
    assert is_bot(b"dependabot[bot]", get_no_bots_regex(True)) is True


def test_is_bot_without_pattern():
    assert is_bot("dependabot[bot]", None) is False


@pytest.mark.parametrize(
    "ended, total, pool, computed, expected",
    [
        (True, 10, 8, 4, False),
        (False, 10, 10, 10, False),
        (True, 10, 5, 5, True),
        (True, 5, 10, 5, True),
        (True, 5, 10, 3, False),
        (True, 10, 5, 3, False),
        (True, 100, 30, 90, True),
    ],
)
def test_should_break(ended, total, pool, computed, expected):
    assert should_break(ended, total, pool, computed) is expected


def test_should_break_without_pool_size_after_traversal():
    assert should_break(True, 10, None, 0) is True
    assert should_break(False, 10, None, 0) is False


def test_update_signature_counts_skips_bots():
    counts = {}
    regex = get_no_bots_regex(True)
    human = Sig("John Doe", "johndoe@example.com")
    bot = Sig("dependabot[bot]", "bot@example.com")
    update_signature_counts(human, regex, counts)
    update_signature_counts(human, regex, counts)
    update_signature_counts(bot, regex, counts)
    assert counts == {human: 2}


def test_update_signature_counts_without_filter():
    counts = {}
    bot = Sig("dependabot[bot]", "bot@example.com")
    update_signature_counts(bot, None, counts)
    assert counts == {bot: 1}


def test_metrics_totals():
    by_sig = {
        Sig("John Doe", "johndoe@example.com"): 30,
        Sig("Jane Doe", "janedoe@example.com"): 20,
    }
    metrics = GitMetrics.from_counts(by_sig, {"a.txt": 3}, 2, 100, 200)
    assert metrics.total_number_of_commits == sum(by_sig.values())
    assert metrics.total_number_of_authors == len(by_sig)
    assert metrics.number_of_commits_by_file_path == {"a.txt": 3}
    assert metrics.churn_pool_size == 2
    assert metrics.time_of_first_commit == 100
    assert metrics.time_of_most_recent_commit == 200


def test_metrics_missing_time_defaults_both():
    metrics = GitMetrics.from_counts({}, {}, 0, 100, None)
    assert metrics.time_of_first_commit == 0
    assert metrics.time_of_most_recent_commit == 0
    assert metrics.total_number_of_commits == 0


def test_sig_is_hashable_and_ordered():
    a = Sig("Alice", "alice@example.com")
    b = Sig("Bob", "bob@example.com")
    assert sorted([b, a]) == [a, b]
    assert {a: 1}[Sig("Alice", "alice@example.com")] == 1


def test_default_pattern_constant_used():
    assert get_no_bots_regex(True).pattern == DEFAULT_BOT_PATTERN