"""Unit tests for core/extract.py"""

from codderlly.core.extract import body_stats, fence_language, heading_level


def test_body_stats_headings(sample_tokens):
    stats = body_stats(sample_tokens)
    assert stats.headings == [(1, "Title"), (2, "Part two")]


def test_body_stats_code_languages_skip_unlabeled(sample_tokens):
    assert body_stats(sample_tokens).code_languages == ["python"]


def test_body_stats_word_count_excludes_fenced_code(sample_tokens):
    """Headings and prose count; fenced code does not; inline code does."""
    assert body_stats(sample_tokens).word_count == 10


def test_body_stats_reading_time(sample_tokens):
    assert body_stats(sample_tokens).reading_time == 1
    assert body_stats(sample_tokens, words_per_minute=3).reading_time == 4


def test_body_stats_empty_body(parser):
    stats = body_stats(parser.parse(""))
    assert stats.word_count == 0
    assert stats.reading_time == 1
    assert stats.headings == []


def test_body_stats_languages_deduplicated(parser):
    md = "```dart\na\n```\n\n```kotlin\nb\n```\n\n```dart title=x\nc\n```\n"
    assert body_stats(parser.parse(md)).code_languages == ["dart", "kotlin"]


def test_heading_level(parser):
    tokens = parser.parse("### Third\n\ntext\n")
    assert heading_level(tokens[0]) == 3
    assert heading_level(tokens[3]) is None


def test_fence_language(parser):
    [fence] = parser.parse("```swift\nlet x = 1\n```\n")
    assert fence_language(fence) == "swift"
    [plain] = parser.parse("```\nx\n```\n")
    assert fence_language(plain) is None


def test_body_stats_intraword_emphasis_is_one_word(parser):
    assert body_stats(parser.parse("foo*bar*baz\n")).word_count == 1


def test_body_stats_line_breaks_separate_words(parser):
    assert body_stats(parser.parse("one\ntwo  \nthree\n")).word_count == 3
