import pytest

from keyline import ParserConfig
from keyline.core.models import LineKind
from keyline.parsing.classifier import LineClassifier


@pytest.fixture
def classifier():
    return LineClassifier(ParserConfig(key_prefix="@", comment_prefix="#", section_prefix="=="))


@pytest.mark.parametrize("line, kind", [
    ("", LineKind.BLANK),
    ("   \t", LineKind.BLANK),
    ("# note", LineKind.COMMENT),
    ("==intro", LineKind.SECTION),
    ("@title Hello", LineKind.KEY),
    ("plain text", LineKind.OTHER),
    (" @indented", LineKind.OTHER),
])
def test_priority_order(classifier, line, kind):
    assert classifier.classify(line).kind is kind


@pytest.mark.parametrize("line, key, argument", [
    ("@title Hello world", "title", "Hello world"),
    ("@title", "title", None),
    ("@title ", "title", None),
    ("@title\tTabbed  arg ", "title", "Tabbed  arg "),
    ("@ bare", "", "bare"),
    ("@", "", None),
])
def test_key_split_at_first_whitespace(classifier, line, key, argument):
    classified = classifier.classify(line, 7)
    assert classified.line_no == 7
    assert (classified.key, classified.argument) == (key, argument)


def test_section_id_is_text_after_prefix(classifier):
    assert classifier.classify("==intro part").section_id == "intro part"


def test_disabled_prefixes_and_empty_skip():
    classifier = LineClassifier(ParserConfig(key_prefix=">>", skip_empty_lines=False))
    assert classifier.classify("").kind is LineKind.OTHER
    assert classifier.classify("# not a comment").kind is LineKind.OTHER
    assert classifier.classify(">>k v").kind is LineKind.KEY


def test_comment_wins_over_key_prefix():
    classifier = LineClassifier(ParserConfig(key_prefix="/", comment_prefix="//"))
    assert classifier.classify("// remark").kind is LineKind.COMMENT
    assert classifier.classify("/key").kind is LineKind.KEY


def test_classify_all_numbers_lines_from_one(classifier):
    result = classifier.classify_all(["# c", "@k", "text"])
    assert [(c.line_no, c.kind) for c in result] == [
        (1, LineKind.COMMENT), (2, LineKind.KEY), (3, LineKind.OTHER),
    ]
