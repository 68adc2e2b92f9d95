import pytest

from keyline import LinearParser, ParserConfig


@pytest.fixture
def calls():
    """Records (key, argument, line) for every handler invocation."""
    return []


@pytest.fixture
def recorder(calls):
    def make(name):
        def handler(argument, cursor):
            calls.append((name, argument, cursor.line_number))
        return handler
    return make


@pytest.fixture
def flat_parser():
    """No sections: '#' comments and '@' keys."""
    return LinearParser(ParserConfig(key_prefix="@", comment_prefix="#"))


@pytest.fixture
def sectioned_parser():
    """'[' switches sections, starting in 'head'."""
    parser = LinearParser(ParserConfig(key_prefix="@", comment_prefix="#",
                                       section_prefix="[", start_section="head"))
    parser.add_section("head")
    parser.add_section("body")
    return parser
