import pytest

from keyline import ConfigError, ParserConfig
from keyline.config import config_from_mapping, load_config


def test_load_yaml_config(tmp_path):
    path = tmp_path / "prefixes.yaml"
    path.write_text(
        'key_prefix: ">>"\n'
        'comment_prefix: "//"\n'
        'section_prefix: "@sec "\n'
        'start_section: "0"\n'
        'skip_empty_lines: false\n',
        encoding="utf-8",
    )
    config = load_config(path)
    assert config == ParserConfig(key_prefix=">>", comment_prefix="//", section_prefix="@sec ",
                                  start_section="0", skip_empty_lines=False)


def test_overrides_replace_file_values(tmp_path):
    path = tmp_path / "prefixes.yaml"
    path.write_text('key_prefix: "@"\ncomment_prefix: "#"\n', encoding="utf-8")
    config = load_config(path, {"comment_prefix": ";", "section_prefix": None})
    assert config.comment_prefix == ";"
    assert config.section_prefix is None


@pytest.mark.parametrize("content", [
    'comment_prefix: "#"\n',                    # key_prefix missing
    'key_prefix: "@"\ncolour: blue\n',          # unknown field
    'key_prefix: "@"\nskip_empty_lines: maybe\n',
    '- just\n- a list\n',
    'key_prefix: [unclosed\n',
])
def test_invalid_config_files(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize("kwargs", [
    {"key_prefix": ""},
    {"key_prefix": "@", "comment_prefix": ""},
    {"key_prefix": "@", "section_prefix": 3},
])
def test_parser_config_validation(kwargs):
    with pytest.raises(ConfigError):
        ParserConfig(**kwargs)


def test_ambiguous_sections_flag():
    assert config_from_mapping({"key_prefix": "@", "section_prefix": "@"}).ambiguous_sections
    assert not ParserConfig(key_prefix="@", section_prefix="[").ambiguous_sections
