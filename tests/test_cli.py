import pytest
from rich.console import Console

from keyline.cli import formatter as formatter_module
from keyline.cli import main as cli_module
from keyline.cli.main import KeyLineCLI


@pytest.fixture
def output(monkeypatch):
    """Routes all rich output into a recording console."""
    console = Console(record=True, width=160, color_system=None)
    monkeypatch.setattr(cli_module, "console", console)
    monkeypatch.setattr(formatter_module, "console", console)
    return console


def run(argv, output):
    cli = KeyLineCLI()
    code = cli.run(argv)
    return code, output.export_text()


def test_no_arguments_prints_help(output, capsys):
    code, text = run([], output)
    assert code == 0
    assert "KeyLine" in text
    assert "scan" in capsys.readouterr().out


def test_scan_outline(tmp_path, output):
    source = tmp_path / "doc.txt"
    source.write_text("# heading\n@title Hello\n\n[body\nplain\n", encoding="utf-8")
    code, text = run(["scan", str(source), "--section-prefix", "["], output)
    assert code == 0
    assert "title" in text and "Hello" in text
    assert "section" in text and "body" in text
    assert "Total      5" in text


def test_scan_with_config_file(tmp_path, output):
    config = tmp_path / "prefixes.yaml"
    config.write_text('key_prefix: ">>"\ncomment_prefix: "//"\n', encoding="utf-8")
    source = tmp_path / "doc.txt"
    source.write_text("// c\n>>key arg\n", encoding="utf-8")
    code, text = run(["scan", str(source), "--config", str(config)], output)
    assert code == 0
    assert "comment" in text and "key" in text


def test_scan_bad_config(tmp_path, output):
    config = tmp_path / "prefixes.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")
    source = tmp_path / "doc.txt"
    source.write_text("@k\n", encoding="utf-8")
    code, text = run(["scan", str(source), "--config", str(config)], output)
    assert code == 2
    assert "Configuration error" in text


def test_scan_missing_file(tmp_path, output):
    code, text = run(["scan", str(tmp_path / "nope.txt")], output)
    assert code == 1
    assert "not found" in text


def test_demo_success(tmp_path, output):
    source = tmp_path / "tour.txt"
    source.write_text("@print hi\n@second\n", encoding="utf-8")
    code, text = run(["demo", "sections", str(source)], output)
    assert code == 0
    assert "*** hi ***" in text
    assert "without errors" in text


def test_demo_failure_shows_message(tmp_path, output):
    source = tmp_path / "magic.txt"
    source.write_text(">> hi\n@sec 7\n", encoding="utf-8")
    code, text = run(["--locale", "de", "demo", "magic", str(source)], output)
    assert code == 1
    assert ">>> hi" in text
    assert 'Fehler in Zeile 2: Der Abschnitt "7" ist nicht definiert.' in text


def test_scan_keeps_form_feed_inside_line(tmp_path, output):
    source = tmp_path / "doc.txt"
    source.write_bytes("@a one\x0ctwo\r\n@b x\n".encode("utf-8"))
    code, text = run(["scan", str(source)], output)
    assert code == 0
    assert "Total      2" in text
