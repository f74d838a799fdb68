import io
import json

from prefixtrie import PrefixTrie, from_word_list
from prefixtrie.cli import main, run_commands


def _run(trie, *lines):
    out = io.StringIO()
    trie = run_commands(trie, lines, out)
    return trie, out.getvalue().splitlines()


def test_add_lookup_prefix():
    t, out = _run(PrefixTrie(), "add cat", "lookup cat", "lookup ca", "prefix ca", "prefix dog")

    assert out == ["  Added 'cat'", "yes", "no", "yes", "no"]
    assert t.get_words() == ["cat"]


def test_remove_and_words():
    t, out = _run(from_word_list(["cat", "car"]), "remove cat", "words")
    assert out[-1] == "car"
    assert t.get_words() == ["car"]


def test_dump_and_load():
    t, out = _run(from_word_list(["ab"]), "dump")
    assert json.loads(out[0]) == {"a": {"b": {"^": 1}}}

    t, out = _run(t, 'load {"x": {"^": 1}}', "words")
    assert out == ["  Loaded 1 words.", "x"]


def test_bad_load_is_reported():
    t, out = _run(from_word_list(["keep"]), "load {oops", "load", "words")

    assert out[0].startswith("  Invalid.")
    assert out[1].startswith("  Invalid.")
    assert out[2] == "keep"


def test_clear_returns_new_trie():
    t, out = _run(from_word_list(["cat"]), "clear")
    assert out == ["  Trie cleared."]
    assert t.get_words() == []


def test_done_stops_processing():
    t, out = _run(PrefixTrie(), "add a", "done", "add b")
    assert t.get_words() == ["a"]


def test_unknown_and_missing_argument():
    t, out = _run(PrefixTrie(), "frobnicate x", "add", "", "help")

    assert out[0].startswith("  Unknown command 'frobnicate'")
    assert out[1].startswith("  Format:")
    assert out[2] == "Commands:"


def test_main_with_word_list(tmp_path, monkeypatch, capsys):
    path = tmp_path / "words.txt"
    path.write_text("cat\ndog\n", encoding="utf-8")
    commands = iter(["lookup dog", "prefix ca"])

    def fake_input(prompt=""):
        try:
            return next(commands)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    assert main(["--words", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:3] == ["yes", "yes"]


def test_main_rejects_bad_json_file(tmp_path):
    path = tmp_path / "trie.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert main(["--json", str(path)]) == 1


def test_run_commands_writes_to_current_stdout(capsys):
    run_commands(from_word_list(["cat"]), ["lookup cat", "prefix dog"])
    assert capsys.readouterr().out.splitlines() == ["yes", "no"]


def test_main_with_json_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "trie.json"
    path.write_text(from_word_list(["dog"]).dump_json(), encoding="utf-8")
    commands = iter(["words"])

    def fake_input(prompt=""):
        try:
            return next(commands)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    assert main(["--json", str(path)]) == 0
    assert capsys.readouterr().out.splitlines()[1] == "dog"


def test_main_missing_files(tmp_path, caplog):
    missing = str(tmp_path / "nope.txt")

    assert main(["--words", missing]) == 1
    assert main(["--json", missing]) == 1
    assert "No such file" in caplog.text
