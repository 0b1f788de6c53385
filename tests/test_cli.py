# tests/test_cli.py - CLI smoke checks (one-shot commands and the shell)

import io
import json

import pytest
from rich.console import Console

from word_index.cli.cli import WordIndexShell, build_parser, main
from word_index.core.avl_tree import Wordlist
from word_index.utils.config_manager import Config


@pytest.fixture
def out():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    # default log/config paths are relative
    monkeypatch.chdir(tmp_path)


def _text(console):
    return console.file.getvalue()


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_stats_command(sample_file, out):
    assert main(["stats", str(sample_file)], out=out) == 0
    text = _text(out)
    assert "Number of different words: 9" in text
    assert "the 3" in text
    assert "8 (89%)" in text


def test_words_command_with_limit(sample_file, out):
    assert main(["words", str(sample_file), "--limit", "2"], out=out) == 0
    text = _text(out)
    assert "brown" in text
    assert "dog" in text
    assert "quick" not in text


def test_words_command_uses_config_limit(sample_file, tmp_path, out):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"max_words": 1}), encoding="utf-8")
    main(["--config", str(cfg), "words", str(sample_file)], out=out)
    text = _text(out)
    assert "brown" in text
    assert "dog" not in text


def test_missing_file_exits_with_error(tmp_path, out, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["stats", str(tmp_path / "absent.txt")], out=out)
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "Couldn't open the file" in err
    assert "done:" not in err
    assert _text(out) == ""


def test_one_shot_run_writes_no_files(tmp_path, out):
    big = tmp_path / "big.txt"
    big.write_text(" ".join(f"w{i:05d}" for i in range(2000)), encoding="utf-8")
    assert main(["stats", str(big)], out=out) == 0
    assert main(["words", str(big), "--limit", "3"], out=out) == 0
    assert not (tmp_path / "logs").exists()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["big.txt"]


def test_report_output_has_no_timing_lines(sample_file, out, capsys):
    main(["stats", str(sample_file)], out=out)
    assert "done:" not in _text(out)
    assert "ingest" in capsys.readouterr().err


def test_log_file_option_writes_debug_log(sample_file, tmp_path, out):
    log_path = tmp_path / "debug" / "run.log"
    assert main(["--log-file", str(log_path), "stats", str(sample_file)], out=out) == 0
    text = log_path.read_text(encoding="utf-8")
    assert "new word 'the'" in text
    assert "ingested 11 tokens" in text


@pytest.fixture
def shell(out):
    return WordIndexShell(cfg=Config(path=None), out=out)


def test_shell_indexes_plain_lines(shell):
    shell.handle_line("the cat and the hat")
    assert shell.wl.total_words() == 5
    assert shell.wl.get_count("the") == 2
    assert "added 5 word(s), 4 unique" in _text(shell.console)


def test_shell_count_and_remove(shell):
    shell.handle_line("a b b")
    shell.handle_line("/count b")
    shell.handle_line("/remove b zzz")
    text = _text(shell.console)
    assert "b: 2" in text
    assert "Removed: b" in text
    assert "Not found: zzz" in text
    assert not shell.wl.contains("b")


def test_shell_top_and_stats(shell):
    shell.handle_line("/top")
    assert "(no data)" in _text(shell.console)
    shell.handle_line("x y y")
    shell.handle_line("/top")
    shell.handle_line("/stats")
    text = _text(shell.console)
    assert "y 2" in text
    assert "Number of different words:" in text


def test_shell_words_and_clear(shell):
    shell.handle_line("delta alpha charlie")
    before = len(_text(shell.console))
    shell.handle_line("/words 2")
    table = _text(shell.console)[before:]
    assert "alpha" in table and "charlie" in table
    assert "delta" not in table
    shell.handle_line("/clear")
    assert len(shell.wl) == 0


def test_shell_load(shell, sample_file, tmp_path):
    assert shell.load(str(sample_file)) is True
    assert shell.wl.total_words() == 11
    assert shell.load(str(tmp_path / "absent.txt")) is False


def test_shell_unknown_and_quit(shell):
    shell.handle_line("/dance")
    assert "Unknown command" in _text(shell.console)
    shell.handle_line("/quit")
    assert shell.running is False


def test_shell_run_until_eof(out, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("one two one\n/quit\n"))
    wl = Wordlist()
    WordIndexShell(wordlist=wl, cfg=Config(path=None), out=out).run()
    assert wl.get_count("one") == 2
    assert "bye." in _text(out)


def test_shell_failed_load_reports_no_timing(shell, tmp_path):
    assert shell.load(str(tmp_path / "absent.txt")) is False
    text = _text(shell.console)
    assert "Couldn't open the file" in text
    assert "done:" not in text


def test_shell_config_show(shell):
    shell.handle_line("/config")
    text = _text(shell.console)
    assert "max_words" in text
    assert "show_percent" in text


def test_shell_config_set_in_memory(shell, tmp_path):
    shell.handle_line("/config max_words 3")
    assert shell.cfg.get("max_words") == 3
    assert "max_words = 3" in _text(shell.console)
    assert "this session only" in _text(shell.console)
    assert not (tmp_path / "word_index.json").exists()

    shell.handle_line("alpha bravo charlie delta echo")
    before = len(_text(shell.console))
    shell.handle_line("/words")
    table = _text(shell.console)[before:]
    assert "charlie" in table
    assert "delta" not in table


def test_shell_config_set_saves_to_file(tmp_path, out):
    path = tmp_path / "cfg.json"
    sh = WordIndexShell(cfg=Config(str(path)), out=out)
    sh.handle_line("/config show_percent no")
    assert json.loads(path.read_text(encoding="utf-8"))["show_percent"] is False
    assert "this session only" not in _text(out)


def test_shell_config_rejects_bad_input(shell):
    shell.handle_line("/config theme dark")
    shell.handle_line("/config max_words lots")
    shell.handle_line("/config max_words")
    text = _text(shell.console)
    assert "No such option: theme" in text
    assert "Bad value for max_words: lots" in text
    assert "usage: /config [key val]" in text
    assert shell.cfg.get("max_words") == 0


def test_shell_help_lists_config(shell):
    shell.handle_line("/help")
    text = _text(shell.console)
    assert "/config [key val]" in text
    assert "/words [n]" in text
