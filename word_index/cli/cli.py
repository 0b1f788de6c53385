"""
cli.py - command line front end for the word index
Features:
- `stats` / `words` one-shot reports for a text file
- `shell` interactive session: type text to index it, slash commands to query
- Uses Rich for tables and formatting, argparse for the command line
"""

import argparse
import shlex
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from word_index.cli.report import statistics_panel, words_table
from word_index.context.tokenizer import ingest_file, tokenize_line
from word_index.core.avl_tree import EmptyWordlistError, Wordlist
from word_index.utils.config_manager import Config
from word_index.utils.logger_utils import Log, configure_logging

# initialise console for rich output
console = Console()

HELP = (
    "Commands: /load <file>  /remove <word>  /count <word>  /stats  /words [n]\n"
    "          /top  /clear  /config [key val]  /help  /quit\n"
    "Anything else is split on whitespace and added to the index."
)


class WordIndexShell:
    """Interactive session around one Wordlist."""
    def __init__(self, wordlist: Optional[Wordlist] = None, cfg: Optional[Config] = None,
                 out: Optional[Console] = None, log_path: Optional[str] = None):
        self.wl = wordlist if wordlist is not None else Wordlist()
        self.cfg = cfg or Config(path=None)
        self.console = out or console
        self.log = Log(path=log_path or self.cfg.get("log_path") or None,
                       use_color=self.cfg.get("color"), stream=self.console.file)
        self.running = True

    def run(self):
        """
        Main loop:
        - slash commands are dispatched to _handle_command
        - any other line is tokenized and inserted
        """
        self.console.rule("[bold magenta]Word Index[/bold magenta]")
        self.console.print(f"[cyan]{escape(HELP)}[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", default="", show_default=False, console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle_line(line)

    def handle_line(self, line: str):
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            self._handle_command(line)
            return
        tokens = tokenize_line(line)
        self.wl.insert_many(tokens)
        self.console.print(f"[dim]added {len(tokens)} word(s), {self.wl.different_words()} unique[/dim]")

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad command:[/red] {e}")
            return
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
            return

        if cmd == "/help":
            self.console.print(HELP, markup=False)
            return

        if cmd == "/load" and args:
            self.load(args[0])
            return

        if cmd == "/remove" and args:
            for w in args:
                if self.wl.remove(w):
                    self.console.print(f"[green]Removed:[/green] {escape(w)}")
                else:
                    self.console.print(f"[yellow]Not found:[/yellow] {escape(w)}")
            return

        if cmd == "/count" and args:
            for w in args:
                self.console.print(f"{escape(w)}: {self.wl.get_count(w)}")
            return

        if cmd == "/stats":
            self.console.print(statistics_panel(self.wl, self.cfg.get("show_percent")))
            return

        if cmd == "/words":
            limit = self.cfg.get("max_words")
            if args:
                if not args[0].isdigit():
                    self.console.print("usage: /words [n]", markup=False)
                    return
                limit = int(args[0])
            self.console.print(words_table(self.wl, limit or None))
            return

        if cmd == "/top":
            try:
                word, count = self.wl.most_frequent()
            except EmptyWordlistError:
                self.console.print("[dim](no data)[/dim]")
                return
            self.console.print(f"[bold]{escape(word)}[/bold] {count}")
            return

        if cmd == "/config":
            if not args:
                self.cfg.show(out=lambda ln: self.console.print(ln, markup=False, highlight=False))
            elif len(args) == 2:
                self._set_option(args[0], args[1])
            else:
                self.console.print("usage: /config [key val]", markup=False)
            return

        if cmd == "/clear":
            self.wl.clear()
            self.console.print("[dim]index cleared[/dim]")
            return

        self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    def _set_option(self, key: str, val: str):
        try:
            saved = self.cfg.set(key, val)
        except KeyError:
            self.console.print(f"[red]No such option:[/red] {escape(key)}")
            return
        except ValueError:
            self.console.print(f"[red]Bad value for {escape(key)}:[/red] {escape(val)}")
            return
        note = "" if saved else " [dim](this session only)[/dim]"
        self.console.print(f"{escape(key)} = {escape(str(self.cfg.get(key)))}{note}")

    def load(self, path: str) -> bool:
        try:
            with self.log.time_block(f"ingest {path}"):
                n = ingest_file(self.wl, path, encoding=self.cfg.get("encoding"))
        except OSError as e:
            self.log.error(f"Couldn't open the file {path}: {e}")
            return False
        self.console.print(f"[green]Loaded[/green] {n} words from {escape(path)}")
        return True


# ONE-SHOT COMMANDS ----------------------------------------------------------
def _load_or_exit(path: str, cfg: Config, log: Log) -> Wordlist:
    wl = Wordlist()
    try:
        with log.time_block(f"ingest {path}"):
            ingest_file(wl, path, encoding=cfg.get("encoding"))
    except OSError as e:
        log.error(f"Couldn't open the file {path}: {e}")
        raise SystemExit(1)
    return wl


def cmd_stats(args, cfg: Config, log: Log, out: Console) -> int:
    wl = _load_or_exit(args.file, cfg, log)
    out.print(statistics_panel(wl, cfg.get("show_percent")))
    return 0


def cmd_words(args, cfg: Config, log: Log, out: Console) -> int:
    wl = _load_or_exit(args.file, cfg, log)
    limit = args.limit if args.limit is not None else cfg.get("max_words")
    out.print(words_table(wl, limit or None))
    return 0


def cmd_shell(args, cfg: Config, log: Log, out: Console) -> int:
    shell = WordIndexShell(cfg=cfg, out=out, log_path=log.path)
    if args.file and not shell.load(args.file):
        return 1
    shell.run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="word-index", description="Word-frequency index over text files.")
    parser.add_argument("--config", default="word_index.json", help="JSON config file")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="console log level")
    parser.add_argument("--log-file", metavar="PATH", default=None,
                        help="also write a debug log (every new word and rotation) to PATH")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("stats", help="print word statistics for a file")
    p.add_argument("file")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("words", help="list words in sorted order with counts")
    p.add_argument("file")
    p.add_argument("--limit", type=int, default=None, help="show at most N words")
    p.set_defaults(func=cmd_words)

    p = sub.add_parser("shell", help="interactive session")
    p.add_argument("file", nargs="?", default=None)
    p.set_defaults(func=cmd_shell)
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    log_file = args.log_file or cfg.get("log_path") or None
    configure_logging(args.log_level, log_file)
    out = out or console
    # timings and errors stay off stdout so reports can be piped
    log = Log(path=log_file, use_color=cfg.get("color"), stream=sys.stderr)
    return args.func(args, cfg, log, out)


if __name__ == "__main__":
    sys.exit(main())
