"""Terminal mode for the prefix trie."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, TextIO

from prefixtrie.constants import LOGGER_NAME
from prefixtrie.errors import ParseError
from prefixtrie.trie import PrefixTrie, from_serialized
from prefixtrie.wordlist import load_word_list

log = logging.getLogger(LOGGER_NAME)

HELP = """\
Commands:
  add WORD      -- store a word
  remove WORD   -- delete a word
  lookup WORD   -- is WORD stored?
  prefix WORD   -- does any stored word start with WORD?
  words         -- list every stored word
  dump          -- print the trie as JSON
  load JSON     -- replace the trie with a JSON dump
  clear         -- start over with an empty trie
  done          -- quit"""


def run_commands(trie: PrefixTrie, lines: Iterable[str], out: TextIO | None = None) -> PrefixTrie:
    """Apply one command per line to *trie*; returns the final trie."""
    out = out if out is not None else sys.stdout
    for raw in lines:
        inp = raw.strip()
        if not inp:
            continue

        parts = inp.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        if cmd == "done":
            break
        if cmd == "help":
            print(HELP, file=out)
        elif cmd == "words":
            for w in trie.get_words():
                print(w, file=out)
        elif cmd == "dump":
            print(trie.dump_json(), file=out)
        elif cmd == "clear":
            trie = PrefixTrie()
            print("  Trie cleared.", file=out)
        elif cmd == "load":
            try:
                trie.load_json(arg)
            except ParseError as exc:
                print(f"  Invalid.  {exc}", file=out)
                continue
            print(f"  Loaded {len(trie)} words.", file=out)
        elif not arg:
            print("  Format: COMMAND WORD  (type 'help' for a list)", file=out)
        elif cmd == "add":
            trie.add_word(arg)
            print(f"  Added '{arg}'", file=out)
        elif cmd == "remove":
            trie.remove_word(arg)
            print(f"  Removed '{arg}'", file=out)
        elif cmd == "lookup":
            print("yes" if trie.lookup(arg) else "no", file=out)
        elif cmd == "prefix":
            print("yes" if trie.is_valid_prefix(arg) else "no", file=out)
        else:
            print(f"  Unknown command '{cmd}'  (type 'help' for a list)", file=out)
    return trie


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input("  trie> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Prefix trie -- interactive word dictionary",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--words", type=str, default=None,
                        help="Path to a word list, one word per line")
    source.add_argument("--json", type=str, default=None,
                        help="Path to a JSON dump produced by 'dump'")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    path = args.words or args.json
    if path and not os.path.exists(path):
        log.error("No such file: %s", path)
        return 1

    if args.words:
        trie = load_word_list(args.words)
    elif args.json:
        with open(args.json, "r", encoding="utf-8") as f:
            try:
                trie = from_serialized(f.read())
            except ParseError as exc:
                log.error("Could not load %s: %s", args.json, exc)
                return 1
    else:
        trie = PrefixTrie()

    print("PREFIX TRIE -- type 'help' for commands")
    run_commands(trie, _stdin_lines())
    return 0


if __name__ == "__main__":
    sys.exit(main())
