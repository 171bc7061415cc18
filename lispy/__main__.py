from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lispy import config
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.printer import println
from lispy.repl import REPL, repl


def run_file(interp: Interpreter, path: Path) -> int:
    """Evaluate a script one line at a time, printing every result."""
    ctrl = REPL(interp)
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        print(f"lispy: cannot open {path}: {e.strerror}", file=sys.stderr)
        return 1
    with f:
        for line in f:
            if line.strip():
                ctrl.handle(line, sys.stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lispy", description="Lispy Couch interpreter")
    parser.add_argument("files", nargs="*", type=Path, help="scripts to evaluate line by line")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate CODE, print the result and exit")
    parser.add_argument("--prelude", type=Path, help="prelude file evaluated at startup")
    parser.add_argument("--no-prelude", action="store_true", help="do not load any prelude")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=config.get_log_level(),
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    interp = Interpreter(prelude=None if (args.no_prelude or args.prelude) else 'auto')
    if args.prelude and not args.no_prelude:
        interp.load_file(args.prelude)

    if args.code is not None:
        try:
            println(interp.eval(args.code, "<eval>"))
        except LispySyntaxError as e:
            print(e, file=sys.stderr)
            return 1
        return 0

    if args.files:
        status = 0
        for path in args.files:
            status = run_file(interp, path) or status
        return status

    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
