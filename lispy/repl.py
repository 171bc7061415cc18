"""Interactive read-evaluate-print loop for Lispy."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from lispy import config
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.printer import println

try:
    import readline
except ImportError:  # Windows has no GNU readline; plain input() still works
    readline = None

logger = logging.getLogger(__name__)


class REPL:
    def __init__(self, interp: Interpreter, history: Path | None = None, prompt: str | None = None):
        self.interp = interp
        self.history = history if history is not None else config.get_history_path()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.hlen = 0

    def complete(self, text: str, state: int) -> str | None:
        m = [k for k in self.interp.env.names() if k.startswith(text)]
        try:
            return m[state]
        except IndexError:
            return None

    def register(self):
        readline.set_history_length(1000)
        readline.set_completer(self.complete)
        readline.set_completer_delims(" (){}")
        readline.parse_and_bind("tab: complete")

    def start(self):
        if readline is None:
            return
        self.register()
        try:
            readline.read_history_file(self.history)
            self.hlen = readline.get_current_history_length()
        except FileNotFoundError:
            self.hlen = 0
        except OSError as e:
            logger.warning("cannot read history file %s: %s", self.history, e)

    def input(self) -> str:
        line = input(self.prompt)
        if readline is not None and line.strip():
            nhlen = readline.get_current_history_length()
            try:
                readline.append_history_file(nhlen - self.hlen, self.history)
            except OSError as e:
                logger.warning("cannot write history file %s: %s", self.history, e)
            self.hlen = nhlen
        return line

    def handle(self, line: str, out: TextIO) -> None:
        """Evaluate one line and print its result; errors never end the session."""
        try:
            result = self.interp.eval(line)
        except LispySyntaxError as e:
            out.write(f"{e}\n")
            return
        except RecursionError:
            logger.debug("recursion limit hit evaluating %r", line)
            out.write("Error: expression nested too deeply\n")
            return
        println(result, out)


def repl(interp: Interpreter | None = None, out: TextIO | None = None) -> None:
    if interp is None:
        interp = Interpreter()
    out = out if out is not None else sys.stdout

    ctrl = REPL(interp)
    ctrl.start()

    out.write(config.BANNER + "\n")
    try:
        while True:
            try:
                line = ctrl.input()
            except EOFError:
                break
            if not line.strip():
                continue
            ctrl.handle(line, out)
    except KeyboardInterrupt:
        pass
    out.write("\nThank you\n")
