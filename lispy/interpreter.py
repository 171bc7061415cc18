from __future__ import annotations

import logging
from typing import Literal

from lispy import config
from lispy.builtin.env_builtin import call_builtin, register
from lispy.errors import LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import parse
from lispy.reader.reader import read
from lispy.types.environment import Environment
from lispy.types.value import Error, SExpr, Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Lispy code against one global Environment that lives
    as long as the interpreter.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = config.get_prelude_path()
            if path is not None:
                self.load_file(path)
        elif prelude:
            self.eval_prelude(prelude)

    def eval(self, code: str, filename: str = "<stdin>") -> Value:
        """Evaluate one input; the whole input is a single S-Expression."""
        tree = parse(code, filename)
        return evaluate(self.env, read(tree))

    def eval_prelude(self, code: str, filename: str = "<prelude>") -> None:
        """Evaluate prelude source line by line.

        Each line is one input, as at the prompt. Syntax errors and Error
        results are logged and the remaining lines still run.
        """
        for lineno, line in enumerate(code.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                result = self.eval(line, filename)
            except LispySyntaxError as e:
                logger.warning("%s:%d: %s", filename, lineno, e.message)
                continue
            except RecursionError:
                logger.warning("%s:%d: expression nested too deeply", filename, lineno)
                continue
            if isinstance(result, Error):
                logger.warning("%s:%d: %s", filename, lineno, result)

    def load_file(self, path) -> None:
        try:
            with open(path, encoding="utf-8") as f:
                code = f.read()
        except FileNotFoundError:
            logger.warning("prelude %s not found, continuing without it", path)
            return
        logger.debug("loading prelude %s", path)
        self.eval_prelude(code, str(path))

    def call(self, name: str, *args: Value) -> Value:
        """Invoke a builtin by name with copies of `args`."""
        return call_builtin(self.env, name, SExpr([a.copy() for a in args]))
