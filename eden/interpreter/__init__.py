from __future__ import annotations

import logging
from typing import Callable, Literal

from eden import SExpression, LispValue
from eden.builtin.env_builtin import new_root_environment
from eden.evaluation.evaluator import evaluate
from eden.modules.loader import load_file, load_prelude, load_source
from eden.reader.parser import lex, TokenStream
from eden.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Eden code.
    Maintains one root Environment across calls, so definitions persist and a
    failed evaluation leaves earlier bindings intact.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
    ):
        self.eval_fn = eval_fn or evaluate
        self.env: Environment = new_root_environment()

        if prelude is None:
            logger.debug("Prelude disabled")
        elif prelude == 'auto':
            try:
                load_prelude(self.env, self.eval_fn)
            except FileNotFoundError:
                logger.debug("No prelude found; continuing with primitives only")
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        load_source(code, self.env, self.eval_fn, origin="<prelude>")

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate each form of `code` as it is read; return every result."""
        stream = TokenStream(lex(code))
        results: list[LispValue] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_fn(expr, self.env))
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form, or () if it has none."""
        results = self.eval_all(code)
        if not results:
            return []
        return results[-1]

    def load(self, path: str) -> LispValue:
        return load_file(path, self.env, self.eval_fn)
