"""Core evaluator for the yascm interpreter.

A plain recursive eval/apply: every nested evaluation is a host-level call,
so recursion depth is bounded by the Python stack (no tail-call flattening).
"""

from __future__ import annotations

import logging

from yascm import SExpression, LispValue
from yascm.types.closure import Closure
from yascm.types.environment import Environment
from yascm.types.pair import Pair, iterate, to_python_list
from yascm.types.procedure import Primitive, SpecialForm
from yascm.types.sentinels import EmptyList
from yascm.types.symbol import Symbol
from yascm.evaluation.apply import apply

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            frame = env.find(expr)
            if frame is None:
                # Unbound names read as the empty list rather than faulting.
                logger.debug("Unbound symbol %s evaluated to ()", expr)
                return EmptyList
            return frame.vars[expr]

        case Pair(car=head, cdr=tail):
            operator = evaluate(head, env)

            # --- Special forms receive their arguments unevaluated ---
            if isinstance(operator, SpecialForm):
                return operator.handler(to_python_list(tail), env, evaluate)

            if isinstance(operator, (Primitive, Closure)):
                args = [evaluate(arg, env) for arg in iterate(tail)]
                return apply(operator, args, env, evaluate)

            logger.debug("Non-callable head of type %s; form evaluates to itself", type(operator).__name__)
            return expr

    # --- Atoms return as-is ---
    return expr
