from timeit import timeit

from yascm.interpreter import Interpreter
from yascm.types.environment import Environment
from yascm.types.symbol import SymbolTable


def time_interpreter(code: str, rounds: int, setup: str = "") -> float:
    """Time evaluation of one already-read form. Parses once and repeatedly
    evaluates the same form in a single interpreter.
    """
    itp = Interpreter(prelude=setup or None)
    expr = next(itp.read(code))
    # Warmup
    itp.evaluate(expr)
    # Timed
    return timeit(lambda: itp.evaluate(expr), number=rounds)


def time_reader(code: str, rounds: int) -> float:
    itp = Interpreter()
    return timeit(lambda: list(itp.read(code)), number=rounds)


# Environment lookup down a deep chain of frames

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    key = SymbolTable().intern("answer")
    root = Environment()
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_SETUP = r"""
(define (fact n)
  (if (= n 0)
      1
      (* n (fact (- n 1)))))
"""

FIB_SETUP = r"""
(define (fib n)
  (cond ((> 2 n) n)
        (else (+ (fib (- n 1)) (fib (- n 2))))))
"""

LIST_BUILD_SETUP = r"""
(define (build n acc)
  (if (= n 0) acc (build (- n 1) (cons n acc))))
"""

READER_CODE = "(define (f x) (let ((y (* x x))) (cond ((> y 10) 'big) (else 'small))))" * 20


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    for name, code, setup, rounds in [
        ("lambda application", LAMBDA_APPLY_CODE, "", 20000),
        ("recursive factorial 100", "(fact 100)", FACT_SETUP, 500),
        ("naive fib 15", "(fib 15)", FIB_SETUP, 20),
        ("cons 300 cells", "(build 300 '())", LIST_BUILD_SETUP, 200),
    ]:
        print(f"Benchmark: {name}")
        print(f"  interpreter: {time_interpreter(code, rounds, setup):.6f}s  [rounds={rounds}]")

    print("Benchmark: reader")
    print(f"  time: {time_reader(READER_CODE, 200):.6f}s")
