from timeit import timeit

from lispy.interpreter import Interpreter
from lispy.types.symbol import Symbol
from lispy.types.expr import QExpr
from lispy.types.number import Number
from lispy.types.environment import Environment
from lispy.reader.parser import parse
from lispy.reader.reader import read


def time_interpreter(code: str, rounds: int) -> float:
    """Time evaluation only: parse once, then read and evaluate the same tree
    repeatedly. Reading is included because evaluation consumes the values.
    """
    itp = Interpreter()
    tree = parse(code)
    # Warmup
    itp.eval_fn(read(tree), itp.env)
    # Timed
    return timeit(lambda: itp.eval_fn(read(tree), itp.env), number=rounds)


def time_parse(code: str, rounds: int) -> float:
    return timeit(lambda: parse(code), number=rounds)


# Environment access copies values in and out; cost grows with the value size

def bench_lookup_copy(size: int = 1000, n_lookups: int = 2000) -> float:
    env = Environment()
    key = Symbol("xs")
    env.put(key, QExpr(Number(i) for i in range(size)))
    # Warmup
    for _ in range(100):
        env.get(key)
    # Timed
    return timeit(lambda: env.get(key), number=n_lookups)


ARITH_CODE = "(+ 1 (* 2 (+ 3 4) (- 10 6)) (/ 100 7) (max 1 2 3) (min 4 5 6))"

LIST_CODE = "eval (head {(join (list 1 2) (tail {0 3 4 5})) (+ 1 2)})"

NESTED_CODE = "(+ " * 50 + "1" + " 1)" * 50


def _print_pair(name: str, code: str, rounds: int) -> None:
    tparse = time_parse(code, rounds)
    teval = time_interpreter(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  parse: {tparse:.6f}s  |  read+eval: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup of a 1000-element list (deep copy)")
    print(f"  time: {bench_lookup_copy():.6f}s")

    _print_pair("arithmetic", ARITH_CODE, rounds=20000)
    _print_pair("list operations", LIST_CODE, rounds=20000)
    _print_pair("nested additions (depth 50)", NESTED_CODE, rounds=2000)
