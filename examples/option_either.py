"""
Options and Eithers: presence, defaults, mapping and folding.

Run: python examples/option_either.py
"""
from dataclasses import dataclass

from fluentfp import Either, Left, Right, Mapper, fold, lookup, of, not_ok, if_, option_to_json


@dataclass(frozen=True)
class ParseError:
    input: str
    reason: str
    default: int


def parse_positive(s: str) -> Either[ParseError, int]:
    try:
        n = int(s)
    except ValueError:
        return Left(ParseError(s, "not a number", 0))
    if n <= 0:
        return Left(ParseError(s, "not positive", 0))
    return Right(n)


def main():
    double = lambda x: x * 2
    print("of(5).map(double) =>", of(5).map(double).get_or_else(0))              # 10
    print("not_ok(int).map(double) =>", not_ok(int).map(double).get_or_else(0))  # 0

    prices = {"apple": 3, "pear": 0}
    for name in ("apple", "pear", "plum"):
        price = lookup(prices, name, int)
        print(name, "=>", if_(price.is_ok()).then("listed").else_("unlisted"), price.or_zero())

    for raw in ("7", "-5", "x"):
        e = parse_positive(raw)
        e.if_left(lambda err: print(f"  {err.input!r}: {err.reason}"))
        print(raw, "=>", fold(e, lambda err: err.default, lambda n: n))

    evens = Mapper.of(1, 2, 3, 4).keep_if(lambda n: n % 2 == 0)
    print("first even > 2 =>", option_to_json(evens.find(lambda n: n > 2)))  # 4
    print("first even > 9 =>", option_to_json(evens.find(lambda n: n > 9)))  # null


if __name__ == "__main__":
    main()
