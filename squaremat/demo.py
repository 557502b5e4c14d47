"""Command that walks through the operations of :class:`SquareMat` and prints the results."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from squaremat.matrix import SquareMat


def _build(values: Sequence[Sequence[float]]) -> SquareMat:
    matrix = SquareMat(len(values))
    for row, row_values in zip(matrix, values):
        for col, value in enumerate(row_values):
            row[col] = value
    return matrix


def _section(title: str, matrix: SquareMat) -> str:
    return f"{title}\n{matrix}\n"


def _report() -> Iterator[str]:
    """Yield the pieces of the demonstration output in order."""
    m = _build([[1, 2], [3, 4]])
    yield _section("matrix m", m)

    m2 = _build([[4, 8], [7, 5]])
    yield _section("matrix m2", m2)

    m3 = m2.copy()
    yield _section("matrix m3", m3)
    m3 = m.copy()
    yield _section("matrix m3", m3)

    yield _section("matrix m+m2", m + m2)
    yield _section("matrix m-m2", m - m2)
    yield _section("matrix -m", -m)
    yield _section("matrix m*m2", m * m2)
    yield _section("matrix m*2", m * 2)
    yield _section("matrix 2*m", 2 * m)
    yield _section("matrix m%m2", m % m2)
    yield _section("matrix m%3", m % 3)
    yield _section("matrix m/3", m / 3)
    yield _section("matrix m^2", m ** 2)

    yield _section("matrix m++", m.post_increment())
    yield _section("matrix --m", m.decrement())
    yield _section("matrix ++m", m.increment())
    yield _section("matrix m--", m.post_decrement())

    yield _section("matrix ~m", ~m)

    for row in range(m.size):
        for col in range(m.size):
            yield f"matrix m[{row}][{col}]: {m[row][col]:g}\n"
    yield "\n"

    comparisons = [
        (m == m3, "m == m3\n"),
        (m != m2, "m != m2\n"),
        (m < m2, "m < m2\n"),
        (m2 > m, "m2 > m\n"),
        (m <= m2, "m <= m2\n"),
        (m2 >= m, "m2 >= m\n\n"),
    ]
    for holds, line in comparisons:
        if holds:
            yield line

    yield f"The determinant of the matrix m is: {m.determinant():g}\n"
    yield f"The determinant of the matrix m2 is: {m2.determinant():g}\n"

    m += m2
    yield _section("m += m2 :", m)
    m -= m2
    yield _section("m -= m2 :", m)
    m *= 2
    yield _section("m *= 2 :", m)
    m /= 2
    yield _section("m /= 2 :", m)

    m3 *= m2
    yield _section("m3 *= m2 :", m3)
    m3 %= m2
    yield _section("m3 %= m2 :", m3)
    m3 %= 5
    yield _section("m3 %= 5 :", m3)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a walkthrough of the matrix operations and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="squaremat",
        description="Print a demonstration of square matrix operations.",
    )
    parser.parse_args(argv)
    sys.stdout.write("".join(_report()))
    return 0


if __name__ == "__main__":
    sys.exit(main())