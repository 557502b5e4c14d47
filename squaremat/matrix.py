"""A square matrix of floats with arithmetic, comparison and determinant support."""

from __future__ import annotations

import numbers
from collections.abc import Iterator


class Row:
    """A writable view of one row of a :class:`SquareMat`."""

    __slots__ = ("_matrix", "_row")

    def __init__(self, matrix: SquareMat, row: int) -> None:
        self._matrix = matrix
        self._row = row

    def _offset(self, col: int) -> int:
        size = self._matrix.size
        if not 0 <= col < size:
            raise IndexError("column index out of bounds")
        return self._row * size + col

    def __getitem__(self, col: int) -> float:
        return self._matrix._data[self._offset(col)]

    def __setitem__(self, col: int, value: float) -> None:
        self._matrix._data[self._offset(col)] = float(value)

    def __len__(self) -> int:
        return self._matrix.size

    def __iter__(self) -> Iterator[float]:
        start = self._row * self._matrix.size
        return iter(self._matrix._data[start:start + self._matrix.size])


def _c_mod(value: float, divisor: int) -> float:
    """Truncate value to an integer and take the remainder with the sign of the dividend."""
    dividend = int(value)
    remainder = abs(dividend) % abs(divisor)
    return float(-remainder if dividend < 0 else remainder)


class SquareMat:
    """A mutable square matrix whose elements start at zero."""

    __slots__ = ("_size", "_data")

    def __init__(self, size: int) -> None:
        if not isinstance(size, numbers.Integral) or isinstance(size, bool):
            raise TypeError("size must be an integer")
        if size <= 0:
            raise ValueError("size must be bigger than 0")
        self._size = int(size)
        self._data = [0.0] * (self._size * self._size)

    @classmethod
    def _from_data(cls, size: int, data: list[float]) -> SquareMat:
        result = cls(size)
        result._data = data
        return result

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._size

    def copy(self) -> SquareMat:
        """Return an independent copy of the matrix."""
        return self._from_data(self._size, list(self._data))

    def __copy__(self) -> SquareMat:
        return self.copy()

    def __getitem__(self, row: int) -> Row:
        if not 0 <= row < self._size:
            raise IndexError("Index out of bounds")
        return Row(self, row)

    def __iter__(self) -> Iterator[Row]:
        return (Row(self, row) for row in range(self._size))

    def _rows(self) -> list[list[float]]:
        n = self._size
        return [self._data[i * n:(i + 1) * n] for i in range(n)]

    def _check_same_size(self, other: SquareMat) -> None:
        if other._size != self._size:
            raise ValueError("the matrices must have the same size")

    def _product(self, other: SquareMat) -> list[float]:
        self._check_same_size(other)
        n = self._size
        columns = [other._data[j::n] for j in range(n)]
        return [
            sum(a * b for a, b in zip(row, column))
            for row in self._rows()
            for column in columns
        ]

    def _elementwise(self, other: SquareMat, op) -> list[float]:
        self._check_same_size(other)
        return [op(a, b) for a, b in zip(self._data, other._data)]

    def __add__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._from_data(self._size, self._elementwise(other, lambda a, b: a + b))

    def __sub__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._from_data(self._size, self._elementwise(other, lambda a, b: a - b))

    def __neg__(self) -> SquareMat:
        return self._from_data(self._size, [-x for x in self._data])

    def __mul__(self, other):
        if isinstance(other, SquareMat):
            return self._from_data(self._size, self._product(other))
        if isinstance(other, numbers.Real):
            return self._from_data(self._size, [x * other for x in self._data])
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return self._from_data(self._size, [x * scalar for x in self._data])
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, SquareMat):
            return self._from_data(self._size, self._elementwise(other, lambda a, b: a * b))
        if isinstance(other, numbers.Integral):
            if other == 0:
                raise ZeroDivisionError("There is no modulo 0")
            return self._from_data(self._size, [_c_mod(x, int(other)) for x in self._data])
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("No division by 0")
        return self._from_data(self._size, [x / scalar for x in self._data])

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        if exponent < 0:
            raise ValueError("negative exponent not supported")
        if exponent == 0:
            identity = SquareMat(self._size)
            for i in range(self._size):
                identity._data[i * self._size + i] = 1.0
            return identity
        result = self.copy()
        for _ in range(int(exponent) - 1):
            result *= self
        return result

    def __xor__(self, exponent):
        return self.__pow__(exponent)

    def increment(self) -> SquareMat:
        """Add 1 to every element in place and return the matrix."""
        self._data = [x + 1 for x in self._data]
        return self

    def decrement(self) -> SquareMat:
        """Subtract 1 from every element in place and return the matrix."""
        self._data = [x - 1 for x in self._data]
        return self

    def post_increment(self) -> SquareMat:
        """Add 1 to every element in place and return a copy taken before."""
        before = self.copy()
        self.increment()
        return before

    def post_decrement(self) -> SquareMat:
        """Subtract 1 from every element in place and return a copy taken before."""
        before = self.copy()
        self.decrement()
        return before

    def transpose(self) -> SquareMat:
        """Return a new matrix with rows and columns swapped."""
        n = self._size
        data = [x for col in range(n) for x in self._data[col::n]]
        return self._from_data(n, data)

    def __invert__(self) -> SquareMat:
        return self.transpose()

    def _minor(self, row: int, col: int) -> SquareMat:
        data = [
            value
            for i, values in enumerate(self._rows())
            if i != row
            for j, value in enumerate(values)
            if j != col
        ]
        return self._from_data(self._size - 1, data)

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        d = self._data
        if self._size == 1:
            return d[0]
        if self._size == 2:
            return d[0] * d[3] - d[1] * d[2]
        result = 0.0
        for col, value in enumerate(d[:self._size]):
            sign = 1 if col % 2 == 0 else -1
            result += sign * value * self._minor(0, col).determinant()
        return result

    def __eq__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return total(self) == total(other)

    def __ne__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return total(self) != total(other)

    def __lt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return total(self) < total(other)

    def __le__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return total(self) <= total(other)

    def __gt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return total(self) > total(other)

    def __ge__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return total(self) >= total(other)

    __hash__ = None

    def __iadd__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._data = self._elementwise(other, lambda a, b: a + b)
        return self

    def __isub__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._data = self._elementwise(other, lambda a, b: a - b)
        return self

    def __imul__(self, other):
        if isinstance(other, SquareMat):
            self._data = self._product(other)
            return self
        if isinstance(other, numbers.Real):
            self._data = [x * other for x in self._data]
            return self
        return NotImplemented

    def __itruediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("No division by 0")
        self._data = [x / scalar for x in self._data]
        return self

    def __imod__(self, other):
        if isinstance(other, SquareMat):
            self._data = self._elementwise(other, lambda a, b: a * b)
            return self
        if isinstance(other, numbers.Integral):
            if other == 0:
                raise ZeroDivisionError("There is no modulo 0")
            self._data = [_c_mod(x, int(other)) for x in self._data]
            return self
        return NotImplemented

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value:g} " for value in row) + "\n" for row in self._rows()
        )


def total(matrix: SquareMat) -> float:
    """Sum of all elements of the matrix."""
    return sum(matrix._data, 0.0)