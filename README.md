# squaremat

`squaremat` provides `SquareMat`, a mutable square matrix of floats with a full
set of arithmetic, comparison and in-place operators, plus a small demo
command. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from squaremat.matrix import SquareMat, total

m = SquareMat(2)          # a 2x2 matrix of zeros
m[0][0] = 1
m[0][1] = 2
m[1][0] = 3
m[1][1] = 4

m2 = SquareMat(2)
m2[0][0] = 4

print(m.size)             # 2
print(m + m2)             # element-wise addition
print(m - m2)             # element-wise subtraction
print(-m)                 # negation
print(m * m2)             # matrix product
print(m * 2, 2 * m)       # scalar multiplication
print(m % m2)             # element-wise product
print(m % 3)              # integer remainder of every element
print(m / 3)              # scalar division
print(m ** 2)             # power; m ^ 2 is the same, exponent 0 gives identity
print(m.transpose())      # also ~m
print(m.determinant())    # determinant by cofactor expansion on the first row
print(total(m))           # sum of all elements
```

Printing a matrix writes each row on its own line, every element followed by
a space.

### Indexing

`m[r]` returns a `Row`, a writable view of that row; `m[r][c]` reads or sets a
single element (values are stored as floats). Rows and matrices can be
iterated: iterating a `SquareMat` yields its `Row` objects, iterating a `Row`
yields its values, and `len(row)` is the matrix size. A row or column index
outside the matrix raises `IndexError`.

### Element-wise remainder

`m % n` (and `m %= n`) with an integer `n` first truncates every element to an
integer and then takes the remainder with the sign of the element, so `-7 % 3`
gives `-1`.

### Increment and decrement

`increment()` and `decrement()` add or subtract 1 from every element and
return the matrix itself; `post_increment()` and `post_decrement()` do the same
but return a copy taken before the change.

### Comparisons

`==`, `!=`, `<`, `<=`, `>` and `>=` compare the sums of the elements (as given
by `total`), so matrices of different sizes may compare equal. Because of this
matrices are not hashable.

### In-place operators

`+=`, `-=`, `*=` (matrix or scalar), `/=` and `%=` (matrix or integer) change
the matrix itself. `copy()` (or `copy.copy`) gives an independent copy.

### Errors

- `SquareMat(size)` raises `TypeError` if `size` is not an integer and
  `ValueError` if it is not positive.
- Adding, subtracting, multiplying or taking the element-wise product of
  matrices of different sizes raises `ValueError`.
- Dividing by 0 or taking a remainder by 0 raises `ZeroDivisionError`.
- A negative exponent raises `ValueError`.

## Demo

```
squaremat-demo
```

prints a walkthrough of every operator applied to two 2x2 matrices. It takes
no options besides `--help`. The same walkthrough is available as
`python -m squaremat.demo`.