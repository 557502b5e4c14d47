import pytest

from squaremat.demo import main
from squaremat.matrix import SquareMat


def _run(capsys):
    status = main([])
    return status, capsys.readouterr().out


def _block(output, header):
    """Return the matrix text printed under a header line."""
    start = output.index(header + "\n") + len(header) + 1
    end = output.index("\n\n", start)
    return output[start:end + 1]


def _matrix(values):
    matrix = SquareMat(len(values))
    for row, row_values in zip(matrix, values):
        for col, value in enumerate(row_values):
            row[col] = value
    return matrix


def test_main_returns_zero(capsys):
    status, output = _run(capsys)
    assert status == 0
    assert output.startswith("matrix m\n")


def test_headers_appear_in_order(capsys):
    _, output = _run(capsys)
    headers = [
        "matrix m+m2", "matrix m-m2", "matrix -m", "matrix m*m2",
        "matrix m*2", "matrix 2*m", "matrix m%m2", "matrix m%3",
        "matrix m/3", "matrix m^2", "matrix m++", "matrix --m",
        "matrix ++m", "matrix m--", "matrix ~m", "m += m2 :",
        "m -= m2 :", "m *= 2 :", "m /= 2 :", "m3 *= m2 :",
        "m3 %= m2 :", "m3 %= 5 :",
    ]
    positions = [output.index(header + "\n") for header in headers]
    assert positions == sorted(positions)


def test_first_matrix_printed(capsys):
    _, output = _run(capsys)
    assert _block(output, "matrix m") == "1 2 \n3 4 \n"
    assert _block(output, "matrix m2") == "4 8 \n7 5 \n"


def test_sum_section_matches_library(capsys):
    _, output = _run(capsys)
    m = _matrix([[1, 2], [3, 4]])
    m2 = _matrix([[4, 8], [7, 5]])
    assert _block(output, "matrix m+m2") == str(m + m2)
    assert _block(output, "matrix m*m2") == str(m * m2)


def test_scalar_products_agree(capsys):
    _, output = _run(capsys)
    assert _block(output, "matrix m*2") == _block(output, "matrix 2*m")


def test_increment_sections_consistent(capsys):
    _, output = _run(capsys)
    original = _block(output, "matrix m")
    assert _block(output, "matrix m++") == original
    assert _block(output, "matrix --m") == original
    assert _block(output, "matrix ++m") == _block(output, "matrix m--")


def test_compound_round_trip(capsys):
    _, output = _run(capsys)
    original = _block(output, "matrix m")
    assert _block(output, "m -= m2 :") == original
    assert _block(output, "m /= 2 :") == original


def test_comparison_lines(capsys):
    _, output = _run(capsys)
    for line in ["m == m3", "m != m2", "m < m2", "m2 > m", "m <= m2", "m2 >= m"]:
        assert line + "\n" in output


def test_determinants(capsys):
    _, output = _run(capsys)
    assert "The determinant of the matrix m is: -2\n" in output
    assert "The determinant of the matrix m2 is: -36\n" in output


def test_final_modulo_section(capsys):
    _, output = _run(capsys)
    assert output.endswith("m3 %= 5 :\n2 4 \n0 0 \n\n")


def test_element_lines(capsys):
    _, output = _run(capsys)
    assert "matrix m[0][0]: 1\n" in output
    assert "matrix m[1][1]: 4\n" in output


def test_output_is_deterministic(capsys):
    _, first = _run(capsys)
    _, second = _run(capsys)
    assert first == second


def test_unknown_argument_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2