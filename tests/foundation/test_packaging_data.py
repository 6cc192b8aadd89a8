from importlib import resources

import numpy as np
import pytest

from evocore.foundation.data import benchmark_data_path, load_matrix, load_row_vector
from evocore.foundation.exceptions import ResourceLoadError, ResourceNotFoundError


def test_shift_data_packaged_and_accessible():
    assert resources.files("evocore.foundation.data").joinpath("benchmarks/ackley_func_data.txt").is_file()
    path = benchmark_data_path("ackley_func_data.txt")
    values = load_row_vector(path, 100)
    assert values.shape == (100,)
    assert np.all(np.abs(values) <= 32.0)


@pytest.mark.parametrize("dimension", [2, 10, 30, 50])
def test_rotation_matrices_packaged_and_orthogonal(dimension):
    path = benchmark_data_path(f"ackley_M_D{dimension}.txt")
    matrix = load_matrix(path, dimension, dimension)
    assert matrix.shape == (dimension, dimension)
    np.testing.assert_allclose(matrix @ matrix.T, np.eye(dimension), atol=1e-10)


def test_unknown_packaged_file_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        benchmark_data_path("ackley_M_D3.txt")


def test_load_matrix_is_row_major(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("1 2 3\n4 5 6\n", encoding="utf-8")
    np.testing.assert_array_equal(load_matrix(path, 2, 3), [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_load_row_vector_accepts_line_delimited_values(tmp_path):
    path = tmp_path / "o.txt"
    path.write_text("1.5\n-2.5\n3e-1\n9\n", encoding="utf-8")
    np.testing.assert_array_equal(load_row_vector(path, 3), [1.5, -2.5, 0.3])


def test_load_row_vector_rejects_short_file(tmp_path):
    path = tmp_path / "o.txt"
    path.write_text("1.0 2.0", encoding="utf-8")
    with pytest.raises(ResourceLoadError) as excinfo:
        load_row_vector(path, 3)
    assert excinfo.value.details["path"] == str(path)


def test_load_matrix_rejects_missing_file(tmp_path):
    with pytest.raises(ResourceNotFoundError):
        load_matrix(tmp_path / "missing.txt", 2, 2)


def test_packaged_benchmark_data_is_documented_as_stand_in():
    from evocore.foundation.problem import cec2005

    assert "stand-ins" in cec2005.__doc__
    assert "not the published CEC 2005 numbers" in cec2005.__doc__
    assert "M.T" in cec2005.__doc__
    assert "stand-in" in cec2005.ShiftedRotatedAckley.__doc__
