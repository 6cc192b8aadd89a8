"""Tests for the shifted rotated Ackley benchmark (CEC 2005 F08)."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from evocore.foundation.data import benchmark_data_path, load_row_vector
from evocore.foundation.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    MissingConfigError,
    ResourceLoadError,
    ResourceNotFoundError,
)
from evocore.foundation.problem.cec2005 import CEC2005F08Problem, ShiftedRotatedAckley, ackley
from evocore.foundation.problem.types import ProblemProtocol


def _write_data(tmp_path, shift, matrix, prefix="ackley_M_D"):
    shift_file = tmp_path / "shift.txt"
    shift_file.write_text(" ".join(str(v) for v in shift) + "\n", encoding="utf-8")
    dim = len(shift)
    rows = "\n".join(" ".join(str(v) for v in row) for row in matrix)
    (tmp_path / f"{prefix}{dim}.txt").write_text(rows + "\n", encoding="utf-8")
    return shift_file, str(tmp_path / prefix)


@pytest.fixture
def identity_2d(tmp_path):
    shift_file, prefix = _write_data(tmp_path, [0.0, 0.0], [[1.0, 0.0], [0.0, 1.0]])
    return ShiftedRotatedAckley(2, 0.0, shift_file, prefix, optimum_on_bounds=False)


def test_ackley_kernel_at_origin_is_zero():
    assert ackley(np.zeros(5)) == pytest.approx(0.0, abs=1e-12)


def test_ackley_kernel_known_value():
    z = np.array([1.0, 0.0])
    expected = -20.0 * math.exp(-0.2 * math.sqrt(0.5)) - math.exp(0.5 * (1.0 + 1.0)) + 20.0 + math.e
    assert ackley(z) == pytest.approx(expected)


def test_identity_scenario_optimum_is_zero(identity_2d):
    assert identity_2d.evaluate(np.array([0.0, 0.0])) == pytest.approx(0.0, abs=1e-9)


def test_bias_is_added(tmp_path):
    shift_file, prefix = _write_data(tmp_path, [0.0, 0.0], [[1.0, 0.0], [0.0, 1.0]])
    fn = ShiftedRotatedAckley(2, -140.0, shift_file, prefix, optimum_on_bounds=False)
    assert fn.evaluate([0.0, 0.0]) == pytest.approx(-140.0, abs=1e-9)
    assert fn.evaluate([0.3, -0.2]) == pytest.approx(ackley(np.array([0.3, -0.2])) - 140.0)


def test_rotation_is_matrix_times_shifted_vector(tmp_path):
    shift_file, prefix = _write_data(tmp_path, [0.5, 0.0], [[1.0, 2.0], [0.0, 1.0]])
    fn = ShiftedRotatedAckley(2, 0.0, shift_file, prefix, optimum_on_bounds=False)
    # shifted = [0, 1]; M @ shifted = [2, 1]
    assert fn.evaluate([0.5, 1.0]) == pytest.approx(ackley(np.array([2.0, 1.0])))


@pytest.mark.parametrize("dimension", [2, 10, 30, 50])
def test_default_data_optimum_equals_bias(dimension):
    fn = ShiftedRotatedAckley(dimension, -140.0)
    assert fn.evaluate(fn.shift_vector) == pytest.approx(-140.0, abs=1e-9)


def test_default_data_pins_even_components_to_lower_bound():
    fn = ShiftedRotatedAckley(10, 0.0)
    raw = load_row_vector(benchmark_data_path(ShiftedRotatedAckley.DEFAULT_FILE_DATA), 10)
    assert np.all(fn.shift_vector[::2] == ShiftedRotatedAckley.LOWER_BOUND)
    np.testing.assert_array_equal(fn.shift_vector[1::2], raw[1::2])


def test_optimum_on_bounds_can_be_disabled():
    fn = ShiftedRotatedAckley(10, 0.0, optimum_on_bounds=False)
    raw = load_row_vector(benchmark_data_path(ShiftedRotatedAckley.DEFAULT_FILE_DATA), 10)
    np.testing.assert_array_equal(fn.shift_vector, raw)


def test_loaded_data_is_read_only():
    fn = ShiftedRotatedAckley(2, 0.0)
    with pytest.raises(ValueError):
        fn.shift_vector[0] = 1.0
    with pytest.raises(ValueError):
        fn.rotation_matrix[0, 0] = 1.0


def test_evaluate_is_deterministic_and_order_independent():
    fn = ShiftedRotatedAckley(10, -140.0)
    rng = np.random.default_rng(3)
    a = rng.uniform(-32.0, 32.0, 10)
    b = rng.uniform(-32.0, 32.0, 10)
    first = fn.evaluate(a)
    fn.evaluate(b)
    assert fn.evaluate(a) == first
    assert ShiftedRotatedAckley(10, -140.0).evaluate(a) == first


def test_evaluate_does_not_modify_input():
    fn = ShiftedRotatedAckley(2, 0.0)
    x = np.array([1.0, -3.0])
    fn.evaluate(x)
    np.testing.assert_array_equal(x, [1.0, -3.0])


@pytest.mark.parametrize("x", [np.zeros(3), np.zeros(1), np.zeros((2, 2))])
def test_wrong_length_raises_dimension_mismatch(x):
    fn = ShiftedRotatedAckley(2, 0.0)
    with pytest.raises(DimensionMismatchError) as excinfo:
        fn.evaluate(x)
    assert excinfo.value.details["expected"] == 2


def test_dimension_mismatch_is_a_value_error():
    fn = ShiftedRotatedAckley(2, 0.0)
    with pytest.raises(ValueError):
        fn.evaluate([1.0, 2.0, 3.0])


def test_unknown_default_dimension_raises_not_found():
    with pytest.raises(ResourceNotFoundError) as excinfo:
        ShiftedRotatedAckley(7, 0.0)
    assert "ackley_M_D7.txt" in str(excinfo.value)


def test_missing_explicit_files_raise_not_found(tmp_path):
    with pytest.raises(ResourceNotFoundError):
        ShiftedRotatedAckley(2, 0.0, tmp_path / "nope.txt", str(tmp_path / "m_D"))


def test_short_matrix_file_raises_load_error(tmp_path):
    shift_file, prefix = _write_data(tmp_path, [0.0, 0.0, 0.0], [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    with pytest.raises(ResourceLoadError):
        ShiftedRotatedAckley(3, 0.0, shift_file, prefix)


def test_non_numeric_shift_file_raises_load_error(tmp_path):
    shift_file, prefix = _write_data(tmp_path, ["0.0", "abc"], [[1.0, 0.0], [0.0, 1.0]])
    with pytest.raises(ResourceLoadError) as excinfo:
        ShiftedRotatedAckley(2, 0.0, shift_file, prefix)
    assert not isinstance(excinfo.value, ResourceNotFoundError)


def test_explicit_mode_requires_both_files(tmp_path):
    shift_file, _ = _write_data(tmp_path, [0.0, 0.0], [[1.0, 0.0], [0.0, 1.0]])
    with pytest.raises(MissingConfigError):
        ShiftedRotatedAckley(2, 0.0, shift_file)


def test_non_positive_dimension_is_rejected():
    with pytest.raises(ConfigurationError):
        ShiftedRotatedAckley(0, 0.0)


def test_spawn_shares_data_with_fresh_buffers():
    fn = ShiftedRotatedAckley(10, -140.0)
    worker = fn.spawn()
    assert worker.shift_vector is fn.shift_vector
    assert worker.rotation_matrix is fn.rotation_matrix
    assert worker._shifted is not fn._shifted
    assert worker._rotated is not fn._rotated
    x = np.linspace(-10.0, 10.0, 10)
    assert worker.evaluate(x) == fn.evaluate(x)


def test_construction_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="evocore")
    ShiftedRotatedAckley(2, 0.0)
    assert ShiftedRotatedAckley.FUNCTION_NAME in caplog.text
    assert "ackley_M_D2.txt" in caplog.text


def test_problem_wrapper_fills_objectives():
    problem = CEC2005F08Problem(n_var=10, bias=-140.0)
    assert problem.n_var == 10
    assert problem.n_obj == 1
    assert problem.xl == -32.0 and problem.xu == 32.0
    X = np.vstack([problem.function.shift_vector, np.zeros(10), np.full(10, 5.0)])
    out: dict[str, np.ndarray] = {}
    problem.evaluate(X, out)
    assert out["F"].shape == (3, 1)
    assert out["F"][0, 0] == pytest.approx(-140.0, abs=1e-9)
    assert out["F"][1, 0] == problem.function.evaluate(np.zeros(10))


def test_problem_wrapper_writes_into_preallocated_buffer(tmp_path):
    shift_file, prefix = _write_data(tmp_path, [0.0, 0.0], [[1.0, 0.0], [0.0, 1.0]])
    fn = ShiftedRotatedAckley(2, 1.0, shift_file, prefix, optimum_on_bounds=False)
    problem = CEC2005F08Problem(function=fn)
    F = np.empty((2, 1))
    problem.evaluate(np.zeros((2, 2)), {"F": F})
    np.testing.assert_allclose(F, [[1.0], [1.0]], atol=1e-9)


def test_explicit_files_with_default_arguments_keep_shift_vector(tmp_path):
    shift_file, prefix = _write_data(tmp_path, [0.0, 0.0], [[1.0, 0.0], [0.0, 1.0]])
    fn = ShiftedRotatedAckley(2, 0.0, shift_file, prefix)
    np.testing.assert_array_equal(fn.shift_vector, [0.0, 0.0])
    assert fn.evaluate([0.0, 0.0]) == pytest.approx(0.0, abs=1e-9)


def test_explicit_files_optimum_equals_bias_at_given_shift(tmp_path):
    shift = [1.5, -2.0, 3.0]
    shift_file, prefix = _write_data(tmp_path, shift, np.eye(3).tolist())
    fn = ShiftedRotatedAckley(3, -140.0, shift_file, prefix)
    assert fn.evaluate(shift) == pytest.approx(-140.0, abs=1e-9)


def test_explicit_files_can_opt_into_optimum_on_bounds(tmp_path):
    shift_file, prefix = _write_data(tmp_path, [1.5, -2.0, 3.0], np.eye(3).tolist())
    fn = ShiftedRotatedAckley(3, 0.0, shift_file, prefix, optimum_on_bounds=True)
    np.testing.assert_array_equal(fn.shift_vector, [-32.0, -2.0, -32.0])


def test_problem_wrapper_satisfies_problem_protocol():
    problem: ProblemProtocol = CEC2005F08Problem(n_var=2, bias=0.0)
    assert isinstance(problem, ProblemProtocol)
    assert problem.encoding == "real"
    assert problem.n_constraints == 0
