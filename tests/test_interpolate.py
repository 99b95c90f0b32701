"""Test cross-buffer interpolation.

Tests for pathmorph.buffers.interpolate:
    - Known morph between a 2-point and a 3-point buffer
    - w = 0 / w = 1 reproduce the aligned inputs exactly
    - Per-point weights reused cyclically
    - Monotonicity between the two aligned buffers
    - Weight validation, input immutability

Also covers the scalar helpers in pathmorph.buffers.numbers.

Run:
    pytest tests/test_interpolate.py -v
"""

import numpy as np
import pytest

from pathmorph.buffers import (
    InvalidArgumentError,
    MalformedBufferError,
    PerPoint,
    PointBuffer,
    Uniform,
    align,
    clamp,
    clamp01,
    interpolate,
    lerp,
)


# ============================================================================
# INTERPOLATE
# ============================================================================

def test_interpolate_known_morph(diagonal):
    out = interpolate([0, 0, 10, 0], diagonal, 0.5)
    assert out == [0, 0, 5, 2.5, 10, 5]


def test_interpolate_default_weight_is_half(diagonal):
    assert interpolate([0, 0, 10, 0], diagonal) == [0, 0, 5, 2.5, 10, 5]


def test_weight_zero_reproduces_aligned_source(square_open, diagonal):
    a, _ = align(diagonal, square_open)
    assert interpolate(diagonal, square_open, 0) == a


def test_weight_one_reproduces_aligned_target(square_open, diagonal):
    _, b = align(square_open, diagonal)
    assert interpolate(square_open, diagonal, 1) == b


def test_endpoint_weights_exact_for_awkward_values():
    a = [0.1, 0.2, 1 / 3, 2 / 3, 1e9, -1e-9]
    b = [7.7, -3.3, 1e-300, 5.5, 0.3, 0.7]
    assert interpolate(a, b, 0.0) == a
    assert interpolate(a, b, 1.0) == b


def test_weight_cycling(square_open):
    target = [100.0, 100.0, 200.0, 200.0, 300.0, 300.0, 400.0, 400.0]
    out = interpolate(square_open, target, [0, 1]).points
    src = np.asarray(square_open).reshape(-1, 2)
    dst = np.asarray(target).reshape(-1, 2)
    np.testing.assert_array_equal(out[0], src[0])
    np.testing.assert_array_equal(out[1], dst[1])
    np.testing.assert_array_equal(out[2], src[2])
    np.testing.assert_array_equal(out[3], dst[3])


def test_per_point_weights_full_length(diagonal):
    out = interpolate([0, 0, 0, 0, 0, 0], diagonal, [0.0, 0.5, 1.0])
    assert out == [0, 0, 2.5, 2.5, 10, 10]


def test_weight_variants_accepted(diagonal):
    source = [0, 0, 10, 0]
    assert interpolate(source, diagonal, Uniform(0.5)) == interpolate(source, diagonal, 0.5)
    assert interpolate(source, diagonal, PerPoint((0.5,))) == interpolate(source, diagonal, 0.5)


@pytest.mark.parametrize("w", np.linspace(0.0, 1.0, 11))
def test_monotonic_between_inputs(w, square_open, diagonal):
    a, b = align(square_open, diagonal)
    out = interpolate(square_open, diagonal, float(w)).coords
    lo = np.minimum(a.coords, b.coords)
    hi = np.maximum(a.coords, b.coords)
    assert np.all(out >= lo - 1e-12)
    assert np.all(out <= hi + 1e-12)


def test_output_count_is_max(square_open):
    out = interpolate([1.0, 1.0], square_open, 0.25)
    assert out.point_count == 4


def test_inputs_not_mutated(diagonal):
    source = [0.0, 0.0, 10.0, 0.0]
    weights = [0.2, 0.8]
    interpolate(source, diagonal, weights)
    assert source == [0.0, 0.0, 10.0, 0.0]
    assert weights == [0.2, 0.8]
    assert diagonal == [0.0, 0.0, 5.0, 5.0, 10.0, 10.0]


def test_returns_new_buffer(diagonal):
    buf = PointBuffer(diagonal)
    out = interpolate(buf, buf, 0.0)
    assert out == buf
    assert out is not buf


@pytest.mark.parametrize("bad", [-0.5, 1.5, [0.5, 2.0], [], float("nan")])
def test_invalid_weights(bad, diagonal):
    with pytest.raises(InvalidArgumentError):
        interpolate(diagonal, diagonal, bad)


def test_malformed_buffer_rejected(diagonal):
    with pytest.raises(MalformedBufferError):
        interpolate([0, 0, 1], diagonal)


# ============================================================================
# NUMBERS
# ============================================================================

def test_lerp_endpoints_exact():
    assert lerp(0.1, 0.7, 0.0) == 0.1
    assert lerp(0.1, 0.7, 1.0) == 0.7
    assert lerp(0.0, 10.0, 0.25) == 2.5


def test_lerp_arrays():
    np.testing.assert_allclose(lerp(np.zeros(3), np.ones(3) * 4, np.array([0, 0.5, 1])), [0, 2, 4])


def test_clamp():
    assert clamp(0, 1, 1.2) == 1
    assert clamp(0, 1, -2) == 0
    assert clamp(0, 1, 0.5) == 0.5
    np.testing.assert_array_equal(clamp01(np.array([-1.0, 0.3, 4.0])), [0.0, 0.3, 1.0])


def test_clamp_inverted_bounds():
    with pytest.raises(InvalidArgumentError, match="inverted"):
        clamp(1, 0, 0.5)
