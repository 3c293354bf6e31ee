import numpy as np
import pytest
from simfourier.errors import NonSquareShapeError
from simfourier.shift import create_shift_vector, times_shift_vector
from simfourier.transforms import TransformDispatcher
from simfourier.vectors import create_cplx, from_array

def _random_cplx(n, seed=1):
    rng = np.random.default_rng(seed)
    return from_array(rng.random((n, n)) + 1j * rng.random((n, n)))

def test_zero_shift_is_all_ones():
    v = create_shift_vector(16, 0.0, 0.0, fast=False)
    assert np.all(v.data[0::2] == 1.0)
    assert np.all(v.data[1::2] == 0.0)

def test_shift_vector_values():
    n, kx, ky = 32, 1.25, -3.5
    v = create_shift_vector(n, kx, ky)
    y, x = np.mgrid[0:n, 0:n]
    expected = np.exp(1j * 2 * np.pi * (kx * x + ky * y) / n)
    assert np.allclose(v.as_array(), expected, atol=1e-5)

def test_fast_close_to_exact():
    for n, kx, ky in [(64, 3.3, -7.1), (128, 0.5, 12.25), (33, -2.0, 2.0)]:
        fast = create_shift_vector(n, kx, ky, fast=True)
        exact = create_shift_vector(n, kx, ky, fast=False)
        assert np.max(np.abs(fast.data - exact.data)) < 1e-4

def test_times_shift_vector_matches_elementwise_product():
    v = _random_cplx(24)
    expected = v.as_array() * create_shift_vector(24, 2.5, 1.0).as_array()
    times_shift_vector(v, 2.5, 1.0)
    assert v.data.size == 2 * 24 * 24
    assert np.allclose(v.as_array(), expected, atol=1e-5)

def test_shift_composition():
    a = _random_cplx(32)
    b = a.copy()
    times_shift_vector(a, 1.5, -2.25)
    times_shift_vector(a, 0.5, 3.0, fast=False)
    times_shift_vector(b, 2.0, 0.75)
    assert np.allclose(a.data, b.data, atol=1e-4)

def test_non_square_rejected():
    v = create_cplx(16, 8)
    with pytest.raises(NonSquareShapeError):
        times_shift_vector(v, 1.0, 1.0)

def test_same_result_for_any_worker_count():
    a = _random_cplx(48)
    b = a.copy()
    times_shift_vector(a, 3.7, -1.2, fast=True, workers=1)
    times_shift_vector(b, 3.7, -1.2, fast=True, workers=5)
    assert np.array_equal(a.data, b.data)

def test_phase_ramp_moves_impulse():
    # with forward FFT e^{-i...} convention, the +phase ramp moves content by (-kx, -ky)
    n = 32
    img = create_cplx(n, n)
    img.set(5, 7, 1.0)
    d = TransformDispatcher()
    d.fft2d(img, inverse=False)
    times_shift_vector(img, 2.0, 3.0)
    d.fft2d(img, inverse=True)
    mag = np.abs(img.as_array())
    y, x = np.unravel_index(int(np.argmax(mag)), mag.shape)
    assert (x, y) == (3, 4)
    assert np.isclose(mag[4, 3], 1.0, atol=1e-4)
