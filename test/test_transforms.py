import numpy as np
import pytest
from simfourier.engine import ShapeKey
from simfourier.errors import UnsupportedShapeError
from simfourier.registry import TransformRegistry
from simfourier.transforms import TransformDispatcher
from simfourier.vectors import ComplexVector, from_array

def test_fft2d_roundtrip_scale_one():
    img = np.random.rand(32, 48) + 1j * np.random.rand(32, 48)
    vec = from_array(img)
    orig = vec.data.copy()
    d = TransformDispatcher()
    d.fft2d(vec, inverse=False)
    assert not np.allclose(vec.data, orig)
    d.fft2d(vec, inverse=True)
    assert np.allclose(vec.data, orig, atol=1e-5)

def test_fft1d_roundtrip_and_packed():
    d = TransformDispatcher()
    v = ComplexVector(20)
    v.data[:] = np.random.rand(40).astype(np.float32)
    orig = v.data.copy()
    d.fft1d(v, inverse=False)
    assert np.allclose(v.as_array(), np.fft.fft(orig.view(np.complex64)), atol=1e-4)
    d.fft1d_packed(v.data, inverse=True)
    assert np.allclose(v.data, orig, atol=1e-5)

def test_dispatch_populates_shared_registry():
    reg = TransformRegistry()
    d1, d2 = TransformDispatcher(reg), TransformDispatcher(reg)
    d1.transform_2d(np.zeros(2 * 8 * 4, dtype=np.float32), 8, 4, False)
    d2.transform_1d(np.zeros(2 * 8, dtype=np.float32), 8, True)
    d2.transform_2d(np.zeros(2 * 8 * 4, dtype=np.float32), 8, 4, True)
    assert reg.keys() == [ShapeKey.two_d(8, 4), ShapeKey.one_d(8)]

def test_dispatch_rejects_empty_shape():
    d = TransformDispatcher()
    with pytest.raises(UnsupportedShapeError):
        d.fft1d_packed(np.zeros(0, dtype=np.float32), inverse=False)
    assert len(d.registry) == 0
