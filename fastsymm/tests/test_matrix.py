from .utils import get_test_devices, init_device
from fastsymm import Matrix, symm
import torch
import pytest

devices = get_test_devices()


def test_offset():
    assert Matrix.offset(0, 0, 3) == 0
    assert Matrix.offset(2, 0, 3) == 2
    assert Matrix.offset(1, 2, 5) == 11


@pytest.mark.parametrize("device", devices)
def test_view_shares_memory(device):
    device = init_device(device)
    buffer = torch.zeros([8], dtype=torch.double, device=device)
    mat = Matrix(buffer)

    view = mat.view(3, 2, 4)
    assert view.shape == (3, 2)
    view[2, 1] = 5
    assert buffer[Matrix.offset(2, 1, 4)].item() == 5
    assert buffer.sum().item() == 5

    with pytest.raises(ValueError):
        mat.view(3, 3, 4)


@pytest.mark.parametrize("device", devices)
def test_dense_roundtrip(device):
    device = init_device(device)
    x = torch.randn([3, 4], dtype=torch.double, device=device)

    mat = Matrix.from_dense(x, ld=5)
    assert not mat.is_complex
    assert len(mat.real) == 20
    padding = mat.real.reshape([4, 5])[:, 3:]
    assert torch.equal(padding, torch.zeros_like(padding))
    assert torch.equal(mat.to_dense(3, 4, 5), x)

    mat = Matrix.from_dense(x, imag=True)
    assert mat.is_complex
    assert torch.equal(mat.imag, torch.zeros_like(mat.imag))

    z = torch.randn([3, 4], dtype=torch.complex128, device=device)
    mat = Matrix.from_dense(z)
    assert mat.is_complex
    assert mat.dtype == torch.double
    assert torch.equal(mat.to_dense(3, 4), z)

    with pytest.raises(ValueError):
        Matrix.from_dense(x, ld=2)
    with pytest.raises(ValueError):
        Matrix.from_dense(x[0])


def test_bad_buffers():
    with pytest.raises(ValueError):
        Matrix(torch.zeros([2, 2]))
    with pytest.raises(ValueError):
        Matrix(torch.zeros([8])[::2])
    with pytest.raises(ValueError):
        Matrix(torch.zeros([4]), torch.zeros([3]))
    with pytest.raises(TypeError):
        Matrix(torch.zeros([4], dtype=torch.float),
               torch.zeros([4], dtype=torch.double))


def test_numpy_buffers_updated_in_place():
    np = pytest.importorskip('numpy')
    a = np.asarray([2., 3., 3., 4.])
    b = np.asarray([1., 0., 0., 1.])
    c = np.zeros([4])
    symm('l', 'u', 2, 2, 1, a, 2, b, 2, 0, c, 2)
    assert c.tolist() == [2, 3, 3, 4]
