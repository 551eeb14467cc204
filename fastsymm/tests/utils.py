import torch
from fastsymm import sym_fill


def get_test_devices():
    devices = [('cpu', 1), ('cpu', 4)]
    if torch.cuda.is_available():
        print('cuda backend available')
        devices.append('cuda')
    return devices


def init_device(device):
    if isinstance(device, (list, tuple)):
        device, param = device
    else:
        param = 1 if device == 'cpu' else 0
    if device == 'cuda':
        torch.cuda.set_device(param)
        torch.cuda.init()
        try:
            torch.cuda.empty_cache()
        except RuntimeError:
            pass
        device = '{}:{}'.format(device, param)
    else:
        assert device == 'cpu'
        torch.set_num_threads(param)
    device = torch.device(device)
    return device


def make_sym(k, uplo, **backend):
    """Random (k, k) matrix whose unreferenced triangle is filled with NaNs"""
    a = torch.randn([k, k], **backend)
    mask = torch.ones([k, k], dtype=torch.bool, device=a.device)
    mask = mask.tril(-1) if uplo[0] == 'u' else mask.triu(1)
    return a.masked_fill_(mask, float('nan'))


def reference(side, uplo, alpha, a, b, beta, c):
    """Dense `alpha * A @ B + beta * C` (or `B @ A`)"""
    a = sym_fill(a, uplo)
    ab = a.matmul(b) if side[0] == 'l' else b.matmul(a)
    return alpha * ab + beta * c


def tolerance(dtype, ulp=256):
    """Absolute/relative tolerance of `ulp` units in the last place"""
    return ulp * torch.finfo(dtype).eps
