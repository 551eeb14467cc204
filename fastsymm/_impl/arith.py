"""Element arithmetic shared by the real and complex engines.

The engine in `_impl.symm` is written once against the operations
below. `Real` works on plain tensors, `Complex` on `ComplexPair`s whose
real and imaginary parts are held in parallel tensors. Operands may be
python scalars, 0-d elements, columns or whole matrix views: every
operation broadcasts.
"""
__all__ = ['ComplexPair', 'Real', 'Complex']
import torch
from torch import Tensor
from typing import Any, NamedTuple


class ComplexPair(NamedTuple):
    """Complex value stored as separate real and imaginary parts."""
    re: Any
    im: Any


class Real:

    @staticmethod
    def scalar(x) -> float:
        if isinstance(x, (int, float)):
            return float(x)
        # numpy and torch scalars: float() would drop the imaginary part
        if isinstance(x, (tuple, list)) or torch.as_tensor(x).is_complex():
            raise TypeError('Real routine called with a complex scalar. '
                            'Use the complex routine instead.')
        return float(torch.as_tensor(x).item())

    @staticmethod
    def is_zero(x) -> bool:
        return x == 0

    @staticmethod
    def is_one(x) -> bool:
        return x == 1

    @staticmethod
    def view(mat, rows: int, cols: int, ld: int) -> Tensor:
        if mat.is_complex:
            raise TypeError('Real routine called with a complex matrix. '
                            'Use the complex routine instead.')
        return mat.view(rows, cols, ld)

    @staticmethod
    def parts(x):
        return (x,)

    @staticmethod
    def at(x, *index):
        return x[index]

    @staticmethod
    def put_(x, index, value):
        x[index] = value

    @staticmethod
    def copy_(x, value):
        x.copy_(value)

    @staticmethod
    def zero_(x):
        x.zero_()

    @staticmethod
    def scale_(x, a):
        x.mul_(a)

    @staticmethod
    def axpy_(y, a, x):
        # y += a * x
        y.addcmul_(x, a)

    @staticmethod
    def mul(x, y):
        return x * y

    @staticmethod
    def add(x, y):
        return x + y

    @staticmethod
    def dot(x, y):
        return torch.dot(x, y)


class Complex:

    @staticmethod
    def scalar(x) -> ComplexPair:
        if torch.is_tensor(x):
            x = x.item()
        if isinstance(x, (tuple, list)):
            re, im = x
            return ComplexPair(float(re), float(im))
        x = complex(x)
        return ComplexPair(x.real, x.imag)

    @staticmethod
    def is_zero(x) -> bool:
        return x.re == 0 and x.im == 0

    @staticmethod
    def is_one(x) -> bool:
        return x.re == 1 and x.im == 0

    @staticmethod
    def view(mat, rows: int, cols: int, ld: int) -> ComplexPair:
        return mat.view(rows, cols, ld)

    @staticmethod
    def parts(x):
        return (x.re, x.im)

    @staticmethod
    def at(x, *index):
        return ComplexPair(x.re[index], x.im[index])

    @staticmethod
    def put_(x, index, value):
        x.re[index] = value.re
        x.im[index] = value.im

    @staticmethod
    def copy_(x, value):
        x.re.copy_(value.re)
        x.im.copy_(value.im)

    @staticmethod
    def zero_(x):
        x.re.zero_()
        x.im.zero_()

    @classmethod
    def scale_(cls, x, a):
        cls.copy_(x, cls.mul(a, x))

    @staticmethod
    def axpy_(y, a, x):
        # y += a * x
        y.re.addcmul_(x.re, a.re).addcmul_(x.im, a.im, value=-1)
        y.im.addcmul_(x.im, a.re).addcmul_(x.re, a.im)

    @staticmethod
    def mul(x, y):
        return ComplexPair(x.re * y.re - x.im * y.im,
                           x.re * y.im + x.im * y.re)

    @staticmethod
    def add(x, y):
        return ComplexPair(x.re + y.re, x.im + y.im)

    @staticmethod
    def dot(x, y):
        return ComplexPair(torch.dot(x.re, y.re) - torch.dot(x.im, y.im),
                           torch.dot(x.re, y.im) + torch.dot(x.im, y.re))
