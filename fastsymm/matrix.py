"""
## Overview

A `Matrix` is a view over a dense, column-major buffer. Element
`(i, j)` (0-based) of a matrix with leading dimension `ld` lives at
offset `j * ld + i` in the buffer, i.e.:

    ld = 3, rows = 2, cols = 2

    [ a c ]
    [ b d ]   =>  [a b . c d .]

The leading dimension is not stored in the matrix: it is provided by
each routine call, so that the same buffer can be interpreted as
different sub-matrices.

Complex matrices hold their real and imaginary parts in two parallel
buffers with identical offsets. A matrix is complex if and only if an
imaginary buffer is provided.

---
"""
__all__ = ['Matrix']
import torch
from torch import Tensor
from typing import Optional, Union
from ._impl.arith import ComplexPair


def _as_buffer(x, name: str) -> Tensor:
    x = torch.as_tensor(x)
    if x.dim() != 1:
        raise ValueError('Buffer `{}` must be one-dimensional. Got shape {}.'
                         .format(name, tuple(x.shape)))
    if x.numel() > 1 and x.stride(0) != 1:
        raise ValueError('Buffer `{}` must be contiguous. Got stride {}.'
                         .format(name, x.stride(0)))
    return x


class Matrix:
    """Column-major matrix buffer(s).

    Parameters
    ----------
    real : `(N,) tensor_like`
        Real part (or the whole matrix for real matrices).
        Numpy arrays are wrapped without copy.
    imag : `(N,) tensor_like`, optional
        Imaginary part. Must have the same dtype, device and length
        as `real`.
    """

    def __init__(self, real, imag=None):
        self.real = _as_buffer(real, 'real')
        self.imag = None
        if imag is not None:
            imag = _as_buffer(imag, 'imag')
            if imag.dtype != self.real.dtype or imag.device != self.real.device:
                raise TypeError('Real and imaginary buffers must have the same '
                                'dtype and device. Got ({}, {}) and ({}, {}).'
                                .format(self.real.dtype, self.real.device,
                                        imag.dtype, imag.device))
            if len(imag) != len(self.real):
                raise ValueError('Real and imaginary buffers must have the same '
                                 'length. Got {} and {}.'
                                 .format(len(self.real), len(imag)))
            self.imag = imag

    def __repr__(self):
        kind = 'complex' if self.is_complex else 'real'
        return 'Matrix({}, numel={}, dtype={}, device={})'.format(
            kind, len(self.real), self.dtype, self.device)

    @property
    def is_complex(self) -> bool:
        return self.imag is not None

    @property
    def dtype(self) -> torch.dtype:
        return self.real.dtype

    @property
    def device(self) -> torch.device:
        return self.real.device

    @staticmethod
    def offset(i: int, j: int, ld: int) -> int:
        """Buffer offset of the (0-based) element `(i, j)`."""
        return j * ld + i

    def _strided(self, buffer: Tensor, rows: int, cols: int, ld: int) -> Tensor:
        if rows and cols:
            needed = self.offset(rows - 1, cols - 1, ld) + 1
            if len(buffer) < needed:
                raise ValueError(
                    'Buffer too small for a ({}, {}) matrix with leading '
                    'dimension {}: needs {} elements, got {}.'
                    .format(rows, cols, ld, needed, len(buffer)))
        return buffer.as_strided([rows, cols], [1, ld], buffer.storage_offset())

    def view(self, rows: int, cols: int, ld: int) -> Union[Tensor, ComplexPair]:
        """Strided `(rows, cols)` view into the buffer(s).

        Writing into the returned view writes into the buffer.

        Parameters
        ----------
        rows, cols : `int`
            Shape of the (sub)matrix.
        ld : `int`
            Leading dimension, i.e., stride between consecutive columns.

        Returns
        -------
        view : `(rows, cols) tensor` or `ComplexPair` of tensors
            A single tensor for real matrices, a `(re, im)` pair of
            tensors for complex matrices.
        """
        real = self._strided(self.real, rows, cols, ld)
        if self.imag is None:
            return real
        return ComplexPair(real, self._strided(self.imag, rows, cols, ld))

    def to_dense(self, rows: int, cols: int, ld: Optional[int] = None) -> Tensor:
        """Copy the `(rows, cols)` matrix into a regular 2D tensor.

        Complex matrices are returned as native complex tensors.
        """
        ld = max(1, rows) if ld is None else ld
        dense = self.view(rows, cols, ld)
        if self.imag is None:
            return dense.clone()
        return torch.complex(dense.re, dense.im)

    @classmethod
    def from_dense(cls, x, ld: Optional[int] = None, imag: bool = False):
        """Pack a 2D tensor into a new column-major buffer.

        Parameters
        ----------
        x : `(rows, cols) tensor_like`
            Input matrix. Native complex tensors are split into their
            real and imaginary parts.
        ld : `int`, default=rows
            Leading dimension of the packed matrix.
            Padding elements are set to zero.
        imag : `bool`, default=False
            Always create an imaginary buffer, even if `x` is real.

        Returns
        -------
        mat : `Matrix`
        """
        x = torch.as_tensor(x)
        if x.dim() != 2:
            raise ValueError('Expected a 2D tensor. Got shape {}.'
                             .format(tuple(x.shape)))
        rows, cols = x.shape
        ld = max(1, rows) if ld is None else ld
        if ld < max(1, rows):
            raise ValueError('Leading dimension ({}) must be at least the '
                             'number of rows ({}).'.format(ld, rows))
        if x.is_complex():
            parts = [x.real, x.imag]
        elif imag:
            parts = [x, torch.zeros_like(x)]
        else:
            parts = [x]
        buffers = []
        for part in parts:
            buffer = part.new_zeros([ld * cols])
            buffer.as_strided([rows, cols], [1, ld]).copy_(part)
            buffers.append(buffer)
        return cls(*buffers)
