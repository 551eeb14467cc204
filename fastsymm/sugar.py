"""
## Overview

This module contains "syntactic sugar" around the BLAS-style routines
of `fastsymm.symm`. Rather than column-major buffers and leading
dimensions, functions here take regular 2D tensors, pack them, run the
in-place routine, and unpack the result.

For example, `sym_mm(a, b)` computes `sym_fill(a) @ b` while only
ever reading the upper triangle of `a`.

---
"""
__all__ = ['sym_fill', 'sym_mm']
import torch
from torch import Tensor
from functools import reduce
from typing import Literal, Optional
from .matrix import Matrix
from .symm import symm, csymm
from .typing import ComplexScalar
from .utils import lower_char


def sym_fill(a: Tensor, uplo: Literal['upper', 'lower'] = 'upper') -> Tensor:
    r"""Build the full symmetric matrix stored in one triangle

    Parameters
    ----------
    a : `(m, m) tensor`
        Square matrix. Only its `uplo` triangle is used; the other
        triangle may hold anything (including NaNs).
    uplo : `{'upper', 'lower'}`, default='upper'
        Triangle that holds the data.

    Returns
    -------
    full : `(m, m) tensor`
        Symmetric matrix.

    """
    a = torch.as_tensor(a)
    if a.dim() != 2 or a.shape[0] != a.shape[1]:
        raise ValueError('Expected a square matrix. Got shape {}.'
                         .format(tuple(a.shape)))
    uplo_ = lower_char(uplo)
    if uplo_ == 'u':
        tri = a.triu()
        return tri + tri.triu(1).transpose(0, 1)
    elif uplo_ == 'l':
        tri = a.tril()
        return tri + tri.tril(-1).transpose(0, 1)
    else:
        raise ValueError('Unknown triangle {}.'.format(uplo))


def sym_mm(
        a: Tensor,
        b: Tensor,
        c: Optional[Tensor] = None,
        alpha: ComplexScalar = 1,
        beta: ComplexScalar = 0,
        side: Literal['left', 'right'] = 'left',
        uplo: Literal['upper', 'lower'] = 'upper',
        out: Optional[Tensor] = None,
) -> Tensor:
    r"""Symmetric matrix product $\alpha\mathbf{AB} + \beta\mathbf{C}$

    Parameters
    ----------
    a : `(k, k) tensor`
        Symmetric matrix, of which only the `uplo` triangle is read.
        `k = m` if `side='left'`, else `k = n`.
    b : `(m, n) tensor`
        General matrix.
    c : `(m, n) tensor`, optional
        Matrix to accumulate into. If not provided, `beta` is ignored.
    alpha : `float or complex`, default=1
        Scaling of the product.
    beta : `float or complex`, default=0
        Scaling of `c`. If zero, the content of `c` is never read.
    side : `{'left', 'right'}`, default='left'
        Compute `alpha * A @ B` (left) or `alpha * B @ A` (right).
    uplo : `{'upper', 'lower'}`, default='upper'
        Triangle of `a` that holds the data.
    out : `(m, n) tensor`, optional
        Output placeholder. May be `c`. Must be complex if the
        result is.

    Returns
    -------
    out : `(m, n) tensor`
        Result. Complex if any input or scalar is complex.

    """
    side_ = lower_char(side)
    if side_ not in ('l', 'r'):
        raise ValueError('Unknown side {}.'.format(side))
    a = torch.as_tensor(a)
    b = torch.as_tensor(b, device=a.device)
    if a.dim() != 2 or b.dim() != 2:
        raise ValueError('Expected 2D tensors. Got shapes {} and {}.'
                         .format(tuple(a.shape), tuple(b.shape)))
    m, n = b.shape
    k = m if side_ == 'l' else n
    if tuple(a.shape) != (k, k):
        raise ValueError('Expected `a` with shape ({}, {}). Got {}.'
                         .format(k, k, tuple(a.shape)))
    tensors = [a, b]
    if c is None:
        beta = 0
    else:
        c = torch.as_tensor(c, device=a.device)
        if tuple(c.shape) != (m, n):
            raise ValueError('Expected `c` with shape ({}, {}). Got {}.'
                             .format(m, n, tuple(c.shape)))
        tensors.append(c)

    dtype = reduce(torch.promote_types, [t.dtype for t in tensors])
    if not (dtype.is_floating_point or dtype.is_complex):
        dtype = torch.get_default_dtype()
    is_complex = (dtype.is_complex or
                  any(isinstance(s, (tuple, list)) or
                      torch.as_tensor(s).is_complex() for s in (alpha, beta)))
    if is_complex:
        dtype = torch.promote_types(dtype, torch.complex64)
    if c is None:
        c = torch.zeros([m, n], dtype=dtype, device=a.device)

    a_ = Matrix.from_dense(a.to(dtype))
    b_ = Matrix.from_dense(b.to(dtype))
    c_ = Matrix.from_dense(c.to(dtype))
    routine = csymm if is_complex else symm
    routine(side_, uplo, m, n, alpha, a_, max(1, k), b_, max(1, m),
            beta, c_, max(1, m))
    result = c_.to_dense(m, n)

    if out is not None:
        if result.is_complex() and not out.is_complex():
            raise TypeError('Complex result cannot be written into a real '
                            '`out` ({}).'.format(out.dtype))
        return out.copy_(result)
    return result
