"""
## Overview

This module implements the level-3 BLAS symmetric matrix-matrix product

    C := alpha * A @ B + beta * C     (side = 'l')
    C := alpha * B @ A + beta * C     (side = 'r')

where `A` is a symmetric matrix of which only one triangle is stored,
and `B`, `C` are `m x n` matrices. All matrices are column-major
`Matrix` buffers (see `fastsymm.matrix`) with their own leading
dimension, and `C` is updated in place.

Two variants are provided:

- `symm` for real matrices,
- `csymm` for complex matrices whose real and imaginary parts are
  stored in separate buffers. This is the symmetric (not Hermitian)
  product: no conjugation ever happens.

Selectors are case-insensitive and only their first character is used,
so `'L'`, `'left'` and `'l'` are equivalent.

When `beta == 0`, the input content of `C` is never read, so that it
can hold uninitialized values (including NaNs).

Invalid arguments raise an `InvalidArgumentError` whose `position`
attribute is the 1-based position of the offending parameter in the
signature. Nothing is written into `C` unless all checks pass.

---
"""
__all__ = ['symm', 'csymm']
from warnings import warn
from .matrix import Matrix
from .errors import MissingImaginaryError
from .typing import Side, Uplo, RealScalar, ComplexScalar
from ._impl.arith import Real, Complex
from ._impl.symm import symm_


def _as_matrix(x, writable: bool = False) -> Matrix:
    if isinstance(x, Matrix):
        return x
    if writable and isinstance(x, (list, tuple)):
        warn('`c` is a python sequence: it is copied into a tensor and '
             'the result cannot be written back.', RuntimeWarning)
    return Matrix(x)


def symm(
        side: Side,
        uplo: Uplo,
        m: int,
        n: int,
        alpha: RealScalar,
        a: Matrix,
        lda: int,
        b: Matrix,
        ldb: int,
        beta: RealScalar,
        c: Matrix,
        ldc: int,
) -> None:
    r"""Real symmetric matrix-matrix product, in place.

    Parameters
    ----------
    side : `{'l', 'r'}`
        Whether the symmetric matrix is on the left (`C = aAB + bC`)
        or on the right (`C = aBA + bC`).
    uplo : `{'u', 'l'}`
        Whether the upper or lower triangle of `a` is stored.
        The other triangle is never read.
    m : `int`
        Number of rows of `b` and `c`.
    n : `int`
        Number of columns of `b` and `c`.
    alpha : `float`
        Scaling of the product.
    a : `Matrix` or `(N,) tensor`
        Symmetric matrix, with shape `(m, m)` if `side='l'`
        or `(n, n)` if `side='r'`.
    lda : `int`
        Leading dimension of `a`.
    b : `Matrix` or `(N,) tensor`
        General matrix with shape `(m, n)`.
    ldb : `int`
        Leading dimension of `b`.
    beta : `float`
        Scaling of the input content of `c`.
        If zero, `c` does not need to be initialized.
    c : `Matrix` or `(N,) tensor`
        General matrix with shape `(m, n)`, overwritten with the result.
    ldc : `int`
        Leading dimension of `c`.

    Raises
    ------
    InvalidArgumentError
        If a selector, dimension or leading dimension is illegal.
    TypeError
        If the buffers are complex, do not share the same dtype and
        device, or if a scalar is complex.
    ValueError
        If a buffer is too small for its matrix.

    """
    a, b = _as_matrix(a), _as_matrix(b)
    c = _as_matrix(c, writable=True)
    symm_(Real, 'symm', side, uplo, m, n, alpha, a, lda, b, ldb,
          beta, c, ldc)


def csymm(
        side: Side,
        uplo: Uplo,
        m: int,
        n: int,
        alpha: ComplexScalar,
        a: Matrix,
        lda: int,
        b: Matrix,
        ldb: int,
        beta: ComplexScalar,
        c: Matrix,
        ldc: int,
) -> None:
    r"""Complex symmetric matrix-matrix product, in place.

    All matrices must hold an imaginary buffer.

    Parameters
    ----------
    side : `{'l', 'r'}`
        Whether the symmetric matrix is on the left (`C = aAB + bC`)
        or on the right (`C = aBA + bC`).
    uplo : `{'u', 'l'}`
        Whether the upper or lower triangle of `a` is stored.
        The other triangle is never read.
    m : `int`
        Number of rows of `b` and `c`.
    n : `int`
        Number of columns of `b` and `c`.
    alpha : `complex or (float, float)`
        Scaling of the product.
    a : `Matrix`
        Complex symmetric matrix, with shape `(m, m)` if `side='l'`
        or `(n, n)` if `side='r'`.
    lda : `int`
        Leading dimension of `a`.
    b : `Matrix`
        Complex matrix with shape `(m, n)`.
    ldb : `int`
        Leading dimension of `b`.
    beta : `complex or (float, float)`
        Scaling of the input content of `c`.
        If zero, `c` does not need to be initialized.
    c : `Matrix`
        Complex matrix with shape `(m, n)`, overwritten with the result.
    ldc : `int`
        Leading dimension of `c`.

    Raises
    ------
    MissingImaginaryError
        If `a`, `b` or `c` has no imaginary buffer.
    InvalidArgumentError
        If a selector, dimension or leading dimension is illegal.
    TypeError
        If the buffers do not share the same dtype and device.
    ValueError
        If a buffer is too small for its matrix.

    """
    a, b = _as_matrix(a), _as_matrix(b)
    c = _as_matrix(c, writable=True)
    for name, mat in zip('abc', (a, b, c)):
        if not mat.is_complex:
            raise MissingImaginaryError(name + '.imag')
    symm_(Complex, 'csymm', side, uplo, m, n, alpha, a, lda, b, ldb,
          beta, c, ldc)
