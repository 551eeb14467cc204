__all__ = ['check_arguments', 'symm_']
from ..errors import InvalidArgumentError
from ..utils import lower_char


def check_arguments(side: str, uplo: str, m: int, n: int,
                    lda: int, ldb: int, ldc: int) -> int:
    """Return the position of the first illegal argument (0 if none).

    Positions refer to the signature
    `(side, uplo, m, n, alpha, a, lda, b, ldb, beta, c, ldc)`.
    Selectors must already be normalized.
    """
    nrowa = m if side == 'l' else n
    if side not in ('l', 'r'):
        return 1
    if uplo not in ('u', 'l'):
        return 2
    if m < 0:
        return 3
    if n < 0:
        return 4
    if lda < max(1, nrowa):
        return 7
    if ldb < max(1, m):
        return 9
    if ldc < max(1, m):
        return 12
    return 0


def _check_backend(arith, *mats):
    parts = [part for mat in mats for part in arith.parts(mat)]
    dtype, device = parts[0].dtype, parts[0].device
    if not dtype.is_floating_point:
        raise TypeError('Expected floating point buffers. Got {}.'
                        .format(dtype))
    for part in parts[1:]:
        if part.dtype != dtype or part.device != device:
            raise TypeError('All buffers must have the same dtype and device. '
                            'Got ({}, {}) and ({}, {}).'
                            .format(dtype, device, part.dtype, part.device))


def symm_(arith, routine, side, uplo, m, n, alpha, a, lda, b, ldb,
          beta, c, ldc):
    """Validate, short-circuit and dispatch to one of the four engines.

    `a`, `b` and `c` must be `Matrix` objects. `arith` is `Real` or
    `Complex`. `c` is modified in place.
    """
    side = lower_char(side)
    uplo = lower_char(uplo)
    info = check_arguments(side, uplo, m, n, lda, ldb, ldc)
    if info:
        raise InvalidArgumentError(routine, info)
    alpha = arith.scalar(alpha)
    beta = arith.scalar(beta)

    if m == 0 or n == 0 or (arith.is_zero(alpha) and arith.is_one(beta)):
        return

    nrowa = m if side == 'l' else n
    a = arith.view(a, nrowa, nrowa, lda)
    b = arith.view(b, m, n, ldb)
    c = arith.view(c, m, n, ldc)
    _check_backend(arith, a, b, c)

    if arith.is_zero(alpha):
        # C is never read when beta == 0 (it may hold garbage)
        if arith.is_zero(beta):
            arith.zero_(c)
        else:
            arith.scale_(c, beta)
        return

    _engines[side, uplo](arith, m, n, alpha, a, b, beta, c)


# ----------------------------------------------------------------------
#   Engines
# ----------------------------------------------------------------------
# All engines compute C := alpha * A @ B + beta * C (left) or
# C := alpha * B @ A + beta * C (right), reading only the stored
# triangle of A. The prior value of C(i, j) is read only if beta != 0.


def _left_upper(arith, m, n, alpha, a, b, beta, c):
    at, mul, add = arith.at, arith.mul, arith.add
    beta_is_zero = arith.is_zero(beta)
    col = slice(None)
    for j in range(n):
        bj = at(b, col, j)
        cj = at(c, col, j)
        for i in range(m):
            ai = at(a, col, i)
            above = slice(0, i)
            temp1 = mul(alpha, at(bj, i))
            arith.axpy_(at(cj, above), temp1, at(ai, above))
            temp2 = arith.dot(at(bj, above), at(ai, above))
            value = add(mul(temp1, at(ai, i)), mul(alpha, temp2))
            if not beta_is_zero:
                value = add(value, mul(beta, at(cj, i)))
            arith.put_(cj, i, value)


def _left_lower(arith, m, n, alpha, a, b, beta, c):
    at, mul, add = arith.at, arith.mul, arith.add
    beta_is_zero = arith.is_zero(beta)
    col = slice(None)
    for j in range(n):
        bj = at(b, col, j)
        cj = at(c, col, j)
        for i in reversed(range(m)):
            ai = at(a, col, i)
            below = slice(i + 1, m)
            temp1 = mul(alpha, at(bj, i))
            arith.axpy_(at(cj, below), temp1, at(ai, below))
            temp2 = arith.dot(at(bj, below), at(ai, below))
            value = add(mul(temp1, at(ai, i)), mul(alpha, temp2))
            if not beta_is_zero:
                value = add(value, mul(beta, at(cj, i)))
            arith.put_(cj, i, value)


def _right(arith, n, alpha, stored, b, beta, c):
    # `stored(k, j)` returns the element of A that holds A(k, j)
    at, mul = arith.at, arith.mul
    beta_is_zero = arith.is_zero(beta)
    col = slice(None)
    for j in range(n):
        cj = at(c, col, j)
        temp1 = mul(alpha, stored(j, j))
        if beta_is_zero:
            arith.copy_(cj, mul(temp1, at(b, col, j)))
        else:
            arith.copy_(cj, arith.add(mul(beta, cj), mul(temp1, at(b, col, j))))
        for k in range(n):
            if k == j:
                continue
            temp1 = mul(alpha, stored(k, j))
            arith.axpy_(cj, temp1, at(b, col, k))


def _right_upper(arith, m, n, alpha, a, b, beta, c):
    def stored(k, j):
        return arith.at(a, min(k, j), max(k, j))
    _right(arith, n, alpha, stored, b, beta, c)


def _right_lower(arith, m, n, alpha, a, b, beta, c):
    def stored(k, j):
        return arith.at(a, max(k, j), min(k, j))
    _right(arith, n, alpha, stored, b, beta, c)


_engines = {
    ('l', 'u'): _left_upper,
    ('l', 'l'): _left_lower,
    ('r', 'u'): _right_upper,
    ('r', 'l'): _right_lower,
}
