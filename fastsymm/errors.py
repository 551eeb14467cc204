"""Errors raised by the symmetric-multiply routines.

Both error types derive from `ValueError` so that callers that already
guard against bad arguments with `except ValueError` keep working.
"""
__all__ = [
    'InvalidArgumentError', 'MissingImaginaryError',
    'wrong_arg_message', 'missing_imag_message',
]


def wrong_arg_message(routine: str, position: int) -> str:
    """Diagnostic for an illegal argument, in the style of BLAS `xerbla`."""
    return ('** On entry to {} parameter number {} had an illegal value'
            .format(routine.upper(), position))


def missing_imag_message(name: str) -> str:
    return ('Complex routine called with a real matrix: '
            'imaginary buffer `{}` is missing'.format(name))


class InvalidArgumentError(ValueError):
    """An argument failed validation.

    Attributes
    ----------
    routine : `str`
        Name of the routine that rejected the call.
    position : `int`
        1-based position of the first offending parameter in the
        routine's signature.
    """

    def __init__(self, routine: str, position: int):
        super().__init__(wrong_arg_message(routine, position))
        self.routine = routine
        self.position = position


class MissingImaginaryError(ValueError):
    """A complex routine received a matrix without imaginary buffer."""

    def __init__(self, name: str):
        super().__init__(missing_imag_message(name))
        self.name = name
