from .symm import symm, csymm
from .matrix import Matrix
from .errors import InvalidArgumentError, MissingImaginaryError
from .sugar import sym_fill, sym_mm
from ._impl.arith import ComplexPair
