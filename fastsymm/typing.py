from typing import TypeVar, Union, Tuple, Literal

T = TypeVar('T')
Pair = Tuple[T, T]
Side = Union[Literal['l', 'r', 'left', 'right'], str]
Uplo = Union[Literal['u', 'l', 'upper', 'lower'], str]
RealScalar = Union[int, float]
ComplexScalar = Union[RealScalar, complex, Pair[float]]
