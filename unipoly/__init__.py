from . import polyarray
from .field import Coefficient, Mod, divide
from .poly import Polynomial, gcd

__all__ = [
    "Coefficient",
    "Mod",
    "Polynomial",
    "divide",
    "gcd",
    "polyarray",
]
