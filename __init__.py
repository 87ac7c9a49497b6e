"""cliffgen — geometric product generator for Clifford algebras."""

__version__ = "0.1.0"

from core.generation import generate
from core.product import get_product
from core.algebra import CliffordAlgebra
from core.multivector import Multivector

__all__ = [
    "__version__",
    "generate",
    "get_product",
    "CliffordAlgebra",
    "Multivector",
]
