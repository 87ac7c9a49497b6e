# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Geometric product capability.

Every backend exposes the same ``combine(a, b)`` operation for a fixed
dimension, so callers select a product by ``(dimension, backend)`` instead
of by function name.
"""

from abc import ABC, abstractmethod

from core.emitter import compile_product
from core.generation import generate


class GeometricProduct(ABC):
    """A geometric product for multivectors of a fixed dimension.

    Attributes:
        dimension (int): Number of unit vectors D.
        dim (int): Coefficients per multivector (2^D).
    """

    def __init__(self, dimension: int):
        self.table = generate(dimension)
        self.dimension = self.table.dimension
        self.dim = self.table.dim

    @abstractmethod
    def combine(self, a, b):
        """Returns the geometric product ``ab`` as a new container."""
        raise NotImplementedError

    def __call__(self, a, b):
        return self.combine(a, b)

    def __repr__(self):
        return f"{type(self).__name__}(dimension={self.dimension})"


class TableProduct(GeometricProduct):
    """Evaluates the structure-constant table directly at call time.

    Each output coefficient is the sparse bilinear sum of its row. Works for
    any element type supporting ``+``, ``-`` and ``*``.
    """

    def combine(self, a, b):
        out = []
        for row in self.table.rows:
            negate, i, j = row[0]
            acc = a[i] * b[j]
            if negate:
                # Row heads pair the scalar with blade k, so this is unreachable
                # for generated tables.
                acc = -acc
            for negate, i, j in row[1:]:
                if negate:
                    acc = acc - a[i] * b[j]
                else:
                    acc = acc + a[i] * b[j]
            out.append(acc)
        return out


class CompiledProduct(GeometricProduct):
    """Calls the emitted, specialised ``geometric_product_D`` function."""

    def __init__(self, dimension: int):
        super().__init__(dimension)
        self.fn = compile_product(self.table)

    def combine(self, a, b):
        return self.fn(a, b)


def _torch_product(dimension: int):
    from core.algebra import CliffordAlgebra
    return CliffordAlgebra(dimension)


PRODUCT_BACKENDS = {
    'table': TableProduct,
    'compiled': CompiledProduct,
    'torch': _torch_product,
}


def get_product(dimension: int, backend: str = 'table') -> GeometricProduct:
    """Selects a geometric product by dimension and backend.

    Args:
        dimension (int): Number of unit vectors.
        backend (str): One of ``'table'``, ``'compiled'``, ``'torch'``.

    Returns:
        GeometricProduct: Object exposing ``combine(a, b)``.
    """
    if backend not in PRODUCT_BACKENDS:
        raise ValueError(
            f"Unknown product backend: {backend}. Available: {list(PRODUCT_BACKENDS.keys())}"
        )
    return PRODUCT_BACKENDS[backend](dimension)
