# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Multivector Container Class.

One wrapper for every dimension: the coefficient count follows from the
algebra, so there is no per-dimension type. Enables ``A * B`` for the
geometric product next to componentwise ``+``, ``-``, ``* s`` and ``/ s``.
"""

import numbers

import torch

from core.algebra import CliffordAlgebra


class Multivector:
    """Object-oriented wrapper for multivector tensors.

    Attributes:
        algebra (CliffordAlgebra): The underlying algebra kernel.
        tensor (torch.Tensor): The raw coefficient tensor [..., Dim].
    """

    def __init__(self, algebra: CliffordAlgebra, tensor: torch.Tensor):
        """Initializes a Multivector.

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            tensor (torch.Tensor): Coefficients.
        """
        self.algebra = algebra
        self.tensor = tensor

    @classmethod
    def zeros(cls, algebra: CliffordAlgebra, dtype=torch.float64):
        return cls(algebra, torch.zeros(algebra.dim, dtype=dtype, device=algebra.device))

    @classmethod
    def scalar(cls, algebra: CliffordAlgebra, value=1.0, dtype=torch.float64):
        """The scalar ``value`` (the unit by default)."""
        mv = cls.zeros(algebra, dtype=dtype)
        mv.tensor[0] = value
        return mv

    @classmethod
    def basis_vector(cls, algebra: CliffordAlgebra, d: int, dtype=torch.float64):
        """Unit vector ``e_d``."""
        return cls(algebra, algebra.basis_vector((d,), dtype=dtype))

    @classmethod
    def pseudoscalar(cls, algebra: CliffordAlgebra, dtype=torch.float64):
        return cls(algebra, algebra.basis_vector(tuple(range(algebra.n)), dtype=dtype))

    @classmethod
    def from_vectors(cls, algebra: CliffordAlgebra, vectors: torch.Tensor):
        """Creates a Multivector from dense vectors (Grade 1).

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            vectors (torch.Tensor): Vectors [..., n].

        Returns:
            Multivector: Wrapper instance.
        """
        return cls(algebra, algebra.embed_vector(vectors))

    def __repr__(self):
        return f"Multivector(shape={tuple(self.tensor.shape)}, dimension={self.algebra.n})"

    def __len__(self):
        return self.tensor.shape[-1]

    def __getitem__(self, index):
        """Coefficient(s) along the last axis."""
        return self.tensor[..., index]

    def __setitem__(self, index, value):
        self.tensor[..., index] = value

    def _check_algebra(self, other):
        assert self.algebra.n == other.algebra.n, (
            f"Algebras must match, got dimensions {self.algebra.n} and {other.algebra.n}"
        )

    def __add__(self, other):
        """Componentwise addition."""
        if isinstance(other, Multivector):
            self._check_algebra(other)
            return Multivector(self.algebra, self.tensor + other.tensor)
        return NotImplemented

    def __sub__(self, other):
        """Componentwise subtraction."""
        if isinstance(other, Multivector):
            self._check_algebra(other)
            return Multivector(self.algebra, self.tensor - other.tensor)
        return NotImplemented

    def __neg__(self):
        return Multivector(self.algebra, -self.tensor)

    def __mul__(self, other):
        """Geometric Product (A * B), or scaling by a number."""
        if isinstance(other, Multivector):
            self._check_algebra(other)
            res = self.algebra.geometric_product(self.tensor, other.tensor)
            return Multivector(self.algebra, res)
        elif isinstance(other, (numbers.Number, torch.Tensor)):
            return Multivector(self.algebra, self.tensor * other)
        else:
            return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (numbers.Number, torch.Tensor)):
            return Multivector(self.algebra, other * self.tensor)
        return NotImplemented

    def __truediv__(self, other):
        """Componentwise division by a scalar."""
        if isinstance(other, (numbers.Number, torch.Tensor)):
            return Multivector(self.algebra, self.tensor / other)
        return NotImplemented

    def grade(self, k: int):
        """Projects to grade k."""
        return Multivector(self.algebra, self.algebra.grade_projection(self.tensor, k))

    def allclose(self, other, atol: float = 1e-4) -> bool:
        """Every coefficient within *atol* of the other multivector's."""
        self._check_algebra(other)
        return bool(((self.tensor - other.tensor).abs() < atol).all())
