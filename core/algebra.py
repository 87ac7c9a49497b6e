# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

import torch

from core.product import GeometricProduct
from log import get_logger

logger = get_logger(__name__)


class CliffordAlgebra(GeometricProduct):
    """Batched geometric product kernel built from the structure constants.

    The sparse rows of the :class:`~core.generation.ProductTable` are laid
    out as dense ``[dim, dim]`` lookup tensors so the product of whole
    batches is a single gather + multiply + sum.

    Attributes:
        n (int): Number of unit vectors.
        dim (int): Total basis elements (2^n).
        basis (tuple): Canonical blades in coefficient order.
        device (str): Computation device.
    """
    _CACHED_TABLES = {}

    def __init__(self, n: int, device='cpu'):
        """Initialize the algebra and cache the Cayley table.

        Args:
            n (int): Number of orthogonal unit vectors.
            device (str, optional): The device on which computations are performed. Defaults to 'cpu'.
        """
        super().__init__(n)
        self.n = self.dimension
        self.basis = self.table.basis
        self.device = device

        cache_key = (self.n, str(device))
        if cache_key not in CliffordAlgebra._CACHED_TABLES:
            CliffordAlgebra._CACHED_TABLES[cache_key] = self._generate_cayley_table()

        (
            self.cayley_indices,
            self.cayley_signs,
            self.right_indices,
            self.gp_signs,
            self.grade_masks,
        ) = CliffordAlgebra._CACHED_TABLES[cache_key]

    @property
    def num_grades(self) -> int:
        """Counts the number of grades (n + 1)."""
        return self.n + 1

    def _generate_cayley_table(self):
        """Lay the structure-constant rows out as dense tensors.

        ``cayley_indices[i, j]`` is the output blade of ``e_i e_j`` and
        ``right_indices[i, k]`` the unique ``j`` with ``e_i e_j ~ e_k``.
        """
        dim = self.dim
        cayley = [[-1] * dim for _ in range(dim)]
        signs = [[0.0] * dim for _ in range(dim)]
        right = [[-1] * dim for _ in range(dim)]
        right_signs = [[0.0] * dim for _ in range(dim)]

        for k, row in enumerate(self.table.rows):
            for negate, i, j in row:
                sign = -1.0 if negate else 1.0
                if right[i][k] != -1:
                    raise RuntimeError(
                        f"blade {i} reaches blade {k} from both {right[i][k]} and {j}"
                    )
                cayley[i][j] = k
                signs[i][j] = sign
                right[i][k] = j
                right_signs[i][k] = sign

        if any(-1 in r for r in right):
            raise RuntimeError(f"incomplete structure constants for dimension {self.n}")

        grade_masks = []
        for g in range(self.n + 1):
            mask = torch.tensor(
                [len(blade) == g for blade in self.basis],
                dtype=torch.bool, device=self.device,
            )
            grade_masks.append(mask)

        logger.debug("dimension %d: cayley table %dx%d on %s", self.n, dim, dim, self.device)
        return (
            torch.tensor(cayley, dtype=torch.long, device=self.device),
            torch.tensor(signs, dtype=torch.float32, device=self.device),
            torch.tensor(right, dtype=torch.long, device=self.device),
            torch.tensor(right_signs, dtype=torch.float32, device=self.device),
            grade_masks,
        )

    def geometric_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the Geometric Product.

        Uses vectorized gather + broadcast multiply + sum. No Python loops,
        no length checks.

        Args:
            A (torch.Tensor): Left operand [..., Dim].
            B (torch.Tensor): Right operand [..., Dim].

        Returns:
            torch.Tensor: The product AB [..., Dim].
        """
        if self.right_indices.device != A.device:
            self.ensure_device(A.device)

        # B_gathered[..., i, k] = B[..., right[i, k]]
        B_gathered = B[..., self.right_indices]  # [..., D, D]

        signs = self.gp_signs
        if signs.dtype != A.dtype:
            signs = signs.to(dtype=A.dtype)

        # result[..., k] = sum_i A[..., i] * B[..., right[i, k]] * signs[i, k]
        return (A.unsqueeze(-1) * B_gathered * signs).sum(dim=-2)

    def combine(self, a, b):
        return self.geometric_product(a, b)

    def ensure_device(self, device) -> None:
        """Move cached tables to the given device if not already there."""
        if self.right_indices.device == device:
            return
        self.cayley_indices = self.cayley_indices.to(device)
        self.cayley_signs = self.cayley_signs.to(device)
        self.right_indices = self.right_indices.to(device)
        self.gp_signs = self.gp_signs.to(device)
        self.grade_masks = [m.to(device) for m in self.grade_masks]
        # Update cache so other instances sharing this key also benefit
        cache_key = (self.n, str(self.device))
        CliffordAlgebra._CACHED_TABLES[cache_key] = (
            self.cayley_indices, self.cayley_signs, self.right_indices,
            self.gp_signs, self.grade_masks,
        )

    def embed_vector(self, vectors: torch.Tensor) -> torch.Tensor:
        """Injects vectors into the Grade-1 subspace.

        Args:
            vectors (torch.Tensor): Raw vectors [..., n].

        Returns:
            torch.Tensor: Multivector coefficients [..., dim].
        """
        batch_shape = vectors.shape[:-1]
        mv = torch.zeros(*batch_shape, self.dim, device=vectors.device, dtype=vectors.dtype)
        for d in range(self.n):
            mv[..., self.table.index((d,))] = vectors[..., d]
        return mv

    def basis_vector(self, blade, dtype=torch.float64) -> torch.Tensor:
        """Unit multivector of a single canonical blade."""
        mv = torch.zeros(self.dim, dtype=dtype, device=self.device)
        mv[self.table.index(blade)] = 1.0
        return mv

    def grade_projection(self, mv: torch.Tensor, grade: int) -> torch.Tensor:
        """Isolates a specific grade.

        Args:
            mv (torch.Tensor): Multivector.
            grade (int): Target grade.

        Returns:
            torch.Tensor: Projected multivector.
        """
        mask = self.grade_masks[grade]
        if mask.device != mv.device:
            mask = mask.to(mv.device)
        result = torch.zeros_like(mv)
        result[..., mask] = mv[..., mask]
        return result
