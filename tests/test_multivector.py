# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

import pytest
import torch

from core.algebra import CliffordAlgebra
from core.multivector import Multivector


@pytest.fixture
def algebra_3d():
    """Creates the 3-dimensional algebra (8 coefficients)."""
    return CliffordAlgebra(3, device='cpu')


def mv(algebra, values):
    return Multivector(algebra, torch.tensor(values, dtype=torch.float64))


class TestComponentwise:

    def test_add_sub(self, algebra_3d):
        a = mv(algebra_3d, [1, 2, 3, 4, 5, 6, 7, 8])
        b = mv(algebra_3d, [8, 7, 6, 5, 4, 3, 2, 1])
        assert (a + b).tensor.tolist() == [9.0] * 8
        assert (a - b).tensor.tolist() == [-7.0, -5.0, -3.0, -1.0, 1.0, 3.0, 5.0, 7.0]
        assert (-a).tensor.tolist() == [-1.0, -2.0, -3.0, -4.0, -5.0, -6.0, -7.0, -8.0]

    def test_scalar_mul_div(self, algebra_3d):
        a = mv(algebra_3d, [1, 2, 3, 4, 5, 6, 7, 8])
        assert (a * 2).tensor.tolist() == [2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0]
        assert (0.5 * a).tensor.tolist() == [0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0]
        assert (a / 2).tensor.tolist() == [0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0]

    def test_indexing(self, algebra_3d):
        a = mv(algebra_3d, [1, 2, 3, 4, 5, 6, 7, 8])
        assert len(a) == 8
        assert a[0].item() == 1.0
        assert a[-1].item() == 8.0

    def test_unsupported_operands(self, algebra_3d):
        a = Multivector.zeros(algebra_3d)
        with pytest.raises(TypeError):
            a + 1.0
        with pytest.raises(TypeError):
            a * "x"

    def test_mismatched_algebras(self, algebra_3d):
        a = Multivector.zeros(algebra_3d)
        b = Multivector.zeros(CliffordAlgebra(2))
        with pytest.raises(AssertionError):
            a + b
        with pytest.raises(AssertionError):
            a * b


class TestGeometricProduct:

    def test_unit_vectors(self, algebra_3d):
        e0 = Multivector.basis_vector(algebra_3d, 0)
        e1 = Multivector.basis_vector(algebra_3d, 1)
        e01 = e0 * e1
        assert e01.tensor.tolist() == [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0]
        assert (e1 * e0).tensor.tolist() == [0.0, 0.0, 0.0, -1.0, 0.0, 0.0, 0.0, 0.0]
        assert (e0 * e0).tensor.tolist() == [-1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0]

    def test_scalar_unit_is_identity(self, algebra_3d):
        a = mv(algebra_3d, [1, -2, 3, -4, 5, -6, 7, -8])
        one = Multivector.scalar(algebra_3d)
        assert (one * a).allclose(a)
        assert (a * one).allclose(a)

    def test_pseudoscalar(self, algebra_3d):
        e0, e1, e2 = (Multivector.basis_vector(algebra_3d, d) for d in range(3))
        assert (e0 * e1 * e2).allclose(Multivector.pseudoscalar(algebra_3d))

    def test_from_vectors_and_grade(self, algebra_3d):
        v = Multivector.from_vectors(algebra_3d, torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64))
        vv = v * v
        # Vectors square to minus their squared length
        assert vv[0].item() == pytest.approx(-14.0)
        assert vv.grade(0).allclose(vv)
        assert v.grade(1).allclose(v)
        assert v.grade(2).allclose(Multivector.zeros(algebra_3d))

    def test_batched(self, algebra_3d):
        a = Multivector(algebra_3d, torch.randn(4, 8, dtype=torch.float64))
        b = Multivector(algebra_3d, torch.randn(4, 8, dtype=torch.float64))
        assert (a * b).tensor.shape == (4, 8)
        assert "dimension=3" in repr(a)


class TestItemAssignment:

    def test_setitem_writes_coefficient(self, algebra_3d):
        a = Multivector.zeros(algebra_3d)
        a[3] = 2.5
        a[-1] = -1.0
        assert a.tensor.tolist() == [0.0, 0.0, 0.0, 2.5, 0.0, 0.0, 0.0, -1.0]

    def test_setitem_on_batch(self, algebra_3d):
        a = Multivector(algebra_3d, torch.zeros(2, 8, dtype=torch.float64))
        a[0] = torch.tensor([1.0, 2.0], dtype=torch.float64)
        assert a[0].tolist() == [1.0, 2.0]
        assert a.tensor[:, 1:].abs().sum().item() == 0.0
