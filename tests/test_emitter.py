# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Tests for code emission of specialised geometric products."""

import random
from fractions import Fraction

import pytest

from core.emitter import (
    compile_product,
    emit_product_source,
    generate_base_string,
    generate_product_string,
)
from core.generation import ProductTable, generate, generate_elements
from core.product import CompiledProduct, TableProduct


def rederive(table, a, b):
    """Reference evaluation straight from the table rows."""
    out = []
    for row in table.rows:
        total = 0
        for negate, i, j in row:
            total += -a[i] * b[j] if negate else a[i] * b[j]
        out.append(total)
    return out


def test_product_string_2d():
    expressions = generate_product_string(generate(2).rows)
    assert expressions == [
        "a[0] * b[0] - a[1] * b[1] - a[2] * b[2] - a[3] * b[3]",
        "a[0] * b[1] + a[1] * b[0] + a[2] * b[3] - a[3] * b[2]",
        "a[0] * b[2] - a[1] * b[3] + a[2] * b[0] + a[3] * b[1]",
        "a[0] * b[3] + a[1] * b[2] - a[2] * b[1] + a[3] * b[0]",
    ]


def test_product_string_scalar():
    assert generate_product_string(generate(0).rows) == ["a[0] * b[0]"]


def test_base_string_3d():
    lines = generate_base_string(generate_elements(3)).splitlines()
    assert lines[0] == "|Index|Outer Product|Type|"
    assert lines[1] == "|-|-|-|"
    assert lines[2] == "|0|[]|Scalar|"
    assert lines[3] == "|1|[0]|Vector|"
    assert lines[5] == "|3|[0, 1]|Bivector|"
    assert lines[-1] == "|7|[0, 1, 2]|Pseudoscalar|"
    assert len(lines) == 2 + 8


def test_base_string_small_dimensions():
    assert generate_base_string(generate_elements(0)).splitlines()[-1] == "|0|[]|Scalar|"
    assert generate_base_string(generate_elements(1)).splitlines()[-1] == "|1|[0]|Pseudoscalar|"


def test_base_string_high_grades():
    text = generate_base_string(generate_elements(7))
    assert "|Quintvector|" in text
    assert "|6-Vector|" in text
    assert text.endswith("|127|[0, 1, 2, 3, 4, 5, 6]|Pseudoscalar|")


def test_emitted_source_layout():
    source = emit_product_source(generate(1))
    assert source.startswith("def geometric_product_1(a, b):\n")
    assert "multivectors of 1-dimensional space." in source
    assert "following 2 basis elements." in source
    assert "        a[0] * b[0] - a[1] * b[1],\n" in source
    assert "        a[0] * b[1] + a[1] * b[0],\n" in source
    assert source.endswith("    ]\n")


def test_compiled_function_metadata():
    fn = compile_product(2)
    assert fn.__name__ == "geometric_product_2"
    assert "2-dimensional space" in fn.__doc__
    assert "|3|[0, 1]|Pseudoscalar|" in fn.__doc__
    assert fn.__source__ == emit_product_source(generate(2))
    assert compile_product(generate(2)) is fn


def test_compiled_scalar_product():
    fn = compile_product(0)
    assert fn([3.0], [-2.5]) == [-7.5]
    assert fn((Fraction(1, 3),), (Fraction(3, 4),)) == [Fraction(1, 4)]


@pytest.mark.parametrize("dimension", range(5))
def test_compiled_matches_table(dimension):
    table = generate(dimension)
    fn = compile_product(table)
    rng = random.Random(dimension)
    for _ in range(5):
        a = [rng.uniform(-10, 10) for _ in range(table.dim)]
        b = [rng.uniform(-10, 10) for _ in range(table.dim)]
        expected = rederive(table, a, b)
        assert fn(a, b) == pytest.approx(expected, abs=1e-9)
        assert TableProduct(dimension).combine(a, b) == pytest.approx(expected, abs=1e-9)


def test_compiled_and_table_agree_exactly():
    rng = random.Random(7)
    compiled, table = CompiledProduct(3), TableProduct(3)
    for _ in range(10):
        a = [Fraction(rng.randint(-10, 10), rng.randint(1, 5)) for _ in range(8)]
        b = [Fraction(rng.randint(-10, 10), rng.randint(1, 5)) for _ in range(8)]
        assert compiled.combine(a, b) == table.combine(a, b)


def test_compiled_returns_fresh_list():
    fn = compile_product(1)
    a, b = [1, 2], [3, 4]
    first = fn(a, b)
    first[0] = 0
    assert fn(a, b) == [1 * 3 - 2 * 4, 1 * 4 + 2 * 3]
    assert a == [1, 2] and b == [3, 4]


def test_compile_accepts_any_integral_dimension():
    np = pytest.importorskip("numpy")
    fn = compile_product(np.int64(2))
    assert fn is compile_product(2)
    assert fn([1, 2, 3, 4], [4, 3, 2, 1]) == TableProduct(2).combine([1, 2, 3, 4], [4, 3, 2, 1])


@pytest.mark.parametrize("bad, error", [("2", TypeError), (2.0, TypeError), (-1, ValueError)])
def test_compile_rejects_bad_dimension(bad, error):
    with pytest.raises(error):
        compile_product(bad)


def test_compile_cache_keyed_by_table():
    table = generate(1)
    # Same dimension, different rows: the sign of e0 * e0 flipped
    rows = list(table.rows)
    rows[0] = ((False, 0, 0), (False, 1, 1))
    flipped = ProductTable(dimension=1, basis=table.basis, rows=tuple(rows))

    fn, flipped_fn = compile_product(table), compile_product(flipped)
    assert flipped_fn is not fn
    assert fn([0, 1], [0, 1]) == [-1, 0]
    assert flipped_fn([0, 1], [0, 1]) == [1, 0]
    assert compile_product(ProductTable(1, table.basis, table.rows)) is fn
