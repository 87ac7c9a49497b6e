# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Basis and structure-constant generation.

Multiplies out every pair of basis blades and records to which output blade
each pair contributes, and under which sign. The algorithms are deliberately
naive: they run once per dimension and the results are cached.
"""

from dataclasses import dataclass
from typing import List, Tuple

from core.blade import canonize, wedge_product
from core.validation import check_dimension
from log import get_logger

logger = get_logger(__name__)

Blade = Tuple[int, ...]
Term = Tuple[bool, int, int]

_CACHED_TABLES = {}


@dataclass(frozen=True)
class ProductTable:
    """Structure constants of the geometric algebra of one dimension.

    Attributes:
        dimension (int): Number of orthogonal unit vectors D.
        basis (tuple): The 2^D canonical blades, in coefficient order.
        rows (tuple): For output index k, the ``(negate, left, right)`` terms
            whose products sum to coefficient k.
    """

    dimension: int
    basis: Tuple[Blade, ...]
    rows: Tuple[Tuple[Term, ...], ...]

    @property
    def dim(self) -> int:
        """Number of basis elements (2^D)."""
        return len(self.basis)

    @property
    def num_terms(self) -> int:
        return sum(len(row) for row in self.rows)

    def index(self, blade) -> int:
        """Position of a canonical blade in the basis."""
        return self.basis.index(tuple(blade))


def generate_elements(dimension: int) -> List[Blade]:
    """Generates all basis blades of the algebra of a given dimension.

    Starting from the scalar, each unit vector is added in turn and the set
    is closed under concatenation + canonicalization, which discovers all
    bi-, tri-, ... vectors up to the pseudoscalar.

    Args:
        dimension (int): Number of unit vectors.

    Returns:
        list: ``2 ** dimension`` canonical blades, scalar first.
    """
    dimension = check_dimension(dimension)

    elements: List[Blade] = [()]
    seen = {()}

    for d in range(dimension):
        elements.append((d,))
        seen.add((d,))

        while True:
            new = []
            for a in elements:
                for b in elements:
                    c = wedge_product(a, b)
                    canonize(c)  # sign is irrelevant for identity
                    c = tuple(c)
                    if c not in seen:
                        seen.add(c)
                        new.append(c)
            if not new:
                break
            elements.extend(new)

    logger.debug("dimension %d: %d basis blades", dimension, len(elements))
    return elements


def generate_product_sums(elements) -> List[List[Term]]:
    """Generates the structure constants of the geometric product.

    Every ordered pair ``(i, j)`` is multiplied out and canonicalized. The
    term ``(negate, i, j)`` lands in the row of the resulting blade, rows
    keep the ``(i, j)`` iteration order.

    Args:
        elements (list): The basis from :func:`generate_elements`.

    Returns:
        list: One list of ``(negate, left, right)`` terms per basis element.

    Raises:
        RuntimeError: If a product is missing from *elements*, i.e. the basis
            is not closed.
    """
    positions = {tuple(e): k for k, e in enumerate(elements)}
    sums: List[List[Term]] = [[] for _ in elements]

    for a_i, a in enumerate(elements):
        for b_i, b in enumerate(elements):
            c = wedge_product(a, b)
            negate = canonize(c)
            try:
                c_i = positions[tuple(c)]
            except KeyError:
                raise RuntimeError(
                    f"product of {list(a)} and {list(b)} is {c}, "
                    f"which is not in the basis"
                ) from None
            sums[c_i].append((negate, a_i, b_i))

    return sums


def generate(dimension: int) -> ProductTable:
    """Returns the (cached) structure-constant table for *dimension*.

    Raises:
        TypeError, ValueError: For an invalid dimension.
        RuntimeError: On an internal consistency failure.
    """
    dimension = check_dimension(dimension)
    if dimension not in _CACHED_TABLES:
        elements = generate_elements(dimension)
        sums = generate_product_sums(elements)
        table = ProductTable(
            dimension=dimension,
            basis=tuple(elements),
            rows=tuple(tuple(row) for row in sums),
        )
        logger.debug(
            "dimension %d: %d rows, %d terms",
            dimension, len(table.rows), table.num_terms,
        )
        _CACHED_TABLES[dimension] = table
    return _CACHED_TABLES[dimension]
