# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Blade utilities and the canonicalizer.

A blade is a sequence of unit-vector indices read as their ordered product
``e_i0 e_i1 ...``. Canonical blades are strictly increasing with no repeats.
The functions here favour clarity over speed; they only run while tables
are generated.
"""

GRADE_NAMES = {
    1: "Vector",
    2: "Bivector",
    3: "Trivector",
    4: "Quadvector",
    5: "Quintvector",
}


def canonize(element: list) -> bool:
    """Rewrites a raw index sequence into canonical form, in place.

    Two rules move the sequence towards canonical form, and each
    application flips the sign of the product:

    1. Swapping two adjacent distinct unit vectors (exchange sort).
    2. Eliminating an adjacent pair of equal unit vectors. Every unit
       vector therefore squares to -1 in this algebra.

    Args:
        element (list): Unit-vector indices, mutated in place.

    Returns:
        bool: True if the canonical blade carries a negative sign.
    """
    negate = False

    swapped = True
    while swapped:
        swapped = False
        for i in range(1, len(element)):
            if element[i - 1] > element[i]:
                element[i - 1], element[i] = element[i], element[i - 1]
                negate = not negate
                swapped = True

    # Sorted now, so equal indices are adjacent
    removed = True
    while removed:
        removed = False
        for i in range(1, len(element)):
            if element[i - 1] == element[i]:
                del element[i - 1:i + 1]
                negate = not negate
                removed = True
                break

    return negate


def wedge_product(a, b) -> list:
    """Raw concatenation of two index sequences (before canonicalization)."""
    return [*a, *b]


def grade(blade) -> int:
    """Number of unit vectors in the blade."""
    return len(blade)


def grade_name(k: int, dimension: int) -> str:
    """Human readable name for grade ``k`` in an algebra of ``dimension``.

    The scalar wins over the pseudoscalar, so the only blade of the
    0-dimensional algebra is a Scalar.
    """
    if k == 0:
        return "Scalar"
    if k == dimension:
        return "Pseudoscalar"
    return GRADE_NAMES.get(k, f"{k}-Vector")
