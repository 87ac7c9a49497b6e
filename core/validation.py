# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Generation-time input checks.

Unlike tensor shape checks these raise real exceptions, so a bad dimension
still aborts generation under ``python -O``.
"""

import numbers

# The closure and table algorithms scale combinatorially with the dimension.
MAX_DIMENSION = 10


def check_dimension(dimension, name: str = "dimension") -> int:
    """Validate an algebra dimension and return it as a plain ``int``.

    Raises:
        TypeError: If *dimension* is not an integer (bools are rejected).
        ValueError: If *dimension* is negative or above :data:`MAX_DIMENSION`.
    """
    if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral):
        raise TypeError(
            f"{name}: expected a non-negative integer, got {type(dimension).__name__} "
            f"({dimension!r})"
        )
    dimension = int(dimension)
    if dimension < 0:
        raise ValueError(f"{name}: must be non-negative, got {dimension}")
    if dimension > MAX_DIMENSION:
        raise ValueError(
            f"{name}: must be <= {MAX_DIMENSION}, got {dimension}"
        )
    return dimension
