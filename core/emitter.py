# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Code emission for specialised geometric products.

Turns a :class:`~core.generation.ProductTable` into the source of a flat
``geometric_product_D(a, b)`` function, documented with the choice of basis,
and compiles that source into a function object.
"""

from core.blade import grade_name
from core.generation import ProductTable, generate
from log import get_logger

logger = get_logger(__name__)

# Keyed by the frozen table itself
_COMPILED = {}


def generate_product_string(product_sums) -> list:
    """One expression per output coefficient.

    The first term of a row is written unsigned, later terms are prefixed
    with ``-`` or ``+`` according to their stored sign.
    """
    expressions = []
    for row in product_sums:
        terms = []
        for i, (negate, a, b) in enumerate(row):
            if i == 0:
                prefix = ""
            elif negate:
                prefix = "- "
            else:
                prefix = "+ "
            terms.append(f"{prefix}a[{a}] * b[{b}]")
        expressions.append(" ".join(terms))
    return expressions


def generate_base_string(elements) -> str:
    """Markdown table labelling every basis index with its blade and grade."""
    dimension = len(elements).bit_length() - 1
    lines = ["|Index|Outer Product|Type|", "|-|-|-|"]
    for i, element in enumerate(elements):
        lines.append(f"|{i}|{list(element)}|{grade_name(len(element), dimension)}|")
    return "\n".join(lines)


def emit_product_source(table) -> str:
    """Python source of ``geometric_product_D`` for the given table."""
    name = f"geometric_product_{table.dimension}"
    doc = (
        f"Calculates the geometric product for multivectors of "
        f"{table.dimension}-dimensional space.\n"
        f"The arrays are coefficient representations wrt. the following "
        f"{table.dim} basis elements.\n\n"
        f"{generate_base_string(table.basis)}"
    )
    body = "".join(
        f"        {expr},\n" for expr in generate_product_string(table.rows)
    )
    doc = "\n".join(
        ("    " + line) if line else "" for line in doc.splitlines()
    )
    return (
        f"def {name}(a, b):\n"
        f'    """{doc.lstrip()}\n    """\n'
        f"    return [\n"
        f"{body}"
        f"    ]\n"
    )


def compile_product(table_or_dimension):
    """Compiles the emitted product into a function object.

    Args:
        table_or_dimension: A :class:`~core.generation.ProductTable` or a
            dimension passed to :func:`~core.generation.generate`.

    Returns:
        callable: ``geometric_product_D(a, b) -> list``. Operands are any
        indexables of length ``2 ** D``; lengths are not checked.
    """
    if isinstance(table_or_dimension, ProductTable):
        table = table_or_dimension
    else:
        table = generate(table_or_dimension)

    if table not in _COMPILED:
        source = emit_product_source(table)
        name = f"geometric_product_{table.dimension}"
        namespace = {}
        exec(compile(source, f"<{name}>", "exec"), namespace)
        fn = namespace[name]
        fn.__source__ = source
        logger.debug("compiled %s (%d lines)", name, source.count("\n"))
        _COMPILED[table] = fn
    return _COMPILED[table]
