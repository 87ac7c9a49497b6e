# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Core generator for Clifford algebra products.

Provides the canonicalizer, basis and structure-constant generation, code
emission for specialised products, the product backends, the torch kernel
and the multivector wrapper.
"""

from .blade import canonize, wedge_product, grade, grade_name
from .validation import check_dimension, MAX_DIMENSION
from .generation import (
    ProductTable,
    generate,
    generate_elements,
    generate_product_sums,
)
from .emitter import (
    generate_product_string,
    generate_base_string,
    emit_product_source,
    compile_product,
)
from .product import (
    GeometricProduct,
    TableProduct,
    CompiledProduct,
    get_product,
)
from .algebra import CliffordAlgebra
from .multivector import Multivector

__all__ = [
    # blades
    "canonize",
    "wedge_product",
    "grade",
    "grade_name",
    # validation
    "check_dimension",
    "MAX_DIMENSION",
    # generation
    "ProductTable",
    "generate",
    "generate_elements",
    "generate_product_sums",
    # emission
    "generate_product_string",
    "generate_base_string",
    "emit_product_source",
    "compile_product",
    # products
    "GeometricProduct",
    "TableProduct",
    "CompiledProduct",
    "get_product",
    "CliffordAlgebra",
    "Multivector",
]
