# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""cliffgen CLI Entry Point.

Generates the structure constants for each configured dimension, logs their
shape and prints the specialised product source to stdout.

    python main.py dimensions=[2,3] emit=true backend=compiled verify=true
"""

import hydra
import torch
from omegaconf import DictConfig, OmegaConf
from tqdm import tqdm

from core.algebra import CliffordAlgebra
from core.emitter import emit_product_source
from core.generation import generate
from core.product import PRODUCT_BACKENDS, get_product
from log import get_logger

logger = get_logger(__name__)


def verify_associativity(product, samples: int = 4, seed: int = 42, atol: float = 1e-4) -> bool:
    """Seeded smoke check that ``(ab)c == a(bc)`` for random multivectors."""
    generator = torch.Generator().manual_seed(seed)

    def sample():
        values = torch.rand(product.dim, generator=generator, dtype=torch.float64) * 20.0 - 10.0
        if isinstance(product, CliffordAlgebra):
            return values
        return values.tolist()

    for _ in range(samples):
        a, b, c = sample(), sample(), sample()
        left = product.combine(product.combine(a, b), c)
        right = product.combine(a, product.combine(b, c))
        if any(abs(float(x) - float(y)) >= atol for x, y in zip(left, right)):
            return False
    return True


def run(cfg: DictConfig) -> dict:
    """Generates every configured dimension.

    Args:
        cfg (DictConfig): ``dimensions``, ``emit``, ``backend`` and ``verify``.

    Returns:
        dict: Emitted source per dimension (empty strings when ``emit`` is off).
    """
    backend = cfg.get('backend', 'table')
    if backend not in PRODUCT_BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Available: {list(PRODUCT_BACKENDS.keys())}")

    dimensions = cfg.dimensions
    if not OmegaConf.is_list(dimensions) and not isinstance(dimensions, (list, tuple)):
        dimensions = [dimensions]

    sources = {}
    for dimension in tqdm(list(dimensions), desc="generating", disable=len(dimensions) < 2):
        table = generate(dimension)
        logger.info(
            "dimension %d: %d basis blades, %d terms",
            table.dimension, table.dim, table.num_terms,
        )

        source = ""
        if cfg.get('emit', True):
            source = emit_product_source(table)
            print(source)
        sources[table.dimension] = source

        if cfg.get('verify', False):
            product = get_product(table.dimension, backend)
            if not verify_associativity(product):
                raise RuntimeError(
                    f"{backend} product for dimension {table.dimension} is not associative"
                )
            logger.info("dimension %d: %s product verified", table.dimension, backend)

    return sources


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Runs generation for the composed config."""
    logger.debug("config:\n%s", OmegaConf.to_yaml(cfg))
    run(cfg)


if __name__ == "__main__":
    main()
