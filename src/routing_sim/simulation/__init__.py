"""
Simulation Module
=================

Darknet location swapping and random-walk sampling experiments.

Submodules
----------
darknet
    Swap rounds and walk endpoint distribution tests
"""

from .darknet import (
    darknet_swap,
    random_walk_distribution_test,
    walk_distribution_pdfs,
)

__all__ = [
    "darknet_swap",
    "random_walk_distribution_test",
    "walk_distribution_pdfs",
]
