"""
Validation Module
=================

Statistical checks that generated topologies and random-walk sampling
behave as intended.

Submodules
----------
statistical_tests
    Bucketed PDFs, chi-square and KS tests, degree target validation
"""

from .statistical_tests import (
    bucketed_pdf,
    test_walk_uniformity,
    test_degree_proportional,
    compare_walk_distributions,
    kleinberg_length_cdf,
    test_link_length_distribution,
    validate_degree_targets,
)

__all__ = [
    "bucketed_pdf",
    "test_walk_uniformity",
    "test_degree_proportional",
    "compare_walk_distributions",
    "kleinberg_length_cdf",
    "test_link_length_distribution",
    "validate_degree_targets",
]
