"""
Configuration constants for the routing topology simulator.
===========================================================

This module contains the configuration constants used throughout
graph generation and simulation. Centralizing these ensures
consistency and reproducibility across experiments.
"""

# Random seed for all stochastic operations
RANDOM_SEED = 42

# Probability of NOT connecting to a peer that already has its target degree.
# The remaining 2% lets generation finish when every reachable peer is saturated.
REJECT_PROBABILITY = 0.98

# Safety cap on connection attempts per source node (None disables the cap)
DEFAULT_MAX_ATTEMPTS = 1_000_000

# Sandberg graphs: predecessor + successor + one shortcut
SANDBERG_DEGREE = 3

# Darknet / random walk defaults
DEFAULT_WALK_HOPS_UNIFORM = 20
DEFAULT_WALK_HOPS_CORRECTED = 40
DEFAULT_N_BUCKETS = 400

# Persisted graph format
GRAPH_FILE_HEADER = "# routing_sim graph v1"
