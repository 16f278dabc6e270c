"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks shared by all
formatters (exact decimal arithmetic, numeric conversion, tier tables).
"""
