"""
Core domain models, numeric primitives, errors and contracts.

This module contains the building blocks shared by the expression
pipeline and the integer base converter.
"""
