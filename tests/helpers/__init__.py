"""Test helpers module for shared test utilities.

- values: boundary values, random corpora and the make_big factory
"""

from tests.helpers.values import (
    BOUNDARY_VALUES,
    SIGNED_BOUNDARY_VALUES,
    make_big,
    random_values,
)

__all__ = [
    "BOUNDARY_VALUES",
    "SIGNED_BOUNDARY_VALUES",
    "make_big",
    "random_values",
]
