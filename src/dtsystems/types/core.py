# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Core Types - Fundamental Building Blocks

Defines the basic types used throughout the package:
- Scalar and array types for signal values
- Coefficient vectors for transfer functions
- Matrix and vector types for state-space realizations
- Function signatures for input sequences

These are the foundation upon which the sample and result types build.

Design Philosophy
----------------
- **SISO**: Inputs and outputs are scalars, internal state is a NumPy vector
- **Semantic Clarity**: Names convey mathematical meaning
- **Type Safety**: Enable static type checking

Usage
-----
>>> from dtsystems.types.core import (
...     ScalarLike,
...     CoefficientVector,
...     StateMatrix,
... )
>>>
>>> def dc_gain(b: CoefficientVector, a: CoefficientVector) -> ScalarLike:
...     return sum(b) / sum(a)
"""

from typing import Callable, Sequence, Union

import numpy as np

# ============================================================================
# Basic Scalar and Array Types
# ============================================================================

ScalarLike = Union[float, int, np.number]
"""
Scalar value.

Can be Python float/int or a NumPy scalar. Every input and output of a
SISO system is converted to a Python float before it is recorded.

Examples
--------
>>> u: ScalarLike = 1.0
>>> u: ScalarLike = np.float64(0.5)
"""

IntegerLike = Union[int, np.integer]
"""
Integer value (Python int or NumPy integer).

Used for buffer sizes and step indices.
"""

ArrayLike = Union[np.ndarray, Sequence[float]]
"""
Array-like numeric data.

Anything `np.asarray` turns into a float array: NumPy arrays, lists and
tuples of numbers.

Shape conventions:
- Vectors: (n,)
- Matrices: (m, n)
"""

NumpyArray = np.ndarray
"""Pure NumPy array (always float64 once validated)."""

# ============================================================================
# Transfer Function Types
# ============================================================================

CoefficientVector = ArrayLike
"""
Polynomial coefficients in ascending powers of z^-1.

For H(z) = (b0 + b1 z^-1 + ... + bm z^-m) / (a0 + a1 z^-1 + ... + an z^-n):
- numerator:   [b0, b1, ..., bm]
- denominator: [a0, a1, ..., an]

Examples
--------
>>> b: CoefficientVector = [0.0099, 0.0099]
>>> a: CoefficientVector = [1.0, -0.9802]
"""

# ============================================================================
# State-Space Types
# ============================================================================

StateVector = ArrayLike
"""
State vector x[k] of shape (n,).
"""

StateMatrix = ArrayLike
"""
State transition matrix A of shape (n, n).

x[k+1] = A x[k] + B u[k]
"""

InputVector = ArrayLike
"""
Input vector B of shape (n,) (single input).
"""

OutputVector = ArrayLike
"""
Output vector C of shape (n,) (single output).

y[k] = C x[k] + D u[k]
"""

FeedthroughScalar = ScalarLike
"""
Direct feedthrough gain D (scalar for a SISO system).
"""

# ============================================================================
# Input Sequence Types
# ============================================================================

InputPolicy = Callable[[int], ScalarLike]
"""
Input as a function of the step index: u[k] = policy(k).

Examples
--------
>>> policy: InputPolicy = lambda k: 1.0 if k >= 10 else 0.0
"""

InputSequence = Union[ArrayLike, ScalarLike, InputPolicy]
"""
Anything accepted by DiscreteTimeSystem.simulate():
- Array/sequence: u[0], u[1], ..., u[N-1]
- Scalar: constant input (requires n_steps)
- Callable: u[k] = policy(k) (requires n_steps)
"""


__all__ = [
    "ScalarLike",
    "IntegerLike",
    "ArrayLike",
    "NumpyArray",
    "CoefficientVector",
    "StateVector",
    "StateMatrix",
    "InputVector",
    "OutputVector",
    "FeedthroughScalar",
    "InputPolicy",
    "InputSequence",
]
