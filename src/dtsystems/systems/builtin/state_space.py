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
State-Space System - Linear SISO Realization
============================================

Discrete-time SISO system defined by

    x[k+1] = A x[k] + B u[k]
    y[k]   = C x[k] + D u[k]

where
- x[k] ∈ ℝⁿ is the state vector (starts at zero)
- u[k], y[k] ∈ ℝ are the scalar input and output
- A ∈ ℝⁿˣⁿ, B ∈ ℝⁿ, C ∈ ℝⁿ, D ∈ ℝ

The output is always computed from the state *before* the update; the new
state replaces the old one only after both products are evaluated.

Examples
--------
Pure one-step delay, y[k] = u[k-1]:

>>> delay = StateSpaceSystem(A=[[0.0]], B=[1.0], C=[1.0], D=0.0, dt=0.1)
>>> delay.step(1.0), delay.step(1.0)
(0.0, 1.0)

Discrete double integrator (position output):

>>> dt = 0.1
>>> A = [[1.0, dt], [0.0, 1.0]]
>>> B = [0.5 * dt**2, dt]
>>> C = [1.0, 0.0]
>>> sys = StateSpaceSystem(A, B, C, 0.0, dt=dt)
>>> result = sys.simulate(1.0, n_steps=100)
"""

from typing import TYPE_CHECKING

import numpy as np

from dtsystems.systems.base.discrete_time_system import DiscreteTimeSystem
from dtsystems.systems.base.exceptions import InvalidDimensions
from dtsystems.types.core import (
    FeedthroughScalar,
    InputVector,
    IntegerLike,
    NumpyArray,
    OutputVector,
    ScalarLike,
    StateMatrix,
)

if TYPE_CHECKING:
    from scipy.signal import dlti


def _as_array(values, name: str) -> NumpyArray:
    try:
        return np.array(values, dtype=float)
    except (TypeError, ValueError) as err:
        # ragged nested lists end up here
        raise InvalidDimensions(
            f"StateSpaceSystem: {name} must be a rectangular numeric array"
        ) from err


def _as_vector(values, name: str, n: int) -> NumpyArray:
    vec = _as_array(values, name)
    # accept (n,), (n, 1) and (1, n)
    if vec.ndim > 2 or (vec.ndim == 2 and 1 not in vec.shape) or vec.size != n:
        raise InvalidDimensions(
            f"StateSpaceSystem: {name} must have length n={n} to match A, got shape {vec.shape}"
        )
    return vec.reshape(n)


class StateSpaceSystem(DiscreteTimeSystem):
    """
    Discrete-time SISO system in state-space form.

    Parameters
    ----------
    A : StateMatrix
        State matrix (n, n), n >= 1
    B : InputVector
        Input vector (n,)
    C : OutputVector
        Output vector (n,)
    D : float
        Direct feedthrough gain
    dt : float
        Sampling period in seconds (must be > 0)
    buffer_size : int
        Capacity of the sample history (default: 100)

    Raises
    ------
    InvalidDimensions
        If A is empty, ragged or not square, if B or C do not have length
        n, or if D is not a scalar
    InvalidSamplingTime
        If dt <= 0
    InvalidBufferSize
        If buffer_size < 1

    Notes
    -----
    The state vector x is the only field mutated by step(); A, B, C and D
    are fixed after construction. reset() sets x back to zero.
    """

    def __init__(
        self,
        A: StateMatrix,
        B: InputVector,
        C: OutputVector,
        D: FeedthroughScalar,
        dt: ScalarLike,
        buffer_size: IntegerLike = 100,
    ):
        super().__init__(dt, buffer_size)

        A = _as_array(A, "A")
        if A.ndim != 2 or A.size == 0 or A.shape[0] != A.shape[1]:
            raise InvalidDimensions(
                f"StateSpaceSystem: A must be a non-empty square matrix, got shape {A.shape}"
            )
        n = A.shape[0]

        B = _as_vector(B, "B", n)
        C = _as_vector(C, "C", n)
        D = _as_array(D, "D")
        if D.size != 1:
            raise InvalidDimensions(
                f"StateSpaceSystem: D must be a scalar for a SISO system, got shape {D.shape}"
            )

        self._A = A
        self._B = B
        self._C = C
        self._D = float(D.reshape(()))
        self._n = n
        self._x = np.zeros(n)

    # =========================================================================
    # Recurrence
    # =========================================================================

    def _recurrence(self, u: float) -> float:
        """
        y[k] = C x[k] + D u[k], then x[k+1] = A x[k] + B u[k].
        """
        y = float(self._C @ self._x + self._D * u)
        self._x = self._A @ self._x + self._B * u
        return y

    def _reset_state(self) -> None:
        self._x = np.zeros(self._n)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def A(self) -> NumpyArray:
        return self._A.copy()

    @property
    def B(self) -> NumpyArray:
        return self._B.copy()

    @property
    def C(self) -> NumpyArray:
        return self._C.copy()

    @property
    def D(self) -> float:
        return self._D

    @property
    def state(self) -> NumpyArray:
        """Current state x[k] (copy)."""
        return self._x.copy()

    @property
    def order(self) -> int:
        """State dimension n."""
        return self._n

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_dlti(self) -> "dlti":
        """
        Return the equivalent scipy.signal.dlti state-space system.

        Examples
        --------
        >>> from scipy import signal
        >>> _, y, _ = signal.dlsim(sys.to_dlti(), u)
        """
        from scipy import signal

        return signal.dlti(
            self._A,
            self._B.reshape(self._n, 1),
            self._C.reshape(1, self._n),
            np.array([[self._D]]),
            dt=self.dt,
        )

    def __str__(self) -> str:
        def fmt(vec):
            return "[" + ", ".join(f"{v:g}" for v in vec) + "]"

        rows = (",\n" + " " * 5).join(fmt(row) for row in self._A)
        return (
            f"StateSpaceSystem(n={self._n}, D={self._D:g}, dt={self.dt:g})\n"
            f"A = [{rows}]\n"
            f"B = {fmt(self._B)}\n"
            f"C = {fmt(self._C)}\n"
            f"x = {fmt(self._x)}"
        )


__all__ = ["StateSpaceSystem"]
