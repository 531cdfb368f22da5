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
Transfer Function System - Difference-Equation Realization
==========================================================

Discrete-time SISO system defined by a rational transfer function in
powers of z^-1:

            b[0] + b[1] z^-1 + ... + b[m] z^-m
    H(z) = ------------------------------------
            a[0] + a[1] z^-1 + ... + a[n] z^-n

Coefficients are normalized at construction so that a[0] = 1, which gives
the difference equation

    y[k] = b[0] u[k] + ... + b[m] u[k-m] - a[1] y[k-1] - ... - a[n] y[k-n]

Internal State
--------------
- u_hist (length m+1): [u[k], u[k-1], ..., u[k-m]]   (most recent first)
- y_hist (length n):   [y[k-1], y[k-2], ..., y[k-n]] (most recent first)

Both windows are allocated once and shifted in place on every step.

Examples
--------
First-order low-pass, y[k] = u[k] + 0.5 y[k-1]:

>>> tf = TransferFunctionSystem(b=[1.0], a=[1.0, -0.5], dt=0.1)
>>> [tf.step(1.0) for _ in range(3)]
[1.0, 1.5, 1.75]

Coefficients are normalized:

>>> tf = TransferFunctionSystem(b=[2.0, 1.0], a=[2.0, -1.6], dt=0.1)
>>> tf.denominator
array([ 1. , -0.8])
>>> tf.numerator
array([1. , 0.5])
"""

import warnings
from typing import TYPE_CHECKING

import numpy as np

from dtsystems.systems.base.discrete_time_system import DiscreteTimeSystem
from dtsystems.systems.base.exceptions import InvalidCoefficients
from dtsystems.types.core import CoefficientVector, IntegerLike, NumpyArray, ScalarLike

if TYPE_CHECKING:
    from scipy.signal import dlti


def _as_coefficients(values: CoefficientVector, name: str) -> NumpyArray:
    try:
        coeffs = np.array(values, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidCoefficients(
            f"TransferFunctionSystem: {name} must be a sequence of numbers"
        ) from err
    if coeffs.ndim != 1:
        raise InvalidCoefficients(
            f"TransferFunctionSystem: {name} must be one-dimensional, got shape {coeffs.shape}"
        )
    if coeffs.size == 0:
        raise InvalidCoefficients(f"TransferFunctionSystem: {name} must not be empty")
    if not np.all(np.isfinite(coeffs)):
        raise InvalidCoefficients(f"TransferFunctionSystem: {name} contains non-finite values")
    return coeffs


class TransferFunctionSystem(DiscreteTimeSystem):
    """
    Discrete-time SISO system defined by numerator/denominator coefficients.

    Parameters
    ----------
    b : CoefficientVector
        Numerator coefficients [b0, b1, ..., bm] in powers of z^-1
    a : CoefficientVector
        Denominator coefficients [a0, a1, ..., an] in powers of z^-1
    dt : float
        Sampling period in seconds (must be > 0)
    buffer_size : int
        Capacity of the sample history (default: 100)

    Raises
    ------
    InvalidCoefficients
        If a or b is empty, not one-dimensional, contains non-finite
        values, or if a[0] == 0
    InvalidSamplingTime
        If dt <= 0
    InvalidBufferSize
        If buffer_size < 1

    Notes
    -----
    Invariants after construction:
    - denominator[0] == 1
    - len(u_hist) == len(numerator), len(y_hist) == len(denominator) - 1

    Examples
    --------
    Tustin-discretized first-order plant:

    >>> plant = TransferFunctionSystem([0.0099, 0.0099], [1.0, -0.9802], dt=0.01)
    >>> result = plant.simulate(1.0, n_steps=500)
    """

    def __init__(
        self,
        b: CoefficientVector,
        a: CoefficientVector,
        dt: ScalarLike,
        buffer_size: IntegerLike = 100,
    ):
        super().__init__(dt, buffer_size)

        a = _as_coefficients(a, "denominator 'a'")
        b = _as_coefficients(b, "numerator 'b'")
        if a[0] == 0.0:
            raise InvalidCoefficients(
                "TransferFunctionSystem: a[0] must be non-zero to normalize the denominator"
            )

        a0 = a[0]
        self._a = a / a0
        self._b = b / a0

        if self._a.size > 1 and self._a[-1] == 0.0:
            warnings.warn(
                "TransferFunctionSystem: trailing zero in the denominator adds an "
                "output history term that never contributes",
                UserWarning,
            )

        self._u_hist = np.zeros(self._b.size)
        self._y_hist = np.zeros(self._a.size - 1)

    # =========================================================================
    # Recurrence
    # =========================================================================

    def _recurrence(self, u: float) -> float:
        """
        Evaluate the normalized difference equation for one step.

        1. Shift u_hist right, insert u[k] at the front
        2. y[k] = b · u_hist - a[1:] · y_hist
        3. Shift y_hist right, insert y[k] at the front
        """
        self._u_hist[1:] = self._u_hist[:-1]
        self._u_hist[0] = u

        y = float(self._b @ self._u_hist - self._a[1:] @ self._y_hist)

        if self._y_hist.size:
            self._y_hist[1:] = self._y_hist[:-1]
            self._y_hist[0] = y
        return y

    def _reset_state(self) -> None:
        self._u_hist.fill(0.0)
        self._y_hist.fill(0.0)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def numerator(self) -> NumpyArray:
        """Normalized numerator coefficients (copy)."""
        return self._b.copy()

    @property
    def denominator(self) -> NumpyArray:
        """Normalized denominator coefficients, denominator[0] == 1 (copy)."""
        return self._a.copy()

    @property
    def num_order(self) -> int:
        """Numerator order m."""
        return self._b.size - 1

    @property
    def den_order(self) -> int:
        """Denominator order n."""
        return self._a.size - 1

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_dlti(self) -> "dlti":
        """
        Return the equivalent scipy.signal.dlti transfer function.

        SciPy expects coefficients in descending powers of z, so both
        polynomials are zero-padded at the end to a common length (which
        multiplies numerator and denominator by the same power of z).

        Examples
        --------
        >>> from scipy import signal
        >>> _, y = signal.dstep(tf.to_dlti(), n=50)
        """
        from scipy import signal

        length = max(self._b.size, self._a.size)
        num = np.pad(self._b, (0, length - self._b.size))
        den = np.pad(self._a, (0, length - self._a.size))
        return signal.dlti(num, den, dt=self.dt)

    def __str__(self) -> str:
        b = ", ".join(f"{v:g}" for v in self._b)
        a = ", ".join(f"{v:g}" for v in self._a)
        return (
            f"TransferFunctionSystem(m={self.num_order}, n={self.den_order}, dt={self.dt:g})\n"
            f"b = [{b}]\n"
            f"a = [{a}]"
        )


__all__ = ["TransferFunctionSystem"]
