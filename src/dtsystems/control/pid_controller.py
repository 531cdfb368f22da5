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
Discrete PID Controller (Incremental Form)

Implements the velocity form of the PID law:

    Δu[k] = a0 e[k] + a1 e[k-1] + a2 e[k-2]
    u[k]  = u[k-1] + Δu[k]

with coefficients derived from the gains and the sampling period:

    a0 =  Kp + Ki Δt + Kd / Δt
    a1 = -Kp - 2 Kd / Δt
    a2 =  Kd / Δt

The input is the control error e[k] = r[k] - y[k]; the output is the
control action u[k]. Because only increments are accumulated, gains can be
changed on-line without a jump in the integral term.

Examples
--------
>>> pid = PIDController(kp=1.0, ki=0.5, kd=0.1, dt=0.1)
>>> u0 = pid.step(1.0)   # a0 * 1 = 1 + 0.05 + 1 = 2.05
>>>
>>> # Re-tune on-line: coefficients update immediately
>>> pid.set_gains(2.0, 1.0, 0.2)
>>> u1 = pid.step(1.0)
"""

from typing import Tuple

from dtsystems.systems.base.discrete_time_system import DiscreteTimeSystem
from dtsystems.types.core import IntegerLike, ScalarLike


class PIDController(DiscreteTimeSystem):
    """
    Incremental discrete PID controller.

    Parameters
    ----------
    kp : float
        Proportional gain
    ki : float
        Integral gain
    kd : float
        Derivative gain
    dt : float
        Sampling period in seconds (must be > 0)
    buffer_size : int
        Capacity of the sample history (default: 1024)

    Attributes
    ----------
    kp, ki, kd : float
        Gains; assigning any of them recomputes the coefficients
    coefficients : Tuple[float, float, float]
        Current (a0, a1, a2)

    Notes
    -----
    Gain setters mutate the instance like step() does and carry the same
    no-concurrent-access rule.
    """

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        dt: ScalarLike,
        buffer_size: IntegerLike = 1024,
    ):
        super().__init__(dt, buffer_size)
        self._kp = float(kp)
        self._ki = float(ki)
        self._kd = float(kd)
        self._update_coefficients()

        self._e1 = 0.0  # e[k-1]
        self._e2 = 0.0  # e[k-2]
        self._u1 = 0.0  # u[k-1]

    def _update_coefficients(self) -> None:
        dt = self.dt
        self._a0 = self._kp + self._ki * dt + self._kd / dt
        self._a1 = -self._kp - 2.0 * self._kd / dt
        self._a2 = self._kd / dt

    # =========================================================================
    # Recurrence
    # =========================================================================

    def _recurrence(self, u: float) -> float:
        error = u
        delta = self._a0 * error + self._a1 * self._e1 + self._a2 * self._e2
        control = self._u1 + delta

        self._e2 = self._e1
        self._e1 = error
        self._u1 = control
        return control

    def _reset_state(self) -> None:
        self._e1 = 0.0
        self._e2 = 0.0
        self._u1 = 0.0

    # =========================================================================
    # Tuning
    # =========================================================================

    @property
    def kp(self) -> float:
        return self._kp

    @kp.setter
    def kp(self, value: float) -> None:
        self._kp = float(value)
        self._update_coefficients()

    @property
    def ki(self) -> float:
        return self._ki

    @ki.setter
    def ki(self, value: float) -> None:
        self._ki = float(value)
        self._update_coefficients()

    @property
    def kd(self) -> float:
        return self._kd

    @kd.setter
    def kd(self, value: float) -> None:
        self._kd = float(value)
        self._update_coefficients()

    def set_gains(self, kp: float, ki: float, kd: float) -> None:
        """Set all three gains and recompute the coefficients once."""
        self._kp = float(kp)
        self._ki = float(ki)
        self._kd = float(kd)
        self._update_coefficients()

    @property
    def coefficients(self) -> Tuple[float, float, float]:
        """Incremental-form coefficients (a0, a1, a2)."""
        return (self._a0, self._a1, self._a2)

    def __repr__(self) -> str:
        return (
            f"PIDController(kp={self._kp}, ki={self._ki}, kd={self._kd}, "
            f"dt={self.dt}, k={self.k})"
        )


__all__ = ["PIDController"]
