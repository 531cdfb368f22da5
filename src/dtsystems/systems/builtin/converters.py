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
Digital Converters

Analog-to-digital and digital-to-analog converter models for closing a
control loop around a discrete plant.

- ADConverter: one-sample conversion delay, H(z) = z^-1
- DAConverter: pass-through, H(z) = 1

Examples
--------
>>> adc = ADConverter(dt=0.1)
>>> [adc.step(x) for x in [1, 2, 3, 4, 5]]
[0.0, 1.0, 2.0, 3.0, 4.0]
"""

from dtsystems.systems.base.discrete_time_system import DiscreteTimeSystem
from dtsystems.types.core import IntegerLike, ScalarLike


class ADConverter(DiscreteTimeSystem):
    """
    Analog-to-digital converter with a one-sample delay.

        y_d[k] = y[k-1],  y_d[0] = 0

    The delay models conversion time and breaks algebraic loops between
    the plant output and the controller input.

    Parameters
    ----------
    dt : float
        Sampling period in seconds
    buffer_size : int
        Capacity of the sample history (default: 1024)
    """

    def __init__(self, dt: ScalarLike, buffer_size: IntegerLike = 1024):
        super().__init__(dt, buffer_size)
        self._previous = 0.0

    def _recurrence(self, u: float) -> float:
        output = self._previous
        self._previous = u
        return output

    def _reset_state(self) -> None:
        self._previous = 0.0


class DAConverter(DiscreteTimeSystem):
    """
    Digital-to-analog converter (ideal pass-through).

        u(t) = u[k],  k dt <= t < (k+1) dt

    The zero-order hold between samples is the caller's concern; this model
    only records the commanded values.

    Parameters
    ----------
    dt : float
        Sampling period in seconds
    buffer_size : int
        Capacity of the sample history (default: 1024)
    """

    def __init__(self, dt: ScalarLike, buffer_size: IntegerLike = 1024):
        super().__init__(dt, buffer_size)

    def _recurrence(self, u: float) -> float:
        return u

    def _reset_state(self) -> None:
        pass


__all__ = ["ADConverter", "DAConverter"]
