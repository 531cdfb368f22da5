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
Plant Models

Ready-made discrete plants for control-loop prototyping.

FirstOrderPlant
---------------
First-order motor model

    G(s) = 1 / (0.5 s + 1)

discretized with the Tustin method at Tp = 0.01 s:

    G(z) = (0.0099 + 0.0099 z^-1) / (1 - 0.9802 z^-1)

DC gain is 0.0198 / 0.0198 = 1 and the time constant is 0.5 s.
"""

from dtsystems.systems.builtin.transfer_function import TransferFunctionSystem
from dtsystems.types.core import IntegerLike, ScalarLike


class FirstOrderPlant(TransferFunctionSystem):
    """
    Tustin-discretized first-order motor, G(z) = 0.0099 (1 + z^-1) / (1 - 0.9802 z^-1).

    Parameters
    ----------
    dt : float
        Plant sampling period (default: 0.01). The coefficients are those
        of the 0.01 s discretization; other periods only change the time
        axis of the recorded samples.
    buffer_size : int
        Capacity of the sample history (default: 1024)

    Examples
    --------
    >>> plant = FirstOrderPlant()
    >>> result = plant.simulate(1.0, n_steps=300)
    >>> round(result['y'][-1], 2)  # settles at unit DC gain
    1.0
    """

    NUMERATOR = (0.0099, 0.0099)
    DENOMINATOR = (1.0, -0.9802)

    def __init__(self, dt: ScalarLike = 0.01, buffer_size: IntegerLike = 1024):
        super().__init__(self.NUMERATOR, self.DENOMINATOR, dt, buffer_size)


__all__ = ["FirstOrderPlant"]
