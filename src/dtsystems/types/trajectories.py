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

# Simulation Result Types

from typing import Any, Dict

from typing_extensions import TypedDict

from .core import NumpyArray


class DiscreteSimulationResult(TypedDict, total=False):
    """
    Result from DiscreteTimeSystem.simulate().

    Shape Convention
    ----------------
    Time-major ordering, N simulated steps:
    - k: (N,) - Step indices of the simulated samples
    - t: (N,) - Sample times k * dt
    - u: (N,) - Input sequence
    - y: (N,) - Output sequence

    Examples
    --------
    >>> result: DiscreteSimulationResult = system.simulate(np.ones(50))
    >>>
    >>> t = result['t']        # (50,)
    >>> y = result['y']        # (50,)
    >>> dt = result['dt']
    """

    k: NumpyArray  # Step indices
    t: NumpyArray  # Sample times
    u: NumpyArray  # Input sequence
    y: NumpyArray  # Output sequence
    dt: float  # Sampling period
    success: bool
    message: str
    method: str
    metadata: Dict[str, Any]


__all__ = ["DiscreteSimulationResult"]
