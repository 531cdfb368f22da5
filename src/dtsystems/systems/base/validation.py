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
Argument validation shared by every time-indexed object in the package.

Both discrete-time systems and reference signals take a sampling period
and a history capacity; these helpers normalize them or raise the
matching construction error.
"""

import math
import numbers

from dtsystems.systems.base.exceptions import InvalidBufferSize, InvalidSamplingTime
from dtsystems.types.core import IntegerLike, ScalarLike


def validate_sampling_time(dt: ScalarLike, owner: str = "DiscreteTimeSystem") -> float:
    """
    Return dt as a float, or raise InvalidSamplingTime.

    Parameters
    ----------
    dt : float
        Sampling period in seconds
    owner : str
        Class name used in the error message

    Raises
    ------
    InvalidSamplingTime
        If dt is not a real number, is not finite, or is <= 0

    Examples
    --------
    >>> validate_sampling_time(0.01)
    0.01
    >>> validate_sampling_time(0)
    Traceback (most recent call last):
        ...
    InvalidSamplingTime: DiscreteTimeSystem: sampling period dt must be > 0, got 0
    """
    if isinstance(dt, bool) or not isinstance(dt, numbers.Real):
        raise InvalidSamplingTime(
            f"{owner}: sampling period dt must be a real number, got {type(dt).__name__}"
        )
    dt = float(dt)
    if math.isnan(dt) or dt <= 0.0:
        raise InvalidSamplingTime(f"{owner}: sampling period dt must be > 0, got {dt:g}")
    if math.isinf(dt):
        raise InvalidSamplingTime(f"{owner}: sampling period dt must be finite")
    return dt


def validate_buffer_size(buffer_size: IntegerLike, owner: str = "DiscreteTimeSystem") -> int:
    """
    Return buffer_size as an int, or raise InvalidBufferSize.

    Raises
    ------
    InvalidBufferSize
        If buffer_size is not an integer or is < 1
    """
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, numbers.Integral):
        raise InvalidBufferSize(
            f"{owner}: buffer_size must be an integer, got {type(buffer_size).__name__}"
        )
    buffer_size = int(buffer_size)
    if buffer_size < 1:
        raise InvalidBufferSize(f"{owner}: buffer_size must be >= 1, got {buffer_size}")
    return buffer_size
