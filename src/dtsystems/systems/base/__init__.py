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
Base classes for discrete-time systems: the step/record/advance skeleton,
its circular sample history, and the construction errors.
"""

from .discrete_time_system import DiscreteTimeSystem
from .exceptions import (
    DiscreteSystemError,
    InvalidBufferSize,
    InvalidCoefficients,
    InvalidDimensions,
    InvalidSamplingTime,
)
from .sample_history import SampleHistory, format_matlab, format_samples, format_tsv

__all__ = [
    "DiscreteTimeSystem",
    "SampleHistory",
    "format_samples",
    "format_tsv",
    "format_matlab",
    "DiscreteSystemError",
    "InvalidSamplingTime",
    "InvalidBufferSize",
    "InvalidCoefficients",
    "InvalidDimensions",
]
