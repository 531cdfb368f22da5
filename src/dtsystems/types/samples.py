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
Sample Types

Defines the record stored in a system's sample history and the formats
the history can be exported to.

Usage
-----
>>> from dtsystems.types.samples import Sample, ExportFormat
>>>
>>> s = Sample(input=1.0, output=0.5, step=0)
>>> s.as_tuple()
(0, 1.0, 0.5)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Sample:
    """
    One recorded step of a discrete-time system.

    Attributes
    ----------
    input : float
        Input u(k) applied at this step
    output : float
        Output y(k) produced at this step
    step : int
        Discrete time index k

    Notes
    -----
    Samples are created only by DiscreteTimeSystem.step() and are
    immutable; evicting a sample from the ring simply drops the reference.
    """

    input: float
    output: float
    step: int

    def as_tuple(self) -> Tuple[int, float, float]:
        """Return (step, input, output), the column order used by exports."""
        return (self.step, self.input, self.output)


class ExportFormat(Enum):
    """
    Text format for exporting a sample history.

    Attributes
    ----------
    TSV : str
        Header line plus one ``k<TAB>u<TAB>y`` line per sample
    MATLAB : str
        Single ``data = [...];`` matrix assignment readable by MATLAB/Octave
    """

    TSV = "tsv"
    MATLAB = "matlab"


__all__ = ["Sample", "ExportFormat"]
