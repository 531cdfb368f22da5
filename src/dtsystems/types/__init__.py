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
Types Module - Type Definitions for dtsystems

Central import point for all type definitions.
Organized into small modules but re-exported here for convenience.

Usage
-----
>>> from dtsystems.types import (
...     Sample,
...     ExportFormat,
...     CoefficientVector,
...     DiscreteSimulationResult,
... )

Module Organization
------------------
- core: Scalars, arrays, coefficient vectors, state-space matrices
- samples: Recorded samples and export formats
- trajectories: Simulation results
"""

from .core import (
    ArrayLike,
    CoefficientVector,
    FeedthroughScalar,
    InputPolicy,
    InputSequence,
    InputVector,
    IntegerLike,
    NumpyArray,
    OutputVector,
    ScalarLike,
    StateMatrix,
    StateVector,
)
from .samples import ExportFormat, Sample
from .trajectories import DiscreteSimulationResult

__all__ = [
    # Core
    "ArrayLike",
    "CoefficientVector",
    "FeedthroughScalar",
    "InputPolicy",
    "InputSequence",
    "InputVector",
    "IntegerLike",
    "NumpyArray",
    "OutputVector",
    "ScalarLike",
    "StateMatrix",
    "StateVector",
    # Samples
    "ExportFormat",
    "Sample",
    # Results
    "DiscreteSimulationResult",
]
