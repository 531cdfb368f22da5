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
dtsystems
=========

Discrete-time SISO systems for simulation and control-loop prototyping.

Every system steps through the same protocol (compute the output, record
the sample, advance time) and keeps a bounded history of recent samples
that can be exported as TSV or as a MATLAB matrix.

Quick Start
-----------
>>> from dtsystems import TransferFunctionSystem, PIDController, FirstOrderPlant
>>>
>>> tf = TransferFunctionSystem(b=[1.0], a=[1.0, -0.5], dt=0.1)
>>> [tf.step(1.0) for _ in range(3)]
[1.0, 1.5, 1.75]
>>> print(tf.export_samples())

Closed loop:

>>> plant = FirstOrderPlant()
>>> pid = PIDController(kp=2.0, ki=1.0, kd=0.0, dt=plant.dt)
>>> y = 0.0
>>> for _ in range(500):
...     y = plant.step(pid.step(1.0 - y))

Package Layout
--------------
- systems.base: DiscreteTimeSystem, SampleHistory, construction errors
- systems.builtin: transfer function, state space, converters, plants
- control: PIDController
- signals: StepSignal, RampSignal, SineSignal
- visualization: SamplePlotter, themes
- types: Sample, ExportFormat, result and alias types

License
-------
GNU Affero General Public License v3.0
"""

from .control import PIDController
from .signals import RampSignal, ReferenceSignal, SineSignal, StepSignal
from .systems.base import (
    DiscreteSystemError,
    DiscreteTimeSystem,
    InvalidBufferSize,
    InvalidCoefficients,
    InvalidDimensions,
    InvalidSamplingTime,
    SampleHistory,
)
from .systems.builtin import (
    ADConverter,
    DAConverter,
    FirstOrderPlant,
    StateSpaceSystem,
    TransferFunctionSystem,
)
from .types import DiscreteSimulationResult, ExportFormat, Sample

__version__ = "0.1.0"

__all__ = [
    # Core
    "DiscreteTimeSystem",
    "SampleHistory",
    "Sample",
    "ExportFormat",
    "DiscreteSimulationResult",
    # Realizations
    "TransferFunctionSystem",
    "StateSpaceSystem",
    "ADConverter",
    "DAConverter",
    "FirstOrderPlant",
    # Control and signals
    "PIDController",
    "ReferenceSignal",
    "StepSignal",
    "RampSignal",
    "SineSignal",
    # Errors
    "DiscreteSystemError",
    "InvalidSamplingTime",
    "InvalidBufferSize",
    "InvalidCoefficients",
    "InvalidDimensions",
]
