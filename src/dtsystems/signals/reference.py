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
Reference Signal Generators
===========================

Discrete reference signals for driving control loops:

- StepSignal: r(t) = amplitude · H(t - step_time) + offset
- RampSignal: r(t) = slope · (t - start_time) + offset for t >= start_time
- SineSignal: r(t) = amplitude · sin(2π f t + phase) + offset

Design
------
ReferenceSignal is a pure function of time, not a recurrence: compute()
never changes state. next() evaluates the signal at the current time,
stores the (time, value) pair in bounded buffers and advances time by one
sampling period. Sample times are k·dt, so they do not drift over long runs.

Parameters (amplitude, step_time, ...) are plain attributes and may be
changed between samples.

Examples
--------
>>> ref = StepSignal(dt=0.1, amplitude=1.0, step_time=0.3)
>>> [ref.next() for _ in range(5)]
[0.0, 0.0, 0.0, 1.0, 1.0]
>>> print(ref.to_csv())
0.0,0.0
0.1,0.0
...
"""

import math
import warnings
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Optional, Tuple

from dtsystems.systems.base.validation import validate_buffer_size, validate_sampling_time
from dtsystems.types.core import IntegerLike, ScalarLike


class ReferenceSignal(ABC):
    """
    Base class for sampled reference signals.

    Parameters
    ----------
    dt : float
        Sampling period in seconds (must be > 0)
    offset : float
        Constant added to every value (default: 0.0)
    buffer_size : int
        Number of (time, value) pairs retained (default: 1024)

    Raises
    ------
    InvalidSamplingTime
        If dt <= 0
    InvalidBufferSize
        If buffer_size < 1
    """

    def __init__(self, dt: ScalarLike, offset: float = 0.0, buffer_size: IntegerLike = 1024):
        owner = type(self).__name__
        self._dt = validate_sampling_time(dt, owner=owner)
        self._buffer_size = validate_buffer_size(buffer_size, owner=owner)
        self.offset = float(offset)
        self._k = 0
        self._time_buffer: Deque[float] = deque(maxlen=self._buffer_size)
        self._value_buffer: Deque[float] = deque(maxlen=self._buffer_size)

    @abstractmethod
    def _compute_at(self, time: float) -> float:
        """Signal value at the given time in seconds (including offset)."""
        pass

    def compute(self, k: Optional[int] = None) -> float:
        """
        Evaluate the signal without changing state.

        Parameters
        ----------
        k : Optional[int]
            Sample index; if None, uses the current sample

        Returns
        -------
        float
            Value at time k * dt
        """
        k = self._k if k is None else k
        return self._compute_at(k * self._dt)

    def next(self) -> float:
        """
        Sample the signal at the current time, record it, then advance.

        Returns
        -------
        float
            Value at the time before advancing
        """
        time = self.t
        value = self._compute_at(time)
        self._time_buffer.append(time)
        self._value_buffer.append(value)
        self._k += 1
        return value

    def reset(self) -> None:
        """Rewind to t = 0 and clear both buffers."""
        self._k = 0
        self._time_buffer.clear()
        self._value_buffer.clear()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def t(self) -> float:
        """Current time k * dt."""
        return self._k * self._dt

    @property
    def k(self) -> int:
        return self._k

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    @property
    def time_buffer(self) -> Tuple[float, ...]:
        """Recorded sample times, oldest first."""
        return tuple(self._time_buffer)

    @property
    def value_buffer(self) -> Tuple[float, ...]:
        """Recorded values, oldest first."""
        return tuple(self._value_buffer)

    # =========================================================================
    # Export
    # =========================================================================

    def to_csv(self) -> str:
        """Buffers as ``time,value`` lines, oldest first."""
        return "".join(
            f"{time!r},{value!r}\n" for time, value in zip(self._time_buffer, self._value_buffer)
        )

    def __str__(self) -> str:
        return self.to_csv()


class StepSignal(ReferenceSignal):
    """
    Step of height ``amplitude`` at ``step_time``.

    Parameters
    ----------
    dt : float
        Sampling period in seconds
    amplitude : float
        Step height
    step_time : float
        Time at which the step occurs, in seconds
    offset : float
        Value before the step (default: 0.0)
    buffer_size : int
        Buffer capacity (default: 1024)
    """

    def __init__(
        self,
        dt: ScalarLike,
        amplitude: float,
        step_time: float,
        offset: float = 0.0,
        buffer_size: IntegerLike = 1024,
    ):
        super().__init__(dt, offset, buffer_size)
        self.amplitude = float(amplitude)
        self.step_time = float(step_time)

    def _compute_at(self, time: float) -> float:
        return self.amplitude + self.offset if time >= self.step_time else self.offset


class RampSignal(ReferenceSignal):
    """
    Ramp of slope ``slope`` (units per second) starting at ``start_time``.

    Parameters
    ----------
    dt : float
        Sampling period in seconds
    slope : float
        Rate of increase
    start_time : float
        Time at which the ramp starts, in seconds
    offset : float
        Initial level (default: 0.0)
    buffer_size : int
        Buffer capacity (default: 1024)
    """

    def __init__(
        self,
        dt: ScalarLike,
        slope: float,
        start_time: float,
        offset: float = 0.0,
        buffer_size: IntegerLike = 1024,
    ):
        super().__init__(dt, offset, buffer_size)
        self.slope = float(slope)
        self.start_time = float(start_time)

    def _compute_at(self, time: float) -> float:
        if time < self.start_time:
            return self.offset
        return self.slope * (time - self.start_time) + self.offset


class SineSignal(ReferenceSignal):
    """
    Sinusoid ``amplitude · sin(2π · frequency · t + phase) + offset``.

    Parameters
    ----------
    dt : float
        Sampling period in seconds
    amplitude : float
        Peak amplitude
    frequency : float
        Frequency in Hz
    phase : float
        Initial phase in radians (default: 0.0)
    offset : float
        Vertical offset (default: 0.0)
    buffer_size : int
        Buffer capacity (default: 1024)

    Warns
    -----
    UserWarning
        If frequency >= 1 / (2 dt) (the sampled signal aliases)
    """

    def __init__(
        self,
        dt: ScalarLike,
        amplitude: float,
        frequency: float,
        phase: float = 0.0,
        offset: float = 0.0,
        buffer_size: IntegerLike = 1024,
    ):
        super().__init__(dt, offset, buffer_size)
        self.amplitude = float(amplitude)
        self.frequency = float(frequency)
        self.phase = float(phase)

        nyquist = 0.5 / self.dt
        if abs(self.frequency) >= nyquist:
            warnings.warn(
                f"SineSignal: frequency {self.frequency:g} Hz is at or above the "
                f"Nyquist frequency {nyquist:g} Hz; the sampled signal will alias",
                UserWarning,
            )

    def _compute_at(self, time: float) -> float:
        return self.amplitude * math.sin(2.0 * math.pi * self.frequency * time + self.phase) + self.offset


__all__ = ["ReferenceSignal", "StepSignal", "RampSignal", "SineSignal"]
