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
Discrete-Time System Base Class (Layer 1)
=========================================

This module provides the abstract base class for all discrete-time SISO
systems in the package.

Overview
--------
DiscreteTimeSystem owns everything that is common to every realization:
the sampling period, the step counter and a bounded history of recent
samples. Concrete realizations only supply the recurrence that maps the
current input (and their own internal state) to the current output.

The public step() is a template method with a fixed three-stage protocol:

    1. y = self._recurrence(u)        (realization-specific)
    2. history.record(u, y, k)        (always)
    3. k = k + 1                      (always)

Subclasses cannot override step() or reset(). Declaring either of them in
a subclass, or inheriting one from a mixin that precedes the realization
in the bases, raises TypeError at class creation, so no realization can skip
recording or reorder the stages.

Architecture Position
--------------------
Layer 1 (Abstract Interface):
    DiscreteTimeSystem ← YOU ARE HERE
    SampleHistory (owned, one per instance)

Layer 2 (Realizations):
    TransferFunctionSystem(DiscreteTimeSystem)
    StateSpaceSystem(DiscreteTimeSystem)

Layer 3 (Collaborators):
    PIDController, ADConverter, DAConverter, FirstOrderPlant

Abstract Methods
---------------
Subclasses MUST implement:
- _recurrence(u): Compute y[k] and update internal state
- _reset_state(): Return internal state to its post-construction value

Concrete Methods
---------------
Provided by the base class (final):
- step(u): Compute, record, advance
- reset(): Clear counter and history, then reset realization state

Provided by the base class:
- simulate(u_sequence): Step through an input sequence
- samples(), export_samples(), dump(): Read the sample history

Mathematical Notation
--------------------
- u[k] ∈ ℝ: Input at discrete time k
- y[k] ∈ ℝ: Output at discrete time k
- k ∈ ℤ₊: Discrete time index (Python int, never wraps)
- Δt: Sampling period (dt property)

Examples
--------
>>> class Gain(DiscreteTimeSystem):
...     def __init__(self, gain, dt, buffer_size=100):
...         super().__init__(dt, buffer_size)
...         self.gain = gain
...
...     def _recurrence(self, u):
...         return self.gain * u
...
...     def _reset_state(self):
...         pass
>>>
>>> g = Gain(2.0, dt=0.1)
>>> g.step(1.5)
3.0
>>> g.k
1

Thread Safety
-------------
None. step() and reset() mutate the counter and the history without
locking; share an instance across threads only under external
synchronization.
"""

import itertools
import numbers
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, final

import numpy as np

from dtsystems.systems.base.sample_history import SampleHistory, format_samples
from dtsystems.systems.base.validation import validate_buffer_size, validate_sampling_time
from dtsystems.types.core import InputSequence, IntegerLike, ScalarLike
from dtsystems.types.samples import ExportFormat, Sample
from dtsystems.types.trajectories import DiscreteSimulationResult


class DiscreteTimeSystem(ABC):
    """
    Abstract base class for discrete-time SISO systems.

    Parameters
    ----------
    dt : float
        Sampling period in seconds (must be finite and > 0)
    buffer_size : int
        Capacity of the sample history (must be >= 1, default: 100)

    Raises
    ------
    InvalidSamplingTime
        If dt is not a finite number > 0
    InvalidBufferSize
        If buffer_size is not an integer >= 1

    Attributes
    ----------
    dt : float
        Sampling period (read-only)
    k : int
        Index of the next step to be taken (read-only)
    buffer_size : int
        Capacity of the sample history (read-only)
    sample_count : int
        Number of samples currently held in the history

    Notes
    -----
    This is an abstract base class and cannot be instantiated directly.
    Realizations implement _recurrence() and _reset_state() and must call
    ``super().__init__(dt, buffer_size)`` before allocating their own state.

    Examples
    --------
    Polymorphic usage:

    >>> def step_response(system: DiscreteTimeSystem, n: int):
    ...     \"\"\"Works with ANY realization.\"\"\"
    ...     system.reset()
    ...     return [system.step(1.0) for _ in range(n)]
    """

    _FINAL_METHODS = ("step", "reset")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name in DiscreteTimeSystem._FINAL_METHODS:
            if getattr(cls, name) is not getattr(DiscreteTimeSystem, name):
                raise TypeError(
                    f"{cls.__name__} cannot override DiscreteTimeSystem.{name}(); "
                    f"implement _recurrence() / _reset_state() instead"
                )

    def __init__(self, dt: ScalarLike, buffer_size: IntegerLike = 100):
        owner = type(self).__name__
        self._dt = validate_sampling_time(dt, owner=owner)
        self._history = SampleHistory(validate_buffer_size(buffer_size, owner=owner))
        self._k = 0

    # =========================================================================
    # Abstract Methods (MUST be implemented by subclasses)
    # =========================================================================

    @abstractmethod
    def _recurrence(self, u: float) -> float:
        """
        Compute the output for input u and advance internal state.

        Parameters
        ----------
        u : float
            Input u[k]

        Returns
        -------
        float
            Output y[k]

        Notes
        -----
        Called exactly once per step(). May read and write only the
        realization's own state; the counter and history are managed by
        the base class.
        """
        pass

    @abstractmethod
    def _reset_state(self) -> None:
        """
        Return internal state to its post-construction value.

        Called by reset() after the counter and history are cleared.
        """
        pass

    # =========================================================================
    # Template Methods (final)
    # =========================================================================

    @final
    def step(self, u: ScalarLike) -> float:
        """
        Advance the system by one sample: compute, record, advance.

        Parameters
        ----------
        u : float
            Input u[k]

        Returns
        -------
        float
            Output y[k]

        Examples
        --------
        >>> y = [system.step(1.0) for _ in range(10)]
        >>> system.k
        10
        """
        u = float(u)
        y = float(self._recurrence(u))
        self._history.record(u, y, self._k)
        self._k += 1
        return y

    @final
    def reset(self) -> None:
        """
        Return the system to its post-construction state.

        Sets k to 0, empties the sample history, then calls _reset_state().
        The sampling period and buffer size are kept.
        """
        self._k = 0
        self._history.clear()
        self._reset_state()

    def __call__(self, u: ScalarLike) -> float:
        """Alias for step()."""
        return self.step(u)

    # =========================================================================
    # Simulation
    # =========================================================================

    def simulate(
        self,
        u_sequence: InputSequence,
        n_steps: Optional[int] = None,
        reset: bool = True,
    ) -> DiscreteSimulationResult:
        """
        Step the system through a sequence of inputs.

        Parameters
        ----------
        u_sequence : InputSequence
            Input sequence, can be:
            - Array/sequence (N,): u[0], u[1], ..., u[N-1]
            - Scalar: constant input for n_steps steps
            - Callable: u[k] = u_sequence(k), evaluated with the absolute
              step index, for n_steps steps
        n_steps : Optional[int]
            Number of steps. Required for scalar and callable inputs; for
            arrays it truncates the sequence.
        reset : bool
            If True (default), reset() before simulating

        Returns
        -------
        DiscreteSimulationResult
            TypedDict with k, t, u, y (each of shape (N,)), dt and metadata

        Raises
        ------
        ValueError
            If n_steps is missing, not an integer, negative, or longer than
            the given array, or if the array is not one-dimensional

        Notes
        -----
        Every step goes through step(), so the simulated samples are also
        recorded in the history (subject to its capacity).

        Examples
        --------
        Step response:

        >>> result = system.simulate(1.0, n_steps=100)
        >>> plt.plot(result['t'], result['y'])

        Pre-computed sequence:

        >>> u = np.sin(0.1 * np.arange(200))
        >>> result = system.simulate(u)

        Input policy:

        >>> result = system.simulate(lambda k: 1.0 if k >= 10 else 0.0, n_steps=50)
        """
        if n_steps is not None:
            if isinstance(n_steps, bool) or not isinstance(n_steps, numbers.Integral):
                raise ValueError(f"n_steps must be an integer, got {type(n_steps).__name__}")
            if n_steps < 0:
                raise ValueError(f"n_steps must be >= 0, got {n_steps}")

        if callable(u_sequence):
            if n_steps is None:
                raise ValueError("n_steps is required when u_sequence is a callable")
            method = "policy"
        elif np.ndim(u_sequence) == 0:
            if n_steps is None:
                raise ValueError("n_steps is required when u_sequence is a scalar")
            method = "constant"
        else:
            values = np.asarray(u_sequence, dtype=float)
            if values.ndim != 1:
                raise ValueError(
                    f"u_sequence must be one-dimensional for a SISO system, got shape {values.shape}"
                )
            if n_steps is None:
                n_steps = values.shape[0]
            elif n_steps > values.shape[0]:
                raise ValueError(
                    f"n_steps={n_steps} exceeds the length of u_sequence ({values.shape[0]})"
                )
            method = "sequence"

        if reset:
            self.reset()

        k0 = self._k
        u_out = np.empty(n_steps)
        y_out = np.empty(n_steps)

        if method == "policy":
            inputs = (u_sequence(k0 + i) for i in range(n_steps))
        elif method == "constant":
            inputs = itertools.repeat(u_sequence, n_steps)
        else:
            inputs = iter(values[:n_steps])

        for i, u in enumerate(inputs):
            u_out[i] = float(u)
            y_out[i] = self.step(u)

        k = np.arange(k0, k0 + n_steps)
        result: DiscreteSimulationResult = {
            "k": k,
            "t": k * self._dt,
            "u": u_out,
            "y": y_out,
            "dt": self._dt,
            "success": True,
            "message": f"Simulated {n_steps} steps",
            "method": method,
            "metadata": {"system": type(self).__name__, "reset": reset},
        }
        return result

    # =========================================================================
    # History Access
    # =========================================================================

    def samples(self) -> List[Sample]:
        """Return the recorded samples, oldest first."""
        return self._history.export_ordered()

    def samples_array(self) -> np.ndarray:
        """Return the recorded samples as a (count, 3) array of (k, u, y)."""
        return self._history.to_array()

    def export_samples(self, fmt: ExportFormat = ExportFormat.TSV, **options) -> str:
        """
        Render the sample history as text.

        Parameters
        ----------
        fmt : ExportFormat or str
            ExportFormat.TSV (default) or ExportFormat.MATLAB
        **options
            separator : str
                TSV field separator (default: tab)
            name : str
                MATLAB variable name (default: 'data')

        Returns
        -------
        str
            Formatted history, oldest sample first

        Examples
        --------
        >>> print(system.export_samples())
        # k	u(k)	y(k)
        0	1.0	1.0
        1	1.0	1.5
        >>>
        >>> system.export_samples(ExportFormat.MATLAB, name='plant')
        """
        return format_samples(self._history.export_ordered(), fmt, **options)

    def dump(self, stream: TextIO, fmt: ExportFormat = ExportFormat.TSV, **options) -> None:
        """
        Write export_samples() output to a text stream.

        Examples
        --------
        >>> with open('plant.tsv', 'w') as f:
        ...     plant.dump(f)
        """
        stream.write(self.export_samples(fmt, **options))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def dt(self) -> float:
        """Sampling period in seconds."""
        return self._dt

    @property
    def sampling_frequency(self) -> float:
        """
        Sampling frequency in Hz.

        Examples
        --------
        >>> print(f"Sampling rate: {system.sampling_frequency} Hz")
        Sampling rate: 100.0 Hz
        """
        return 1.0 / self._dt

    @property
    def k(self) -> int:
        """Index of the next step (number of steps since the last reset)."""
        return self._k

    @property
    def time(self) -> float:
        """Time of the next step, k * dt."""
        return self._k * self._dt

    @property
    def buffer_size(self) -> int:
        return self._history.capacity

    @property
    def sample_count(self) -> int:
        return len(self._history)

    def __repr__(self) -> str:
        """
        String representation of the discrete system.

        Examples
        --------
        >>> print(repr(system))
        TransferFunctionSystem(dt=0.01, k=0, buffer_size=100)
        """
        return f"{type(self).__name__}(dt={self._dt}, k={self._k}, buffer_size={self.buffer_size})"


__all__ = ["DiscreteTimeSystem"]
