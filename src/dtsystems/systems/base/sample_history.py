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
Sample History - Fixed-Capacity Circular Buffer
===============================================

Stores the most recent (input, output, step) samples of a discrete-time
system and exports them in temporal order.

Overview
--------
The ring is a preallocated list of ``capacity`` slots addressed by a write
cursor. Recording never allocates a new slot: once the ring is full, each
new sample overwrites the oldest one.

    count < capacity:   oldest sample at slot 0
    count == capacity:  oldest sample at slot write_index
                        (the next slot to be overwritten)

Getting that index wrong does not crash anything; it silently rotates the
exported data. export_ordered() is the only place that computes it.

Export Formats
--------------
format_samples() renders an ordered sample list as text:

- ExportFormat.TSV:    ``# k<TAB>u(k)<TAB>y(k)`` header, one line per sample
- ExportFormat.MATLAB: ``data = [k u y;k u y;...];`` with comment lines

Examples
--------
>>> history = SampleHistory(capacity=3)
>>> for k in range(5):
...     history.record(float(k), 2.0 * k, k)
>>> [s.step for s in history]
[2, 3, 4]
>>> print(format_samples(history.export_ordered(), ExportFormat.TSV))
# k	u(k)	y(k)
2	2.0	4.0
3	3.0	6.0
4	4.0	8.0
"""

from typing import Iterator, List, Optional, Sequence

import numpy as np

from dtsystems.systems.base.validation import validate_buffer_size
from dtsystems.types.core import IntegerLike, NumpyArray
from dtsystems.types.samples import ExportFormat, Sample


class SampleHistory:
    """
    Fixed-capacity ring of Sample records.

    Attributes
    ----------
    capacity : int
        Maximum number of samples retained
    write_index : int
        Slot the next sample is written to, 0 <= write_index < capacity

    Notes
    -----
    Invariant: the stored samples always form a contiguous window of step
    indices ending at the most recently recorded step, provided the owner
    records steps in increasing order (DiscreteTimeSystem.step does).
    """

    def __init__(self, capacity: IntegerLike = 100):
        self._capacity = validate_buffer_size(capacity, owner="SampleHistory")
        self._slots: List[Optional[Sample]] = [None] * self._capacity
        self._write_index = 0
        self._count = 0

    # ========================================================================
    # Mutation
    # ========================================================================

    def record(self, input: float, output: float, step: int) -> None:
        """
        Store one sample, evicting the oldest one if the ring is full.

        Parameters
        ----------
        input : float
            Input u(k)
        output : float
            Output y(k)
        step : int
            Step index k
        """
        self._slots[self._write_index] = Sample(input=input, output=output, step=step)
        if self._count < self._capacity:
            self._count += 1
        self._write_index = (self._write_index + 1) % self._capacity

    def clear(self) -> None:
        """Forget every sample. Slots stay allocated."""
        self._count = 0
        self._write_index = 0

    # ========================================================================
    # Ordered Access
    # ========================================================================

    def export_ordered(self) -> List[Sample]:
        """
        Return the stored samples, oldest first.

        Returns
        -------
        List[Sample]
            ``len(self)`` samples in increasing step order
        """
        oldest = self._write_index if self._count == self._capacity else 0
        return [
            self._slots[(oldest + i) % self._capacity] for i in range(self._count)
        ]

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.export_ordered())

    def __len__(self) -> int:
        return self._count

    @property
    def latest(self) -> Optional[Sample]:
        """Most recently recorded sample, or None if the history is empty."""
        if self._count == 0:
            return None
        return self._slots[(self._write_index - 1) % self._capacity]

    def to_array(self) -> NumpyArray:
        """
        Return the history as a float array of shape (count, 3).

        Columns are (step, input, output), oldest row first.

        Examples
        --------
        >>> data = history.to_array()
        >>> k, u, y = data[:, 0], data[:, 1], data[:, 2]
        """
        samples = self.export_ordered()
        if not samples:
            return np.empty((0, 3))
        return np.array([s.as_tuple() for s in samples], dtype=float)

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def write_index(self) -> int:
        return self._write_index

    @property
    def is_full(self) -> bool:
        return self._count == self._capacity

    def __repr__(self) -> str:
        return f"SampleHistory(capacity={self._capacity}, count={self._count})"


# ============================================================================
# Export Formatting
# ============================================================================


def _format_value(value: float) -> str:
    return repr(float(value))


def format_tsv(samples: Sequence[Sample], separator: str = "\t") -> str:
    """
    Render samples as a header line plus one ``k<SEP>u<SEP>y`` line each.

    An empty sequence yields only the header line.
    """
    lines = [f"# k{separator}u(k){separator}y(k)"]
    for s in samples:
        lines.append(
            f"{s.step}{separator}{_format_value(s.input)}{separator}{_format_value(s.output)}"
        )
    return "\n".join(lines) + "\n"


def format_matlab(samples: Sequence[Sample], name: str = "data") -> str:
    """
    Render samples as a MATLAB/Octave matrix assignment.

    Rows are samples (oldest first), columns are ``k u y``, rows are
    separated by ``;``.
    """
    rows = ";".join(
        f"{s.step} {_format_value(s.input)} {_format_value(s.output)}" for s in samples
    )
    lines = [
        "% Export format: MATLAB compatible",
        "% Columns: k u y",
        f"{name} = [{rows}];",
        f"% Usage in MATLAB/Octave: k = {name}(:,1); u = {name}(:,2); y = {name}(:,3);",
    ]
    return "\n".join(lines) + "\n"


def format_samples(samples: Sequence[Sample], fmt: ExportFormat = ExportFormat.TSV, **options) -> str:
    """
    Render samples in the requested export format.

    Parameters
    ----------
    samples : Sequence[Sample]
        Samples in temporal order
    fmt : ExportFormat or str
        ExportFormat.TSV / 'tsv' or ExportFormat.MATLAB / 'matlab'
    **options
        separator : str
            Field separator for TSV (default: tab)
        name : str
            Variable name for MATLAB (default: 'data')

    Raises
    ------
    ValueError
        If fmt is not a known export format
    """
    fmt = ExportFormat(fmt.lower() if isinstance(fmt, str) else fmt)
    if fmt is ExportFormat.TSV:
        return format_tsv(samples, separator=options.get("separator", "\t"))
    return format_matlab(samples, name=options.get("name", "data"))


__all__ = [
    "SampleHistory",
    "format_samples",
    "format_tsv",
    "format_matlab",
]
