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
Unit Tests for SampleHistory

Tests the fixed-capacity ring: recording, eviction, temporal ordering
across wrap-around, clearing, and the TSV/MATLAB formatters.
"""

import numpy as np
import pytest

from dtsystems.systems.base.exceptions import InvalidBufferSize
from dtsystems.systems.base.sample_history import (
    SampleHistory,
    format_matlab,
    format_samples,
    format_tsv,
)
from dtsystems.types.samples import ExportFormat, Sample

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def history():
    """Empty history with capacity 4."""
    return SampleHistory(capacity=4)


def fill(history, n):
    for k in range(n):
        history.record(float(k), 10.0 * k, k)


# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """Test capacity validation."""

    def test_starts_empty(self, history):
        assert len(history) == 0
        assert history.capacity == 4
        assert history.write_index == 0
        assert history.latest is None
        assert history.export_ordered() == []

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_non_positive_capacity_rejected(self, capacity):
        with pytest.raises(InvalidBufferSize):
            SampleHistory(capacity=capacity)

    @pytest.mark.parametrize("capacity", [2.5, "10", None, True])
    def test_non_integer_capacity_rejected(self, capacity):
        with pytest.raises(InvalidBufferSize):
            SampleHistory(capacity=capacity)

    def test_numpy_integer_capacity_accepted(self):
        assert SampleHistory(capacity=np.int64(3)).capacity == 3


# ============================================================================
# Recording and Eviction
# ============================================================================


class TestRecording:
    """Test count, cursor and eviction behavior."""

    def test_partial_fill_keeps_all(self, history):
        fill(history, 3)
        assert len(history) == 3
        assert not history.is_full
        assert history.write_index == 3
        assert [s.step for s in history] == [0, 1, 2]

    def test_exact_fill(self, history):
        fill(history, 4)
        assert history.is_full
        assert history.write_index == 0
        assert [s.step for s in history] == [0, 1, 2, 3]

    def test_overflow_evicts_oldest(self, history):
        fill(history, 6)
        assert len(history) == 4
        assert history.write_index == 2
        assert [s.step for s in history] == [2, 3, 4, 5]

    def test_ordered_export_after_many_wraps(self, history):
        n = 4 * 7 + 3
        fill(history, n)
        steps = [s.step for s in history.export_ordered()]
        assert steps == list(range(n - 4, n))

    def test_samples_keep_values(self, history):
        history.record(1.5, -2.5, 0)
        assert history.export_ordered() == [Sample(input=1.5, output=-2.5, step=0)]

    def test_latest(self, history):
        fill(history, 6)
        assert history.latest.step == 5
        assert history.latest.output == 50.0

    def test_capacity_one(self):
        h = SampleHistory(capacity=1)
        fill(h, 3)
        assert [s.step for s in h] == [2]
        assert h.write_index == 0

    def test_samples_are_immutable(self, history):
        fill(history, 1)
        sample = history.latest
        with pytest.raises(AttributeError):
            sample.output = 99.0


# ============================================================================
# Clearing
# ============================================================================


class TestClear:
    """Test logical clearing."""

    def test_clear_resets_count_and_cursor(self, history):
        fill(history, 6)
        history.clear()
        assert len(history) == 0
        assert history.write_index == 0
        assert history.export_ordered() == []
        assert history.capacity == 4

    def test_record_after_clear_starts_at_zero(self, history):
        fill(history, 6)
        history.clear()
        history.record(7.0, 8.0, 0)
        assert history.export_ordered() == [Sample(7.0, 8.0, 0)]


# ============================================================================
# Array Export
# ============================================================================


class TestToArray:
    """Test NumPy export."""

    def test_empty_shape(self, history):
        assert history.to_array().shape == (0, 3)

    def test_columns_and_order(self, history):
        fill(history, 5)
        data = history.to_array()
        assert data.shape == (4, 3)
        np.testing.assert_array_equal(data[:, 0], [1, 2, 3, 4])
        np.testing.assert_array_equal(data[:, 1], [1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(data[:, 2], [10.0, 20.0, 30.0, 40.0])


# ============================================================================
# Text Formatting
# ============================================================================


class TestFormatting:
    """Test TSV and MATLAB renderers."""

    @pytest.fixture
    def samples(self):
        return [Sample(1.0, 0.5, 0), Sample(1.0, 0.75, 1)]

    def test_tsv(self, samples):
        assert format_tsv(samples) == "# k\tu(k)\ty(k)\n0\t1.0\t0.5\n1\t1.0\t0.75\n"

    def test_tsv_custom_separator(self, samples):
        text = format_tsv(samples, separator=",")
        assert text.splitlines() == ["# k,u(k),y(k)", "0,1.0,0.5", "1,1.0,0.75"]

    def test_tsv_empty_is_header_only(self):
        assert format_tsv([]) == "# k\tu(k)\ty(k)\n"

    def test_matlab(self, samples):
        lines = format_matlab(samples).splitlines()
        assert lines[0].startswith("%")
        assert lines[1] == "% Columns: k u y"
        assert lines[2] == "data = [0 1.0 0.5;1 1.0 0.75];"
        assert lines[3].startswith("%")

    def test_matlab_custom_name_and_empty(self):
        lines = format_matlab([], name="plant").splitlines()
        assert "plant = [];" in lines

    def test_matlab_matrix_parses_back(self, samples):
        line = format_matlab(samples).splitlines()[2]
        body = line[line.index("[") + 1 : line.index("]")]
        rows = [list(map(float, row.split())) for row in body.split(";")]
        np.testing.assert_array_equal(rows, [[0, 1.0, 0.5], [1, 1.0, 0.75]])

    def test_full_precision(self):
        text = format_tsv([Sample(0.1, 1.0 / 3.0, 0)])
        assert repr(1.0 / 3.0) in text

    def test_format_samples_dispatch(self, samples):
        assert format_samples(samples, ExportFormat.TSV) == format_tsv(samples)
        assert format_samples(samples, "matlab", name="d") == format_matlab(samples, name="d")
        assert format_samples(samples, "TSV", separator=";") == format_tsv(samples, separator=";")

    def test_format_samples_unknown(self, samples):
        with pytest.raises(ValueError):
            format_samples(samples, "csv")
