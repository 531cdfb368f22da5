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
Unit Tests for Reference Signals

Tests StepSignal, RampSignal and SineSignal values, sampling/advance
behavior, bounded buffers, CSV export and validation.
"""

import math
import warnings

import pytest

from dtsystems.signals.reference import (
    RampSignal,
    ReferenceSignal,
    SineSignal,
    StepSignal,
)
from dtsystems.systems.base.exceptions import InvalidBufferSize, InvalidSamplingTime

# ============================================================================
# Step
# ============================================================================


class TestStepSignal:
    """Test step values and sampling."""

    def test_sequence(self):
        ref = StepSignal(dt=0.1, amplitude=1.0, step_time=0.3)
        assert [ref.next() for _ in range(5)] == [0.0, 0.0, 0.0, 1.0, 1.0]

    def test_offset(self):
        ref = StepSignal(dt=1.0, amplitude=2.0, step_time=1.0, offset=-0.5)
        assert [ref.next() for _ in range(3)] == [-0.5, 1.5, 1.5]

    def test_step_at_zero(self):
        ref = StepSignal(dt=0.5, amplitude=3.0, step_time=0.0)
        assert ref.next() == 3.0

    def test_parameters_mutable(self):
        ref = StepSignal(dt=1.0, amplitude=1.0, step_time=0.0)
        ref.next()
        ref.amplitude = 4.0
        assert ref.next() == 4.0


# ============================================================================
# Ramp
# ============================================================================


class TestRampSignal:
    """Test ramp values."""

    def test_before_and_after_start(self):
        ref = RampSignal(dt=0.5, slope=2.0, start_time=1.0)
        values = [ref.next() for _ in range(5)]
        assert values == pytest.approx([0.0, 0.0, 0.0, 1.0, 2.0])

    def test_offset(self):
        ref = RampSignal(dt=1.0, slope=1.0, start_time=0.0, offset=10.0)
        assert [ref.next() for _ in range(3)] == pytest.approx([10.0, 11.0, 12.0])

    def test_negative_slope(self):
        ref = RampSignal(dt=1.0, slope=-0.5, start_time=0.0)
        assert ref.compute(4) == pytest.approx(-2.0)


# ============================================================================
# Sine
# ============================================================================


class TestSineSignal:
    """Test sinusoid values and the aliasing warning."""

    def test_quarter_period_samples(self):
        ref = SineSignal(dt=0.25, amplitude=2.0, frequency=1.0)
        values = [ref.next() for _ in range(4)]
        assert values == pytest.approx([0.0, 2.0, 0.0, -2.0], abs=1e-12)

    def test_phase_and_offset(self):
        ref = SineSignal(dt=0.1, amplitude=1.0, frequency=0.5, phase=math.pi / 2, offset=1.0)
        assert ref.next() == pytest.approx(2.0)

    def test_nyquist_warning(self):
        with pytest.warns(UserWarning, match="Nyquist"):
            SineSignal(dt=0.1, amplitude=1.0, frequency=5.0)

    def test_no_warning_below_nyquist(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            SineSignal(dt=0.1, amplitude=1.0, frequency=4.9)


# ============================================================================
# Common Behavior
# ============================================================================


class TestReferenceSignal:
    """Test timing, buffers and export shared by all signals."""

    @pytest.fixture
    def ramp(self):
        return RampSignal(dt=0.1, slope=1.0, start_time=0.0, buffer_size=3)

    def test_is_abstract(self):
        with pytest.raises(TypeError):
            ReferenceSignal(dt=0.1)

    def test_compute_does_not_advance(self, ramp):
        assert ramp.compute() == 0.0
        assert ramp.compute(10) == pytest.approx(1.0)
        assert ramp.k == 0
        assert ramp.time_buffer == ()

    def test_next_advances_time(self, ramp):
        ramp.next()
        ramp.next()
        assert ramp.k == 2
        assert ramp.t == pytest.approx(0.2)

    def test_time_does_not_drift(self):
        ref = StepSignal(dt=0.001, amplitude=1.0, step_time=0.0, buffer_size=1)
        for _ in range(100000):
            ref.next()
        assert ref.t == 100000 * 0.001
        assert ref.time_buffer == (99999 * 0.001,)

    def test_buffers_bounded(self, ramp):
        for _ in range(5):
            ramp.next()
        assert ramp.time_buffer == pytest.approx((0.2, 0.3, 0.4))
        assert ramp.value_buffer == pytest.approx((0.2, 0.3, 0.4))
        assert ramp.buffer_size == 3

    def test_reset(self, ramp):
        for _ in range(4):
            ramp.next()
        ramp.reset()
        assert ramp.k == 0
        assert ramp.t == 0.0
        assert ramp.time_buffer == ()
        assert ramp.value_buffer == ()
        assert ramp.next() == 0.0

    def test_to_csv(self):
        ref = StepSignal(dt=0.5, amplitude=1.0, step_time=0.5)
        ref.next()
        ref.next()
        assert ref.to_csv() == "0.0,0.0\n0.5,1.0\n"
        assert str(ref) == ref.to_csv()

    def test_to_csv_empty(self, ramp):
        assert ramp.to_csv() == ""

    @pytest.mark.parametrize("dt", [0.0, -1.0, float("nan")])
    def test_invalid_dt(self, dt):
        with pytest.raises(InvalidSamplingTime):
            StepSignal(dt=dt, amplitude=1.0, step_time=0.0)

    def test_invalid_buffer_size(self):
        with pytest.raises(InvalidBufferSize):
            SineSignal(dt=0.1, amplitude=1.0, frequency=1.0, buffer_size=0)
