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
Unit Tests for Converters and Plant Models

Tests ADConverter, DAConverter and FirstOrderPlant, plus a closed loop
assembled from them.
"""

import numpy as np
import pytest

from dtsystems.control.pid_controller import PIDController
from dtsystems.systems.builtin.converters import ADConverter, DAConverter
from dtsystems.systems.builtin.plants import FirstOrderPlant

# ============================================================================
# Converters
# ============================================================================


class TestADConverter:
    """Test the one-sample conversion delay."""

    def test_delay(self):
        adc = ADConverter(dt=0.1)
        assert [adc.step(x) for x in [1, 2, 3, 4, 5]] == [0.0, 1.0, 2.0, 3.0, 4.0]

    def test_reset(self):
        adc = ADConverter(dt=0.1)
        adc.step(7.0)
        adc.reset()
        assert adc.step(1.0) == 0.0

    def test_default_buffer(self):
        assert ADConverter(dt=0.1).buffer_size == 1024


class TestDAConverter:
    """Test the pass-through converter."""

    def test_identity(self):
        dac = DAConverter(dt=0.1)
        values = [0.5, -1.0, 3.25]
        assert [dac.step(v) for v in values] == values
        assert [s.output for s in dac.samples()] == values


# ============================================================================
# Plant
# ============================================================================


class TestFirstOrderPlant:
    """Test the Tustin-discretized motor model."""

    @pytest.fixture
    def plant(self):
        return FirstOrderPlant()

    def test_coefficients(self, plant):
        np.testing.assert_allclose(plant.numerator, [0.0099, 0.0099])
        np.testing.assert_allclose(plant.denominator, [1.0, -0.9802])
        assert plant.dt == 0.01
        assert plant.buffer_size == 1024

    def test_first_sample(self, plant):
        assert plant.step(1.0) == pytest.approx(0.0099)

    def test_unit_dc_gain(self, plant):
        result = plant.simulate(1.0, n_steps=2000)
        assert result["y"][-1] == pytest.approx(1.0, rel=1e-6)

    def test_time_constant(self, plant):
        # 0.5 s time constant: ~63% of the final value after 50 samples
        y = plant.simulate(1.0, n_steps=51)["y"]
        assert y[50] == pytest.approx(1.0 - np.exp(-1.0), abs=0.01)

    def test_monotone_step_response(self, plant):
        y = plant.simulate(1.0, n_steps=300)["y"]
        assert np.all(np.diff(y) > 0)


# ============================================================================
# Closed Loop
# ============================================================================


class TestClosedLoop:
    """Reference -> PID -> DAC -> plant -> ADC -> feedback."""

    def test_tracks_setpoint(self):
        dt = 0.01
        pid = PIDController(kp=2.0, ki=4.0, kd=0.0, dt=dt)
        dac = DAConverter(dt)
        plant = FirstOrderPlant(dt)
        adc = ADConverter(dt)

        measured = 0.0
        for _ in range(1500):
            u = dac.step(pid.step(1.0 - measured))
            measured = adc.step(plant.step(u))

        assert measured == pytest.approx(1.0, abs=1e-3)
        assert pid.k == plant.k == adc.k == 1500
