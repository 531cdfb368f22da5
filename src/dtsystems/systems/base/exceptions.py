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
Construction-time validation errors for discrete-time systems.

All errors derive from ValueError, so callers that only care about
"bad arguments" can catch that. None of them can be raised by step() or
reset() on a validly constructed system.
"""


class DiscreteSystemError(ValueError):
    """Base class for discrete-time system construction errors"""
    pass


class InvalidSamplingTime(DiscreteSystemError):
    """Raised when the sampling period is not a finite number > 0"""
    pass


class InvalidBufferSize(DiscreteSystemError):
    """Raised when the sample history capacity is not an integer >= 1"""
    pass


class InvalidCoefficients(DiscreteSystemError):
    """Raised when transfer-function coefficients cannot be normalized"""
    pass


class InvalidDimensions(DiscreteSystemError):
    """Raised when state-space matrices have inconsistent shapes"""
    pass


__all__ = [
    "DiscreteSystemError",
    "InvalidSamplingTime",
    "InvalidBufferSize",
    "InvalidCoefficients",
    "InvalidDimensions",
]
