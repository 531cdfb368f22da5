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
Built-in discrete-time realizations.

- TransferFunctionSystem: rational transfer function in z^-1
- StateSpaceSystem: linear state-space model
- ADConverter / DAConverter: converter models
- FirstOrderPlant: Tustin-discretized first-order motor
"""

from .converters import ADConverter, DAConverter
from .plants import FirstOrderPlant
from .state_space import StateSpaceSystem
from .transfer_function import TransferFunctionSystem

__all__ = [
    "TransferFunctionSystem",
    "StateSpaceSystem",
    "ADConverter",
    "DAConverter",
    "FirstOrderPlant",
]
