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
Sample Plotter - Interactive Plots of Recorded Samples

Plotly-based visualization of what a discrete-time system has recorded in
its sample history. Plotting reads the history only; it never steps or
resets a system.

Main Class
----------
SamplePlotter
    plot_samples() : Input and output of one system, stacked subplots
    plot_comparison() : Outputs of several systems on one axis
    plot_signal() : Buffered values of a reference signal

Usage
-----
>>> from dtsystems.visualization import SamplePlotter
>>>
>>> plant.simulate(1.0, n_steps=300)
>>> plotter = SamplePlotter()
>>> fig = plotter.plot_samples(plant, title='Plant step response')
>>> fig.show()
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from dtsystems.signals.reference import ReferenceSignal
from dtsystems.systems.base.discrete_time_system import DiscreteTimeSystem
from dtsystems.types.samples import Sample
from dtsystems.visualization.themes import ColorSchemes, PlotThemes

SampleSource = Union[DiscreteTimeSystem, Sequence[Sample]]


class SamplePlotter:
    """
    Plot sample histories of discrete-time systems.

    Parameters
    ----------
    default_theme : str
        Theme applied when a plot call does not pass one (default: 'default')

    Examples
    --------
    >>> plotter = SamplePlotter(default_theme='publication')
    >>> fig = plotter.plot_comparison({'plant': plant, 'model': model})
    """

    def __init__(self, default_theme: str = "default"):
        PlotThemes.get_theme(default_theme)
        self.default_theme = default_theme

    @staticmethod
    def _resolve(source: SampleSource, dt: Optional[float]) -> Tuple[np.ndarray, np.ndarray, np.ndarray, bool]:
        """Return (x, u, y, x_is_time) for a system or a sample sequence."""
        if isinstance(source, DiscreteTimeSystem):
            data = source.samples_array()
            dt = source.dt if dt is None else dt
        else:
            data = np.array([s.as_tuple() for s in source], dtype=float).reshape(-1, 3)

        k, u, y = data[:, 0], data[:, 1], data[:, 2]
        if dt is None:
            return k, u, y, False
        return k * dt, u, y, True

    def plot_samples(
        self,
        source: SampleSource,
        dt: Optional[float] = None,
        title: str = "Sample History",
        show_input: bool = True,
        theme: Optional[str] = None,
    ) -> go.Figure:
        """
        Plot input and output of one system as staircase traces.

        Parameters
        ----------
        source : DiscreteTimeSystem or Sequence[Sample]
            System whose history is plotted, or samples in temporal order
        dt : Optional[float]
            Sampling period for the time axis. Defaults to the system's dt;
            for a bare sample sequence without dt the x-axis is the step k.
        title : str
            Figure title
        show_input : bool
            If True, add an input subplot above the output
        theme : Optional[str]
            Theme name; if None, uses self.default_theme

        Returns
        -------
        go.Figure
            Figure with one or two rows sharing the x-axis
        """
        x, u, y, x_is_time = self._resolve(source, dt)
        x_title = "Time (s)" if x_is_time else "Step k"
        colors = ColorSchemes.SIGNAL_ROLES

        if show_input:
            fig = make_subplots(
                rows=2,
                cols=1,
                shared_xaxes=True,
                vertical_spacing=0.08,
                subplot_titles=("Input u(k)", "Output y(k)"),
            )
            fig.add_trace(
                go.Scatter(x=x, y=u, mode="lines", name="u(k)", line=dict(color=colors["input"], shape="hv")),
                row=1,
                col=1,
            )
            fig.add_trace(
                go.Scatter(x=x, y=y, mode="lines", name="y(k)", line=dict(color=colors["output"], shape="hv")),
                row=2,
                col=1,
            )
            fig.update_xaxes(title_text=x_title, row=2, col=1)
        else:
            fig = go.Figure()
            fig.add_trace(
                go.Scatter(x=x, y=y, mode="lines", name="y(k)", line=dict(color=colors["output"], shape="hv"))
            )
            fig.update_layout(xaxis_title=x_title, yaxis_title="y(k)")

        fig.update_layout(title=title, showlegend=True)
        return PlotThemes.apply_theme(fig, theme=theme or self.default_theme)

    def plot_comparison(
        self,
        sources: Dict[str, SampleSource],
        reference: Optional[ReferenceSignal] = None,
        title: str = "Output Comparison",
        color_scheme: str = "plotly",
        theme: Optional[str] = None,
    ) -> go.Figure:
        """
        Overlay the outputs of several systems.

        Parameters
        ----------
        sources : Dict[str, DiscreteTimeSystem or Sequence[Sample]]
            Legend name → system (or samples)
        reference : Optional[ReferenceSignal]
            Reference drawn as a dashed trace
        title : str
            Figure title
        color_scheme : str
            Palette for the system traces
        theme : Optional[str]
            Theme name; if None, uses self.default_theme

        Returns
        -------
        go.Figure
            One trace per source, plus the reference if given
        """
        fig = go.Figure()
        colors = ColorSchemes.get_colors(color_scheme, n_colors=len(sources))
        any_time = False

        for color, (name, source) in zip(colors, sources.items()):
            x, _, y, x_is_time = self._resolve(source, None)
            any_time = any_time or x_is_time
            fig.add_trace(
                go.Scatter(x=x, y=y, mode="lines", name=name, line=dict(color=color, shape="hv"))
            )

        if reference is not None:
            fig.add_trace(
                go.Scatter(
                    x=list(reference.time_buffer),
                    y=list(reference.value_buffer),
                    mode="lines",
                    name="Reference",
                    line=dict(color=ColorSchemes.SIGNAL_ROLES["reference"], dash="dash", shape="hv"),
                )
            )

        fig.update_layout(
            title=title,
            xaxis_title="Time (s)" if any_time or reference is not None else "Step k",
            yaxis_title="y(k)",
            showlegend=True,
        )
        return PlotThemes.apply_theme(fig, theme=theme or self.default_theme)

    def plot_signal(
        self,
        signal: ReferenceSignal,
        title: Optional[str] = None,
        theme: Optional[str] = None,
    ) -> go.Figure:
        """
        Plot the buffered samples of a reference signal.

        Parameters
        ----------
        signal : ReferenceSignal
            Signal whose time/value buffers are plotted
        title : Optional[str]
            Figure title (default: the signal's class name)
        theme : Optional[str]
            Theme name; if None, uses self.default_theme
        """
        times: List[float] = list(signal.time_buffer)
        values: List[float] = list(signal.value_buffer)

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=times,
                y=values,
                mode="lines+markers",
                name="r(k)",
                line=dict(color=ColorSchemes.SIGNAL_ROLES["reference"], shape="hv"),
            )
        )
        fig.update_layout(
            title=title or type(signal).__name__,
            xaxis_title="Time (s)",
            yaxis_title="r(k)",
        )
        return PlotThemes.apply_theme(fig, theme=theme or self.default_theme)


__all__ = ["SamplePlotter"]
