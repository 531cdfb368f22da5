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
Plotting Themes and Color Schemes

Centralized palettes and styling for the sample plots, so that input,
output and reference traces look the same in every figure.

Main Classes
------------
ColorSchemes : Color palette definitions
    PLOTLY : Default Plotly colors
    COLORBLIND_SAFE : Wong palette (colorblind accessible)
    TABLEAU : Tableau 10 palette
    SIGNAL_ROLES : Fixed colors for input / output / reference traces

PlotThemes : Complete theme configurations
    DEFAULT, PUBLICATION, DARK, PRESENTATION

Usage
-----
>>> from dtsystems.visualization.themes import ColorSchemes, PlotThemes
>>>
>>> colors = ColorSchemes.get_colors('colorblind_safe', n_colors=3)
>>> fig = PlotThemes.apply_theme(fig, theme='publication')
"""

from typing import Dict, List, Optional, Union

import plotly.graph_objects as go


class ColorSchemes:
    """
    Predefined color palettes.

    Examples
    --------
    >>> ColorSchemes.PLOTLY[0]
    '#636EFA'
    >>> ColorSchemes.get_colors('wong', n_colors=10)  # cycles past 8
    """

    PLOTLY = [
        "#636EFA",  # Blue
        "#EF553B",  # Red
        "#00CC96",  # Green
        "#AB63FA",  # Purple
        "#FFA15A",  # Orange
        "#19D3F3",  # Cyan
        "#FF6692",  # Pink
        "#B6E880",  # Light green
        "#FF97FF",  # Light purple
        "#FECB52",  # Yellow
    ]

    COLORBLIND_SAFE = [
        "#0173B2",  # Blue
        "#DE8F05",  # Orange
        "#029E73",  # Green
        "#CC78BC",  # Pink
        "#CA9161",  # Tan
        "#949494",  # Gray
        "#ECE133",  # Yellow
        "#56B4E9",  # Sky blue
    ]

    TABLEAU = [
        "#4E79A7",  # Blue
        "#F28E2B",  # Orange
        "#E15759",  # Red
        "#76B7B2",  # Teal
        "#59A14F",  # Green
        "#EDC948",  # Yellow
        "#B07AA1",  # Purple
        "#FF9DA7",  # Pink
        "#9C755F",  # Brown
        "#BAB0AC",  # Gray
    ]

    SIGNAL_ROLES = {
        "input": "#636EFA",
        "output": "#EF553B",
        "reference": "#7F7F7F",
    }

    _ALIASES = {
        "plotly": "PLOTLY",
        "colorblind_safe": "COLORBLIND_SAFE",
        "wong": "COLORBLIND_SAFE",
        "tableau": "TABLEAU",
    }

    @staticmethod
    def get_colors(scheme: str = "plotly", n_colors: Optional[int] = None) -> List[str]:
        """
        Get a color palette by name.

        Parameters
        ----------
        scheme : str
            'plotly', 'colorblind_safe' (alias 'wong') or 'tableau'.
            Case, hyphens and spaces are ignored.
        n_colors : Optional[int]
            Number of colors needed; cycles through the palette if larger

        Returns
        -------
        List[str]
            Hex color codes

        Raises
        ------
        ValueError
            If scheme name is not recognized
        """
        key = scheme.lower().replace("-", "_").replace(" ", "_")
        if key not in ColorSchemes._ALIASES:
            raise ValueError(
                f"Unknown color scheme '{scheme}'. "
                f"Available: {', '.join(sorted(ColorSchemes._ALIASES))}"
            )
        palette = getattr(ColorSchemes, ColorSchemes._ALIASES[key])

        if n_colors is None:
            return palette.copy()
        return [palette[i % len(palette)] for i in range(n_colors)]


class PlotThemes:
    """
    Complete plotting theme configurations.

    Examples
    --------
    >>> fig = PlotThemes.apply_theme(fig, theme='dark')
    >>>
    >>> custom = dict(PlotThemes.DEFAULT, font_size=16)
    >>> fig = PlotThemes.apply_theme(fig, theme=custom)
    """

    DEFAULT = {
        "color_scheme": "plotly",
        "template": "plotly_white",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 2,
    }

    PUBLICATION = {
        "color_scheme": "colorblind_safe",
        "template": "simple_white",
        "font_family": "Times New Roman, serif",
        "font_size": 14,
        "line_width": 2.5,
        "showlegend": True,
    }

    DARK = {
        "color_scheme": "plotly",
        "template": "plotly_dark",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 2,
    }

    PRESENTATION = {
        "color_scheme": "tableau",
        "template": "plotly_white",
        "font_family": "Arial, sans-serif",
        "font_size": 18,
        "line_width": 3,
    }

    @staticmethod
    def get_theme(theme: Union[str, Dict]) -> Dict:
        """
        Resolve a theme name or custom dict to a configuration dict.

        Raises
        ------
        ValueError
            If the theme name is unknown
        TypeError
            If theme is neither str nor dict
        """
        if isinstance(theme, dict):
            return theme
        if not isinstance(theme, str):
            raise TypeError("theme must be str or dict")

        themes = {
            "default": PlotThemes.DEFAULT,
            "publication": PlotThemes.PUBLICATION,
            "dark": PlotThemes.DARK,
            "presentation": PlotThemes.PRESENTATION,
        }
        try:
            return themes[theme.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown theme '{theme}'. Available: {', '.join(themes)}"
            ) from None

    @staticmethod
    def apply_theme(fig: go.Figure, theme: Union[str, Dict] = "default") -> go.Figure:
        """
        Apply a theme to a Plotly figure in place and return it.

        Parameters
        ----------
        fig : go.Figure
            Figure to style
        theme : str or dict
            Theme name ('default', 'publication', 'dark', 'presentation')
            or custom theme dictionary

        Returns
        -------
        go.Figure
            The same figure, styled
        """
        config = PlotThemes.get_theme(theme)

        if "template" in config:
            fig.update_layout(template=config["template"])

        font = {}
        if "font_family" in config:
            font["family"] = config["font_family"]
        if "font_size" in config:
            font["size"] = config["font_size"]
        if font:
            fig.update_layout(font=font)

        if "showlegend" in config:
            fig.update_layout(showlegend=config["showlegend"])

        if "line_width" in config:
            for trace in fig.data:
                if hasattr(trace, "line"):
                    trace.line.width = config["line_width"]

        return fig


__all__ = ["ColorSchemes", "PlotThemes"]
