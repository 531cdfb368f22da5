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
Unit Tests for Plotting Themes Module

Tests color schemes and plot themes.
"""

import re

import plotly.graph_objects as go
import pytest

from dtsystems.visualization.themes import ColorSchemes, PlotThemes

# ============================================================================
# ColorSchemes Tests
# ============================================================================


class TestColorSchemes:
    """Test ColorSchemes class functionality."""

    def test_palette_sizes(self):
        """Verify palettes have the expected number of colors."""
        assert len(ColorSchemes.PLOTLY) == 10
        assert len(ColorSchemes.COLORBLIND_SAFE) == 8
        assert len(ColorSchemes.TABLEAU) == 10

    def test_colors_are_valid_hex(self):
        """Verify all colors are valid hex codes."""
        pattern = re.compile(r"^#[0-9A-Fa-f]{6}$")
        palettes = [
            ColorSchemes.PLOTLY,
            ColorSchemes.COLORBLIND_SAFE,
            ColorSchemes.TABLEAU,
            list(ColorSchemes.SIGNAL_ROLES.values()),
        ]
        for palette in palettes:
            for color in palette:
                assert pattern.match(color), f"Invalid hex color: {color}"

    def test_signal_roles(self):
        """Input, output and reference have distinct colors."""
        roles = ColorSchemes.SIGNAL_ROLES
        assert set(roles) == {"input", "output", "reference"}
        assert len(set(roles.values())) == 3

    def test_get_colors_returns_copy(self):
        """Mutating the result does not alter the palette."""
        colors = ColorSchemes.get_colors("plotly")
        colors[0] = "#000000"
        assert ColorSchemes.PLOTLY[0] == "#636EFA"

    def test_get_colors_n_colors(self):
        """Test requesting fewer colors than the palette holds."""
        assert ColorSchemes.get_colors("tableau", n_colors=3) == ColorSchemes.TABLEAU[:3]

    def test_get_colors_cycles(self):
        """Test palette cycling past its length."""
        colors = ColorSchemes.get_colors("colorblind_safe", n_colors=10)
        assert len(colors) == 10
        assert colors[8] == colors[0]
        assert colors[9] == colors[1]

    @pytest.mark.parametrize("name", ["wong", "Colorblind-Safe", "colorblind safe"])
    def test_get_colors_aliases(self, name):
        """Test alias and name normalization."""
        assert ColorSchemes.get_colors(name) == ColorSchemes.COLORBLIND_SAFE

    def test_get_colors_unknown(self):
        """Test unknown scheme raises ValueError."""
        with pytest.raises(ValueError, match="Unknown color scheme"):
            ColorSchemes.get_colors("viridis")


# ============================================================================
# PlotThemes Tests
# ============================================================================


class TestPlotThemes:
    """Test PlotThemes class functionality."""

    @pytest.fixture
    def fig(self):
        fig = go.Figure()
        fig.add_trace(go.Scatter(x=[0, 1, 2], y=[0, 1, 0]))
        fig.add_trace(go.Scatter(x=[0, 1, 2], y=[1, 0, 1]))
        return fig

    def test_themes_have_required_keys(self):
        """Verify every predefined theme carries the core keys."""
        for theme in (PlotThemes.DEFAULT, PlotThemes.PUBLICATION, PlotThemes.DARK, PlotThemes.PRESENTATION):
            for key in ("color_scheme", "template", "font_family", "font_size", "line_width"):
                assert key in theme

    def test_presentation_has_larger_fonts(self):
        """Presentation should have larger fonts."""
        assert PlotThemes.PRESENTATION["font_size"] > PlotThemes.DEFAULT["font_size"]

    def test_get_theme_by_name(self):
        """Test lookup is case-insensitive."""
        assert PlotThemes.get_theme("DARK") is PlotThemes.DARK

    def test_get_theme_dict_passthrough(self):
        """Custom dicts are returned unchanged."""
        custom = {"font_size": 20}
        assert PlotThemes.get_theme(custom) is custom

    def test_get_theme_unknown(self):
        """Test unknown theme raises ValueError."""
        with pytest.raises(ValueError, match="Unknown theme"):
            PlotThemes.get_theme("neon")

    def test_get_theme_wrong_type(self):
        """Test non-str/non-dict raises TypeError."""
        with pytest.raises(TypeError):
            PlotThemes.get_theme(42)

    def test_apply_default_theme(self, fig):
        """Test applying default theme."""
        result = PlotThemes.apply_theme(fig, theme="default")
        assert result is fig
        assert result.layout.template.layout.plot_bgcolor == "white"
        assert result.layout.font.size == 12

    def test_apply_publication_theme(self, fig):
        """Test applying publication theme."""
        result = PlotThemes.apply_theme(fig, theme="publication")
        assert result.layout.font.size == 14
        assert "Times New Roman" in result.layout.font.family
        assert result.layout.showlegend is True

    def test_apply_dark_theme(self, fig):
        """Test applying dark theme."""
        result = PlotThemes.apply_theme(fig, theme="dark")
        assert result.layout.template.layout.plot_bgcolor != "white"

    def test_apply_theme_updates_line_width(self, fig):
        """Test apply_theme updates line widths of every trace."""
        result = PlotThemes.apply_theme(fig, theme="publication")
        assert result.data[0].line.width == 2.5
        assert result.data[1].line.width == 2.5

    def test_apply_custom_theme(self, fig):
        """Test applying a partial custom theme dict."""
        result = PlotThemes.apply_theme(fig, theme={"font_family": "Helvetica", "font_size": 20})
        assert result.layout.font.size == 20
        assert "Helvetica" in result.layout.font.family
