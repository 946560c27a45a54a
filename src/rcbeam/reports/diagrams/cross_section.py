"""
Cross-section diagram generator using Matplotlib.
"""

import io

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle, FancyBboxPatch, Rectangle

from rcbeam.models.outputs import DesignSnapshot


def generate_cross_section(
    width: float,
    depth: float,
    effective_cover: float,
    tension_bars: int,
    tension_bar_dia: float,
    stirrup_dia: float,
    stirrup_spacing: int = 0,
    return_figure: bool = True,
):
    """
    Generate cross-section diagram of the designed beam.

    Args:
        width: Beam width in mm
        depth: Overall depth in mm
        effective_cover: Tension face to bar centroid in mm
        tension_bars: Number of tension (bottom) bars
        tension_bar_dia: Tension bar diameter in mm
        stirrup_dia: Stirrup diameter in mm
        stirrup_spacing: Stirrup spacing in mm (0 = section failed in shear)
        return_figure: If True, return figure; if False, return PNG bytes

    Returns:
        Matplotlib figure or PNG bytes
    """
    fig, ax = plt.subplots(1, 1, figsize=(6, 8))

    # Clear cover to the stirrup, derived from the centroid cover
    clear_cover = max(effective_cover - stirrup_dia - tension_bar_dia / 2, 0.0)

    concrete = FancyBboxPatch(
        (0, 0), width, depth,
        boxstyle="round,pad=0,rounding_size=5",
        linewidth=2, edgecolor='#2c3e50', facecolor='#ecf0f1'
    )
    ax.add_patch(concrete)

    stirrup_colour = '#27ae60' if stirrup_spacing > 0 else '#c0392b'
    stirrup = Rectangle(
        (clear_cover, clear_cover),
        width - 2 * clear_cover, depth - 2 * clear_cover,
        linewidth=1.5, edgecolor=stirrup_colour, facecolor='none',
        linestyle='--'
    )
    ax.add_patch(stirrup)

    # Bottom layer sits at the effective cover
    bar_y = effective_cover
    if tension_bars == 1:
        bar_positions = [width / 2]
    else:
        edge = clear_cover + stirrup_dia + tension_bar_dia / 2
        bar_positions = np.linspace(edge, width - edge, tension_bars)

    for bar_x in bar_positions:
        ax.add_patch(Circle(
            (bar_x, bar_y), tension_bar_dia / 2,
            facecolor='#e74c3c', edgecolor='#c0392b', linewidth=1
        ))

    # Two hanger bars hold the stirrups at the top
    hanger_y = depth - clear_cover - stirrup_dia - 5
    for hanger_x in (clear_cover + stirrup_dia + 5, width - clear_cover - stirrup_dia - 5):
        ax.add_patch(Circle(
            (hanger_x, hanger_y), 5,
            facecolor='#95a5a6', edgecolor='#7f8c8d', linewidth=1
        ))

    dim_offset = 30

    _dimension(ax, (0, -dim_offset), (width, -dim_offset), f'{width:.0f} mm')
    _dimension(ax, (width + dim_offset, 0), (width + dim_offset, depth), f'{depth:.0f} mm')
    _dimension(
        ax, (-dim_offset / 2, bar_y), (-dim_offset / 2, depth),
        f'd = {depth - effective_cover:.0f}', minor=True,
    )

    ax.text(width / 2, bar_y + tension_bar_dia + 10,
            f'{tension_bars}-{tension_bar_dia:g}φ',
            ha='center', va='bottom', fontsize=9, color='#c0392b', fontweight='bold')

    if stirrup_spacing > 0:
        stirrup_label = f'{stirrup_dia:g}φ @ {stirrup_spacing} c/c'
    else:
        stirrup_label = 'SHEAR FAILURE'
    ax.text(width - clear_cover - 5, depth / 2, stirrup_label,
            ha='right', va='center', fontsize=8, color=stirrup_colour, rotation=90)

    legend_y = depth + 40
    ax.add_patch(Circle((20, legend_y), 5, facecolor='#e74c3c', edgecolor='#c0392b'))
    ax.text(35, legend_y, 'Tension steel', va='center', fontsize=8)
    ax.add_patch(Circle((120, legend_y), 5, facecolor='#95a5a6', edgecolor='#7f8c8d'))
    ax.text(135, legend_y, 'Hanger bars', va='center', fontsize=8)

    margin = 60
    ax.set_xlim(-margin, width + margin)
    ax.set_ylim(-margin, depth + margin + 30)
    ax.set_aspect('equal')
    ax.axis('off')

    ax.set_title('Cross Section', fontsize=12, fontweight='bold', pad=20)

    plt.tight_layout()

    if return_figure:
        return fig
    return _to_png(fig)


def cross_section_for(snapshot: DesignSnapshot, return_figure: bool = True):
    """Cross-section of a completed design run."""
    beam = snapshot.inputs.beam
    flexure = snapshot.design.flexure
    shear = snapshot.design.shear
    return generate_cross_section(
        width=beam.width,
        depth=beam.depth,
        effective_cover=beam.effective_cover,
        tension_bars=flexure.number_of_bars,
        tension_bar_dia=flexure.bar_diameter,
        stirrup_dia=shear.stirrup_diameter,
        stirrup_spacing=shear.stirrup_spacing,
        return_figure=return_figure,
    )


def _to_png(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()


def _dimension(ax, start, end, label: str, minor: bool = False) -> None:
    """Double-headed dimension line with its label beside the midpoint."""
    colour = 'gray' if minor else 'black'
    ax.annotate('', xy=start, xytext=end,
                arrowprops=dict(arrowstyle='<->', color=colour, lw=0.8 if minor else 1))
    (x0, y0), (x1, y1) = start, end
    mid_x, mid_y = (x0 + x1) / 2, (y0 + y1) / 2
    if y0 == y1:
        ax.text(mid_x, mid_y - 15, label, ha='center', va='top',
                fontsize=10, fontweight='bold')
    elif minor:
        ax.text(mid_x - 5, mid_y, label, ha='right', va='center',
                fontsize=8, color=colour, rotation=90)
    else:
        ax.text(mid_x + 10, mid_y, label, ha='left', va='center',
                fontsize=10, fontweight='bold', rotation=90)
