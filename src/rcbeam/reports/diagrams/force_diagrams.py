"""
Loading, bending moment and shear force diagrams using Matplotlib.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from rcbeam.models.outputs import AnalysisResult
from rcbeam.reports.diagrams.cross_section import _to_png


def generate_force_diagrams(
    analysis: AnalysisResult,
    segments: int = 40,
    return_figure: bool = True,
):
    """
    Draw the loading, BMD and SFD of a simply supported span.

    Args:
        analysis: Analysis record (span, factored UDL, point loads)
        segments: Number of samples along the span
        return_figure: If True, return figure; if False, return PNG bytes

    Returns:
        Matplotlib figure or PNG bytes
    """
    fig, (ax_load, ax_bmd, ax_sfd) = plt.subplots(
        3, 1, figsize=(10, 9), sharex=True,
        gridspec_kw={'height_ratios': [1, 2, 2]},
    )
    L = analysis.span

    # Loading
    ax_load.plot([0, L], [0, 0], color='#2c3e50', linewidth=4)
    udl_top = 1.0
    ax_load.fill_between([0, L], 0.15, udl_top, color='#3498db', alpha=0.25)
    ax_load.text(L / 2, udl_top + 0.1, f'wu = {analysis.design_udl:.2f} kN/m',
                 ha='center', va='bottom', fontsize=9)
    for p in analysis.point_loads:
        ax_load.annotate(
            '', xy=(p.distance, 0.1), xytext=(p.distance, 1.6),
            arrowprops=dict(arrowstyle='->', color='#e74c3c', lw=2)
        )
        ax_load.text(p.distance, 1.65, f'{p.value:.1f} kN',
                     ha='center', va='bottom', fontsize=8, color='#c0392b')
    support = 0.04 * L
    for x in (0, L):
        ax_load.add_patch(Polygon(
            [(x, 0), (x - support, -0.5), (x + support, -0.5)],
            facecolor='#95a5a6', edgecolor='#7f8c8d'
        ))
    ax_load.set_ylim(-0.7, 2.3)
    ax_load.axis('off')
    ax_load.set_title('Loading (factored)', fontsize=11, fontweight='bold')

    # Bending moment
    xs, moments = zip(*analysis.moment_diagram(segments))
    xs = np.asarray(xs)
    moments = np.asarray(moments)
    ax_bmd.plot(xs, moments, color='#2980b9', linewidth=2)
    ax_bmd.fill_between(xs, moments, color='#3498db', alpha=0.3)
    ax_bmd.axhline(0, color='black', linewidth=0.8)
    ax_bmd.invert_yaxis()  # sagging drawn below the axis
    ax_bmd.set_ylabel('M (kNm)')
    ax_bmd.set_title(f'Bending Moment Diagram (Mu = {analysis.max_moment:.2f} kNm)',
                     fontsize=11, fontweight='bold')
    ax_bmd.grid(True, alpha=0.3)

    # Shear force
    xs_v, shears = zip(*analysis.shear_diagram(segments))
    ax_sfd.step(xs_v, shears, where='post', color='#c0392b', linewidth=2)
    ax_sfd.fill_between(xs_v, shears, step='post', color='#e74c3c', alpha=0.3)
    ax_sfd.axhline(0, color='black', linewidth=0.8)
    ax_sfd.set_ylabel('V (kN)')
    ax_sfd.set_xlabel('Distance from left support (m)')
    ax_sfd.set_title(f'Shear Force Diagram (Vu = {analysis.max_shear:.2f} kN)',
                     fontsize=11, fontweight='bold')
    ax_sfd.grid(True, alpha=0.3)
    ax_sfd.set_xlim(0, L)

    plt.tight_layout()

    if return_figure:
        return fig
    return _to_png(fig)
