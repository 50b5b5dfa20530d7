"""Matplotlib static PNG renderer for the orbital view and the sky dome."""

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Wedge

from siderealday.astronomy import calculate_earth_state, deg2rad, rad2deg
from siderealday.config import (
    CHART_SIZE,
    EARTH_RADIUS,
    GLOW_MAGNITUDE_LIMIT,
    GRID_ALTITUDES_DEG,
    GRID_AZIMUTH_STEP_DEG,
    LABEL_MAGNITUDE_LIMIT,
    REFERENCE_STAR_DISTANCE,
    RESULTS_DIR,
    ROTATION_TICK_COUNT,
    SUN_RADIUS,
)
from siderealday.models import OrbitalData, SkyData, StepMode, VisualOptions

_ROOT = Path(__file__).parent.parent.parent.parent


def _screen(angle: float, radius: float = 1.0) -> tuple[float, float]:
    """Clockwise screen direction used by the orbital view."""
    return radius * math.cos(angle), -radius * math.sin(angle)


def render_orbital_chart(
    orbital: OrbitalData, options: VisualOptions = VisualOptions()
) -> Figure:
    """Render OrbitalData as an overhead view of the Sun, the orbit, and Earth.

    Args:
        orbital: Fully computed orbital state.
        options: Display toggles.

    Returns:
        matplotlib Figure object.
    """
    hc = options.high_contrast
    fig, ax = plt.subplots(figsize=(CHART_SIZE, CHART_SIZE))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    if options.show_orbit_trail:
        ax.add_patch(
            Circle(
                (0, 0),
                1,
                fill=False,
                linestyle="--",
                color="#ffffff" if hc else "#666666",
                linewidth=0.8,
            )
        )

    ref_color = "#00ffff" if hc else "#4488ff"
    ax.plot(
        [0, REFERENCE_STAR_DISTANCE],
        [0, 0],
        linestyle=":",
        color=ref_color,
        linewidth=0.8,
    )
    if options.show_labels:
        ax.text(REFERENCE_STAR_DISTANCE, 0.05, "★ Reference Star", color=ref_color, fontsize=8)

    ax.add_patch(Circle((0, 0), SUN_RADIUS, color="#ffbb00", zorder=3))
    for i in range(8):
        x0, y0 = _screen(i * math.pi / 4, SUN_RADIUS)
        x1, y1 = _screen(i * math.pi / 4, SUN_RADIUS * 1.35)
        ax.plot([x0, x1], [y0, y1], color="#ffff00" if hc else "#ffaa00", linewidth=1.5)

    ex, ey = orbital.earth_x, orbital.earth_y
    ax.plot([0, ex], [0, ey], color="#ffff00" if hc else "#ffaa00", alpha=0.3, linewidth=0.8)

    ax.add_patch(Circle((ex, ey), EARTH_RADIUS, color="#0088ff" if hc else "#4488ff", zorder=4))
    # Day/night split: the half of the disk facing the pin is drawn green
    pin_deg = -rad2deg(orbital.pin_angle)
    ax.add_patch(
        Wedge(
            (ex, ey),
            EARTH_RADIUS,
            pin_deg - 90,
            pin_deg + 90,
            color="#00ff00" if hc else "#44ff88",
            zorder=5,
        )
    )

    pin_color = "#ff0000" if hc else "#ff3333"
    px, py = _screen(orbital.pin_angle, EARTH_RADIUS)
    qx, qy = _screen(orbital.pin_angle, EARTH_RADIUS * 1.4)
    ax.plot([ex + px, ex + qx], [ey + py, ey + qy], color=pin_color, linewidth=2, zorder=6)
    ax.add_patch(Circle((ex + px, ey + py), EARTH_RADIUS * 0.2, color=pin_color, zorder=6))

    if options.show_rotation_ticks:
        for i in range(ROTATION_TICK_COUNT):
            # Tick 0 is the top-of-disk marker spun onto the meridian
            angle = orbital.rotation - math.pi / 2 + i * 2 * math.pi / ROTATION_TICK_COUNT
            x0, y0 = _screen(angle, EARTH_RADIUS)
            x1, y1 = _screen(angle, EARTH_RADIUS * 1.25)
            alpha = 0.3 - i / ROTATION_TICK_COUNT * 0.2
            ax.plot([ex + x0, ex + x1], [ey + y0, ey + y1], color=pin_color, alpha=alpha)

    if options.show_markers:
        for marker in orbital.markers:
            # Earth's orbital position when the day completed
            mx, my = _screen(calculate_earth_state(marker.time).orbit_angle)
            color = ref_color if marker.kind == StepMode.SIDEREAL else "#ffaa00"
            ax.scatter([mx], [my], s=12, color=color, zorder=2)

    if options.show_labels:
        state = orbital.earth_state
        ax.text(
            ex + EARTH_RADIUS * 1.5,
            ey,
            f"{rad2deg(state.sidereal_angle):.1f}°\norbit: {rad2deg(state.orbit_angle):.1f}°",
            color="#ffffff" if hc else "#cccccc",
            fontsize=8,
        )

    ax.set_xlim(-1.3, REFERENCE_STAR_DISTANCE + 0.5)
    ax.set_ylim(-1.3, 1.3)
    ax.set_aspect("equal")
    ax.axis("off")
    return fig


def render_sky_chart(sky: SkyData, options: VisualOptions = VisualOptions()) -> Figure:
    """Render SkyData as a dome chart: zenith at center, horizon at the rim.

    Args:
        sky: Fully computed local sky.
        options: Display toggles.

    Returns:
        matplotlib Figure object.
    """
    hc = options.high_contrast
    fig, ax = plt.subplots(figsize=(CHART_SIZE, CHART_SIZE))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    ax.add_patch(Circle((0, 0), 1, color="#000000" if hc else "#001122", zorder=0))
    ax.add_patch(
        Circle((0, 0), 1, fill=False, color="#ffffff" if hc else "#888888", linewidth=2)
    )

    grid_color = "#ffffff" if hc else "#888888"
    if options.show_grid:
        for alt in GRID_ALTITUDES_DEG:
            r = 1 - alt / 90
            ax.add_patch(Circle((0, 0), r, fill=False, color=grid_color, alpha=0.2))
        for az in range(0, 360, GRID_AZIMUTH_STEP_DEG):
            ax.plot(
                [0, math.sin(deg2rad(az))],
                [0, math.cos(deg2rad(az))],
                color=grid_color,
                alpha=0.2,
                linewidth=0.8,
            )

    star_color = "#ffffff" if hc else "#c8c8ff"
    if sky.stars:
        x_vals = np.array([s.x for s in sky.stars])
        y_vals = np.array([s.y for s in sky.stars])
        sizes = np.array([s.size for s in sky.stars])
        alphas = np.array([s.opacity for s in sky.stars])
        glow = np.array([s.magnitude < GLOW_MAGNITUDE_LIMIT for s in sky.stars])
        if glow.any():
            ax.scatter(
                x_vals[glow],
                y_vals[glow],
                s=(sizes[glow] * 3) ** 2,
                color=star_color,
                alpha=0.15,
                linewidths=0,
                zorder=2,
            )
        ax.scatter(
            x_vals,
            y_vals,
            s=(sizes * 2) ** 2,
            color=star_color,
            alpha=alphas,
            linewidths=0,
            zorder=3,
        )
        if options.show_labels:
            for s in sky.stars:
                if s.magnitude < LABEL_MAGNITUDE_LIMIT:
                    ax.text(s.x + 0.02, s.y + 0.01, s.name, color=star_color, fontsize=7)

    sun = sky.sun
    if sun.is_visible:
        if sun.is_up:
            ax.scatter([sun.x], [sun.y], s=2500, color="#ffffc8", alpha=0.25, linewidths=0)
        ax.scatter([sun.x], [sun.y], s=220, color="#ffdd00", linewidths=0, zorder=4)
        if options.show_labels:
            ax.text(
                sun.x + 0.05,
                sun.y,
                "SUN",
                color="#ffff00" if hc else "#ffaa00",
                fontsize=9,
                fontweight="bold",
            )

    horizon = Circle((0, 0), radius=1, transform=ax.transData)
    for col in ax.collections:
        col.set_clip_path(horizon)

    label_color = "#ffffff" if hc else "#666666"
    for text, (x, y) in {"N": (0, 1.08), "S": (0, -1.12), "E": (1.08, 0), "W": (-1.12, 0)}.items():
        ax.text(x, y, text, color=label_color, fontsize=12, fontweight="bold", ha="center")

    if options.show_labels:
        ax.plot([0, 0], [-1, 1], linestyle="--", color=grid_color, alpha=0.3)

    ax.set_xlim(-1.2, 1.2)
    ax.set_ylim(-1.2, 1.2)
    ax.set_aspect("equal")
    ax.axis("off")
    return fig


def save_charts(
    orbital: OrbitalData,
    sky: SkyData,
    output_dir: Path | None = None,
    options: VisualOptions = VisualOptions(),
) -> tuple[Path, Path]:
    """Save both views as PNG files.

    Args:
        orbital: Fully computed orbital state.
        sky: Fully computed local sky.
        output_dir: Destination directory. results/ under the project root if None.
        options: Display toggles.

    Returns:
        Paths to the saved orbital and sky images.
    """
    if output_dir is None:
        output_dir = _ROOT / RESULTS_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    stem = f"{sky.location.name}__t{int(sky.time)}".replace(" ", "_").replace(",", "")
    paths = (output_dir / f"orbital_{stem}.png", output_dir / f"sky_{stem}.png")
    for fig, path in (
        (render_orbital_chart(orbital, options), paths[0]),
        (render_sky_chart(sky, options), paths[1]),
    ):
        fig.savefig(path, facecolor="black")
        plt.close(fig)
    return paths
