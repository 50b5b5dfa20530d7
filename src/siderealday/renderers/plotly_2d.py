"""Plotly 2D interactive renderer for the orbital view and the sky dome.

Both figures use a square data range with a locked aspect ratio so circles stay round.
"""

import math

import numpy as np
import plotly.graph_objects as go

from siderealday.astronomy import calculate_earth_state, deg2rad, rad2deg
from siderealday.config import (
    EARTH_RADIUS,
    GLOW_MAGNITUDE_LIMIT,
    GRID_ALTITUDES_DEG,
    GRID_AZIMUTH_STEP_DEG,
    LABEL_MAGNITUDE_LIMIT,
    REFERENCE_STAR_DISTANCE,
    ROTATION_TICK_COUNT,
    SUN_RADIUS,
)
from siderealday.models import OrbitalData, SkyData, StepMode, VisualOptions

_BG = "#050a1a"
_SKY_BG = "#001122"


def _circle_shape(x: float, y: float, r: float, **kwargs: object) -> dict:
    return dict(type="circle", xref="x", yref="y", x0=x - r, y0=y - r, x1=x + r, y1=y + r, **kwargs)


def _screen(angle: float, radius: float = 1.0) -> tuple[float, float]:
    return radius * math.cos(angle), -radius * math.sin(angle)


def _base_layout(fig: go.Figure, x_range: list[float], y_range: list[float], bg: str) -> None:
    fig.update_layout(
        paper_bgcolor=bg,
        plot_bgcolor=bg,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=600,
        height=600,
        xaxis=dict(visible=False, range=x_range, fixedrange=True),
        yaxis=dict(
            visible=False, range=y_range, fixedrange=True, scaleanchor="x", scaleratio=1
        ),
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]


def render_orbital_figure(
    orbital: OrbitalData, options: VisualOptions = VisualOptions()
) -> go.Figure:
    """Render OrbitalData as an interactive overhead view.

    Args:
        orbital: Fully computed orbital state.
        options: Display toggles.

    Returns:
        Plotly Figure object.
    """
    hc = options.high_contrast
    ref_color = "#00ffff" if hc else "#4488ff"
    pin_color = "#ff0000" if hc else "#ff3333"
    ex, ey = orbital.earth_x, orbital.earth_y

    shapes: list[dict] = []
    if options.show_orbit_trail:
        shapes.append(
            _circle_shape(0, 0, 1, line=dict(color="#ffffff" if hc else "#666666", width=1, dash="dash"))
        )
    shapes.append(
        dict(type="line", x0=0, y0=0, x1=REFERENCE_STAR_DISTANCE, y1=0,
             line=dict(color=ref_color, width=1, dash="dot"))
    )
    shapes.append(_circle_shape(0, 0, SUN_RADIUS, fillcolor="#ffbb00", line=dict(color="#ff8800")))
    shapes.append(
        dict(type="line", x0=0, y0=0, x1=ex, y1=ey, line=dict(color="rgba(255,170,0,0.3)", width=1))
    )
    shapes.append(
        _circle_shape(ex, ey, EARTH_RADIUS, fillcolor="#0088ff" if hc else "#4488ff", line=dict(width=0))
    )

    # Lit half of the disk, as a polygon facing the pin
    arc = np.linspace(orbital.pin_angle - math.pi / 2, orbital.pin_angle + math.pi / 2, 24)
    half_x = [ex] + list(ex + EARTH_RADIUS * np.cos(arc)) + [ex]
    half_y = [ey] + list(ey - EARTH_RADIUS * np.sin(arc)) + [ey]
    traces: list[go.Scatter] = [
        go.Scatter(
            x=half_x,
            y=half_y,
            mode="lines",
            fill="toself",
            fillcolor="#00ff00" if hc else "#44ff88",
            line=dict(width=0),
            hoverinfo="skip",
        )
    ]

    px, py = _screen(orbital.pin_angle, EARTH_RADIUS)
    qx, qy = _screen(orbital.pin_angle, EARTH_RADIUS * 1.4)
    traces.append(
        go.Scatter(
            x=[ex + px, ex + qx],
            y=[ey + py, ey + qy],
            mode="lines+markers",
            line=dict(color=pin_color, width=3),
            marker=dict(size=[8, 0], color=pin_color),
            hoverinfo="skip",
        )
    )

    if options.show_rotation_ticks:
        for i in range(ROTATION_TICK_COUNT):
            # Tick 0 is the top-of-disk marker spun onto the meridian
            angle = orbital.rotation - math.pi / 2 + i * 2 * math.pi / ROTATION_TICK_COUNT
            x0, y0 = _screen(angle, EARTH_RADIUS)
            x1, y1 = _screen(angle, EARTH_RADIUS * 1.25)
            alpha = 0.3 - i / ROTATION_TICK_COUNT * 0.2
            shapes.append(
                dict(type="line", x0=ex + x0, y0=ey + y0, x1=ex + x1, y1=ey + y1,
                     line=dict(color=f"rgba(255,51,51,{alpha:.2f})", width=1))
            )

    if options.show_markers and orbital.markers:
        points = [_screen(calculate_earth_state(m.time).orbit_angle) for m in orbital.markers]
        traces.append(
            go.Scatter(
                x=[p[0] for p in points],
                y=[p[1] for p in points],
                mode="markers",
                marker=dict(
                    size=5,
                    color=[ref_color if m.kind == StepMode.SIDEREAL else "#ffaa00" for m in orbital.markers],
                ),
                hoverinfo="skip",
            )
        )

    annotations: list[dict] = []
    if options.show_labels:
        state = orbital.earth_state
        annotations.append(
            dict(x=REFERENCE_STAR_DISTANCE, y=0.08, text="★ Reference Star", showarrow=False,
                 font=dict(color=ref_color, size=11))
        )
        annotations.append(
            dict(
                x=ex + EARTH_RADIUS * 1.5,
                y=ey,
                xanchor="left",
                text=f"{rad2deg(state.sidereal_angle):.1f}°<br>orbit: {rad2deg(state.orbit_angle):.1f}°",
                showarrow=False,
                font=dict(color="#ffffff" if hc else "#cccccc", size=10),
            )
        )

    fig = go.Figure(data=traces)
    _base_layout(fig, [-1.3, REFERENCE_STAR_DISTANCE + 0.5], [-1.4, 1.4], "#000000")
    fig.update_layout(shapes=shapes, annotations=annotations)
    return fig


def render_sky_figure(sky: SkyData, options: VisualOptions = VisualOptions()) -> go.Figure:
    """Render SkyData as an interactive dome chart.

    Only stars above the horizon are shown; hovering a star shows its name and altitude.

    Args:
        sky: Fully computed local sky.
        options: Display toggles.

    Returns:
        Plotly Figure object.
    """
    hc = options.high_contrast
    grid_color = "rgba(255,255,255,0.2)" if hc else "rgba(136,136,136,0.2)"
    star_color = "#ffffff" if hc else "#c8c8ff"

    shapes: list[dict] = [
        _circle_shape(0, 0, 1, fillcolor="#000000" if hc else _SKY_BG,
                      line=dict(color="#ffffff" if hc else "#888888", width=2), layer="below")
    ]
    if options.show_grid:
        for alt in GRID_ALTITUDES_DEG:
            shapes.append(_circle_shape(0, 0, 1 - alt / 90, line=dict(color=grid_color, width=1)))
        for az in range(0, 360, GRID_AZIMUTH_STEP_DEG):
            shapes.append(
                dict(type="line", x0=0, y0=0, x1=math.sin(deg2rad(az)), y1=math.cos(deg2rad(az)),
                     line=dict(color=grid_color, width=1))
            )
    if options.show_labels:
        shapes.append(
            dict(type="line", x0=0, y0=-1, x1=0, y1=1,
                 line=dict(color="rgba(136,136,136,0.3)", width=2, dash="dash"))
        )

    sizes = np.array([s.size for s in sky.stars])
    glow = [s for s in sky.stars if s.magnitude < GLOW_MAGNITUDE_LIMIT]
    traces: list[go.Scatter] = [
        go.Scatter(
            x=[s.x for s in glow],
            y=[s.y for s in glow],
            mode="markers",
            marker=dict(size=[s.size * 6 for s in glow], color=star_color, opacity=0.15, line=dict(width=0)),
            hoverinfo="skip",
        ),
        go.Scatter(
            x=[s.x for s in sky.stars],
            y=[s.y for s in sky.stars],
            mode="markers+text" if options.show_labels else "markers",
            text=[s.name if s.magnitude < LABEL_MAGNITUDE_LIMIT else "" for s in sky.stars],
            textposition="top right",
            textfont=dict(color=star_color, size=9),
            marker=dict(
                size=list(sizes * 2),
                color=star_color,
                opacity=[s.opacity for s in sky.stars],
                line=dict(width=0),
            ),
            customdata=[round(rad2deg(s.altitude), 1) for s in sky.stars],
            hovertext=[s.name for s in sky.stars],
            hovertemplate="%{hovertext}<br>alt %{customdata}°<extra></extra>",
        ),
    ]

    sun = sky.sun
    if sun.is_up:
        traces.append(
            go.Scatter(
                x=[sun.x],
                y=[sun.y],
                mode="markers",
                marker=dict(size=90, color="rgba(255,255,200,0.3)", line=dict(width=0)),
                hoverinfo="skip",
            )
        )
    if sun.is_visible:
        traces.append(
            go.Scatter(
                x=[sun.x],
                y=[sun.y],
                mode="markers+text" if options.show_labels else "markers",
                text=["SUN"],
                textposition="middle right",
                textfont=dict(color="#ffff00" if hc else "#ffaa00", size=12),
                marker=dict(
                    size=22,
                    color="#ffdd00",
                    line=dict(width=0),
                ),
                hoverinfo="skip",
            )
        )

    label_color = "#ffffff" if hc else "#666666"
    annotations = [
        dict(x=x, y=y, text=text, showarrow=False, font=dict(color=label_color, size=14))
        for text, (x, y) in {"N": (0, 1.1), "S": (0, -1.1), "E": (1.1, 0), "W": (-1.1, 0)}.items()
    ]

    fig = go.Figure(data=traces)
    _base_layout(fig, [-1.2, 1.2], [-1.2, 1.2], _BG)
    fig.update_layout(shapes=shapes, annotations=annotations)
    return fig
