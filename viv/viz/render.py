"""Matplotlib-based rendering functions for Life grids and generation logs."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pyarrow.parquet as pq  # noqa: E402
from matplotlib.colors import ListedColormap  # noqa: E402
from matplotlib.image import AxesImage  # noqa: E402

from viv.domain.grid import Grid  # noqa: E402
from viv.io.paths import resolve_within_base as _resolve_within_base  # noqa: E402
from viv.io.schemas import GENERATION_METRIC_NAMES  # noqa: E402
from viv.simulation.engine import iterate  # noqa: E402
from viv.viz.theme import DEFAULT_THEME, Theme  # noqa: E402
from viv.viz.viewport import Viewport  # noqa: E402

logger = logging.getLogger(__name__)


def _resolve_output(output_path: Path, base_dir: Path | None) -> Path:
    if base_dir is None:
        return Path(output_path).resolve()
    return _resolve_within_base(Path(output_path), Path(base_dir).resolve())


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> ListedColormap:
    """Two-color colormap: index 0 dead, index 1 live."""
    return ListedColormap([theme.dead_cell_color, theme.live_cell_color])


def _draw_cells(
    ax: plt.Axes,
    cells: np.ndarray,
    theme: Theme = DEFAULT_THEME,
    grid_lines: bool = True,
) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    img = ax.imshow(
        cells.astype(int),
        cmap=_cell_cmap(theme),
        vmin=0,
        vmax=1,
        origin="upper",
        aspect="equal",
        interpolation="nearest",
    )
    if grid_lines:
        h, w = cells.shape
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(theme.background_color)
    return img


def render_frame(
    grid: Grid,
    viewport: Viewport,
    output_path: Path,
    base_dir: Path | None = None,
    title: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render one viewport of ``grid`` to an image file."""
    output_path = _resolve_output(output_path, base_dir)

    figsize = (max(2.0, viewport.width / 10), max(2.0, viewport.height / 10))
    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(theme.background_color)
    _draw_cells(ax, viewport.to_array(grid), theme=theme)
    if title is not None:
        ax.set_title(title, fontsize=10, color=theme.text_color)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_filmstrip(
    grid: Grid,
    viewport: Viewport,
    output_path: Path,
    n_frames: int = 6,
    stride: int = 1,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render a horizontal filmstrip of successive generations with generation labels.

    Frame ``i`` shows generation ``i * stride``; the first frame is ``grid``.
    """
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    if stride < 1:
        raise ValueError("stride must be >= 1")
    output_path = _resolve_output(output_path, base_dir)

    frames: list[tuple[int, np.ndarray]] = []
    for generation, current in enumerate(iterate(grid, (n_frames - 1) * stride)):
        if generation % stride == 0:
            frames.append((generation, viewport.to_array(current)))

    fig, axes = plt.subplots(1, n_frames, figsize=(3 * n_frames, 3), squeeze=False)
    fig.patch.set_facecolor(theme.background_color)
    for col_idx, (generation, cells) in enumerate(frames):
        ax = axes[0, col_idx]
        _draw_cells(ax, cells, theme=theme, grid_lines=viewport.width <= 60)
        ax.set_title(f"Generation {generation}", fontsize=9, color=theme.text_color)

    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_metric_timeseries(
    generation_log_path: Path,
    output_path: Path,
    metric_names: list[str] | None = None,
    run_ids: list[str] | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Plot per-generation metric trajectories, one panel per metric and one line per run."""
    metrics = metric_names or ["population"]
    unknown = [name for name in metrics if name not in GENERATION_METRIC_NAMES]
    if unknown:
        valid = ", ".join(GENERATION_METRIC_NAMES)
        raise ValueError(f"Unknown metric(s) {unknown}; available: {valid}")

    if base_dir is None:
        generation_log_path = Path(generation_log_path).resolve()
    else:
        generation_log_path = _resolve_within_base(
            Path(generation_log_path), Path(base_dir).resolve()
        )
    output_path = _resolve_output(output_path, base_dir)

    if not generation_log_path.is_file():
        raise ValueError(f"Generation log not found: {generation_log_path}")
    rows = pq.read_table(generation_log_path).to_pylist()
    if not rows:
        raise ValueError(f"No generation rows found in {generation_log_path}")
    by_run: dict[str, list[dict[str, object]]] = {}
    for row in rows:
        by_run.setdefault(str(row["run_id"]), []).append(row)
    selected = run_ids if run_ids is not None else sorted(by_run)
    for run_id in selected:
        if run_id not in by_run:
            logger.warning("Skipping run_id=%s: not present in %s", run_id, generation_log_path)
    selected = [run_id for run_id in selected if run_id in by_run]

    fig, axes = plt.subplots(1, len(metrics), figsize=(5 * len(metrics), 4), squeeze=False)
    for m_idx, metric_name in enumerate(metrics):
        ax = axes[0, m_idx]
        color = theme.metric_colors.get(metric_name, "tab:blue")
        for run_id in selected:
            run_rows = sorted(
                by_run[run_id],
                key=lambda r: int(r["generation"]),  # type: ignore[call-overload]
            )
            generations = [int(r["generation"]) for r in run_rows]  # type: ignore[call-overload]
            values = [int(r[metric_name] or 0) for r in run_rows]  # type: ignore[call-overload]
            ax.plot(generations, values, color=color, alpha=0.6, linewidth=1.5)
        ax.set_xlabel("Generation")
        ax.set_ylabel(theme.metric_labels.get(metric_name, metric_name))
        ax.grid(True, alpha=0.3)

    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200)
    plt.close(fig)
