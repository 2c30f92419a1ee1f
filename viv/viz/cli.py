from __future__ import annotations

import argparse
import logging
from pathlib import Path
from random import Random

from viv.config.constants import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from viv.domain.grid import Grid
from viv.domain.index import Index
from viv.simulation.engine import iterate
from viv.viz.render import render_filmstrip, render_frame, render_metric_timeseries
from viv.viz.theme import get_theme
from viv.viz.viewport import Viewport


def _parse_cells(raw: str) -> list[Index]:
    """Parse ``"x,y;x,y;..."`` into indices."""
    cells: list[Index] = []
    for item in raw.split(";"):
        item = item.strip()
        if not item:
            continue
        tokens = item.split(",")
        if len(tokens) != 2:
            raise ValueError(f"Expected x,y format, got: {item}")
        try:
            cells.append(Index(int(tokens[0]), int(tokens[1])))
        except ValueError as exc:
            raise ValueError(f"cell coordinates must be integers, got: {item}") from exc
    return cells


def _add_grid_arguments(p: argparse.ArgumentParser) -> None:
    source = p.add_mutually_exclusive_group()
    source.add_argument("--seed", type=int, default=0, help="Random seed for Grid.generate")
    source.add_argument("--cells", type=str, default=None, metavar="X,Y;X,Y")
    p.add_argument("--width", type=int, default=VIEWPORT_WIDTH)
    p.add_argument("--height", type=int, default=VIEWPORT_HEIGHT)
    p.add_argument("--center", type=str, default="0,0", metavar="X,Y")


def _build_grid(args: argparse.Namespace) -> Grid:
    if args.cells is not None:
        return Grid.new(_parse_cells(args.cells))
    return Grid.generate(rng=Random(args.seed))


def _build_viewport(args: argparse.Namespace) -> Viewport:
    centers = _parse_cells(args.center)
    if len(centers) != 1:
        raise ValueError(f"Expected a single X,Y center, got: {args.center}")
    return Viewport(width=args.width, height=args.height, center=centers[0])


def _build_show_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("show", help="Print a text viewport after N generations")
    p.set_defaults(func=_handle_show)
    _add_grid_arguments(p)
    p.add_argument("--generations", type=int, default=0)


def _build_frame_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("frame", help="Render one viewport image after N generations")
    p.set_defaults(func=_handle_frame)
    _add_grid_arguments(p)
    p.add_argument("--generations", type=int, default=0)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_filmstrip_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("filmstrip", help="Render filmstrip of successive generations")
    p.set_defaults(func=_handle_filmstrip)
    _add_grid_arguments(p)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--n-frames", type=int, default=6)
    p.add_argument("--stride", type=int, default=1)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_timeseries_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("timeseries", help="Plot metrics from a generation log")
    p.set_defaults(func=_handle_timeseries)
    p.add_argument("--generation-log", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--metric", action="append", default=None, dest="metrics")
    p.add_argument("--run-id", action="append", default=None, dest="run_ids")
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _advance(grid: Grid, generations: int) -> Grid:
    if generations < 0:
        raise ValueError("generations must be >= 0")
    *_, last = iterate(grid, generations)
    return last


def _handle_show(args: argparse.Namespace) -> None:
    grid = _advance(_build_grid(args), args.generations)
    print(_build_viewport(args).render_text(grid, theme=args.theme))


def _handle_frame(args: argparse.Namespace) -> None:
    grid = _advance(_build_grid(args), args.generations)
    render_frame(
        grid=grid,
        viewport=_build_viewport(args),
        output_path=args.output,
        base_dir=args.base_dir,
        title=f"Generation {args.generations}",
        theme=args.theme,
    )


def _handle_filmstrip(args: argparse.Namespace) -> None:
    render_filmstrip(
        grid=_build_grid(args),
        viewport=_build_viewport(args),
        output_path=args.output,
        n_frames=args.n_frames,
        stride=args.stride,
        base_dir=args.base_dir,
        theme=args.theme,
    )


def _handle_timeseries(args: argparse.Namespace) -> None:
    render_metric_timeseries(
        generation_log_path=args.generation_log,
        output_path=args.output,
        metric_names=args.metrics,
        run_ids=args.run_ids,
        base_dir=args.base_dir,
        theme=args.theme,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Visualization tools for Life grids")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, paper)",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_show_parser(sub)
    _build_frame_parser(sub)
    _build_filmstrip_parser(sub)
    _build_timeseries_parser(sub)
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=args.log_level.upper())
        args.theme = get_theme(args.theme)
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
