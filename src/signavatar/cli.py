"""CLI entry point using Typer."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Annotated

import typer

app = typer.Typer(
    name="signavatar",
    help="Stick-figure avatar that plays a sign for each message.",
    no_args_is_help=False,
)


SourceOption = Annotated[
    str | None,
    typer.Option("--source", "-s", help="Pose catalog URL or JSON file"),
]


@app.command()
def poses(source: SourceOption = None) -> None:
    """List the poses in the catalog."""
    import asyncio

    from signavatar.config import load_config
    from signavatar.poses.loader import CatalogLoadError, fallback_catalog, fetch_catalog

    config = load_config()
    src = source or config.catalog.source

    result = asyncio.run(fetch_catalog(src, timeout=config.catalog.timeout))
    if isinstance(result, CatalogLoadError):
        typer.echo(f"Warning: {result}", err=True)
        typer.echo("Using fallback catalog")
        result = fallback_catalog()
    for name in result.names():
        frames = len(result[name].frames)
        typer.echo(f"{name} ({frames} frame{'s' if frames != 1 else ''})")


@app.command()
def check(source: SourceOption = None) -> None:
    """Check that the pose catalog loads and report its size."""
    import asyncio

    from signavatar.config import load_config
    from signavatar.poses.loader import CatalogLoadError, fetch_catalog

    config = load_config()
    src = source or config.catalog.source

    result = asyncio.run(fetch_catalog(src, timeout=config.catalog.timeout))
    if isinstance(result, CatalogLoadError):
        typer.echo(f"Catalog: unavailable ({src})")
        typer.echo(f"Reason: {result.reason}")
        typer.echo("Status: fallback (idle only)")
        raise typer.Exit(1)
    typer.echo(f"Catalog: loaded ({src})")
    typer.echo(f"Poses: {len(result)} available")
    typer.echo("Status: ready")


@app.command()
def play(
    text: Annotated[str, typer.Argument(help="Message text to sign")],
    source: SourceOption = None,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output GIF, or PNG for the last frame only"),
    ] = Path("sign.gif"),
    ticks: Annotated[
        int | None,
        typer.Option("--ticks", "-t", min=1, help="Frames to render (default: one full transition)"),
    ] = None,
) -> None:
    """Play a sign headlessly and write the animation to disk."""
    import asyncio

    from signavatar.config import load_config
    from signavatar.engine.avatar import SignAvatar
    from signavatar.render.pillow import PillowRenderer

    config = load_config()
    renderer = PillowRenderer(config.render, record=output.suffix.lower() != ".png")
    avatar = SignAvatar(
        renderer,
        source,
        catalog_settings=config.catalog,
        animation_settings=config.animation,
    )
    n_ticks = ticks or math.ceil(1 / config.animation.speed)

    async def _run() -> None:
        await avatar.load()
        avatar.play_sign(text)
        target = avatar.controller.state.target_pose.name  # type: ignore[union-attr]
        typer.echo(f"Signing '{text}' -> {target} ({n_ticks} frames)")
        await avatar.scheduler.run(max_ticks=n_ticks)

    asyncio.run(_run())

    if renderer.record:
        renderer.save_gif(output, fps=config.animation.fps)
    else:
        renderer.save_png(output)
    typer.echo(f"Saved: {output}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
    ] = None,
) -> None:
    """SignAvatar - stick-figure avatar that plays a sign for each message."""
    if version:
        from signavatar import __version__

        typer.echo(f"signavatar {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    from signavatar.config import load_config

    level = (log_level or load_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
