"""Uvicorn server launcher.

Console scripts must point to a callable, not an ASGI app object.
"""

from __future__ import annotations

from typing import Annotated

import typer
import uvicorn

from outliner.config import load_settings


def main(
    host: Annotated[str | None, typer.Option(help="Bind host (defaults to OUTLINER_API_HOST)")] = None,
    port: Annotated[int | None, typer.Option(help="Bind port (defaults to OUTLINER_API_PORT)")] = None,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload (dev)")] = False,
) -> None:
    """Start the Outliner API server."""

    settings = load_settings()
    uvicorn.run(
        "outliner.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level="info",
    )


def run() -> None:
    """Console script entrypoint."""

    typer.run(main)


if __name__ == "__main__":
    run()
