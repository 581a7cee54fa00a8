# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/cli/app.py
from pathlib import Path
from typing import Optional

import typer

from gamestore.config.loader import load_config
from gamestore.errors import ConfigError, InvalidNotificationError
from gamestore.logging.log import init_logging
from gamestore.observers.events import discount as build_discount
from gamestore.observers.factory import build_publisher


app = typer.Typer(help="Game store discount notifications")


def _load(config: Path):
    try:
        return load_config(config)
    except ConfigError as e:
        typer.echo(f"[config] {e}", err=True)
        raise typer.Exit(1)


@app.command("discount")
def discount(
    config: Path = typer.Argument(..., help="Store config (YAML)"),
    game_id: str = typer.Option(..., "--game-id", help="Catalogue id of the game"),
    title: str = typer.Option(..., "--title", help="Display title of the game"),
    price: float = typer.Option(..., "--price", help="Original price"),
    sale_price: float = typer.Option(..., "--sale-price", help="Discounted price"),
    currency: str = typer.Option("USD", "--currency"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on the console"),
):
    """Publish one discount to every configured subscriber."""
    cfg = _load(config)
    base_dir = Path(cfg.logging.dir) if cfg.logging.dir else None
    logger, run_id, _ = init_logging(base_dir=base_dir, level=cfg.logging.level, verbose=verbose)

    try:
        notification = build_discount(cfg.store, game_id, title, price, sale_price, currency)
    except InvalidNotificationError as e:
        typer.echo(f"[discount] {e}", err=True)
        raise typer.Exit(1)

    try:
        publisher = build_publisher(cfg, logger)
        logger.info(
            f"Publishing {notification.title} at {notification.percent_off}% off "
            f"to {len(publisher)} subscriber(s) run_id={run_id}"
        )
        report = publisher.notify(notification)
    except Exception as e:
        logger.exception(f"Publishing {notification.game_id} failed")
        typer.echo(f"[discount] {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"[discount] {report.summary()}")
    if not report.ok:
        raise typer.Exit(1)


@app.command("check-config")
def check_config(config: Path = typer.Argument(..., help="Store config (YAML)")):
    """Validate a config file and list its subscribers."""
    cfg = _load(config)
    typer.echo(f"store: {cfg.store} (isolate_errors={cfg.isolate_errors})")
    if not cfg.subscribers:
        typer.echo("  no subscribers configured")
    for s in cfg.subscribers:
        detail: Optional[str] = s.path if s.kind == "jsonfile" else None
        if s.kind == "logger":
            detail = s.level
        typer.echo(f"  - {s.kind}" + (f" ({detail})" if detail else ""))


if __name__ == "__main__":
    app()
