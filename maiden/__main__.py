from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from .config import Settings
from .logs import configure_logging, get_logger
from .main import create_app

logger = get_logger(__name__)

cli = typer.Typer(add_completion=False, help='Serve a device-local data directory over REST.')


@cli.command()
def serve(
    port: Optional[int] = typer.Option(None, '--port', help='http port'),
    data: Optional[str] = typer.Option(None, '--data', help='path to user data directory'),
    app: Optional[str] = typer.Option(None, '--app', help='path to maiden app directory'),
    doc: Optional[str] = typer.Option(None, '--doc', help='path to matron lua docs'),
    host: Optional[str] = typer.Option(None, '--host', help='interface to bind'),
    debug: bool = typer.Option(False, '--debug', help='enable debug logging'),
):
    overrides = {'port': port, 'data_dir': data, 'app_dir': app, 'doc_dir': doc, 'host': host}
    if debug:
        overrides['debug'] = True
    config = Settings(**{key: value for key, value in overrides.items() if value is not None})

    configure_logging(config.debug)
    logger.info(
        'maiden',
        version=config.version,
        port=config.port,
        app=config.app_dir,
        data=config.data_dir,
        doc=config.doc_dir,
    )

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level='debug' if config.debug else 'info',
    )


if __name__ == '__main__':
    cli()
