"""
Process entry point: one application served by two listeners, plain HTTP and
HTTPS, running side by side in one event loop.
"""
import asyncio
import logging
import sys
from typing import List, Optional

import uvicorn
from fastapi import FastAPI

from .config import Settings
from .logging_config import configure_logging
from .main import create_app

logger = logging.getLogger(__name__)


def build_servers(app: FastAPI, settings: Settings) -> List[uvicorn.Server]:
    # uvicorn has no per-request read/write timeouts; the read timeout bounds
    # idle keep-alive reads, the write timeout bounds draining on shutdown.
    common = dict(
        host=settings.host,
        log_config=None,
        log_level=settings.log_level,
        timeout_keep_alive=settings.read_timeout,
        timeout_graceful_shutdown=settings.write_timeout,
    )
    insecure = uvicorn.Config(app, port=settings.http_port, **common)
    secure = uvicorn.Config(
        app,
        port=settings.https_port,
        ssl_certfile=settings.certfile,
        ssl_keyfile=settings.keyfile,
        **common,
    )
    return [uvicorn.Server(insecure), uvicorn.Server(secure)]


async def serve_all(servers: List[uvicorn.Server]) -> None:
    """Run every server until one of them stops, then stop the rest.

    An exception from any server is re-raised once all of them are down.
    """
    tasks = [asyncio.create_task(server.serve()) for server in servers]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)

    for server in servers:
        server.should_exit = True
    if pending:
        await asyncio.wait(pending)

    for task in tasks:
        exc = task.exception()
        if exc is not None:
            raise exc


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_args(argv)
    configure_logging(settings.log_level)

    app = create_app()
    servers = build_servers(app, settings)
    logger.info(
        "Serving products on http://%s:%d and https://%s:%d",
        settings.host, settings.http_port, settings.host, settings.https_port,
    )

    try:
        asyncio.run(serve_all(servers))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except SystemExit as e:
        # uvicorn exits with status 1 when a listener fails to start
        if e.code:
            logger.error("Listener failed to start, exiting")
            return 1
    except Exception:
        logger.exception("Listener stopped with an error, exiting")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
