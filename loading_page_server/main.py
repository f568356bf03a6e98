import logging
import socket
import sys

import uvicorn

from loading_page_server.app import create_app
from loading_page_server.config import (
    DEFAULT_HOST,
    PROGRAM_DIR,
    ServerConfig,
    StartupError,
    load_content,
)

logger = logging.getLogger(__name__)


def bind_listener(port: int, host: str = DEFAULT_HOST) -> socket.socket:
    """
    An empty host means every interface: one dual-stack socket
    where the OS supports it, plain IPv4 otherwise.
    """
    try:
        if not host and socket.has_dualstack_ipv6():
            return socket.create_server(
                ("", port), family=socket.AF_INET6, dualstack_ipv6=True
            )
        return socket.create_server((host or "0.0.0.0", port))
    except (OSError, OverflowError) as e:
        raise StartupError(f"Cannot bind {host or '*'}:{port}") from e


def start(argv=None, environ=None, base_dir=PROGRAM_DIR):
    # STARTING: nothing is bound until the page is in memory
    config = ServerConfig.from_args(argv, environ, base_dir=base_dir)
    page = load_content(config.file_path)
    app = create_app(page)
    sock = bind_listener(config.port, config.host)

    # SERVING
    logger.info(f"Loading page server listening on port {config.port}")
    server = uvicorn.Server(
        uvicorn.Config(app, log_level="warning", access_log=False)
    )
    server.run(sockets=[sock])


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    start(sys.argv[1:])


if __name__ == "__main__":
    main()
