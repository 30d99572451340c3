import argparse
from typing import List, Optional

from pydantic import BaseModel

# Listener defaults. These are fixed; the command line is the only override.
HTTP_PORT = 8080
HTTPS_PORT = 8443
CERT_FILE = "server.pem"
KEY_FILE = "server.key"
READ_TIMEOUT = 5
WRITE_TIMEOUT = 10


class Settings(BaseModel):
    host: str = "0.0.0.0"
    http_port: int = HTTP_PORT
    https_port: int = HTTPS_PORT
    certfile: str = CERT_FILE
    keyfile: str = KEY_FILE
    read_timeout: int = READ_TIMEOUT
    write_timeout: int = WRITE_TIMEOUT
    log_level: str = "info"

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "Settings":
        args = build_parser().parse_args(argv)
        return cls(**{k: v for k, v in vars(args).items() if v is not None})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-registry",
        description="Serve the product registry over HTTP and HTTPS",
    )
    parser.add_argument("--host", help="Interface to bind both listeners to")
    parser.add_argument("--http-port", type=int, help=f"Plain HTTP port (default {HTTP_PORT})")
    parser.add_argument("--https-port", type=int, help=f"TLS port (default {HTTPS_PORT})")
    parser.add_argument("--certfile", help=f"TLS certificate (default {CERT_FILE})")
    parser.add_argument("--keyfile", help=f"TLS private key (default {KEY_FILE})")
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default info)",
    )
    return parser
