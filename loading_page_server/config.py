import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

# =========================
# DEFAULTS
# =========================
PROGRAM_DIR = Path(__file__).resolve().parent
DEFAULT_FILENAME = "loading-page.html"
DEFAULT_PORT = 8080
# empty: all interfaces, IPv4 and IPv6
DEFAULT_HOST = ""
PORT_ENV = "PORT"


class StartupError(RuntimeError):
    """Fatal error raised before the server starts listening."""


# =========================
# RESOLUTION
# =========================
def resolve_file_path(arg: Optional[str] = None, base_dir: Path = PROGRAM_DIR) -> Path:
    return Path(base_dir) / (arg or DEFAULT_FILENAME)


def resolve_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    PORT from the environment, 8080 when unset.
    The range is left to the bind call.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(PORT_ENV, "").strip()
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError as e:
        raise StartupError(f"Invalid {PORT_ENV} value: {value!r}") from e


def load_content(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise StartupError(f"Cannot read page file: {path}") from e


@dataclass(frozen=True)
class ServerConfig:
    file_path: Path
    port: int
    host: str = DEFAULT_HOST

    @classmethod
    def from_args(
        cls,
        argv: Optional[Sequence[str]] = None,
        environ: Optional[Mapping[str, str]] = None,
        base_dir: Path = PROGRAM_DIR,
    ) -> "ServerConfig":
        # argv excludes the program name
        arg = argv[0] if argv else None
        return cls(
            file_path=resolve_file_path(arg, base_dir),
            port=resolve_port(environ),
        )
