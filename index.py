"""
Launcher for the NoteShelf server.
"""

import os
import subprocess
from typing import Any
from dotenv import load_dotenv

load_dotenv()

DEV_TRUTHY_VALUES = {"1", "true", "yes", "on"}
DEV_FALSEY_VALUES = {"0", "false", "no", "off"}


def required_env(name: str) -> Any:
    """Get required environment variable or raise error."""
    value = os.getenv(name)
    if value is None:
        raise RuntimeError(f"Environment variable '{name}' is required but not set.")
    return value


def parse_bool_env(name: str) -> bool:
    """Parse an environment variable into a strict boolean."""
    normalized = required_env(name).strip().lower()
    if normalized in DEV_TRUTHY_VALUES:
        return True
    if normalized in DEV_FALSEY_VALUES:
        return False
    raise RuntimeError(
        f"Environment variable '{name}' must be one of: true/false, 1/0, yes/no, on/off"
    )


def build_command(port: int, dev: bool, host: str = "0.0.0.0") -> list:
    """Return the uvicorn command line for the app."""
    return [
        "uvicorn",
        "noteshelf.server:app",
        *(["--reload"] if dev else []),
        "--host",
        host,
        "--port",
        str(port),
    ]


def main() -> None:
    port = int(required_env("PORT"))
    dev = parse_bool_env("DEV")
    # Normalize DEV for the server process, which reads it through noteshelf.config
    os.environ["DEV"] = "true" if dev else "false"

    try:
        subprocess.run(
            build_command(port, dev, os.getenv("HOST", "0.0.0.0")),
            cwd=os.getcwd(),
            check=True,
        )
    except KeyboardInterrupt:
        print("Server stopped by user.")


if __name__ == "__main__":
    main()
