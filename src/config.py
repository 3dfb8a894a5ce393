"""Environment and logging configuration for Voicing Architect.

Reports the host platform and library versions, and configures the
root logger for command-line use. Library modules only ever create
their own module loggers; handlers are set up here.
"""

import logging
import platform
import sys

import numpy as np
import pretty_midi
import yaml

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: str | int = "WARNING") -> None:
    """Configure the root logger once for the CLI.

    Args:
        level: Logging level name or number (e.g. ``"DEBUG"``).
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def describe_environment() -> dict:
    """Collect and print the current execution environment.

    Returns:
        dict with keys ``os``, ``arch``, ``python_version``, ``numpy``,
        ``pretty_midi``, ``pyyaml``.
    """
    info = {
        "os": sys.platform,
        "arch": platform.machine(),
        "python_version": platform.python_version(),
        "numpy": np.__version__,
        "pretty_midi": getattr(pretty_midi, "__version__", "unknown"),
        "pyyaml": yaml.__version__,
    }

    print("──── Voicing Architect — Environment ────")
    print(f"  OS            : {info['os']}")
    print(f"  Architecture  : {info['arch']}")
    print(f"  Python        : {info['python_version']}")
    print(f"  numpy         : {info['numpy']}")
    print(f"  pretty_midi   : {info['pretty_midi']}")
    print(f"  PyYAML        : {info['pyyaml']}")
    print("─────────────────────────────────────────")
    return info
