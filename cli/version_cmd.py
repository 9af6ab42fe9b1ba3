"""Version info: envx, Python and dependency versions."""
from __future__ import annotations

import json
import sys

from envx.theme import theme as _theme


def _dependency_versions() -> dict[str, str]:
    from importlib.metadata import PackageNotFoundError, version

    deps: dict[str, str] = {}
    for pkg in ("pyyaml", "rich"):
        try:
            deps[pkg] = version(pkg)
        except PackageNotFoundError:
            deps[pkg] = "not installed"
    return deps


def cmd_version(json_output: bool = False):
    """Show envx version, Python version and key dependency versions."""
    from cli.helpers import get_version

    version = get_version()
    py_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    deps = _dependency_versions()

    if json_output:
        print(json.dumps({"version": version, "python": py_version,
                          "dependencies": deps}, indent=2))
        return

    from rich.console import Console
    console = Console(no_color=_theme.no_color, highlight=False)
    console.print(f"envx {version}")
    console.print(_theme.wrap(_theme.muted, f"Python {py_version}"))
    for pkg, ver in deps.items():
        style = _theme.success if ver != "not installed" else _theme.error
        console.print(f"  {pkg:<8} {_theme.wrap(style, ver)}")
