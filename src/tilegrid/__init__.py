"""Top-level package for tilegrid, the tile placement engine.

Provides subpackages:
- tilegrid.core – registry, tile and geometry models; payload schemas
- tilegrid.placement – resolver, executor and live estimation
- tilegrid.editor – drag session orchestration and starter layouts
- tilegrid.gui – PySide6 geometry provider and signal bridge
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("tilegrid")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
