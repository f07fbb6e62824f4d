"""Top-level package for the flexflow toolkit.

Converts absolutely positioned canvas children into a grouped, row-based
flow layout.

Provides subpackages:
- flexflow_toolkit.core – immutable geometry, row and memento models
- flexflow_toolkit.flow – grouping, metrics, responsive mode and sessions
- flexflow_toolkit.surfaces – reference rendering surfaces
- flexflow_toolkit.utils – serialization and debug visualization
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("flexflow_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
