"""
Locate the WPS Office installation.
"""
import winreg
from pathlib import Path
from typing import Optional

from .classifier import DocumentTypeSpec
from .errors import InstallationNotFound
from ..utils.logger import logger

INSTALL_KEY = r"Software\Kingsoft\Office\6.0\Common"
INSTALL_VALUE = "InstallRoot"

# Executables live either directly under InstallRoot or in its office6 folder
EXECUTABLE_SUBDIRS = ("", "office6")


def _read_install_root(hive) -> Optional[str]:
    try:
        key = winreg.OpenKey(hive, INSTALL_KEY)
    except OSError:
        return None
    try:
        value, _ = winreg.QueryValueEx(key, INSTALL_VALUE)
        return value or None
    except OSError:
        return None
    finally:
        winreg.CloseKey(key)


def find_install_dir() -> Optional[Path]:
    """
    Read the WPS install directory from the registry, per-user first.

    Returns:
        The directory, or None if no installation is registered.
    """
    for hive in (winreg.HKEY_CURRENT_USER, winreg.HKEY_LOCAL_MACHINE):
        root = _read_install_root(hive)
        if root:
            logger.debug(f"Found WPS InstallRoot: {root}")
            return Path(root)
    return None


def locate_executable(spec: DocumentTypeSpec, install_dir: Optional[Path] = None) -> Path:
    """
    Resolve the executable that serves `spec`.

    Args:
        spec: Document type whose executable is needed.
        install_dir: Explicit install directory; discovered from the registry when omitted.

    Raises:
        InstallationNotFound: no directory, or the executable is not in it.
    """
    directory = install_dir or find_install_dir()
    if directory is None:
        raise InstallationNotFound("WPS Office installation not found in the registry. Use --install-dir.")

    for subdir in EXECUTABLE_SUBDIRS:
        candidate = Path(directory) / subdir / spec.executable_name
        if candidate.is_file():
            logger.debug(f"Using executable: {candidate}")
            return candidate

    raise InstallationNotFound(
        f"'{spec.executable_name}' not found in {directory}",
        {"install_dir": str(directory)},
    )
