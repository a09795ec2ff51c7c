import yaml
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union
from dataclasses import dataclass

from .core.errors import ValidationError

CONFIG_FILE = Path("config.yml")


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def parse(cls, value: Union[str, "Orientation", None]) -> "Orientation":
        if value is None:
            return cls.PORTRAIT
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(o.value for o in cls)
            raise ValidationError(f"Invalid orientation '{value}'. Expected one of: {choices}")


@dataclass(frozen=True)
class PrintDefaults:
    """Values from the `print` section of config.yml."""
    printer: Optional[str] = None
    page_size: Optional[str] = None
    orientation: Orientation = Orientation.PORTRAIT
    install_dir: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrintDefaults":
        install_dir = data.get("install_dir")
        return cls(
            printer=data.get("printer") or None,
            page_size=data.get("page_size") or None,
            orientation=Orientation.parse(data.get("orientation")),
            install_dir=Path(install_dir) if install_dir else None,
        )


@dataclass(frozen=True)
class PrintJobConfig:
    file_path: Path
    printer_name: Optional[str] = None
    page_size: Optional[str] = None
    orientation: Orientation = Orientation.PORTRAIT

    @classmethod
    def create(
        cls,
        file_path: Union[str, Path],
        printer_name: Optional[str] = None,
        page_size: Optional[str] = None,
        orientation: Union[str, Orientation, None] = None,
    ) -> "PrintJobConfig":
        """Build a job, resolving the file path and checking it exists."""
        path = Path(file_path).resolve()
        if not path.is_file():
            raise ValidationError(f"Input file not found: {path}")
        return cls(
            file_path=path,
            printer_name=printer_name or None,
            page_size=page_size or None,
            orientation=Orientation.parse(orientation),
        )


def load_config(path: Path = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.
    """
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except Exception as e:
        print(f"Warning: Failed to load configuration from {path}: {e}")
        return {}


def _merge_dict(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries."""
    merged = base.copy()
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_logging_config(path: Path = CONFIG_FILE) -> Dict[str, Any]:
    """
    Get logging configuration with defaults.
    """
    defaults = {
        "level": "INFO",
        "console": True,
        "file": {
            "enabled": True,
            "path": "logs/wpsprint_{time:YYYYMMDDHHmmss}.log",
            "rotation": "10 MB",
            "retention": "10 days"
        }
    }
    logging_config = load_config(path).get("logging") or {}
    return _merge_dict(defaults, logging_config)


def get_print_defaults(path: Path = CONFIG_FILE) -> PrintDefaults:
    return PrintDefaults.from_dict(load_config(path).get("print") or {})
