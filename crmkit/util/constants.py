import copy
import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Mapping

import yaml

# Dev server defaults mirrored into the frontend build configuration.
DEFAULT_DEV_SERVER_PORT: Final[int] = 5173
DEFAULT_DEV_SERVER_OPEN: Final[bool] = False

SUMMARY_FILENAME: Final[str] = "Project-Summary.xlsx"
# Number of directory levels between the summary script and the output folder.
SUMMARY_LEVELS_UP: Final[int] = 2

CONFIG_FILENAME: Final[str] = "crmkit.yaml"

CI_ENV_KEY: Final[str] = "GITHUB_ACTIONS"
REPOSITORY_ENV_KEY: Final[str] = "GITHUB_REPOSITORY"


class Paths:
    """Project path constants"""
    BASE_DIR: Final[str] = str(Path(__file__).resolve().parents[2])
    CONFIG_DIR: Final[str] = os.path.join(BASE_DIR, "config")
    SCRIPTS_DIR: Final[str] = os.path.join(BASE_DIR, "scripts")


def get_config_base() -> Path:
    """Return the configuration directory path.

    Prefer a ``config`` directory alongside the executable; if missing,
    fallback to :attr:`Paths.CONFIG_DIR`.
    """
    exe_dir = Path(sys.argv[0]).resolve().parent
    candidate = exe_dir / "config"
    if candidate.exists():
        return candidate
    return Path(Paths.CONFIG_DIR)


def _read_yaml_dict(path: Path) -> dict[str, Any]:
    """Return mapping parsed from *path*, raising on malformed YAML."""
    if not path.exists():
        logging.debug("Config file %s does not exist; using empty mapping", path)
        return {}
    try:
        content = path.read_text(encoding="utf-8")
    except Exception as exc:  # pragma: no cover - file permission issues are environment-dependent
        raise RuntimeError(f"Failed to read config file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Failed to parse YAML file {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise RuntimeError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return dict(data)


@lru_cache(maxsize=None)
def _load_config_cached(config_path: str) -> dict[str, Any]:
    return _read_yaml_dict(Path(config_path))


def load_config(
    refresh: bool = False,
    *,
    path: str | os.PathLike[str] | None = None,
) -> dict[str, Any]:
    """Return a deep-copied configuration dictionary.

    ``path`` defaults to ``crmkit.yaml`` under :func:`get_config_base`.
    Set ``refresh=True`` to discard the cached content and re-read from disk.
    """
    config_path = Path(path) if path is not None else get_config_base() / CONFIG_FILENAME
    cache_key = str(config_path.resolve())
    if refresh:
        _load_config_cached.cache_clear()
    data = _load_config_cached(cache_key)
    return copy.deepcopy(data)


def _coerce_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass(frozen=True)
class ReportSettings:
    """Output settings for the project summary workbook."""

    filename: str = SUMMARY_FILENAME
    levels_up: int = SUMMARY_LEVELS_UP


@dataclass(frozen=True)
class DevServerSettings:
    port: int = DEFAULT_DEV_SERVER_PORT
    open: bool = DEFAULT_DEV_SERVER_OPEN


def _section(config: Mapping[str, Any] | None, name: str) -> Mapping[str, Any]:
    section = (config or {}).get(name)
    return section if isinstance(section, Mapping) else {}


def get_report_settings(*, config: Mapping[str, Any] | None = None) -> ReportSettings:
    """Return report settings, falling back to defaults for missing keys."""

    section = _section(config, "report")
    filename = str(section.get("filename") or SUMMARY_FILENAME).strip() or SUMMARY_FILENAME
    try:
        levels_up = int(section.get("levels_up", SUMMARY_LEVELS_UP))
    except (TypeError, ValueError):
        logging.warning("Invalid report.levels_up %r; using %s", section.get("levels_up"), SUMMARY_LEVELS_UP)
        levels_up = SUMMARY_LEVELS_UP
    if levels_up < 0:
        logging.warning("Negative report.levels_up %s; using %s", levels_up, SUMMARY_LEVELS_UP)
        levels_up = SUMMARY_LEVELS_UP
    return ReportSettings(filename=filename, levels_up=levels_up)


def get_dev_server_settings(*, config: Mapping[str, Any] | None = None) -> DevServerSettings:
    section = _section(config, "dev_server")
    try:
        port = int(section.get("port", DEFAULT_DEV_SERVER_PORT))
    except (TypeError, ValueError):
        logging.warning("Invalid dev_server.port %r; using %s", section.get("port"), DEFAULT_DEV_SERVER_PORT)
        port = DEFAULT_DEV_SERVER_PORT
    open_browser = _coerce_truthy(section.get("open", DEFAULT_DEV_SERVER_OPEN))
    return DevServerSettings(port=port, open=open_browser)
