"""Build configuration for the CRM frontend.

GitHub Actions exposes ``GITHUB_REPOSITORY``; when building there the static
assets are served from ``/<repo>/`` (GitHub Pages), otherwise from ``/``.
The environment is passed in explicitly so the resolver stays pure.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from crmkit.util.constants import (
    CI_ENV_KEY,
    DEFAULT_DEV_SERVER_OPEN,
    DEFAULT_DEV_SERVER_PORT,
    REPOSITORY_ENV_KEY,
    _coerce_truthy,
)

LOGGER = logging.getLogger(__name__)

ROOT_BASE_PATH = "/"


@dataclass(frozen=True)
class BuildContext:
    is_ci: bool = False
    repository_name: Optional[str] = None


@dataclass(frozen=True)
class BuildConfig:
    """Values consumed by the frontend build tool."""

    base: str = ROOT_BASE_PATH
    port: int = DEFAULT_DEV_SERVER_PORT
    open: bool = DEFAULT_DEV_SERVER_OPEN

    def to_dict(self) -> dict[str, Any]:
        return {"base": self.base, "server": {"port": self.port, "open": self.open}}


def repository_short_name(repository: Optional[str]) -> Optional[str]:
    """Return the segment after the first ``/`` of ``owner/name``, if any."""
    if not repository:
        return None
    parts = str(repository).split("/")
    if len(parts) < 2:
        return None
    return parts[1].strip() or None


def build_context_from_env(environ: Mapping[str, str]) -> BuildContext:
    return BuildContext(
        is_ci=_coerce_truthy(environ.get(CI_ENV_KEY, "")),
        repository_name=repository_short_name(environ.get(REPOSITORY_ENV_KEY)),
    )


def resolve_base_path(context: BuildContext) -> str:
    if context.is_ci and context.repository_name:
        return f"/{context.repository_name}/"
    return ROOT_BASE_PATH


def define_config(
    environ: Mapping[str, str] | None = None,
    *,
    port: int = DEFAULT_DEV_SERVER_PORT,
    open_browser: bool = DEFAULT_DEV_SERVER_OPEN,
) -> BuildConfig:
    """Assemble the build configuration from ``environ`` (``os.environ`` by default)."""
    context = build_context_from_env(os.environ if environ is None else environ)
    base = resolve_base_path(context)
    LOGGER.debug("Resolved base path %s (ci=%s, repo=%s)", base, context.is_ci, context.repository_name)
    return BuildConfig(base=base, port=port, open=open_browser)
