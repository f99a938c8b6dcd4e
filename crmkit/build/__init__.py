"""Frontend build configuration helpers."""

from .base_path import (
    BuildConfig,
    BuildContext,
    build_context_from_env,
    define_config,
    repository_short_name,
    resolve_base_path,
)

__all__ = [
    "BuildConfig",
    "BuildContext",
    "build_context_from_env",
    "define_config",
    "repository_short_name",
    "resolve_base_path",
]
