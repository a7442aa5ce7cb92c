"""Environment variable loading utilities."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values


def env_files_for_mode(mode: str | None = None) -> list[str]:
    """Return dotenv file names in load order (later files take precedence).

    Args:
        mode: Optional build mode, e.g. "development" or "production".

    Returns:
        File names relative to the env directory.
    """
    files = [".env", ".env.local"]
    if mode:
        files += [f".env.{mode}", f".env.{mode}.local"]
    return files


def load_project_env(
    env_dir: str | Path | None = None,
    mode: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Load environment variables from dotenv files and the process environment.

    Dotenv files are merged in the order given by ``env_files_for_mode``; the
    process environment is applied last and always wins.

    Args:
        env_dir: Directory holding the dotenv files. Defaults to the working directory.
        mode: Optional build mode selecting the ``.env.<mode>`` files.
        environ: Environment mapping to apply on top. Defaults to ``os.environ``.

    Returns:
        A dictionary containing the merged environment variables.
    """
    base_dir = Path(env_dir) if env_dir is not None else Path.cwd()
    merged: dict[str, str] = {}

    for name in env_files_for_mode(mode):
        env_file = base_dir / name
        if not env_file.is_file():
            continue
        logging.debug("Loading environment file %s", env_file)
        # Bare KEY lines parse to None: there is no value to expose.
        merged.update({
            key: value for key, value in dotenv_values(env_file).items() if value is not None
        })

    merged.update(os.environ if environ is None else environ)
    return merged
