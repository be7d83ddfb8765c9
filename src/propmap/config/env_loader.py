"""Prefix-scoped environment loader with .env support.

Values are merged in deterministic order (later wins):
1) .env file (explicit path, or ./.env when present)
2) OS environment variables
3) Explicit overrides

Only variables named ``{prefix}_*`` are kept, with the prefix removed:
``PROPMAP_ENCODING=utf-8`` becomes ``{"ENCODING": "utf-8"}``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values


class EnvLoader:
    """Load ``{prefix}_*`` settings from a .env file and the environment."""

    def __init__(self, prefix: str, env_file: Optional[Path | str] = None) -> None:
        self.prefix = prefix.rstrip("_")
        self.env_file = Path(env_file) if env_file else None

    def _scoped(self, values: Mapping[str, Optional[object]]) -> Dict[str, str]:
        marker = f"{self.prefix}_"
        return {
            key[len(marker):]: str(value)
            for key, value in values.items()
            if key.startswith(marker) and value is not None
        }

    def load(self, overrides: Optional[Mapping[str, object]] = None) -> Dict[str, str]:
        """Return prefix-stripped settings, overrides taking precedence.

        Override keys may be given with or without the prefix.
        """
        data: Dict[str, str] = {}

        env_path = self.env_file or Path.cwd() / ".env"
        if env_path.is_file():
            data.update(self._scoped(dotenv_values(env_path)))

        data.update(self._scoped(os.environ))

        if overrides:
            marker = f"{self.prefix}_"
            data.update(
                {
                    (key[len(marker):] if key.startswith(marker) else key): str(value)
                    for key, value in overrides.items()
                }
            )

        return data


__all__ = ["EnvLoader"]
