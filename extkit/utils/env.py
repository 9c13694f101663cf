"""
extkit Environment Access
=========================

Typed access to environment variables, optionally seeded from a .env file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Dict, Mapping, Optional, Union


_TRUTHY = ("true", "1", "yes", "on", "enabled")
_FALSY = ("false", "0", "no", "off", "disabled", "")


class Env:
    """
    Environment variable reader.

    Values come from the process environment first, then from the loaded
    .env file. An explicit mapping can replace the process environment,
    which keeps tests independent of the host.

    Example:
        env = Env().load()

        interval = env.int("EXTKIT_DEBOUNCE_MS", default=300)
        locale = env.str("EXTKIT_LOCALE", default="en_US")
    """

    def __init__(
        self,
        env_file: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Args:
            env_file: Path to a .env file (searched for when omitted)
            environ: Mapping used instead of os.environ
        """
        self._env_file = Path(env_file) if env_file else None
        self._environ = environ if environ is not None else os.environ
        self._file_values: Dict[str, str] = {}

    def load(self, env_file: Optional[Union[str, Path]] = None) -> "Env":
        """
        Read KEY=value pairs from a .env file.

        Missing files are ignored. Returns self for chaining.
        """
        path = Path(env_file) if env_file else self._env_file
        if path is None:
            path = self._find_env_file()

        if path is not None and path.exists():
            self._file_values.update(self._parse(path.read_text(encoding="utf-8")))

        return self

    def _find_env_file(self) -> Optional[Path]:
        """Find .env in the current directory or its nearest parents."""
        cwd = Path.cwd()
        for directory in [cwd] + list(cwd.parents)[:3]:
            candidate = directory / ".env"
            if candidate.exists():
                return candidate
        return None

    @staticmethod
    def _parse(content: str) -> Dict[str, str]:
        values: Dict[str, str] = {}

        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if line.startswith("export "):
                line = line[7:]

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            value = value.strip()

            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]
            else:
                # Trailing comment on an unquoted value
                value = re.sub(r"\s+#.*$", "", value)

            values[key.strip()] = value

        return values

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._environ.get(key)
        if value is None:
            value = self._file_values.get(key, default)
        return value

    def str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get string value."""
        return self.get(key, default)

    def int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """
        Get integer value.

        Raises:
            ValueError: If the variable is set but is not an integer
        """
        value = self.get(key)
        if value is None:
            return default

        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(
                f"Environment variable '{key}' is not a valid integer: {value!r}"
            ) from None

    def bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        """
        Get boolean value.

        Raises:
            ValueError: If the variable is set but is not a recognised boolean
        """
        value = self.get(key)
        if value is None:
            return default

        lowered = value.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False

        raise ValueError(f"Environment variable '{key}' is not a valid boolean: {value!r}")

    def __contains__(self, key: str) -> bool:
        return key in self._environ or key in self._file_values
