"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.dingo/config.toml.
The mirror URL may be overridden with the DINGO_MIRROR_URL environment
variable.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

import tomli_w

from dingocli.core.component.fetcher.real import DEFAULT_TIMEOUT_SECONDS
from dingocli.core.component.types import INSTALLED_FILE, default_components_dir

MIRROR_URL_ENV = "DINGO_MIRROR_URL"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in DingoContext.
    """

    mirror_url: str | None
    components_dir: Path
    request_timeout: float

    @property
    def ledger_path(self) -> Path:
        return self.components_dir / INSTALLED_FILE

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(
            mirror_url=None,
            components_dir=default_components_dir(),
            request_timeout=DEFAULT_TIMEOUT_SECONDS,
        )


def apply_env_overrides(config: GlobalConfig, environ: Mapping[str, str]) -> GlobalConfig:
    """Return `config` with environment overrides applied."""
    mirror = environ.get(MIRROR_URL_ENV)
    if mirror:
        return replace(config, mirror_url=mirror)
    return config


class GlobalConfigOps(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config.

        Returns:
            GlobalConfig instance; defaults when no config was saved

        Raises:
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for error messages)."""
        ...


class FilesystemGlobalConfigOps(GlobalConfigOps):
    """Production implementation that reads/writes ~/.dingo/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        """Load global config from ~/.dingo/config.toml.

        A missing file yields defaults.

        Raises:
            ValueError: If the file is not valid TOML or a field has the wrong type
        """
        config_path = self.path()
        if not config_path.exists():
            return GlobalConfig.defaults()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        mirror_url = data.get("mirror_url")
        if mirror_url is not None and not isinstance(mirror_url, str):
            raise ValueError(f"'mirror_url' must be a string in {config_path}")

        components_dir = data.get("components_dir")
        timeout = data.get("request_timeout", DEFAULT_TIMEOUT_SECONDS)
        if not isinstance(timeout, int | float) or isinstance(timeout, bool) or timeout <= 0:
            raise ValueError(f"'request_timeout' must be a positive number in {config_path}")

        return GlobalConfig(
            mirror_url=mirror_url or None,
            components_dir=(
                Path(components_dir).expanduser() if components_dir else default_components_dir()
            ),
            request_timeout=float(timeout),
        )

    def save(self, config: GlobalConfig) -> None:
        """Save global config to ~/.dingo/config.toml.

        Raises:
            PermissionError: If directory or file cannot be written
        """
        config_path = self.path()
        parent = config_path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(
                f"Cannot write to directory: {parent}\n"
                f"The directory exists but is not writable."
            )
        parent.mkdir(parents=True, exist_ok=True)

        data: dict[str, object] = {
            "components_dir": str(config.components_dir),
            "request_timeout": config.request_timeout,
        }
        if config.mirror_url is not None:
            data["mirror_url"] = config.mirror_url

        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return Path.home() / ".dingo" / "config.toml"


class InMemoryGlobalConfigOps(GlobalConfigOps):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig.defaults()
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/dingo/config.toml")
