from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class ServerSettings:
    """Configuration block for the HTTP wrapper."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass(slots=True)
class EmphasisConfig:
    """Configuration options for the syllable emphasis pipeline."""

    lower_band: float = 74.0
    upper_band: float = 82.0
    adjust_enabled: bool = True
    base_block_size: int = 21
    min_block_size: int = 4
    max_block_size: int = 12
    sigma_left: float = 2.41
    sigma_right: float = 3.74
    emphasis_threshold: float = 0.8
    seed: int | None = None
    server: ServerSettings = field(default_factory=ServerSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def validate(self) -> "EmphasisConfig":
        """Raise ValueError when the options cannot describe a usable pipeline."""
        if self.lower_band > self.upper_band:
            raise ValueError(
                f"lower_band {self.lower_band} exceeds upper_band {self.upper_band}."
            )
        if self.min_block_size < 1:
            raise ValueError("min_block_size must be at least 1.")
        if self.min_block_size > self.max_block_size:
            raise ValueError(
                f"min_block_size {self.min_block_size} exceeds "
                f"max_block_size {self.max_block_size}."
            )
        if self.sigma_left <= 0 or self.sigma_right <= 0:
            raise ValueError("sigma_left and sigma_right must be positive.")
        return self


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EmphasisConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "server" in data:
        server_value = data["server"]
        if isinstance(server_value, ServerSettings):
            kwargs["server"] = server_value
        elif isinstance(server_value, Mapping):
            kwargs["server"] = _build_server_settings(server_value)
        else:
            kwargs.pop("server")
    return kwargs


def _build_server_settings(data: Mapping[str, Any]) -> ServerSettings:
    server_allowed = {field.name for field in fields(ServerSettings)}
    filtered = {key: data[key] for key in data if key in server_allowed}
    return ServerSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> EmphasisConfig:
    """Build an EmphasisConfig from a dictionary-like input."""
    if data is None:
        return EmphasisConfig()
    return EmphasisConfig(**_build_kwargs(data)).validate()


def config_from_yaml(path: str | Path) -> EmphasisConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EmphasisConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EmphasisConfig()
    return config_from_yaml(path)
