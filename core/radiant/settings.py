"""
Radiant Configuration Settings

User-facing settings are loaded from config.yaml, add-on options or the
environment by the backend.
"""

from dataclasses import dataclass, field
import re

from .exceptions import ConfigurationError


def _camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


@dataclass
class ZoneSettings:
    """Configuration for a single Messana zone."""

    index: int
    name: str = ""
    enabled: bool = True

    def __post_init__(self):
        if not self.name:
            self.name = f"Zone {self.index}"

    @classmethod
    def from_dict(cls, data) -> "ZoneSettings":
        """Create from dictionary, or from a bare zone index."""
        if isinstance(data, int):
            return cls(index=data)

        converted = {_camel_to_snake(k): v for k, v in data.items()}

        # Accept "id" / "zone_index" as the index key
        for alias in ("id", "zone_index"):
            if alias in converted:
                converted["index"] = converted.pop(alias)

        if "index" not in converted:
            raise ConfigurationError(f"Zone entry has no index: {data}")
        converted["index"] = int(converted["index"])

        return cls(**converted)


@dataclass
class PlatformSettings:
    """Connection settings for a Messana controller and its zones."""

    host: str
    api_key: str
    zones: list[ZoneSettings] = field(default_factory=list)
    timeout: float = 5.0

    @property
    def base_url(self) -> str:
        if self.host.startswith(("http://", "https://")):
            return self.host
        return f"http://{self.host}"

    @classmethod
    def from_dict(cls, data: dict) -> "PlatformSettings":
        """Create from dictionary."""
        converted = {_camel_to_snake(k): v for k, v in data.items()}

        for required in ("host", "api_key"):
            if not converted.get(required):
                raise ConfigurationError(f"Missing required setting: {required}")

        converted["zones"] = [
            ZoneSettings.from_dict(z) for z in converted.get("zones") or []
        ]
        indexes = [z.index for z in converted["zones"]]
        if len(indexes) != len(set(indexes)):
            raise ConfigurationError(f"Duplicate zone index in {indexes}")

        return cls(**converted)
