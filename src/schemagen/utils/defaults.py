"""
Default profiles for SchemaGen configuration.
"""

from dataclasses import dataclass
from typing import Literal

from schemagen.core.types import FieldKind
from schemagen.logging import configure_logging
from schemagen.store.json_file import DEFAULT_STORAGE_KEY, JsonFileModelLibrary


@dataclass(frozen=True)
class DefaultsProfile:
    """
    Configuration profile with sensible defaults.

    Profiles control where the model library lives, the kind given to new
    property rows, and how logs are emitted.
    """

    mode: Literal["prod", "dev"]

    # Library
    library_path: str = "schema_models.json"
    storage_key: str = DEFAULT_STORAGE_KEY

    # Editor
    default_kind: str = FieldKind.STRING.value

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    use_colors: bool = False

    def configure_logging(self) -> None:
        """Apply this profile's logging settings."""
        configure_logging(
            level=self.log_level,
            format=self.log_format,
            use_colors=self.use_colors,
        )

    def create_library(self) -> JsonFileModelLibrary:
        """Create the file-backed model library this profile points at."""
        return JsonFileModelLibrary(self.library_path, storage_key=self.storage_key)


# Built-in profiles

DEFAULT_PROD = DefaultsProfile(
    mode="prod",
    log_level="INFO",
    log_format="json",
    use_colors=False,
)

DEFAULT_DEV = DefaultsProfile(
    mode="dev",
    log_level="DEBUG",
    log_format="text",
    use_colors=True,
)

_PROFILES = {
    "prod": DEFAULT_PROD,
    "dev": DEFAULT_DEV,
}


def get_profile(mode: str) -> DefaultsProfile:
    """
    Get a built-in profile by mode name.

    Raises:
        ValueError: If the mode is not a built-in profile
    """
    if mode not in _PROFILES:
        raise ValueError(f"Unknown profile: {mode}. Use one of: {', '.join(_PROFILES)}")
    return _PROFILES[mode]
