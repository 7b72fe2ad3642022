"""Launch configuration parser.

Parses JSON configuration files describing the applications, intents,
interests, choices and lookup lists the resolver works with.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from launchbar.logger import get_logger
from launchbar.utils import get_package_config_path

logger = get_logger("launch_config")

PRIMITIVE_FIELD_TYPES = ("number", "string", "date")


class Option(BaseModel):
    """An entry of a lookup list or enumerated choice."""

    value: str = Field(..., description="Value inserted into the input text")
    display: Optional[str] = Field(None, description="Label used for matching and display")
    body: Optional[Any] = Field(None, description="Payload handed to the host for interests")

    @property
    def label(self) -> str:
        return self.display if self.display is not None else self.value

    class Config:
        """Pydantic configuration."""

        frozen = True


class Application(BaseModel):
    """A launchable application from the host directory."""

    url: str = Field(..., description="Address the host launches")
    title: Optional[str] = Field(None, description="Human readable title")

    @property
    def label(self) -> str:
        return self.title if self.title is not None else self.url

    class Config:
        """Pydantic configuration."""

        frozen = True


class FieldDefinition(BaseModel):
    """A payload field captured from typed tokens once an intent is chosen."""

    name: str
    type: str = Field(..., description="number, string, date or the key of a configured choice")
    match_pattern: Optional[str] = Field(None, alias="matchPattern")
    match_expression: Optional[str] = Field(None, alias="matchExpression")
    value_expression: Optional[str] = Field(None, alias="valueExpression")
    date_formats: Optional[list[str]] = Field(None, alias="dateFormats")

    def is_primitive(self) -> bool:
        """Return True when the field captures free text rather than a choice."""
        return self.type.lower() in PRIMITIVE_FIELD_TYPES

    class Config:
        """Pydantic configuration."""

        frozen = True
        populate_by_name = True


class Intent(BaseModel):
    """A parametrised action activated by one of its trigger words."""

    triggers: list[str] = Field(..., min_length=1)
    trigger_field: Optional[str] = Field(None, alias="triggerField")
    ignore_case: bool = Field(True, alias="ignoreCase")
    action: str
    domain: Optional[str] = None
    sub_domain: Optional[str] = Field(None, alias="subDomain")
    fields: list[FieldDefinition] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""

        frozen = True
        populate_by_name = True


class Interest(BaseModel):
    """A topic backed by a lookup list."""

    topic: str
    domain: Optional[str] = None
    sub_domain: Optional[str] = Field(None, alias="subDomain")
    list_key: Optional[str] = Field(None, alias="list")
    body: Optional[Any] = None

    class Config:
        """Pydantic configuration."""

        frozen = True
        populate_by_name = True


class Choice(BaseModel):
    """An enumerated value set referenced by field types."""

    key: str
    ignore_case: bool = Field(True, alias="ignoreCase")
    list_key: Optional[str] = Field(None, alias="list")

    class Config:
        """Pydantic configuration."""

        frozen = True
        populate_by_name = True


class LaunchConfig(BaseModel):
    """Directory and declarative configuration consumed by the resolver."""

    applications: list[Application] = Field(default_factory=list)
    choices: list[Choice] = Field(default_factory=list)
    interests: list[Interest] = Field(default_factory=list)
    intents: list[Intent] = Field(default_factory=list)
    lists: dict[str, list[Option]] = Field(default_factory=dict)

    @field_validator("lists", mode="before")
    @classmethod
    def _coerce_bare_strings(cls, value: Any) -> Any:
        # Lists may hold bare strings as a shorthand for {"value": ...}
        if not isinstance(value, dict):
            return value
        return {
            key: [{"value": entry} if isinstance(entry, str) else entry for entry in entries]
            for key, entries in value.items()
        }

    def find_choice(self, type_key: str) -> Optional[Choice]:
        """Find the choice a field type refers to (keys compare case-insensitively)."""
        lowered = type_key.lower()
        for choice in self.choices:
            if choice.key.lower() == lowered:
                return choice
        return None

    def find_intent(self, action: str) -> Optional[Intent]:
        for intent in self.intents:
            if intent.action == action:
                return intent
        return None

    class Config:
        """Pydantic configuration."""

        frozen = True


def load_launch_config(config_path: Optional[str | Path] = None) -> LaunchConfig:
    """
    Load launch configuration from a JSON file.

    Args:
        config_path: Path to the JSON configuration file. If None, the
            ``LAUNCHBAR_CONFIG`` environment variable is used, falling back
            to the ``config/launch_config.json`` file shipped with the package.

    Returns:
        LaunchConfig: Parsed configuration object

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the configuration structure is invalid
    """
    if config_path is None:
        env_path = os.getenv("LAUNCHBAR_CONFIG")
        config_path = Path(env_path) if env_path else get_package_config_path()
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        error_msg = f"Launch configuration file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading launch configuration from: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file {config_path}: {e}")
        raise

    try:
        config = LaunchConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid configuration structure in {config_path}: {e}")
        raise

    logger.info(
        f"Loaded {len(config.applications)} application(s), {len(config.intents)} intent(s), "
        f"{len(config.interests)} interest(s), {len(config.choices)} choice(s)"
    )
    for intent in config.intents:
        logger.debug(f"  - intent {intent.action}: triggers={intent.triggers}")
    return config
