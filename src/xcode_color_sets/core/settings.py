"""Exporter configuration and command line settings."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from xcode_color_sets.core.naming import StringCase
from xcode_color_sets.error_handling import report_file_error

logger = logging.getLogger(__name__)

DEFAULT_ROOT_CATALOG_PATH = "Colors.xcassets"
DEFAULT_PROPERTIES_FILE_NAME = "token-properties.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExporterConfiguration(BaseModel):
    """Options recognised by the exporter.

    Keys are accepted in camelCase (as stored in exporter configuration files)
    or snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    generate_root_catalog: bool = Field(
        default=True,
        description="Create the root catalog folder and its Contents.json",
    )
    root_catalog_path: str = Field(
        default=DEFAULT_ROOT_CATALOG_PATH,
        description="Root path of the catalog; may contain '/' for nested folders",
    )
    exclude_collections_in_pipelines: bool = Field(
        default=False, description="Drop tokens belonging to excluded collections"
    )
    excluded_collections: List[str] = Field(
        default_factory=list, description="Collection names to exclude"
    )
    write_name_to_property: bool = Field(
        default=False,
        description="Write the exported name of each token to a custom property",
    )
    property_to_write_name_to: str = Field(
        default="", description="Custom property receiving the exported name"
    )
    folder_name_style: StringCase = Field(
        default=StringCase.KEBAB, description="Casing of color set folder names"
    )
    theme_folder_style: StringCase = Field(
        default=StringCase.PASCAL, description="Casing of theme namespace folders"
    )

    @field_validator("root_catalog_path")
    @classmethod
    def validate_root_catalog_path(cls, v: str) -> str:
        """Strip surrounding whitespace and slashes; empty falls back to the default."""
        cleaned = v.strip().strip("/")
        return cleaned or DEFAULT_ROOT_CATALOG_PATH

    @model_validator(mode="after")
    def validate_write_back(self) -> "ExporterConfiguration":
        if self.write_name_to_property and not self.property_to_write_name_to.strip():
            raise ValueError(
                "propertyToWriteNameTo is required when writeNameToProperty is enabled"
            )
        return self

    @property
    def root_path(self) -> str:
        """Catalog root used for every output path, empty when no root catalog is generated."""
        return self.root_catalog_path if self.generate_root_catalog else ""

    @property
    def excludes_collections(self) -> bool:
        return self.exclude_collections_in_pipelines and bool(self.excluded_collections)


def load_exporter_configuration(path: Optional[Path] = None) -> ExporterConfiguration:
    """
    Load exporter configuration from a JSON file, or defaults when no path is given.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If the options are invalid.
    """
    if path is None:
        return ExporterConfiguration()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        report_file_error(exception=e, file_path=str(path), operation="read")
        raise

    logger.debug(f"Loaded exporter configuration from {path}")
    return ExporterConfiguration.model_validate(data)


class Settings(BaseSettings):
    """Command line settings for one export run."""

    model_config = SettingsConfigDict(
        env_prefix="XCODE_COLOR_SETS_",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
        cli_parse_args=True,
        cli_prog_name="xcode-color-sets",
        cli_kebab_case=True,
        cli_implicit_flags=True,
    )

    snapshot: Optional[Path] = Field(
        default=None, description="Design system snapshot JSON to export from"
    )
    output: Path = Field(
        default=Path("."), description="Directory receiving the generated files"
    )
    config: Optional[Path] = Field(
        default=None, description="Exporter configuration JSON"
    )
    theme_ids: List[str] = Field(
        default_factory=list, description="Theme ids to apply (id or idInVersion)"
    )
    brand_id: Optional[str] = Field(
        default=None, description="Only export tokens of this brand"
    )
    preview: bool = Field(
        default=False, description="Preview run: skip property write-back"
    )
    properties_file: Optional[Path] = Field(
        default=None,
        description="JSON file receiving written token properties "
        f"(default: <output>/{DEFAULT_PROPERTIES_FILE_NAME})",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Log file path")
    debug: bool = Field(default=False, description="Enable debug logging")
    version: bool = Field(default=False, description="Show version and exit")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(LOG_LEVELS)}"
            )
        return level

    @field_validator("theme_ids", mode="before")
    @classmethod
    def validate_theme_ids(cls, v: Any) -> Any:
        """Accept a comma separated string in addition to a list."""
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @model_validator(mode="after")
    def apply_debug(self) -> "Settings":
        if self.debug:
            self.log_level = "DEBUG"
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Only explicit values and prefixed environment variables are used."""
        return init_settings, env_settings

    @classmethod
    def load(cls, argv: Optional[List[str]] = None) -> "Settings":
        """Parse settings from ``argv`` (defaults to ``sys.argv[1:]``)."""
        args = sys.argv[1:] if argv is None else argv
        return cls(_cli_parse_args=args)

    @property
    def resolved_properties_file(self) -> Path:
        return self.properties_file or self.output / DEFAULT_PROPERTIES_FILE_NAME
