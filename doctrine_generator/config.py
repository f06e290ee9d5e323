import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .constants import DefaultConfig, MappingModes, OutputFormat
from .exceptions import ConfigurationError, raise_configuration_error


logger = logging.getLogger(__name__)


# --- Preference descriptions (what a host application shows to users) ---

PREFERENCE_SCHEMA: Dict[str, Dict[str, Any]] = {
    "bundleSuffix": {
        "text": "Bundle suffix",
        "description": "Suffix appended at the end of package name.",
        "type": "String",
        "default": DefaultConfig.BUNDLE_SUFFIX,
    },
    "entityFolder": {
        "text": "Entity directory",
        "description": "Will be added to the path of generated files.",
        "type": "String",
        "default": DefaultConfig.ENTITY_FOLDER,
    },
    "defaultPk": {
        "text": "Default PK",
        "description": "Default primary key for entities.",
        "type": "String",
        "default": DefaultConfig.DEFAULT_PK,
    },
    "unknownType": {
        "text": "Unknown type",
        "description": "Will be used for unknown variable type.",
        "type": "String",
        "default": DefaultConfig.UNKNOWN_TYPE,
    },
    "mapping": {
        "text": "Mapping",
        "description": "Type of mapping.",
        "type": "Dropdown",
        "options": [{"text": "Annotations", "value": MappingModes.ANNOTATIONS}],
        "default": DefaultConfig.MAPPING,
    },
    "setterChaining": {
        "text": "Setters chaining",
        "description": "Make setters return $this.",
        "type": "Check",
        "default": DefaultConfig.SETTER_CHAINING,
    },
    "phpDoc": {
        "text": "PHPDoc",
        "description": "Generate PHPDoc comments.",
        "type": "Check",
        "default": DefaultConfig.PHP_DOC,
    },
    "useTab": {
        "text": "Use Tab",
        "description": "Use Tab for indentation instead of spaces.",
        "type": "Check",
        "default": DefaultConfig.USE_TAB,
    },
    "indentSpaces": {
        "text": "Indent Spaces",
        "description": "Number of spaces for indentation.",
        "type": "Number",
        "default": DefaultConfig.INDENT_SPACES,
    },
}


class GenerationOptions(BaseModel):
    """
    Options resolved once per generation run.

    Fields accept their snake_case names as well as the camelCase preference
    keys (``bundleSuffix``, ``defaultPk``, ...).
    """

    bundle_suffix: str = Field(
        DefaultConfig.BUNDLE_SUFFIX,
        alias="bundleSuffix",
        description="Suffix appended to module (bundle) directory and namespace names.",
    )
    entity_folder: str = Field(
        DefaultConfig.ENTITY_FOLDER,
        alias="entityFolder",
        description="Sub-directory of every bundle receiving the generated entities.",
    )
    default_pk: str = Field(
        DefaultConfig.DEFAULT_PK,
        alias="defaultPk",
        description="Name of the primary key synthesized on every entity.",
    )
    unknown_type: str = Field(
        DefaultConfig.UNKNOWN_TYPE,
        alias="unknownType",
        description="Column type used for attributes without a type.",
    )
    mapping: Optional[str] = Field(
        DefaultConfig.MAPPING,
        description="Persistence mapping mode ('0' = annotations, None = no mapping).",
    )
    setter_chaining: bool = Field(
        DefaultConfig.SETTER_CHAINING,
        alias="setterChaining",
        description="Reserved: make setters return $this.",
    )
    php_doc: bool = Field(
        DefaultConfig.PHP_DOC,
        alias="phpDoc",
        description="Generate PHPDoc comments (and the annotations they carry).",
    )
    use_tab: bool = Field(
        DefaultConfig.USE_TAB,
        alias="useTab",
        description="Indent with a tab instead of spaces.",
    )
    indent_spaces: int = Field(
        DefaultConfig.INDENT_SPACES,
        ge=0,
        alias="indentSpaces",
        description="Number of spaces per indentation level.",
    )
    base_namespace: Optional[str] = Field(
        None,
        alias="baseNamespace",
        description="Namespace prepended to every generated namespace declaration.",
    )
    author: Optional[str] = Field(
        None,
        description="Author written in class doc blocks; defaults to the project author.",
    )

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("mapping", mode="before")
    @classmethod
    def normalize_mapping(cls, v):
        """Accept the dropdown value as int or string; empty disables mapping."""
        if v is None or v == "":
            return None
        value = str(v)
        if value not in MappingModes.ALL:
            raise ValueError(
                f"Unsupported mapping '{v}'. Supported mappings: {', '.join(MappingModes.ALL)}"
            )
        return value

    @field_validator("base_namespace", mode="before")
    @classmethod
    def strip_namespace_separators(cls, v):
        """Drop leading/trailing separators so it can be joined safely."""
        if v is None:
            return None
        value = str(v).strip().strip(OutputFormat.NAMESPACE_SEPARATOR)
        return value or None

    @property
    def mapping_enabled(self) -> bool:
        return self.mapping == MappingModes.ANNOTATIONS

    @property
    def pk_name(self) -> str:
        """Primary key name used for the getter, even without a configured PK."""
        return self.default_pk or DefaultConfig.DEFAULT_PK

    @property
    def indent_string(self) -> str:
        if self.use_tab:
            return "\t"
        return " " * self.indent_spaces


def _normalize_keys(raw_options: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase preference keys onto field names so later values override earlier ones."""
    aliases = {
        field_info.alias: name
        for name, field_info in GenerationOptions.model_fields.items()
        if field_info.alias
    }
    return {aliases.get(key, key): value for key, value in raw_options.items()}


def validate_options(raw_options: Dict[str, Any], config_file: Optional[str] = None) -> GenerationOptions:
    """
    Validates a raw option dictionary against GenerationOptions.

    Raises ConfigurationError listing every invalid field.
    """
    try:
        options = GenerationOptions.model_validate(raw_options)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error.get("loc", ())) or "Model Level"
            errors.append(f"{loc}: {error.get('msg', 'Unknown validation error')}")
        logger.error("Generation options validation failed.")
        raise ConfigurationError(
            "Invalid generation options",
            config_file=config_file,
            context={"errors": errors},
        ) from e
    logger.debug("Generation options parsed and validated successfully.")
    return options


def _read_yaml_options(config_path: Path) -> Dict[str, Any]:
    """Read the option mapping from a YAML file (optionally under ``doctrine.gen``)."""
    if not config_path.is_file():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            config_file=str(config_path),
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML configuration: {e}",
            config_file=str(config_path),
        ) from e

    if data is None:
        logger.warning(f"Config file {config_path} is empty. Using default options.")
        return {}
    if not isinstance(data, dict):
        raise_configuration_error(
            "Configuration file must contain a mapping",
            config_file=str(config_path),
            context={"loaded_type": type(data).__name__},
        )

    section = data.get("doctrine")
    if isinstance(section, dict):
        data = section.get("gen", section)
        if not isinstance(data, dict):
            raise_configuration_error(
                "The 'doctrine.gen' section must be a mapping",
                config_file=str(config_path),
            )
    return data


def load_options(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> GenerationOptions:
    """
    Loads generation options from a YAML file, merges explicit overrides
    and returns the validated, immutable options.
    """
    raw_options: Dict[str, Any] = {}
    config_file = None

    if config_path:
        config_file = str(config_path)
        raw_options.update(_normalize_keys(_read_yaml_options(Path(config_path))))
        logger.debug(f"Loaded configuration from {config_path}")

    if overrides:
        applied = {
            key: value for key, value in _normalize_keys(overrides).items() if value is not None
        }
        raw_options.update(applied)
        if applied:
            logger.debug(f"Overridden option keys: {set(applied)}")

    return validate_options(raw_options, config_file=config_file)
