"""
Centralized constants for the Doctrine entity generator.

This module contains the default option values, multiplicity markers, PHP type
categories and the exact Doctrine annotation strings written into generated
entities.
"""

from typing import FrozenSet


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default generation option values."""

    BUNDLE_SUFFIX = "Bundle"
    ENTITY_FOLDER = "Entity"
    DEFAULT_PK = "id"
    UNKNOWN_TYPE = "void"
    MAPPING = "0"
    SETTER_CHAINING = False
    PHP_DOC = True
    USE_TAB = False
    INDENT_SPACES = 4


class MappingModes:
    """Supported persistence mapping modes."""

    ANNOTATIONS = "0"

    ALL = [ANNOTATIONS]


# =============================================================================
# OUTPUT CONVENTIONS
# =============================================================================

class OutputFormat:
    """Fixed pieces of every generated file."""

    NAMESPACE_SEPARATOR = "\\"
    FILE_EXTENSION = ".php"
    FILE_MARKER = "<?php\n"
    ORM_USE_DECLARATION = "use Doctrine\\ORM\\Mapping as ORM;\n"
    DEFAULT_INDENT = "    "
    TODO_BODY = "// TODO implement here"
    # Type used when a typed element has no resolvable type
    VOID_TYPE = "void"
    COLLECTION_MARKER = "[]"
    ANNOTATION_TYPE_STEREOTYPE = "annotationType"


class Multiplicity:
    """Multiplicity markers used for association classification."""

    ONE = "1"
    MANY = "*"

    # Multiplicities that turn a resolved type into a collection
    COLLECTION_FORMS: FrozenSet[str] = frozenset({"0..*", "1..*", "*"})


# =============================================================================
# DOCTRINE ANNOTATIONS
# =============================================================================

class OrmAnnotations:
    """Doctrine annotation templates."""

    ENTITY = "@ORM\\Entity"
    TABLE = "@ORM\\Table(name=\"{table}\")"
    ID = "@ORM\\Id"
    COLUMN = "@ORM\\Column({terms})"
    PK_COLUMN = "@ORM\\Column(type=\"integer\")"
    GENERATED_VALUE = "@ORM\\GeneratedValue(strategy=\"AUTO\")"

    MANY_TO_ONE = "@ManyToOne(targetEntity=\"{target}\", inversedBy=\"{inversed_by}\")"
    ONE_TO_MANY = "@OneToMany(targetEntity=\"{target}\", mappedBy=\"{mapped_by}\")"
    MANY_TO_MANY = "@ManyToMany(targetEntity=\"{target}\", inversedBy=\"{inversed_by}\")"
    ONE_TO_ONE = "@OneToOne(targetEntity=\"{target}\")"
    JOIN_COLUMN = "@JoinColumn(name=\"{column}_id\", referencedColumnName=\"{referenced}\")"
    JOIN_TABLE = "@JoinTable(name=\"{table}\")"


class ColumnTypes:
    """Doctrine column types that carry extra column directives."""

    STRING = "string"
    DECIMAL = "decimal"

    STRING_LENGTH = 255
    DECIMAL_SCALE = 2


class ReturnTypes:
    """Type categories used to default the return statement of stub bodies."""

    BOOLEAN: FrozenSet[str] = frozenset({"boolean", "bool"})
    INTEGRAL: FrozenSet[str] = frozenset({"int", "integer", "long", "short", "byte"})
    FLOATING: FrozenSet[str] = frozenset({"float", "double"})
    CHAR: FrozenSet[str] = frozenset({"char"})
    STRING: FrozenSet[str] = frozenset({"string"})
