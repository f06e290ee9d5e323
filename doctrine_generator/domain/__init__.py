"""
Domain module for the Doctrine entity generator.

This module contains the structural model read by the generator, the naming
transforms and the association classifier, kept apart from text emission and
filesystem concerns.
"""

from .models import (
    NodeKind,
    Visibility,
    Concurrency,
    ParameterDirection,
    Element,
    Feature,
    Project,
    Module,
    Package,
    Classifier,
    Class,
    Interface,
    Enumeration,
    EnumerationLiteral,
    AnnotationType,
    StructuralFeature,
    Attribute,
    Operation,
    Parameter,
    Relationship,
    Generalization,
    InterfaceRealization,
    Association,
    AssociationEnd,
    ModelRepository,
    CLASSIFIER_KINDS,
)

from .relationships import (
    AssociationClassifier,
    AssociationKind,
    AssociationMapping,
    MultiplicityClass,
    classify,
    classify_multiplicity,
)

from .naming import (
    to_snake_case,
    to_upper_camel_case,
    lower_first_letter,
    capitalize,
    pluralize,
)

__all__ = [
    # Core models
    'NodeKind',
    'Visibility',
    'Concurrency',
    'ParameterDirection',
    'Element',
    'Feature',
    'Project',
    'Module',
    'Package',
    'Classifier',
    'Class',
    'Interface',
    'Enumeration',
    'EnumerationLiteral',
    'AnnotationType',
    'StructuralFeature',
    'Attribute',
    'Operation',
    'Parameter',
    'Relationship',
    'Generalization',
    'InterfaceRealization',
    'Association',
    'AssociationEnd',
    'ModelRepository',
    'CLASSIFIER_KINDS',

    # Associations
    'AssociationClassifier',
    'AssociationKind',
    'AssociationMapping',
    'MultiplicityClass',
    'classify',
    'classify_multiplicity',

    # Naming
    'to_snake_case',
    'to_upper_camel_case',
    'lower_first_letter',
    'capitalize',
    'pluralize',
]
