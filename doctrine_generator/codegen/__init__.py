"""
Code generation module for the Doctrine entity generator.

Turns the structural model into PHP text: namespace and type resolution,
member and accessor synthesis, one emitter per classifier kind and the tree
walker that writes directories and files.
"""

from .writer import CodeWriter
from .resolver import (
    resolve_namespace,
    resolve_qualified_namespace,
    qualified_name,
    resolve_type,
)
from .emitters import (
    EmissionContext,
    EmitterFactory,
    TypeEmitter,
    emit,
)
from .generator import (
    DoctrineCodeGenerator,
    directory_name,
    generate,
    render,
)

__all__ = [
    'CodeWriter',

    # Resolution
    'resolve_namespace',
    'resolve_qualified_namespace',
    'qualified_name',
    'resolve_type',

    # Emission
    'EmissionContext',
    'EmitterFactory',
    'TypeEmitter',
    'emit',

    # Tree walker
    'DoctrineCodeGenerator',
    'directory_name',
    'generate',
    'render',
]
