"""
Doctrine entity generator.

Generates Doctrine 2 annotated PHP entities from a structural model of
projects, bundles, packages and classifiers.
"""

__version__ = "0.1.0"

from .codegen import generate, render
from .commands import handle_generate
from .config import GenerationOptions, load_options

__all__ = [
    'generate',
    'render',
    'handle_generate',
    'GenerationOptions',
    'load_options',
]
