"""
Namespace and type resolution for generated PHP.

Namespaces come from the ownership chain: every project, module (bundle) and
package above an element contributes one segment. Types resolve to a
fully-qualified class name, a plain type name, or ``void``.
"""

from typing import List

from ..config import GenerationOptions
from ..constants import Multiplicity, OutputFormat
from ..domain.models import AssociationEnd, Element, Module, Package, Project
from ..domain.naming import to_upper_camel_case


SEPARATOR = OutputFormat.NAMESPACE_SEPARATOR


def _namespace_segment(node: Element, options: GenerationOptions):
    """Segment contributed by a container, or None for any other node."""
    if isinstance(node, Module):
        return to_upper_camel_case(node.name) + options.bundle_suffix
    if isinstance(node, (Project, Package)):
        return to_upper_camel_case(node.name)
    return None


def resolve_namespace(elem: Element, options: GenerationOptions) -> List[str]:
    """
    Namespace segments of ``elem`` from the root down to its parent.

    The walk stops at the first owner that is not a project, module or package,
    so types nested in other types get no namespace.
    """
    segments = []
    for ancestor in elem.ancestors():
        segment = _namespace_segment(ancestor, options)
        if segment is None:
            break
        segments.append(segment)
    segments.reverse()
    return segments


def resolve_qualified_namespace(elem: Element, options: GenerationOptions) -> str:
    """Namespace used in the ``namespace`` declaration, base namespace included."""
    namespace = SEPARATOR.join(resolve_namespace(elem, options))
    if options.base_namespace:
        if namespace:
            return options.base_namespace + SEPARATOR + namespace
        return options.base_namespace
    return namespace


def qualified_name(elem: Element, options: GenerationOptions) -> str:
    """Fully-qualified class name with a leading separator: ``\\Shop\\Customer``."""
    return SEPARATOR + SEPARATOR.join(resolve_namespace(elem, options) + [elem.name])


def _declared_type(elem, options: GenerationOptions) -> str:
    if isinstance(elem, AssociationEnd):
        reference = elem.reference
        if isinstance(reference, Element) and reference.name:
            return qualified_name(reference, options)
        return OutputFormat.VOID_TYPE

    declared = getattr(elem, "type", None)
    if isinstance(declared, Element) and declared.name:
        return qualified_name(declared, options)
    if isinstance(declared, str) and declared:
        return declared
    return OutputFormat.VOID_TYPE


def is_collection(multiplicity: str) -> bool:
    return bool(multiplicity) and multiplicity.strip() in Multiplicity.COLLECTION_FORMS


def resolve_type(elem, options: GenerationOptions) -> str:
    """
    Type expression of an attribute, parameter or association end.

    Model elements win over plain type names; many-valued multiplicities add
    the ``[]`` collection marker. Never raises: missing information yields
    ``void``.
    """
    resolved = _declared_type(elem, options)
    if resolved != OutputFormat.VOID_TYPE and is_collection(getattr(elem, "multiplicity", "")):
        resolved += OutputFormat.COLLECTION_MARKER
    return resolved
