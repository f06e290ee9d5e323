"""
PHP type emitters.

One emission strategy per classifier kind (class, interface, enumeration,
annotation type), looked up through ``EmitterFactory``. Each strategy writes a
complete type unit into a CodeWriter, composing namespace and type resolution,
association classification and member synthesis. Nested definitions recurse
through the same factory.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional, Type

from ..config import GenerationOptions
from ..constants import OrmAnnotations, OutputFormat
from ..domain.models import (
    CLASSIFIER_KINDS,
    Association,
    Classifier,
    Element,
    Enumeration,
    NodeKind,
    ModelRepository,
)
from ..domain.naming import to_snake_case
from ..domain.relationships import AssociationClassifier
from .members import (
    declares_pk,
    get_class_modifiers,
    get_visibility,
    write_association,
    write_doc,
    write_member_variable,
    write_method,
    write_pk,
    write_pk_getter,
    write_setter_and_getter,
    write_super_class_stub,
)
from .resolver import SEPARATOR, resolve_qualified_namespace
from .writer import CodeWriter


logger = logging.getLogger(__name__)


@dataclass
class EmissionContext:
    """Everything an emitter reads besides the node itself."""

    options: GenerationOptions
    repository: ModelRepository
    classifier: AssociationClassifier = field(default_factory=AssociationClassifier)

    @property
    def author(self) -> str:
        """Author for doc blocks: the option wins over the project author."""
        if self.options.author:
            return self.options.author
        project = self.repository.project
        return project.author if project is not None else ""


# ---- Emission strategies ----

class TypeEmitter(ABC):
    """Abstract strategy writing one PHP type unit."""

    @abstractmethod
    def emit(self, writer: CodeWriter, node: Classifier, context: EmissionContext) -> None:
        """Write ``node`` into ``writer``."""
        pass

    def write_uses(self, writer: CodeWriter, node: Classifier, context: EmissionContext) -> None:
        """Lines between the namespace declaration and the type itself."""
        writer.write_line()


def write_nested_definitions(writer: CodeWriter, owner: Element, context: EmissionContext) -> None:
    """Emit every classifier owned by ``owner``, each followed by a blank line."""
    for definition in owner.owned_elements:
        if definition.kind not in CLASSIFIER_KINDS:
            continue
        EmitterFactory.create(definition.kind).emit(writer, definition, context)
        writer.write_line()


class ClassEmitter(TypeEmitter):
    """Entity class: mapped fields, associations, accessors and methods."""

    def write_uses(self, writer: CodeWriter, node: Classifier, context: EmissionContext) -> None:
        if context.options.mapping_enabled:
            writer.write_line(OutputFormat.ORM_USE_DECLARATION)

    def _doc(self, node: Classifier, context: EmissionContext) -> str:
        doc = resolve_qualified_namespace(node, context.options) + SEPARATOR + node.name
        if node.documentation:
            doc += "\n\n" + node.documentation.strip()
        if context.author:
            doc += "\n@author " + context.author
        if context.options.mapping_enabled:
            doc += "\n\n" + OrmAnnotations.ENTITY
            doc += "\n" + OrmAnnotations.TABLE.format(table=to_snake_case(node.name))
        return doc

    def emit(self, writer: CodeWriter, node: Classifier, context: EmissionContext) -> None:
        options = context.options
        repository = context.repository

        write_doc(writer, self._doc(node, context), options)

        terms = list(get_class_modifiers(node))
        terms += ["class", node.name]
        super_classes = repository.super_classes(node)
        super_class = super_classes[0] if super_classes else None
        if super_class is not None:
            terms.append("extends " + super_class.name)
        interfaces = repository.super_interfaces(node)
        if interfaces:
            terms.append("implements " + ", ".join(i.name for i in interfaces))
        writer.write_line(" ".join(terms))
        writer.write_line("{")
        writer.indent()

        write_pk(writer, node, options)
        writer.write_line()
        for attribute in node.attributes:
            if not attribute.name:
                continue
            write_member_variable(writer, attribute, options)
            writer.write_line()

        for association in repository.associations_of(node):
            write_association(writer, context.classifier.resolve(association, node), options)
            writer.write_line()

        if not declares_pk(node, options):
            write_pk_getter(writer, options.pk_name, options)
        for attribute in node.attributes:
            write_setter_and_getter(writer, attribute, options)

        for operation in node.operations:
            if not operation.name:
                continue
            write_method(writer, operation, options)
            writer.write_line()

        if isinstance(super_class, Classifier):
            for method in super_class.operations:
                if method.is_abstract and write_super_class_stub(writer, method, node, options):
                    writer.write_line()

        write_nested_definitions(writer, node, context)

        writer.outdent()
        writer.write_line("}")


class InterfaceEmitter(TypeEmitter):
    """Interface: constants, navigable association ends and method signatures."""

    def emit(self, writer: CodeWriter, node: Classifier, context: EmissionContext) -> None:
        options = context.options

        write_doc(writer, node.documentation, options)

        terms = []
        visibility = get_visibility(node)
        if visibility:
            terms.append(visibility)
        terms += ["interface", node.name]
        super_interfaces = context.repository.super_classes(node)
        if super_interfaces:
            terms.append("extends " + ", ".join(s.name for s in super_interfaces))
        writer.write_line(" ".join(terms) + " {")
        writer.write_line()
        writer.indent()

        for attribute in node.attributes:
            if not attribute.name:
                continue
            write_member_variable(writer, attribute, options)
            writer.write_line()

        for association in context.repository.associations_of(node):
            end = self._navigable_end(association, node)
            if end is not None and end.name:
                write_member_variable(writer, end, options)
                writer.write_line()

        for operation in node.operations:
            if not operation.name:
                continue
            write_method(writer, operation, options, skip_body=True)
            writer.write_line()

        write_nested_definitions(writer, node, context)

        writer.outdent()
        writer.write_line("}")

    @staticmethod
    def _navigable_end(association: Association, node: Classifier):
        """The opposite end when it is navigable from ``node``."""
        if association.end1.reference is node and association.end2.navigable:
            return association.end2
        if association.end2.reference is node and association.end1.navigable:
            return association.end1
        return None


class EnumerationEmitter(TypeEmitter):
    """Enumeration: a comma separated literal list."""

    def emit(self, writer: CodeWriter, node: Enumeration, context: EmissionContext) -> None:
        write_doc(writer, node.documentation, context.options)

        terms = []
        visibility = get_visibility(node)
        if visibility:
            terms.append(visibility)
        terms += ["enum", node.name]
        writer.write_line(" ".join(terms) + " {")
        writer.indent()

        literals = node.literals
        for index, literal in enumerate(literals):
            separator = "," if index < len(literals) - 1 else ""
            writer.write_line(literal.name + separator)

        writer.outdent()
        writer.write_line("}")


class AnnotationTypeEmitter(TypeEmitter):
    """Annotation type: attributes and bare method signatures."""

    def emit(self, writer: CodeWriter, node: Classifier, context: EmissionContext) -> None:
        options = context.options

        doc = node.documentation.strip()
        if context.author:
            doc += "\n@author " + context.author
        write_doc(writer, doc, options)

        terms = list(get_class_modifiers(node))
        terms += ["@interface", node.name]
        writer.write_line(" ".join(terms) + " {")
        writer.write_line()
        writer.indent()

        for attribute in node.attributes:
            if not attribute.name:
                continue
            write_member_variable(writer, attribute, options)
            writer.write_line()

        for operation in node.operations:
            if not operation.name:
                continue
            write_method(writer, operation, options, skip_body=True, skip_params=True)
            writer.write_line()

        write_nested_definitions(writer, node, context)

        writer.outdent()
        writer.write_line("}")


# Factory Pattern for looking up emitters by node kind
class EmitterFactory:
    """Factory for type emission strategies"""

    _registry: Dict[NodeKind, Type[TypeEmitter]] = {
        NodeKind.CLASS: ClassEmitter,
        NodeKind.INTERFACE: InterfaceEmitter,
        NodeKind.ENUMERATION: EnumerationEmitter,
        NodeKind.ANNOTATION_TYPE: AnnotationTypeEmitter,
    }

    @classmethod
    def register(cls, kind: NodeKind, emitter_class: Type[TypeEmitter]) -> None:
        """Register an emitter strategy for a node kind"""
        cls._registry[kind] = emitter_class

    @classmethod
    def create(cls, kind: NodeKind) -> TypeEmitter:
        """Create the emitter strategy for a node kind"""
        emitter_class = cls._registry.get(kind)
        if not emitter_class:
            raise ValueError(f"No emitter registered for node kind: {kind.value}")
        return emitter_class()

    @classmethod
    def supports(cls, kind: NodeKind) -> bool:
        return kind in cls._registry


def emit(
    node: Classifier,
    options: GenerationOptions,
    repository: Optional[ModelRepository] = None
) -> str:
    """
    Emit the PHP unit for ``node`` (without file preamble) and return it.

    The relationship index is built from the node's tree unless given.
    """
    context = EmissionContext(
        options=options,
        repository=repository or ModelRepository.for_element(node),
    )
    writer = CodeWriter(options.indent_string)
    EmitterFactory.create(node.kind).emit(writer, node, context)
    return writer.get_data()
