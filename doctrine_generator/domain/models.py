"""
Core domain models for the Doctrine entity generator.

These dataclasses describe the structural model handed to the generator:
containers (project, module, package), classifiers (class, interface,
enumeration, annotation type), their features and the relationships between
them. The generator only reads them; building and mutating the model is the
job of whoever owns it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Iterator, List, Optional, Union

from ..constants import OutputFormat


class NodeKind(Enum):
    """Closed set of node kinds the generator dispatches on."""

    PROJECT = "project"
    MODULE = "module"
    PACKAGE = "package"
    CLASS = "class"
    INTERFACE = "interface"
    ENUMERATION = "enumeration"
    ANNOTATION_TYPE = "annotation_type"
    ATTRIBUTE = "attribute"
    OPERATION = "operation"
    PARAMETER = "parameter"
    ENUMERATION_LITERAL = "enumeration_literal"
    ASSOCIATION = "association"
    ASSOCIATION_END = "association_end"
    GENERALIZATION = "generalization"
    INTERFACE_REALIZATION = "interface_realization"


class Visibility(Enum):
    """Visibility of a model element."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    PACKAGE = "package"


class Concurrency(Enum):
    """Concurrency kind of a feature."""

    SEQUENTIAL = "sequential"
    GUARDED = "guarded"
    CONCURRENT = "concurrent"


class ParameterDirection(Enum):
    """Direction of an operation parameter."""

    IN = "in"
    INOUT = "inout"
    OUT = "out"
    RETURN = "return"


@dataclass(eq=False)
class Element:
    """
    Base node of the structural model.

    Ownership forms a tree: every child attached through ``add()`` (or passed
    in ``owned_elements``) records its owner as ``parent``. The back-reference
    is a plain relation, the owner keeps the child alive.
    """

    KIND: ClassVar[NodeKind]

    name: str = ""
    documentation: str = ""
    stereotype: Optional[str] = None
    owned_elements: List["Element"] = field(default_factory=list)
    _parent: Optional["Element"] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        for child in self.owned_elements:
            child._parent = self

    @property
    def kind(self) -> NodeKind:
        return self.KIND

    @property
    def parent(self) -> Optional["Element"]:
        return self._parent

    def add(self, child: "Element") -> "Element":
        """Attach ``child`` as the last owned element and return it."""
        child._parent = self
        self.owned_elements.append(child)
        return child

    def ancestors(self) -> Iterator["Element"]:
        """Yield owners from the immediate parent up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def root(self) -> "Element":
        """Return the topmost owner (the element itself when it has none)."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node


@dataclass(eq=False)
class Feature(Element):
    """Element carrying visibility and the static/abstract/leaf flags."""

    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    is_abstract: bool = False
    is_leaf: bool = False
    concurrency: Concurrency = Concurrency.SEQUENTIAL


# --- Containers ---


@dataclass(eq=False)
class Project(Element):
    KIND: ClassVar[NodeKind] = NodeKind.PROJECT

    author: str = ""


@dataclass(eq=False)
class Module(Element):
    """A top-level model, generated as a bundle."""

    KIND: ClassVar[NodeKind] = NodeKind.MODULE


@dataclass(eq=False)
class Package(Element):
    KIND: ClassVar[NodeKind] = NodeKind.PACKAGE


# --- Typed features ---

TypeReference = Union[str, Element, None]


@dataclass(eq=False)
class EnumerationLiteral(Element):
    KIND: ClassVar[NodeKind] = NodeKind.ENUMERATION_LITERAL


@dataclass(eq=False)
class StructuralFeature(Feature):
    """Attribute-like feature: something that becomes a PHP property."""

    type: TypeReference = None
    multiplicity: str = ""
    default_value: str = ""
    is_unique: bool = False
    is_id: bool = False


@dataclass(eq=False)
class Attribute(StructuralFeature):
    KIND: ClassVar[NodeKind] = NodeKind.ATTRIBUTE


@dataclass(eq=False)
class Parameter(Element):
    KIND: ClassVar[NodeKind] = NodeKind.PARAMETER

    type: TypeReference = None
    multiplicity: str = ""
    direction: ParameterDirection = ParameterDirection.IN


@dataclass(eq=False)
class Operation(Feature):
    KIND: ClassVar[NodeKind] = NodeKind.OPERATION

    parameters: List[Parameter] = field(default_factory=list)
    specification: str = ""

    def __post_init__(self):
        super().__post_init__()
        for parameter in self.parameters:
            parameter._parent = self

    def non_return_parameters(self) -> List[Parameter]:
        return [p for p in self.parameters if p.direction != ParameterDirection.RETURN]

    def return_parameter(self) -> Optional[Parameter]:
        for parameter in self.parameters:
            if parameter.direction == ParameterDirection.RETURN:
                return parameter
        return None


# --- Classifiers ---


@dataclass(eq=False)
class Classifier(Feature):
    """Element generated as a PHP type: it owns attributes and operations."""

    attributes: List[Attribute] = field(default_factory=list)
    operations: List[Operation] = field(default_factory=list)

    def __post_init__(self):
        super().__post_init__()
        for feature in [*self.attributes, *self.operations]:
            feature._parent = self

    def add_attribute(self, attribute: Attribute) -> Attribute:
        attribute._parent = self
        self.attributes.append(attribute)
        return attribute

    def add_operation(self, operation: Operation) -> Operation:
        operation._parent = self
        self.operations.append(operation)
        return operation


@dataclass(eq=False)
class Class(Classifier):
    KIND: ClassVar[NodeKind] = NodeKind.CLASS

    @property
    def kind(self) -> NodeKind:
        # Annotation types are modelled as stereotyped classes as well
        if self.stereotype == OutputFormat.ANNOTATION_TYPE_STEREOTYPE:
            return NodeKind.ANNOTATION_TYPE
        return NodeKind.CLASS


@dataclass(eq=False)
class Interface(Classifier):
    KIND: ClassVar[NodeKind] = NodeKind.INTERFACE


@dataclass(eq=False)
class AnnotationType(Classifier):
    KIND: ClassVar[NodeKind] = NodeKind.ANNOTATION_TYPE


@dataclass(eq=False)
class Enumeration(Classifier):
    KIND: ClassVar[NodeKind] = NodeKind.ENUMERATION

    literals: List[EnumerationLiteral] = field(default_factory=list)

    def __post_init__(self):
        super().__post_init__()
        for literal in self.literals:
            literal._parent = self


CLASSIFIER_KINDS = frozenset({
    NodeKind.CLASS,
    NodeKind.INTERFACE,
    NodeKind.ENUMERATION,
    NodeKind.ANNOTATION_TYPE,
})


# --- Relationships ---


@dataclass(eq=False)
class Relationship(Feature):
    """Graph edge between classifiers, owned somewhere in the tree."""


@dataclass(eq=False)
class Generalization(Relationship):
    """``source`` extends ``target``."""

    KIND: ClassVar[NodeKind] = NodeKind.GENERALIZATION

    source: Optional[Element] = None
    target: Optional[Element] = None


@dataclass(eq=False)
class InterfaceRealization(Relationship):
    """``source`` implements ``target``."""

    KIND: ClassVar[NodeKind] = NodeKind.INTERFACE_REALIZATION

    source: Optional[Element] = None
    target: Optional[Element] = None


@dataclass(eq=False)
class AssociationEnd(StructuralFeature):
    KIND: ClassVar[NodeKind] = NodeKind.ASSOCIATION_END

    reference: Optional[Element] = None
    navigable: bool = True


@dataclass(eq=False)
class Association(Relationship):
    KIND: ClassVar[NodeKind] = NodeKind.ASSOCIATION

    end1: AssociationEnd = field(default_factory=AssociationEnd)
    end2: AssociationEnd = field(default_factory=AssociationEnd)

    def __post_init__(self):
        super().__post_init__()
        self.end1._parent = self
        self.end2._parent = self

    def touches(self, elem: Element) -> bool:
        return self.end1.reference is elem or self.end2.reference is elem


# --- Relationship index ---


class ModelRepository:
    """
    Read-only index of the relationships reachable from a model root.

    Relationships are collected once, in declaration order (depth-first over
    owned elements), so every query is a filter over the same ordered list.
    """

    def __init__(self, root: Element):
        self.root = root
        self.relationships: List[Relationship] = list(self._collect_relationships(root))

    @classmethod
    def for_element(cls, elem: Element) -> "ModelRepository":
        """Build the index for the whole tree ``elem`` belongs to."""
        return cls(elem.root())

    @staticmethod
    def _collect_relationships(root: Element) -> Iterator[Relationship]:
        stack = [root]
        while stack:
            node = stack.pop()
            if isinstance(node, Relationship):
                yield node
            stack.extend(reversed(node.owned_elements))

    @property
    def project(self) -> Optional[Project]:
        return self.root if isinstance(self.root, Project) else None

    def relationships_of(
        self,
        elem: Element,
        predicate: Optional[Callable[[Relationship], bool]] = None
    ) -> List[Relationship]:
        """Return relationships touching ``elem`` that satisfy ``predicate``."""
        related = []
        for rel in self.relationships:
            if isinstance(rel, Association):
                touches = rel.touches(elem)
            else:
                touches = rel.source is elem or rel.target is elem
            if touches and (predicate is None or predicate(rel)):
                related.append(rel)
        return related

    def super_classes(self, elem: Element) -> List[Element]:
        generalizations = self.relationships_of(
            elem, lambda rel: isinstance(rel, Generalization) and rel.source is elem
        )
        return [gen.target for gen in generalizations if gen.target is not None]

    def super_interfaces(self, elem: Element) -> List[Element]:
        realizations = self.relationships_of(
            elem, lambda rel: isinstance(rel, InterfaceRealization) and rel.source is elem
        )
        return [rel.target for rel in realizations if rel.target is not None]

    def associations_of(self, elem: Element) -> List[Association]:
        return self.relationships_of(elem, lambda rel: isinstance(rel, Association))
