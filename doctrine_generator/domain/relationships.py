"""
Association analysis domain logic for the Doctrine entity generator.

This module reduces association end multiplicities to one/many, classifies an
end pair into a Doctrine relationship kind and builds the annotations and
property name written on the owning class side.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..constants import Multiplicity, OrmAnnotations
from .models import Association, AssociationEnd, Element
from .naming import lower_first_letter, pluralize, to_snake_case


class MultiplicityClass(Enum):
    """Reduction of a multiplicity string by its trailing character."""

    ONE = "one"
    MANY = "many"


class AssociationKind(Enum):
    """Doctrine association kinds."""

    MANY_TO_ONE = "ManyToOne"
    ONE_TO_MANY = "OneToMany"
    MANY_TO_MANY = "ManyToMany"
    ONE_TO_ONE = "OneToOne"

    @property
    def is_to_many(self) -> bool:
        """True when the owning side holds a collection."""
        return self in (AssociationKind.ONE_TO_MANY, AssociationKind.MANY_TO_MANY)


_CLASSIFICATION_TABLE = {
    (MultiplicityClass.MANY, MultiplicityClass.ONE): AssociationKind.MANY_TO_ONE,
    (MultiplicityClass.ONE, MultiplicityClass.MANY): AssociationKind.ONE_TO_MANY,
    (MultiplicityClass.MANY, MultiplicityClass.MANY): AssociationKind.MANY_TO_MANY,
    (MultiplicityClass.ONE, MultiplicityClass.ONE): AssociationKind.ONE_TO_ONE,
}


def classify_multiplicity(multiplicity: Optional[str]) -> Optional[MultiplicityClass]:
    """
    Classify a multiplicity by its last character.

    Returns None for anything that ends neither in ``*`` nor in ``1``,
    including an empty multiplicity.
    """
    trailing = (multiplicity or "")[-1:]
    if trailing == Multiplicity.MANY:
        return MultiplicityClass.MANY
    if trailing == Multiplicity.ONE:
        return MultiplicityClass.ONE
    return None


def classify(source_end: AssociationEnd, target_end: AssociationEnd) -> AssociationKind:
    """
    Classify an association seen from ``source_end``.

    Unclassifiable multiplicities on either side default to one-to-one.
    """
    key = (
        classify_multiplicity(source_end.multiplicity),
        classify_multiplicity(target_end.multiplicity),
    )
    return _CLASSIFICATION_TABLE.get(key, AssociationKind.ONE_TO_ONE)


def _reference_name(end: AssociationEnd) -> str:
    return end.reference.name if end.reference is not None else ""


@dataclass
class AssociationMapping:
    """
    An association resolved for one owning class.

    ``source_end`` is the end attached to the owning class, ``target_end`` the
    other one; the generated property points at the target.
    """

    association: Association
    source_end: AssociationEnd
    target_end: AssociationEnd
    kind: AssociationKind

    @property
    def source_name(self) -> str:
        return _reference_name(self.source_end)

    @property
    def target_name(self) -> str:
        return _reference_name(self.target_end)

    @property
    def field_name(self) -> str:
        """Property name on the owning class, pluralized for collections."""
        name = lower_first_letter(self.target_name)
        if self.kind.is_to_many:
            return pluralize(name)
        return name

    def annotations(self, default_pk: str) -> List[str]:
        """Doctrine annotation lines for this side of the association."""
        target = self.target_name
        source = self.source_name

        if self.kind == AssociationKind.MANY_TO_ONE:
            return [
                OrmAnnotations.MANY_TO_ONE.format(
                    target=target, inversed_by=pluralize(source.lower())
                ),
                OrmAnnotations.JOIN_COLUMN.format(
                    column=to_snake_case(target), referenced=default_pk
                ),
            ]
        if self.kind == AssociationKind.ONE_TO_MANY:
            return [
                OrmAnnotations.ONE_TO_MANY.format(target=target, mapped_by=source.lower()),
            ]
        if self.kind == AssociationKind.MANY_TO_MANY:
            return [
                OrmAnnotations.MANY_TO_MANY.format(
                    target=target, inversed_by=pluralize(source.lower())
                ),
                OrmAnnotations.JOIN_TABLE.format(
                    table=f"{to_snake_case(source)}_{pluralize(target.lower())}"
                ),
            ]
        return [
            OrmAnnotations.ONE_TO_ONE.format(target=target),
            OrmAnnotations.JOIN_COLUMN.format(
                column=to_snake_case(target), referenced=default_pk
            ),
        ]


class AssociationClassifier:
    """
    Resolves associations for the class being generated.

    The owning side is picked by name: the end whose reference carries the
    class name becomes the source. When both ends reference classes with the
    same name (self associations, duplicate names in different packages) the
    first end wins.
    """

    def orient(
        self,
        association: Association,
        owner: Element
    ) -> Tuple[AssociationEnd, AssociationEnd]:
        """Return ``(source_end, target_end)`` for ``owner``."""
        if _reference_name(association.end1) == owner.name:
            return association.end1, association.end2
        return association.end2, association.end1

    def classify(self, source_end: AssociationEnd, target_end: AssociationEnd) -> AssociationKind:
        return classify(source_end, target_end)

    def resolve(self, association: Association, owner: Element) -> AssociationMapping:
        """Orient and classify ``association`` for ``owner``."""
        source_end, target_end = self.orient(association, owner)
        return AssociationMapping(
            association=association,
            source_end=source_end,
            target_end=target_end,
            kind=self.classify(source_end, target_end),
        )
