"""
Tests for association classification.
"""

from unittest import TestCase

from doctrine_generator.domain.models import Association, AssociationEnd, Class
from doctrine_generator.domain.relationships import (
    AssociationClassifier,
    AssociationKind,
    MultiplicityClass,
    classify,
    classify_multiplicity,
)


def _ends(source_multiplicity: str, target_multiplicity: str):
    return (
        AssociationEnd(reference=Class(name="Source"), multiplicity=source_multiplicity),
        AssociationEnd(reference=Class(name="Target"), multiplicity=target_multiplicity),
    )


class TestClassifyMultiplicity(TestCase):
    """Test cases for classify_multiplicity"""

    def test_trailing_star_is_many(self):
        assert classify_multiplicity("*") == MultiplicityClass.MANY
        assert classify_multiplicity("0..*") == MultiplicityClass.MANY
        assert classify_multiplicity("1..*") == MultiplicityClass.MANY

    def test_trailing_one_is_one(self):
        assert classify_multiplicity("1") == MultiplicityClass.ONE
        assert classify_multiplicity("0..1") == MultiplicityClass.ONE

    def test_other_forms_are_unclassified(self):
        assert classify_multiplicity("0..2") is None
        assert classify_multiplicity("") is None
        assert classify_multiplicity(None) is None
        assert classify_multiplicity("* ") is None
        assert classify_multiplicity("1 ") is None


class TestClassify(TestCase):
    """Test cases for the pair classification table"""

    def test_table(self):
        assert classify(*_ends("*", "1")) == AssociationKind.MANY_TO_ONE
        assert classify(*_ends("1", "*")) == AssociationKind.ONE_TO_MANY
        assert classify(*_ends("*", "*")) == AssociationKind.MANY_TO_MANY
        assert classify(*_ends("1", "1")) == AssociationKind.ONE_TO_ONE

    def test_unclassifiable_defaults_to_one_to_one(self):
        assert classify(*_ends("0..2", "*")) == AssociationKind.ONE_TO_ONE
        assert classify(*_ends("*", "")) == AssociationKind.ONE_TO_ONE
        assert classify(*_ends("* ", "1")) == AssociationKind.ONE_TO_ONE

    def test_swapping_roles(self):
        pairs = [("*", "1"), ("1", "*"), ("*", "*"), ("1", "1")]
        swapped = {
            AssociationKind.MANY_TO_ONE: AssociationKind.ONE_TO_MANY,
            AssociationKind.ONE_TO_MANY: AssociationKind.MANY_TO_ONE,
            AssociationKind.MANY_TO_MANY: AssociationKind.MANY_TO_MANY,
            AssociationKind.ONE_TO_ONE: AssociationKind.ONE_TO_ONE,
        }
        for source, target in pairs:
            source_end, target_end = _ends(source, target)
            assert classify(target_end, source_end) == swapped[classify(source_end, target_end)]


class TestAssociationClassifier(TestCase):
    """Test cases for orienting and mapping associations"""

    def setUp(self):
        self.tag = Class(name="Tag")
        self.post = Class(name="Post")
        self.classifier = AssociationClassifier()

    def _association(self, tag_multiplicity: str, post_multiplicity: str) -> Association:
        return Association(
            end1=AssociationEnd(reference=self.tag, multiplicity=tag_multiplicity),
            end2=AssociationEnd(reference=self.post, multiplicity=post_multiplicity),
        )

    def test_orient_picks_end_named_after_owner(self):
        association = self._association("*", "*")
        source, target = self.classifier.orient(association, self.post)
        assert source is association.end2
        assert target is association.end1

    def test_many_to_many_from_post_side(self):
        mapping = self.classifier.resolve(self._association("*", "*"), self.post)
        assert mapping.kind == AssociationKind.MANY_TO_MANY
        assert mapping.field_name == "tags"
        assert mapping.annotations("id") == [
            '@ManyToMany(targetEntity="Tag", inversedBy="posts")',
            '@JoinTable(name="post_tags")',
        ]

    def test_many_to_one(self):
        # Many posts for one tag, seen from the post
        mapping = self.classifier.resolve(self._association("1", "*"), self.post)
        assert mapping.kind == AssociationKind.MANY_TO_ONE
        assert mapping.field_name == "tag"
        assert mapping.annotations("id") == [
            '@ManyToOne(targetEntity="Tag", inversedBy="posts")',
            '@JoinColumn(name="tag_id", referencedColumnName="id")',
        ]

    def test_one_to_many(self):
        mapping = self.classifier.resolve(self._association("*", "1"), self.post)
        assert mapping.kind == AssociationKind.ONE_TO_MANY
        assert mapping.field_name == "tags"
        assert mapping.annotations("id") == [
            '@OneToMany(targetEntity="Tag", mappedBy="post")',
        ]

    def test_one_to_one_uses_configured_pk(self):
        mapping = self.classifier.resolve(self._association("1", "1"), self.post)
        assert mapping.kind == AssociationKind.ONE_TO_ONE
        assert mapping.field_name == "tag"
        assert mapping.annotations("uid") == [
            '@OneToOne(targetEntity="Tag")',
            '@JoinColumn(name="tag_id", referencedColumnName="uid")',
        ]

    def test_multi_word_names(self):
        order = Class(name="Order")
        line = Class(name="OrderLine")
        association = Association(
            end1=AssociationEnd(reference=line, multiplicity="*"),
            end2=AssociationEnd(reference=order, multiplicity="*"),
        )
        mapping = self.classifier.resolve(association, order)
        assert mapping.field_name.startswith("orderLine")
        assert mapping.annotations("id")[1] == '@JoinTable(name="order_orderlines")'
