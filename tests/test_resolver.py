"""
Tests for namespace and type resolution.
"""

from unittest import TestCase

from doctrine_generator.codegen.resolver import (
    qualified_name,
    resolve_namespace,
    resolve_qualified_namespace,
    resolve_type,
)
from doctrine_generator.config import GenerationOptions
from doctrine_generator.domain.models import (
    AssociationEnd,
    Attribute,
    Class,
    Module,
    Package,
    Parameter,
    Project,
)


class TestResolveNamespace(TestCase):
    """Test cases for resolve_namespace"""

    def setUp(self):
        self.options = GenerationOptions()
        self.project = Project(name="my project")
        self.module = self.project.add(Module(name="store"))
        self.package = self.module.add(Package(name="shop"))
        self.customer = self.package.add(Class(name="Customer"))

    def test_full_chain(self):
        assert resolve_namespace(self.customer, self.options) == ["MyProject", "StoreBundle", "Shop"]

    def test_entry_point_does_not_matter(self):
        attribute = self.customer.add_attribute(Attribute(name="email"))
        assert resolve_namespace(self.package, self.options) == ["MyProject", "StoreBundle"]
        # The attribute stops at its owning class
        assert resolve_namespace(attribute, self.options) == []

    def test_bundle_suffix_is_configurable(self):
        options = GenerationOptions(bundle_suffix="Module")
        assert resolve_namespace(self.customer, options) == ["MyProject", "StoreModule", "Shop"]

    def test_nested_packages(self):
        inner = self.package.add(Package(name="billing"))
        invoice = inner.add(Class(name="Invoice"))
        assert resolve_namespace(invoice, self.options) == ["MyProject", "StoreBundle", "Shop", "Billing"]

    def test_nested_class_has_no_namespace(self):
        inner = self.customer.add(Class(name="Address"))
        assert resolve_namespace(inner, self.options) == []

    def test_orphan(self):
        assert resolve_namespace(Class(name="Loose"), self.options) == []

    def test_qualified_namespace(self):
        assert resolve_qualified_namespace(self.customer, self.options) == "MyProject\\StoreBundle\\Shop"

    def test_qualified_namespace_with_base(self):
        options = GenerationOptions(base_namespace="\\Vendor\\")
        assert resolve_qualified_namespace(self.customer, options) == "Vendor\\MyProject\\StoreBundle\\Shop"
        assert resolve_qualified_namespace(Class(name="Loose"), options) == "Vendor"

    def test_qualified_name(self):
        assert qualified_name(self.customer, self.options) == "\\MyProject\\StoreBundle\\Shop\\Customer"
        assert qualified_name(Class(name="Loose"), self.options) == "\\Loose"


class TestResolveType(TestCase):
    """Test cases for resolve_type"""

    def setUp(self):
        self.options = GenerationOptions()
        package = Package(name="shop")
        self.customer = package.add(Class(name="Customer"))

    def test_plain_type(self):
        assert resolve_type(Attribute(name="email", type="string"), self.options) == "string"

    def test_model_type_is_qualified(self):
        attribute = Attribute(name="owner", type=self.customer)
        assert resolve_type(attribute, self.options) == "\\Shop\\Customer"

    def test_missing_type_is_void(self):
        assert resolve_type(Attribute(name="x"), self.options) == "void"
        assert resolve_type(Attribute(name="x", type=Class(name="")), self.options) == "void"

    def test_collection_marker(self):
        for multiplicity in ("0..*", "1..*", "*", " * "):
            attribute = Attribute(name="tags", type="string", multiplicity=multiplicity)
            assert resolve_type(attribute, self.options) == "string[]"

    def test_other_multiplicities_have_no_marker(self):
        for multiplicity in ("1", "0..1", "2..*", ""):
            attribute = Attribute(name="tag", type="string", multiplicity=multiplicity)
            assert resolve_type(attribute, self.options) == "string"

    def test_void_never_gets_marker(self):
        assert resolve_type(Attribute(name="x", multiplicity="*"), self.options) == "void"

    def test_association_end(self):
        end = AssociationEnd(reference=self.customer, multiplicity="0..*")
        assert resolve_type(end, self.options) == "\\Shop\\Customer[]"
        assert resolve_type(AssociationEnd(), self.options) == "void"

    def test_parameter(self):
        assert resolve_type(Parameter(name="count", type="int"), self.options) == "int"
