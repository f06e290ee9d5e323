"""
Member and accessor synthesis.

Helpers writing the pieces of a PHP type body into a CodeWriter: doc blocks,
the synthesized primary key, member variables with their Doctrine column
mapping, association fields, accessors and methods.
"""

import logging
from typing import List, Optional

from ..config import GenerationOptions
from ..constants import ColumnTypes, OrmAnnotations, OutputFormat, ReturnTypes
from ..domain.models import (
    Classifier,
    Concurrency,
    Element,
    Feature,
    Operation,
    StructuralFeature,
    Visibility,
)
from ..domain.naming import capitalize
from ..domain.relationships import AssociationMapping
from .resolver import resolve_type
from .writer import CodeWriter


logger = logging.getLogger(__name__)


# --- Doc blocks ---


def write_doc(writer: CodeWriter, text: Optional[str], options: GenerationOptions) -> None:
    """Write ``text`` as a ``/** ... */`` block when PHPDoc is enabled."""
    if not options.php_doc or text is None:
        return
    writer.write_line("/**")
    for line in text.strip().split("\n"):
        writer.write_line(" * " + line)
    writer.write_line(" */")


def write_specification(writer: CodeWriter, text: str) -> None:
    """Write a literal method body, one model line per output line."""
    for line in text.strip().split("\n"):
        writer.write_line(line)


# --- Modifiers ---


def get_visibility(elem) -> Optional[str]:
    """PHP visibility keyword; package visibility has none."""
    visibility = getattr(elem, "visibility", None)
    if visibility is None or visibility == Visibility.PACKAGE:
        return None
    return visibility.value


def get_class_modifiers(elem: Feature) -> List[str]:
    """Modifiers that do not depend on visibility (used for class headers)."""
    modifiers = []
    if elem.is_static:
        modifiers.append("static")
    if elem.is_abstract:
        modifiers.append("abstract")
    if elem.is_leaf:
        modifiers.append("final")
    if elem.concurrency == Concurrency.CONCURRENT:
        modifiers.append("synchronized")
    return modifiers


def get_modifiers(elem: Feature) -> List[str]:
    """Visibility followed by the class modifiers, without duplicates."""
    modifiers = []
    visibility = get_visibility(elem)
    if visibility:
        modifiers.append(visibility)
    modifiers.extend(get_class_modifiers(elem))
    return list(dict.fromkeys(modifiers))


def _type_label(elem) -> str:
    """Declared type as written in column mappings and accessor docs."""
    declared = getattr(elem, "type", None)
    if isinstance(declared, Element):
        return declared.name
    return declared or ""


# --- Primary key ---


def declares_pk(classifier: Classifier, options: GenerationOptions) -> bool:
    """True when a declared attribute already carries the primary key name."""
    return any(attribute.name == options.pk_name for attribute in classifier.attributes)


def write_pk(writer: CodeWriter, classifier: Classifier, options: GenerationOptions) -> None:
    """Synthesized primary key field, written only with annotation mapping and a configured PK."""
    if not (options.default_pk and options.mapping_enabled):
        return
    if declares_pk(classifier, options):
        logger.debug(
            f"Skipping synthesized primary key on {classifier.name}: "
            f"attribute '{options.pk_name}' is declared"
        )
        return

    doc = "\n".join([OrmAnnotations.ID, OrmAnnotations.PK_COLUMN, OrmAnnotations.GENERATED_VALUE])
    write_doc(writer, doc, options)
    writer.write_line(f"protected ${options.default_pk};")


def write_pk_getter(writer: CodeWriter, pk_name: str, options: GenerationOptions) -> None:
    write_doc(writer, f"Get {pk_name}\n\n@return integer", options)
    writer.write_line(f"public function get{capitalize(pk_name)}()")
    writer.write_line("{")
    writer.indent()
    writer.write_line(f"return $this->{pk_name};")
    writer.outdent()
    writer.write_line("}")
    writer.write_line()


# --- Member variables ---


def _column_terms(elem: StructuralFeature, options: GenerationOptions) -> List[str]:
    declared = _type_label(elem)
    terms = [f'name="{elem.name}"', f'type="{declared or options.unknown_type}"']
    if declared == ColumnTypes.STRING:
        terms.append(f"length={ColumnTypes.STRING_LENGTH}")
    if declared == ColumnTypes.DECIMAL:
        terms.append(f"scale={ColumnTypes.DECIMAL_SCALE}")
    if elem.is_unique:
        terms.append('unique="true"')
    return terms


def write_member_variable(writer: CodeWriter, elem: StructuralFeature, options: GenerationOptions) -> None:
    """
    Field declaration for an attribute or association end.

    The doc block carries ``@var`` and, with annotation mapping, the column
    descriptor (plus identity directives for id attributes). Leaf attributes
    become class constants. Nameless elements are skipped.
    """
    if not elem.name:
        return

    doc = f"@var {resolve_type(elem, options)} {elem.documentation.strip()}"
    if options.mapping_enabled:
        doc += "\n\n" + OrmAnnotations.COLUMN.format(terms=", ".join(_column_terms(elem, options)))
        if elem.is_id:
            doc += "\n" + OrmAnnotations.ID
            doc += "\n" + OrmAnnotations.GENERATED_VALUE
    write_doc(writer, doc, options)

    terms = []
    if elem.is_leaf:
        terms.append("const " + elem.name.upper())
    else:
        modifiers = get_modifiers(elem)
        if modifiers:
            terms.append(" ".join(modifiers))
        terms.append("$" + elem.name)
    if elem.default_value:
        terms.append("= " + elem.default_value)
    writer.write_line(" ".join(terms) + ";")


def write_association(writer: CodeWriter, mapping: AssociationMapping, options: GenerationOptions) -> None:
    """Field pointing at the other end of an association, with its Doctrine annotations."""
    if options.mapping_enabled:
        write_doc(writer, "\n".join(mapping.annotations(options.default_pk)), options)

    terms = []
    modifiers = get_modifiers(mapping.association)
    if modifiers:
        terms.append(" ".join(modifiers))
    terms.append("$" + mapping.field_name)
    writer.write_line(" ".join(terms) + ";")


# --- Accessors ---


def write_setter_and_getter(writer: CodeWriter, elem: StructuralFeature, options: GenerationOptions) -> None:
    if not elem.name:
        return

    declared = _type_label(elem) or "type"
    documentation = elem.documentation.strip()

    write_doc(writer, f"Set {elem.name}\n\n@param {declared} {elem.name} {documentation}", options)
    writer.write_line(f"public function set{capitalize(elem.name)}(${elem.name})")
    writer.write_line("{")
    writer.indent()
    writer.write_line(f"$this->{elem.name} = ${elem.name};")
    writer.outdent()
    writer.write_line("}")
    writer.write_line()

    write_doc(writer, f"Get {elem.name}\n\n@return {declared} {documentation}", options)
    writer.write_line(f"public function get{capitalize(elem.name)}()")
    writer.write_line("{")
    writer.indent()
    writer.write_line(f"return $this->{elem.name};")
    writer.outdent()
    writer.write_line("}")
    writer.write_line()


# --- Methods ---


def default_return_statement(return_type: str) -> str:
    """Placeholder return for a stubbed body, picked by return type category."""
    if return_type in ReturnTypes.BOOLEAN:
        return "return false;"
    if return_type in ReturnTypes.INTEGRAL:
        return "return 0;"
    if return_type in ReturnTypes.FLOATING:
        return "return 0.0;"
    if return_type in ReturnTypes.CHAR:
        return "return '0';"
    if return_type in ReturnTypes.STRING:
        return 'return "";'
    return "return null;"


def _method_doc(operation: Operation, options: GenerationOptions, param_prefix: str = "$") -> str:
    doc = operation.documentation.strip()
    for param in operation.non_return_parameters():
        doc += f"\n@param {resolve_type(param, options)} {param_prefix}{param.name} {param.documentation}"
    return_param = operation.return_parameter()
    if return_param is not None:
        doc += f"\n@return {resolve_type(return_param, options)} {return_param.documentation}"
    return doc


def _signature(operation: Operation, skip_params: bool) -> str:
    params = [] if skip_params else ["$" + p.name for p in operation.non_return_parameters()]
    return f"{operation.name}({', '.join(params)})"


def write_method(
    writer: CodeWriter,
    operation: Operation,
    options: GenerationOptions,
    skip_body: bool = False,
    skip_params: bool = False
) -> None:
    """
    Method declaration for an operation.

    Abstract operations and ``skip_body`` produce a signature terminated by
    ``;``. Otherwise the body is the operation specification, or a TODO stub
    returning a default value for the declared return type.
    """
    if not operation.name:
        return

    write_doc(writer, _method_doc(operation, options), options)

    modifiers = get_modifiers(operation)
    terms = []
    if modifiers:
        terms.append(" ".join(modifiers))
    terms.append("function")
    terms.append(_signature(operation, skip_params))

    if skip_body or "abstract" in modifiers:
        writer.write_line(" ".join(terms) + ";")
        return

    writer.write_line(" ".join(terms) + " {")
    writer.indent()
    if operation.specification:
        write_specification(writer, operation.specification)
    else:
        writer.write_line(OutputFormat.TODO_BODY)
        return_param = operation.return_parameter()
        if return_param is not None:
            writer.write_line(default_return_statement(resolve_type(return_param, options)))
    writer.outdent()
    writer.write_line("}")


def write_super_class_stub(
    writer: CodeWriter,
    method: Operation,
    owner: Classifier,
    options: GenerationOptions
) -> bool:
    """
    Implementation stub for an abstract superclass method.

    Nothing is written when ``owner`` declares an operation with the same
    name. Returns whether a stub was written.
    """
    if not method.name or any(op.name == method.name for op in owner.operations):
        return False

    write_doc(writer, _method_doc(method, options, param_prefix=""), options)

    terms = []
    visibility = get_visibility(method)
    if visibility:
        terms.append(visibility)
    terms.append("function")
    terms.append(_signature(method, skip_params=False))

    writer.write_line(" ".join(terms) + " {")
    writer.indent()
    writer.write_line(OutputFormat.TODO_BODY)
    writer.outdent()
    writer.write_line("}")
    return True
