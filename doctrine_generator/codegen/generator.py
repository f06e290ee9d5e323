"""
Tree walker for Doctrine entity generation.

Containers (project, module, package) become directories, classifiers become
one ``<Name>.php`` file each. Children are generated one after the other in
declaration order; the first failure stops the walk and propagates.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..colored_logging import log_progress
from ..config import GenerationOptions
from ..constants import OutputFormat
from ..domain.models import Element, Module, ModelRepository, NodeKind
from ..domain.naming import to_upper_camel_case
from ..filesystem import FileSystem, LocalFileSystem
from .emitters import EmissionContext, EmitterFactory
from .resolver import resolve_qualified_namespace
from .writer import CodeWriter


logger = logging.getLogger(__name__)

CONTAINER_KINDS = frozenset({NodeKind.PROJECT, NodeKind.MODULE, NodeKind.PACKAGE})


def directory_name(elem: Element, options: GenerationOptions) -> Path:
    """Relative directory a container generates its children into."""
    name = to_upper_camel_case(elem.name)
    if isinstance(elem, Module):
        directory = Path(name + options.bundle_suffix)
        if options.entity_folder:
            directory = directory / options.entity_folder
        return directory
    return Path(name)


class DoctrineCodeGenerator:
    """
    Walks a model tree and writes one PHP file per classifier.

    The relationship index and emission context are built once per run from
    the tree ``base_model`` belongs to.
    """

    def __init__(
        self,
        base_model: Element,
        base_path: Union[str, Path],
        options: GenerationOptions,
        file_system: Optional[FileSystem] = None
    ):
        self.base_model = base_model
        self.base_path = Path(base_path)
        self.options = options
        self.file_system = file_system or LocalFileSystem()
        self.context = EmissionContext(
            options=options,
            repository=ModelRepository.for_element(base_model),
        )

    async def run(self) -> None:
        """Generate ``base_model`` into ``base_path``."""
        await self.generate(self.base_model, self.base_path)

    async def generate(self, elem: Element, path: Path) -> None:
        kind = elem.kind
        if kind in CONTAINER_KINDS:
            await self._generate_container(elem, path)
        elif EmitterFactory.supports(kind):
            await self._generate_file(elem, path)
        else:
            logger.debug(f"Skipping {kind.value} '{elem.name}': nothing to generate")

    async def _generate_container(self, elem: Element, path: Path) -> None:
        directory = path / directory_name(elem, self.options)
        log_progress(logger, f"Generating {elem.kind.value} '{elem.name}' into {directory}")
        try:
            await self.file_system.create_directory(directory)
        except Exception as e:
            logger.error(f"Error creating directory '{directory}': {e}")
            raise

        for child in elem.owned_elements:
            await self.generate(child, directory)

    async def _generate_file(self, elem: Element, path: Path) -> None:
        file_path = path / (elem.name + OutputFormat.FILE_EXTENSION)
        code = self.render(elem)
        try:
            await self.file_system.write_file(file_path, code, True)
        except Exception as e:
            logger.error(f"Error generating file '{file_path}': {e}")
            raise
        logger.info(f"Generated file: {file_path}")

    def render(self, elem: Element) -> str:
        """Full file contents for a classifier: marker, namespace, uses and the type."""
        writer = CodeWriter(self.options.indent_string)
        writer.write_line(OutputFormat.FILE_MARKER)

        namespace = resolve_qualified_namespace(elem, self.options)
        if namespace:
            writer.write_line(f"namespace {namespace};\n")

        emitter = EmitterFactory.create(elem.kind)
        emitter.write_uses(writer, elem, self.context)
        emitter.emit(writer, elem, self.context)
        return writer.get_data()


async def generate(
    base_model: Element,
    base_path: Union[str, Path],
    options: GenerationOptions,
    file_system: Optional[FileSystem] = None
) -> None:
    """Generate ``base_model`` (any node of the tree) under ``base_path``."""
    await DoctrineCodeGenerator(base_model, base_path, options, file_system).run()


def render(elem: Element, options: GenerationOptions) -> str:
    """Return the file ``elem`` would be written as, without touching the filesystem."""
    return DoctrineCodeGenerator(elem, ".", options).render(elem)
