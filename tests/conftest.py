# File: tests/conftest.py
# Contains pytest fixtures for building sample models and running the generator.

import asyncio
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from doctrine_generator.codegen.generator import generate
from doctrine_generator.config import GenerationOptions
from doctrine_generator.domain.models import (
    Association,
    AssociationEnd,
    Attribute,
    Class,
    Module,
    Package,
    Project,
)
from doctrine_generator.exceptions import FileSystemError


# --- In-memory filesystem collaborator ---
class RecordingFileSystem:
    """
    Records every directory and file request instead of touching the disk.

    Creating a directory whose last path component equals ``fail_on`` raises
    FileSystemError, after being recorded as attempted.
    """

    def __init__(self, fail_on: Optional[str] = None):
        self.fail_on = fail_on
        self.directories: List[Path] = []
        self.files: Dict[Path, str] = {}

    async def create_directory(self, path) -> None:
        path = Path(path)
        self.directories.append(path)
        if self.fail_on is not None and path.name == self.fail_on:
            raise FileSystemError(
                f"Could not create directory {path}",
                path=str(path),
                operation="create_directory",
            )

    async def write_file(self, path, text: str, overwrite: bool = True) -> None:
        self.files[Path(path)] = text

    def file_named(self, name: str) -> str:
        for path, text in self.files.items():
            if path.name == name:
                return text
        raise KeyError(name)


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture
def failing_fs_factory():
    """Returns a callable building a RecordingFileSystem failing on a directory name."""
    return lambda name: RecordingFileSystem(fail_on=name)


# --- Options ---
@pytest.fixture
def options() -> GenerationOptions:
    """Default options: annotation mapping, PHPDoc on, four space indentation."""
    return GenerationOptions()


# --- Sample model ---
@pytest.fixture
def shop_model() -> Dict[str, object]:
    """
    Project "acme" > Module "store" > Package "Shop" with:
      - Customer (email: string, unique)
      - Tag and Post joined by a many-to-many association
    Returns the interesting nodes by name.
    """
    project = Project(name="acme", author="Acme Team")
    module = project.add(Module(name="store"))
    package = module.add(Package(name="Shop"))

    customer = package.add(Class(name="Customer"))
    customer.add_attribute(Attribute(name="email", type="string", is_unique=True))

    tag = package.add(Class(name="Tag"))
    post = package.add(Class(name="Post"))
    post.add_attribute(Attribute(name="title", type="string"))
    package.add(Association(
        end1=AssociationEnd(reference=tag, multiplicity="*"),
        end2=AssociationEnd(reference=post, multiplicity="*"),
    ))

    return {
        "project": project,
        "module": module,
        "package": package,
        "customer": customer,
        "tag": tag,
        "post": post,
    }


# --- Fixture to Run the Code Generator ---
@pytest.fixture
def run_generation():
    """Runs the asynchronous generator to completion."""
    def _run(base, path, options, file_system=None):
        return asyncio.run(generate(base, path, options, file_system))

    return _run
