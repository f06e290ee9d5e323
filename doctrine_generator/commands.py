"""
Generate command handler.

Resolves what the generation run needs (base model, destination folder,
options) and starts the walk. Hosts with a user interface pass asynchronous
pickers; without them a missing base or folder cancels the run.
"""

import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, Sequence, Union

from .colored_logging import log_highlight, log_section, log_success
from .codegen.generator import generate
from .config import GenerationOptions, load_options
from .domain.models import Element
from .exceptions import UserCancelledError
from .filesystem import FileSystem


logger = logging.getLogger(__name__)

FolderPicker = Callable[[], Awaitable[Sequence[Union[str, Path]]]]
ElementPicker = Callable[[], Awaitable[Optional[Element]]]

SUCCESS_MESSAGE = "Entities have been successfully generated."


async def _select_base(element_picker: Optional[ElementPicker]) -> Element:
    if element_picker is None:
        raise UserCancelledError("No base model selected")
    selected = await element_picker()
    if selected is None:
        raise UserCancelledError("No base model selected")
    return selected


async def _select_folder(folder_picker: Optional[FolderPicker]) -> Path:
    if folder_picker is None:
        raise UserCancelledError("No destination folder selected")
    folders = await folder_picker()
    if not folders:
        raise UserCancelledError("No destination folder selected")
    return Path(folders[0])


async def handle_generate(
    base: Optional[Element] = None,
    path: Optional[Union[str, Path]] = None,
    options: Optional[GenerationOptions] = None,
    file_system: Optional[FileSystem] = None,
    folder_picker: Optional[FolderPicker] = None,
    element_picker: Optional[ElementPicker] = None
) -> Path:
    """
    Generate entities for ``base`` into ``path`` and return the destination.

    Args:
        base: Model node to generate; asked from ``element_picker`` when missing
        path: Destination folder; the first folder from ``folder_picker`` when missing
        options: Generation options; loaded with ``load_options()`` when missing
        file_system: Filesystem collaborator (local disk by default)
        folder_picker: Awaitable returning candidate destination folders
        element_picker: Awaitable returning the base model

    Raises:
        UserCancelledError: when no base model or destination was chosen
        FileSystemError: when a directory or file could not be written
    """
    if options is None:
        options = load_options()

    try:
        if base is None:
            base = await _select_base(element_picker)
        destination = Path(path) if path else await _select_folder(folder_picker)
    except UserCancelledError as e:
        log_highlight(logger, f"Generation cancelled: {e.message}")
        raise

    log_section(logger, "Doctrine entity generation")
    await generate(base, destination, options, file_system)
    log_success(logger, SUCCESS_MESSAGE)
    return destination
