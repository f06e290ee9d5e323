# File: tests/test_commands.py
# Contains tests for the generate command handler.

import asyncio
import logging

import pytest

from doctrine_generator.commands import SUCCESS_MESSAGE, handle_generate
from doctrine_generator.exceptions import UserCancelledError


def _picker(result):
    async def pick():
        return result
    return pick


def test_generate_with_explicit_path(shop_model, options, recording_fs, tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="doctrine_generator"):
        destination = asyncio.run(
            handle_generate(shop_model["project"], tmp_path, options, file_system=recording_fs)
        )

    assert destination == tmp_path
    assert recording_fs.directories[0] == tmp_path / "Acme"
    assert any(SUCCESS_MESSAGE in message for message in caplog.messages)


def test_folder_picker_first_folder_wins(shop_model, options, recording_fs, tmp_path):
    picker = _picker([tmp_path / "a", tmp_path / "b"])
    destination = asyncio.run(
        handle_generate(shop_model["package"], options=options, file_system=recording_fs, folder_picker=picker)
    )

    assert destination == tmp_path / "a"
    assert recording_fs.directories == [tmp_path / "a" / "Shop"]


def test_empty_folder_selection_cancels(shop_model, options, recording_fs):
    with pytest.raises(UserCancelledError) as exc_info:
        asyncio.run(handle_generate(
            shop_model["project"], options=options, file_system=recording_fs, folder_picker=_picker([])
        ))
    assert exc_info.value.error_code == "USER_CANCELED"
    assert recording_fs.directories == []


def test_missing_folder_without_picker_cancels(shop_model, options, recording_fs):
    with pytest.raises(UserCancelledError):
        asyncio.run(handle_generate(shop_model["project"], options=options, file_system=recording_fs))


def test_missing_base_model(options, recording_fs, tmp_path, shop_model):
    with pytest.raises(UserCancelledError):
        asyncio.run(handle_generate(None, tmp_path, options, file_system=recording_fs))

    asyncio.run(handle_generate(
        None, tmp_path, options,
        file_system=recording_fs,
        element_picker=_picker(shop_model["package"]),
    ))
    assert recording_fs.directories == [tmp_path / "Shop"]


def test_default_options_are_loaded(shop_model, recording_fs, tmp_path):
    asyncio.run(handle_generate(shop_model["customer"], tmp_path, file_system=recording_fs))
    assert 'use Doctrine\\ORM\\Mapping as ORM;' in recording_fs.file_named("Customer.php")
