from types import SimpleNamespace

import pytest

from menu_api.core.exc import InvalidImageException
from menu_api.enums import ObjectExtension
from menu_api.repository.base import get_obj_from_integrity_error
from menu_api.services.storages import AbstractStorageRepository
from menu_api.utils.convertors import text_normalize, webp_converter


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Pizza Margherita", "pizza-margherita"),
        ("Caffè \"Espresso\"", "caffe-espresso"),
        ("  fish & chips ", "fish-chips"),
    ],
)
def test_text_normalize(text, expected) -> None:
    assert text_normalize(text) == expected


def test_construct_object_name() -> None:
    name = AbstractStorageRepository.construct_object_name(
        prefix="Menu", id="42", version=None, extension=ObjectExtension.WEBP
    )

    assert name == "menu_42.webp"


def test_webp_converter_rejects_garbage() -> None:
    with pytest.raises(InvalidImageException) as exc_info:
        webp_converter(b"garbage")

    assert exc_info.value.status_code == 400


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ('duplicate key value violates unique constraint "category_name_key"\n'
         "DETAIL:  Key (name)=(Pizza) already exists.", "name=Pizza"),
        ("UNIQUE constraint failed: category.name", "name"),
        ("something else", ""),
    ],
)
def test_get_obj_from_integrity_error(message, expected) -> None:
    assert get_obj_from_integrity_error(SimpleNamespace(orig=message)) == expected
