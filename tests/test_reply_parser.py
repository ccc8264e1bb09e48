import pytest

from garden_assistant.modules.plant_assistant.domain.services.reply_parser import (
    extract_introduction,
    extract_plant_name,
)

from conftest import NAMELESS_REPLY, SAMPLE_REPLY


def test_plant_name_before_slash():
    assert extract_plant_name("**نام گیاه:** Monstera / Monstera deliciosa\n") == "Monstera"


def test_plant_name_from_full_reply():
    assert extract_plant_name(SAMPLE_REPLY) == "مونسترا"


def test_plant_name_up_to_newline_without_slash():
    assert extract_plant_name("**نام گیاه:**   پوتوس  \n**معرفی:**") == "پوتوس"


def test_plant_name_found_after_preamble():
    reply = "سلام! این گیاه را شناختم.\n**نام گیاه:** فیکوس / Ficus elastica"
    assert extract_plant_name(reply) == "فیکوس"


@pytest.mark.parametrize(
    "reply",
    [
        NAMELESS_REPLY,
        "",
        None,
        "**نام گیاه:** بدون جداکننده",
        "**نام گیاه:** / Ficus",
        "نام گیاه: فیکوس / Ficus",
    ],
)
def test_plant_name_missing(reply):
    assert extract_plant_name(reply) is None


def test_introduction_between_headings():
    assert extract_introduction(SAMPLE_REPLY) == "مونسترا گیاهی گرمسیری با برگ‌های بزرگ و بریده است."


def test_introduction_spanning_lines():
    reply = "**معرفی:**\nخط اول\nخط دوم\n**مراقبت:**"
    assert extract_introduction(reply) == "خط اول\nخط دوم"


@pytest.mark.parametrize("reply", [NAMELESS_REPLY, "", None, "**معرفی:**\nبدون عنوان بعدی"])
def test_introduction_missing(reply):
    assert extract_introduction(reply) is None
