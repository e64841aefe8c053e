import json

from sarifkit.message import Message
from sarifkit.regions import Rectangle, Region, Replacement


def test_simple_region_has_start_and_end_lines():
    region = Region.simple(3, 7)
    assert region.to_dict() == {"startLine": 3, "endLine": 7}


def test_region_member_order_follows_schema():
    region = Region(
        start_line=1,
        start_column=2,
        end_line=3,
        end_column=4,
        char_offset=5,
        char_length=6,
        byte_offset=7,
        byte_length=8,
        source_language="go",
    )
    assert list(region.to_dict()) == [
        "startLine",
        "startColumn",
        "endLine",
        "endColumn",
        "charOffset",
        "charLength",
        "byteOffset",
        "byteLength",
        "sourceLanguage",
    ]


def test_zero_line_is_still_written():
    region = Region(start_line=0)
    assert region.to_dict() == {"startLine": 0}


def test_text_and_markdown_message_share_one_message():
    region = Region.simple(1, 2).with_text_message("plain").with_message_markdown("*md*")
    assert region.message == Message(text="plain", markdown="*md*")


def test_region_round_trip_decodes_message():
    region = Region.simple(4, 9).with_text_message("plain")
    region.snippet = {"text": "x := 1"}
    restored = Region.from_dict(json.loads(region.to_json()))
    assert restored == region
    assert isinstance(restored.message, Message)


def test_rectangle_integral_floats_are_written_as_integers():
    rectangle = Rectangle(bottom=2.0)
    assert rectangle.to_json() == '{"bottom":2}'


def test_rectangle_messages_and_round_trip():
    rectangle = Rectangle(bottom=1.5, left=0.25, right=3.0, top=0.5)
    rectangle.with_message_markdown("md").with_text_message("plain")
    assert rectangle.message == Message(text="plain", markdown="md")
    assert Rectangle.from_dict(json.loads(rectangle.to_json())) == rectangle


def test_replacement_always_writes_deleted_region():
    assert Replacement().to_dict() == {"deletedRegion": {}}


def test_replacement_copies_the_region():
    region = Region.simple(1, 2)
    replacement = Replacement(region)
    region.start_line = 10
    assert replacement.deleted_region.start_line == 1


def test_replacement_round_trip():
    replacement = Replacement(Region.simple(1, 2), inserted_content={"text": "new"})
    restored = Replacement.from_dict(replacement.to_dict())
    assert restored == replacement
    assert isinstance(restored.deleted_region, Region)