import json

import pytest

from sarifkit.automation import RunAutomationDetails
from sarifkit.message import Message


def test_empty_details_serialise_to_empty_object():
    assert RunAutomationDetails().to_json() == "{}"


def test_description_text_creates_message():
    details = RunAutomationDetails()
    returned = details.with_description_text("nightly")
    assert returned is details
    assert details.description == Message(text="nightly")


def test_description_markdown_keeps_text():
    details = RunAutomationDetails().with_description_text("plain")
    details.with_description_markdown("**bold**")
    assert details.description.text == "plain"
    assert details.description.markdown == "**bold**"


def test_member_order_and_properties_last():
    details = RunAutomationDetails(id="build/1", guid="g-1", correlation_guid="c-1")
    details.with_description_text("run")
    details.add_boolean("flag", True)
    assert list(details.to_dict()) == [
        "correlationGuid",
        "description",
        "guid",
        "id",
        "properties",
    ]


def test_round_trip():
    details = RunAutomationDetails(id="build/2").with_description_markdown("# run")
    restored = RunAutomationDetails.from_dict(json.loads(details.to_json()))
    assert restored == details


def test_from_dict_rejects_non_object():
    with pytest.raises(TypeError):
        RunAutomationDetails.from_dict("id")