import pytest

from sarifkit.message import MultiformatMessageString
from sarifkit.properties import PropertyBag
from sarifkit.rules import (
    ReportingConfiguration,
    ReportingDescriptor,
    ReportingDescriptorReference,
    ToolComponentReference,
    TranslationMetadata,
)


def test_new_rule_emits_null_short_description():
    rule = ReportingDescriptor("rule1")
    assert rule.to_dict() == {"id": "rule1", "shortDescription": None}


def test_with_description_sets_plain_text():
    rule = ReportingDescriptor("rule1").with_description("a short one")
    assert rule.short_description == MultiformatMessageString(text="a short one")
    assert rule.to_dict()["shortDescription"] == {"text": "a short one"}


def test_text_and_markdown_help_share_one_message():
    rule = ReportingDescriptor("r").with_text_help("plain").with_markdown_help("# md")
    assert rule.help.text == "plain"
    assert rule.help.markdown == "# md"


def test_rule_properties_come_last():
    rule = ReportingDescriptor("r", name="Name")
    bag = PropertyBag()
    bag.add_string("k", "v")
    rule.attach_property_bag(bag)
    assert list(rule.to_dict())[-1] == "properties"
    assert rule.properties is bag.properties


def test_rule_round_trip():
    rule = ReportingDescriptor(
        "r1",
        name="R1",
        help_uri="https://example.com/help",
        deprecated_ids=["old"],
        default_configuration=ReportingConfiguration(level="error", rank=5.5),
        message_strings={"default": MultiformatMessageString(text="hi")},
    ).with_description("desc")
    assert ReportingDescriptor.from_dict(rule.to_dict()) == rule


def test_configuration_omits_empty_level():
    config = ReportingConfiguration(enabled=False)
    assert "level" not in config.to_dict()
    assert config.to_dict()["enabled"] is False


def test_configuration_parameters_round_trip():
    params = PropertyBag()
    params.add_integer("depth", 3)
    config = ReportingConfiguration(parameters=params, level="warning")
    restored = ReportingConfiguration.from_dict(config.to_dict())
    assert restored.parameters.properties == {"depth": 3}
    assert restored.level == "warning"


def test_tool_component_reference_emits_nulls():
    assert ToolComponentReference().to_dict() == {
        "name": None,
        "index": None,
        "guid": None,
    }


def test_descriptor_reference_properties_first():
    ref = ReportingDescriptorReference(id="x", index=2)
    ref.add("a", 1)
    assert list(ref.to_dict()) == ["properties", "id", "index"]


def test_descriptor_reference_round_trip():
    ref = ReportingDescriptorReference(
        id="x", guid="g", tool_component=ToolComponentReference(name="tc", index=0)
    )
    restored = ReportingDescriptorReference.from_dict(ref.to_dict())
    assert restored == ref
    assert restored.tool_component.name == "tc"


def test_translation_metadata_descriptions():
    meta = (
        TranslationMetadata(name="t")
        .with_full_description_text("full")
        .with_full_description_markdown("**full**")
        .with_short_description_text("short")
        .with_short_description_markdown("*short*")
    )
    assert meta.full_description == MultiformatMessageString(
        text="full", markdown="**full**"
    )
    assert meta.short_description == MultiformatMessageString(
        text="short", markdown="*short*"
    )
    assert TranslationMetadata.from_dict(meta.to_dict()) == meta


def test_translation_metadata_keeps_null_name():
    assert TranslationMetadata().to_dict() == {"name": None}


def test_from_dict_rejects_non_object():
    with pytest.raises(TypeError):
        ReportingDescriptor.from_dict(["not", "an", "object"])