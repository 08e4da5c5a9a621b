from __future__ import annotations

import pytest

from maec_v5.domain import (
    Behavior,
    BehaviorName,
    Capability,
    CapabilityName,
    Collection,
    EntityAssociation,
    FieldData,
    MalwareAction,
    MalwareActionName,
    MalwareFamily,
    MalwareInstance,
    ProcessorArchitecture,
    Relationship,
    generate_maec_id,
)
from maec_v5.exceptions import (
    InvalidIdError,
    InvalidReferenceError,
    MaecValidationError,
    MissingFieldError,
)


def test_behavior_requires_name() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        Behavior.builder().description("no name").build()
    assert excinfo.value.field == "name"


def test_behavior_rejects_unknown_vocabulary_value() -> None:
    with pytest.raises(MaecValidationError):
        Behavior.builder().name("not-a-behavior").build()


def test_behavior_action_refs_accept_any_kind_on_build() -> None:
    action_id = generate_maec_id("malware-action")
    behavior = (
        Behavior.builder()
        .name(BehaviorName.DETECT_VIRTUAL_MACHINE)
        .add_action_ref(action_id)
        .attribute("technique", "cpuid")
        .build()
    )
    assert behavior.action_refs == (action_id,)
    assert behavior.attributes == {"technique": "cpuid"}
    behavior.check_reference_kinds()

    other_id = generate_maec_id("x-action")
    loose = Behavior.builder().name("check-for-payload").add_action_ref(other_id).build()
    assert loose.action_refs == (other_id,)
    with pytest.raises(InvalidReferenceError):
        loose.check_reference_kinds()


def test_builders_are_immutable_values() -> None:
    empty = Behavior.builder()
    named = empty.name(BehaviorName.CHECK_FOR_PAYLOAD)

    assert named.build().name is BehaviorName.CHECK_FOR_PAYLOAD
    with pytest.raises(MissingFieldError):
        empty.build()


def test_builder_applies_and_validates_supplied_id() -> None:
    behavior_id = generate_maec_id("behavior")
    behavior = Behavior.builder().id(behavior_id).name("detect-debugging").build()
    assert behavior.id == behavior_id

    with pytest.raises(InvalidIdError):
        Behavior.builder().id("behavior-notauuid").name("detect-debugging").build()


def test_malware_action_collects_api_call() -> None:
    with pytest.raises(MissingFieldError):
        MalwareAction.builder().build()

    action = (
        MalwareAction.builder()
        .name(MalwareActionName.CREATE_FILE)
        .is_successful(True)
        .add_output_object_ref("0")
        .api_call(function_name="CreateFileW", address="0x401000")
        .build()
    )
    assert action.type == "malware-action"
    assert action.output_object_refs == ("0",)
    assert action.api_call == {"function_name": "CreateFileW", "address": "0x401000"}


def test_malware_family_requires_name() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        MalwareFamily.builder().add_label("trojan").build()
    assert excinfo.value.field == "name"


def test_malware_family_behavior_refs_are_checked_on_request() -> None:
    action_id = generate_maec_id("malware-action")
    family = MalwareFamily.builder().name("TestMalware").add_common_behavior_ref(action_id).build()
    assert family.common_behavior_refs == (action_id,)
    with pytest.raises(InvalidReferenceError):
        family.check_reference_kinds()


def test_malware_family_with_field_data_and_capabilities() -> None:
    capability = Capability.builder().name(CapabilityName.PERSISTENCE).build()
    family = (
        MalwareFamily.builder()
        .name("TestMalware")
        .field_data(FieldData.with_delivery_vectors(["phishing"]))
        .add_common_capability(capability)
        .add_common_string("evil.example")
        .build()
    )
    assert family.common_capabilities == (capability,)
    assert family.field_data is not None
    assert family.field_data.delivery_vectors == ("phishing",)


def test_malware_instance_requires_object_refs() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        MalwareInstance.builder().name("sample").build()
    assert excinfo.value.field == "instance_object_refs"


def test_malware_instance_builder() -> None:
    instance = (
        MalwareInstance.builder()
        .add_instance_object_ref("0")
        .name("dropper.exe")
        .add_architecture_execution_env("x86-64")
        .add_triggered_signature(signature_type="yara", rule="Dropper_Generic")
        .build()
    )
    assert instance.instance_object_refs == ("0",)
    assert instance.architecture_execution_envs == (ProcessorArchitecture.X86_64,)
    assert instance.triggered_signatures == ({"signature_type": "yara", "rule": "Dropper_Generic"},)


def test_capability_behavior_refs_are_checked_on_request() -> None:
    with pytest.raises(MissingFieldError):
        Capability.builder().build()

    action_id = generate_maec_id("malware-action")
    loose = Capability.builder().name("anti-detection").add_behavior_ref(action_id).build()
    assert loose.behavior_refs == (action_id,)

    parent = Capability.builder().name("persistence").add_refined_capability(loose).build()
    assert parent.refined_capabilities == (loose,)
    with pytest.raises(InvalidReferenceError):
        parent.check_reference_kinds()

    instance = MalwareInstance.builder().add_instance_object_ref("0").add_capability(parent).build()
    with pytest.raises(InvalidReferenceError):
        instance.check_reference_kinds()


def test_collection_has_no_required_fields() -> None:
    collection = Collection.builder().build()
    assert collection.type == "collection"
    assert collection.entity_refs == ()

    grouped = (
        Collection.builder()
        .name("droppers")
        .association_type(EntityAssociation.OBSERVED_TOGETHER)
        .add_entity_ref(generate_maec_id("malware-instance"))
        .build()
    )
    assert grouped.association_type is EntityAssociation.OBSERVED_TOGETHER

    with pytest.raises(MaecValidationError):
        Collection.builder().association_type("unrelated").build()


def test_relationship_checks_required_fields_in_order() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        Relationship.builder().build()
    assert excinfo.value.field == "source_ref"

    with pytest.raises(MissingFieldError) as excinfo:
        Relationship.builder().source_ref(generate_maec_id("behavior")).build()
    assert excinfo.value.field == "target_ref"


def test_relationship_links_behavior_to_family() -> None:
    behavior = Behavior.builder().name(BehaviorName.CHECK_FOR_PAYLOAD).build()
    family = MalwareFamily.builder().name("TestMalware").build()

    relationship = Relationship.link(behavior.id, "derived-from", family.id)

    assert relationship.type == "relationship"
    assert relationship.source_ref == behavior.id
    assert relationship.target_ref == family.id
    assert relationship.relationship_type == "derived-from"
    relationship.check_reference_kinds("behavior", "malware-family")
    with pytest.raises(InvalidReferenceError):
        relationship.check_reference_kinds("malware-family", "behavior")


def test_relationship_rejects_malformed_refs() -> None:
    with pytest.raises(InvalidReferenceError):
        Relationship.link("behavior-notauuid", "related-to", generate_maec_id("malware-family"))
