from __future__ import annotations

from uuid import uuid4

import pytest

from maec_v5.domain import (
    extract_type_from_id,
    generate_maec_id,
    is_valid_maec_id,
    is_valid_ref_for_type,
    require_maec_id,
    require_ref_for_type,
)
from maec_v5.exceptions import InvalidIdError, InvalidReferenceError


def test_generated_id_is_valid_and_typed() -> None:
    identifier = generate_maec_id("malware-family")
    assert identifier.startswith("malware-family--")
    assert is_valid_maec_id(identifier)
    assert extract_type_from_id(identifier) == "malware-family"


def test_generated_ids_are_unique() -> None:
    assert generate_maec_id("behavior") != generate_maec_id("behavior")


@pytest.mark.parametrize(
    "value",
    [
        "package-notauuid",
        "behavior--not-a-uuid",
        f"--{uuid4()}",
        f"malware-family--{uuid4()}--extra",
        "behavior--0123456789ab-cdef-0123-4567-89abcdef0123",
        "behavior--urn:uuid:00000000-0000-4000-8000-000000000000",
        "behavior--{00000000-0000-4000-8000-000000000000}",
        "",
    ],
)
def test_malformed_ids_are_rejected(value: str) -> None:
    assert not is_valid_maec_id(value)
    assert extract_type_from_id(value) is None
    with pytest.raises(InvalidIdError):
        require_maec_id(value)


def test_reference_kind_check() -> None:
    behavior_id = generate_maec_id("behavior")
    assert is_valid_ref_for_type(behavior_id, "behavior")
    assert not is_valid_ref_for_type(behavior_id, "malware-action")
    assert not is_valid_ref_for_type("behavior--nope", "behavior")
    assert require_ref_for_type(behavior_id, "behavior") == behavior_id


def test_reference_error_carries_expected_type() -> None:
    family_id = generate_maec_id("malware-family")
    with pytest.raises(InvalidReferenceError) as excinfo:
        require_ref_for_type(family_id, "behavior")
    assert excinfo.value.value == family_id
    assert excinfo.value.expected_type == "behavior"


def test_uuid_segment_accepts_hyphenated_and_simple_forms() -> None:
    value = uuid4()
    assert is_valid_maec_id(f"behavior--{value}")
    assert is_valid_maec_id(f"behavior--{str(value).upper()}")
    assert is_valid_maec_id(f"behavior--{value.hex}")
    # Any version is accepted, not only version 4.
    assert is_valid_maec_id("package--6ba7b810-9dad-11d1-80b4-00c04fd430c8")
