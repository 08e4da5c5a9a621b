from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from maec_v5.domain import (
    AnalysisConclusionType,
    AnalysisMetadata,
    AnalysisType,
    DeliveryVector,
    ExternalReference,
    FieldData,
    MalwareFamily,
    Name,
)
from maec_v5.exceptions import MaecValidationError


def test_name_accepts_plain_strings() -> None:
    assert Name.coerce("Zeus") == Name(value="Zeus")
    assert Name.model_validate("Zeus").value == "Zeus"
    assert str(Name(value="Zeus")) == "Zeus"

    family = MalwareFamily.builder().name("Zeus").add_alias("Zbot").build()
    assert family.name == Name(value="Zeus")
    assert family.aliases == (Name(value="Zbot"),)


def test_name_with_source_and_confidence() -> None:
    source = ExternalReference(source_name="vendor-report")
    name = Name.with_confidence("Emotet", source, "high")
    assert name.source == source
    assert name.confidence == "high"
    assert Name.with_source("Emotet", source).confidence is None


def test_field_data_requires_one_field() -> None:
    with pytest.raises(ValidationError):
        FieldData()
    with pytest.raises(MaecValidationError):
        FieldData.builder().build()


def test_field_data_builder_collects_values() -> None:
    first_seen = datetime(2023, 5, 1, tzinfo=UTC)
    field_data = (
        FieldData.builder()
        .add_delivery_vector(DeliveryVector.PHISHING)
        .add_delivery_vector(DeliveryVector.EMAIL_ATTACHMENT)
        .first_seen(first_seen)
        .build()
    )
    assert field_data.delivery_vectors == ("phishing", "email-attachment")
    assert field_data.first_seen == first_seen
    assert field_data.last_seen is None


def test_field_data_shortcuts() -> None:
    assert FieldData.with_delivery_vectors(["dropper"]).delivery_vectors == ("dropper",)
    seen = datetime(2023, 1, 1, tzinfo=UTC)
    assert FieldData.with_timestamps(seen).first_seen == seen


def test_analysis_metadata_window_is_ordered() -> None:
    metadata = AnalysisMetadata(
        is_automated=True,
        analysis_type=AnalysisType.DYNAMIC,
        conclusion=AnalysisConclusionType.MALICIOUS,
    )
    assert metadata.analysis_type is AnalysisType.DYNAMIC

    with pytest.raises(ValidationError):
        AnalysisMetadata(
            is_automated=False,
            analysis_type="static",
            start_time=datetime(2024, 1, 2, tzinfo=UTC),
            end_time=datetime(2024, 1, 1, tzinfo=UTC),
        )
