"""Tests for the Variant model and the record-level normalization API."""

import json
import logging

import pytest
from pydantic import ValidationError

from varnorm.errors import AltBasesInvalidSymbolError, RefBasesEmptyError
from varnorm.models.core import Variant, VariantType
from varnorm.record import normalize_variant


class TestVariantModel:
    """Pydantic field constraints on Variant."""

    def test_minimal_variant(self):
        v = Variant(pos=1000, ref="A", alt="T", variant_type=VariantType.SNV)
        assert v.variant_type == VariantType.SNV
        assert v.was_normalized is False

    def test_negative_position_rejected(self):
        with pytest.raises(ValidationError):
            Variant(pos=-1, ref="A", alt="T")

    def test_empty_allele_rejected(self):
        with pytest.raises(ValidationError):
            Variant(pos=1, ref="", alt="T")
        with pytest.raises(ValidationError):
            Variant(pos=1, ref="A", alt="")

    def test_variant_type_values(self):
        assert [t.value for t in VariantType] == ["SNV", "MNV", "INSERTION", "DELETION", "INDEL"]
        assert VariantType("INDEL") is VariantType.INDEL


class TestNormalizeVariant:
    """normalize_variant wraps normalize + variant_type in a Variant."""

    def test_insertion_record(self):
        v = normalize_variant(1000, "ATCC", "ATACC")
        assert (v.pos, v.ref, v.alt) == (1001, "T", "TA")
        assert v.variant_type == VariantType.INSERTION
        assert (v.original_pos, v.original_ref, v.original_alt) == (1000, "ATCC", "ATACC")
        assert v.was_normalized is True

    def test_already_minimal_record(self):
        v = normalize_variant(1000, "A", "T")
        assert v.variant_type == VariantType.SNV
        assert v.was_normalized is False

    def test_identical_alleles(self):
        v = normalize_variant(1000, "A", "A")
        assert v.variant_type is None
        assert v.was_normalized is False

    def test_json_dump(self):
        v = normalize_variant(1000, "ACTCC", "AGTTCC")
        data = json.loads(v.model_dump_json())
        assert data["pos"] == 1001
        assert data["ref"] == "C"
        assert data["alt"] == "GT"
        assert data["variant_type"] == "INDEL"
        assert data["was_normalized"] is True

    def test_validation_errors_propagate(self):
        with pytest.raises(RefBasesEmptyError):
            normalize_variant(1000, "", "A")
        with pytest.raises(AltBasesInvalidSymbolError):
            normalize_variant(1000, "A", ".")

    def test_logs_normalization(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="varnorm.record"):
            normalize_variant(1000, "AT", "ATA")
        assert "Normalized 1000:AT>ATA -> 1001:T>TA" in caplog.text

    def test_logs_failure(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="varnorm.record"):
            with pytest.raises(AltBasesInvalidSymbolError):
                normalize_variant(1000, "A", "!")
        assert "normalize_variant failed" in caplog.text
