"""Tests for the fee estimate output contract."""

import pytest
from pydantic import ValidationError

from relayfee.types import FeeEstimate, FeeEstimateEnvelope


def test_envelope_requires_exactly_one_state():
    with pytest.raises(ValidationError):
        FeeEstimateEnvelope()

    with pytest.raises(ValidationError):
        FeeEstimateEnvelope(error="boom", is_fetching=True)

    with pytest.raises(ValidationError):
        FeeEstimateEnvelope(
            is_fetching=True,
            data=FeeEstimate(is_relayable=False, is_relaying_available=False),
        )


def test_envelope_dumps_with_camel_case_aliases():
    envelope = FeeEstimateEnvelope(isFetching=True)

    assert envelope.model_dump(by_alias=True) == {
        "error": "",
        "isFetching": True,
        "receivedAt": None,
        "data": None,
    }


def test_estimate_accepts_aliases_and_field_names():
    by_alias = FeeEstimate(isRelayable=True, isRelayingAvailable=True, feeUsd="1.00")
    by_name = FeeEstimate(is_relayable=True, is_relaying_available=True, fee_fiat="1.00")

    assert by_alias == by_name
    assert by_alias.fee_in_source_units is None
