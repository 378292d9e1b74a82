"""Tests for eligibility warnings, hospital network and benefits."""

from first_care_quote.pricing.benefits import KEY_INFORMATION, OUTPATIENT_BENEFITS, benefits_for
from first_care_quote.pricing.config import PricingConfig
from first_care_quote.pricing.eligibility import PRE_EXISTING_WARNING, warnings_for
from first_care_quote.pricing.hospitals import (
    CO_PAYMENT_RATE,
    HOSPITAL_NETWORK,
    SUPPORTED_COUNTRIES,
    hospitals_for,
)
from first_care_quote.service.schemas import FormInput

AGE_WARNING = "Age exceeds the maximum enrollment age of 55 years."


class TestWarnings:
    """Tests for warnings_for."""

    def test_no_warnings(self):
        assert warnings_for(FormInput(age=40, has_pre_existing_condition=False)) == []

    def test_both_warnings_age_first(self):
        warnings = warnings_for(FormInput(age=60, has_pre_existing_condition=True))
        assert warnings == [AGE_WARNING, PRE_EXISTING_WARNING]

    def test_age_55_is_allowed(self):
        assert warnings_for(FormInput(age=55)) == []

    def test_pre_existing_only(self):
        assert warnings_for(FormInput(age=20, has_pre_existing_condition=True)) == [PRE_EXISTING_WARNING]

    def test_configurable_ceiling(self):
        warnings = warnings_for(FormInput(age=50), cfg=PricingConfig(max_enrollment_age=45))
        assert warnings == ["Age exceeds the maximum enrollment age of 45 years."]


class TestHospitals:
    """Tests for the premium hospital network."""

    def test_thailand_in_declared_order(self):
        assert hospitals_for("Thailand") == [
            "Bumrungrad International Hospital",
            "First Western Hospital",
        ]

    def test_country_without_network(self):
        assert hospitals_for("Germany") == []

    def test_empty_and_unknown(self):
        assert hospitals_for("") == []
        assert hospitals_for("Atlantis") == []

    def test_exact_match_only(self):
        assert hospitals_for("thailand") == []
        assert hospitals_for(" Thailand") == []

    def test_result_is_a_copy(self):
        hospitals_for("India").append("Somewhere Else")
        assert hospitals_for("India") == ["Wockhardt Hospital"]

    def test_countries_sorted(self):
        assert list(SUPPORTED_COUNTRIES) == sorted(SUPPORTED_COUNTRIES)
        assert len(SUPPORTED_COUNTRIES) == 15
        assert SUPPORTED_COUNTRIES[0] == "Cambodia"

    def test_network_countries_are_supported(self):
        assert set(HOSPITAL_NETWORK) <= set(SUPPORTED_COUNTRIES)
        assert CO_PAYMENT_RATE == 0.40


class TestBenefits:
    """Tests for benefits summaries."""

    def test_inpatient_only_has_no_outpatient(self):
        summary = benefits_for("IP")
        assert summary.outpatient == []
        assert "Room & Board: Private Room" in summary.inpatient

    def test_inpatient_plus_outpatient(self):
        summary = benefits_for("IP+OP")
        assert summary.outpatient == list(OUTPATIENT_BENEFITS)

    def test_key_information_always_present(self):
        for tier in ("IP", "IP+OP"):
            assert benefits_for(tier).key_information == list(KEY_INFORMATION)
