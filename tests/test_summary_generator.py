# DEPENDENCIES
import pytest
from config.risk_rules import RiskRules
from services.data_models import KeyDetail
from services.data_models import RiskBreakdown
from config.clause_catalog import ClauseCategory
from services.summary_generator import SummaryGenerator


OPENING = "This appears to be a residential tenancy agreement for a property in British Columbia. "


def _risk(score, count):
    return RiskBreakdown(high_severity   = 0,
                         medium_severity = 0,
                         low_severity    = 0,
                         malicious_count = count,
                         score           = score,
                         risk_level      = RiskRules.get_risk_level(score),
                        )


def test_no_concerns_without_details():
    summary = SummaryGenerator().generate_summary([], _risk(0, 0))

    assert summary == OPENING + "No concerning clauses were detected in this contract. However, always read the full document carefully."


def test_rent_and_deposit_sentences():
    details = [KeyDetail("Monthly Rent", "1,800", ClauseCategory.RENT),
               KeyDetail("Security Deposit", "900", ClauseCategory.SECURITY_DEPOSIT),
              ]

    summary = SummaryGenerator().generate_summary(details, _risk(0, 0))

    assert summary.startswith(OPENING + "The monthly rent is listed as $1,800. A security deposit of $900 is required. ")


@pytest.mark.parametrize("score, count, closing", [(5, 1, "We found 1 potentially concerning clause(s). These may warrant further review."),
                                                   (29, 2, "We found 2 potentially concerning clause(s). These may warrant further review."),
                                                   (30, 1, "We identified 1 problematic clause(s) that may violate BC tenancy laws. We recommend seeking advice before signing."),
                                                   (59, 3, "We identified 3 problematic clause(s) that may violate BC tenancy laws. We recommend seeking advice before signing."),
                                                   (60, 2, "WARNING: This contract contains 2 highly problematic clause(s) that likely violate BC tenancy laws. We strongly recommend consulting with a tenant rights organization before signing."),
                                                   (100, 7, "WARNING: This contract contains 7 highly problematic clause(s) that likely violate BC tenancy laws. We strongly recommend consulting with a tenant rights organization before signing."),
                                                  ])
def test_closing_by_band(score, count, closing):
    summary = SummaryGenerator().generate_summary([], _risk(score, count))

    assert summary == OPENING + closing


def test_risk_level_bands():
    assert RiskRules.get_risk_level(0) == "none"
    assert RiskRules.get_risk_level(29) == "low"
    assert RiskRules.get_risk_level(30) == "moderate"
    assert RiskRules.get_risk_level(59) == "moderate"
    assert RiskRules.get_risk_level(60) == "high"
