# DEPENDENCIES
import pytest
from conftest import make_clause
from config.clause_catalog import Severity
from services.data_models import FlaggedClause
from services.risk_analyzer import RiskAnalyzer


def _flag(clause):
    return FlaggedClause(clause = clause, matched_text = "......", position = 0)


def _flags(*severities, is_malicious = True):
    return [_flag(make_clause(f"clause-{index}", ["x"], is_malicious = is_malicious, severity = severity)) for index, severity in enumerate(severities)]


def test_no_clauses_scores_zero():
    risk = RiskAnalyzer().calculate_risk([])

    assert risk.score == 0
    assert risk.risk_level == "none"
    assert risk.malicious_count == 0


@pytest.mark.parametrize("severities, expected", [((Severity.LOW,), 5),
                                                  ((Severity.MEDIUM,), 15),
                                                  ((Severity.HIGH,), 30),
                                                  ((Severity.HIGH, Severity.MEDIUM, Severity.LOW), 50),
                                                  ((Severity.HIGH, Severity.HIGH), 60),
                                                 ])
def test_weighted_score(severities, expected):
    assert RiskAnalyzer().calculate_risk(_flags(*severities)).score == expected


def test_score_is_capped_at_100():
    risk = RiskAnalyzer().calculate_risk(_flags(*([Severity.HIGH] * 5)))

    assert risk.score == 100
    assert risk.high_severity == 5
    assert risk.risk_level == "high"


def test_informational_clauses_do_not_count():
    flagged = _flags(Severity.HIGH, Severity.HIGH, is_malicious = False)
    risk    = RiskAnalyzer().calculate_risk(flagged)

    assert risk.score == 0
    assert risk.malicious_count == 0
    assert risk.high_severity == 0


def test_adding_malicious_clause_never_lowers_score():
    analyzer = RiskAnalyzer()
    flagged  = list()
    previous = 0

    for severity in [Severity.LOW, Severity.HIGH, Severity.MEDIUM, Severity.HIGH, Severity.HIGH, Severity.LOW]:
        flagged.append(_flag(make_clause(f"c-{len(flagged)}", ["x"], severity = severity)))
        score    = analyzer.calculate_risk(flagged).score

        assert previous <= score <= 100
        previous = score


def test_severity_counts():
    risk = RiskAnalyzer().calculate_risk(_flags(Severity.HIGH, Severity.MEDIUM, Severity.MEDIUM, Severity.LOW))

    assert (risk.high_severity, risk.medium_severity, risk.low_severity) == (1, 2, 1)
    assert risk.malicious_count == 4
    assert risk.score == 65


def test_custom_weights():
    analyzer = RiskAnalyzer(severity_weights = {Severity.HIGH: 50, Severity.MEDIUM: 10, Severity.LOW: 1})

    assert analyzer.calculate_risk(_flags(Severity.HIGH, Severity.LOW)).score == 51
