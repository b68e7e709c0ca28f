# DEPENDENCIES
from typing import Dict
from typing import List
from typing import Optional
from config.risk_rules import RiskRules
from config.clause_catalog import Severity
from services.data_models import RiskBreakdown
from services.data_models import FlaggedClause


class RiskAnalyzer:
    """
    Weighted, bounded risk score over malicious flagged clauses

    score = min(100, 30 * high + 15 * medium + 5 * low)

    Non-malicious clauses never contribute.
    """
    def __init__(self, severity_weights: Optional[Dict[Severity, int]] = None, max_score: int = RiskRules.MAX_RISK_SCORE):
        self.severity_weights = severity_weights or dict(RiskRules.SEVERITY_WEIGHTS)
        self.max_score        = max_score


    def calculate_risk(self, flagged_clauses: List[FlaggedClause]) -> RiskBreakdown:
        """
        Score the flagged clauses

        Arguments:
        ----------
            flagged_clauses { list } : Clauses found by the ClauseMatcher

        Returns:
        --------
                { RiskBreakdown }    : Severity counts, bounded score and risk band
        """
        malicious = [flagged.clause for flagged in flagged_clauses if flagged.clause.is_malicious]

        counts    = {severity: 0 for severity in Severity}

        for clause in malicious:
            counts[clause.severity] += 1

        raw_score = sum(self.severity_weights.get(severity, 0) * count for severity, count in counts.items())
        score     = max(0, min(self.max_score, raw_score))

        return RiskBreakdown(high_severity   = counts[Severity.HIGH],
                             medium_severity = counts[Severity.MEDIUM],
                             low_severity    = counts[Severity.LOW],
                             malicious_count = len(malicious),
                             score           = score,
                             risk_level      = RiskRules.get_risk_level(score),
                            )
