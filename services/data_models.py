# DEPENDENCIES
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from dataclasses import dataclass
from config.clause_catalog import ClausePattern
from config.clause_catalog import ClauseCategory


@dataclass(frozen = True)
class KeyDetail:
    """
    Structured fact (rent, deposit, dates, ...) extracted from contract text
    """
    label    : str
    value    : str
    category : ClauseCategory

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary
        """
        return {"label"    : self.label,
                "value"    : self.value,
                "category" : self.category.value,
               }


@dataclass(frozen = True)
class FlaggedClause:
    """
    Catalog clause pattern matched in the contract, with surrounding excerpt
    """
    clause       : ClausePattern
    matched_text : str   # "..." + excerpt + "..."
    position     : int   # Offset of the first matching keyword

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"clause"       : self.clause.to_dict(),
                "matched_text" : self.matched_text,
                "position"     : self.position,
               }


@dataclass(frozen = True)
class RiskBreakdown:
    """
    Severity counts of malicious flagged clauses and the resulting score
    """
    high_severity   : int
    medium_severity : int
    low_severity    : int
    malicious_count : int
    score           : int  # 0-100
    risk_level      : str  # "none", "low", "moderate", "high"

    def to_dict(self) -> Dict[str, Any]:
        return {"high_severity"   : self.high_severity,
                "medium_severity" : self.medium_severity,
                "low_severity"    : self.low_severity,
                "malicious_count" : self.malicious_count,
                "score"           : self.score,
                "risk_level"      : self.risk_level,
               }


@dataclass(frozen = True)
class AnalysisResult:
    """
    Complete rental contract analysis: the engine's only output
    """
    summary            : str
    key_details        : Tuple[KeyDetail, ...]     = ()
    flagged_clauses    : Tuple[FlaggedClause, ...] = ()
    overall_risk_score : int                       = 0
    recommendations    : Tuple[str, ...]           = ()

    def __post_init__(self):
        # Sequences are stored as tuples
        object.__setattr__(self, "key_details", tuple(self.key_details))
        object.__setattr__(self, "flagged_clauses", tuple(self.flagged_clauses))
        object.__setattr__(self, "recommendations", tuple(self.recommendations))


    @property
    def malicious_clauses(self) -> List[FlaggedClause]:
        """
        Flagged clauses considered problematic for the tenant
        """
        return [flagged for flagged in self.flagged_clauses if flagged.clause.is_malicious]


    @property
    def informational_clauses(self) -> List[FlaggedClause]:
        """
        Flagged clauses that are notable but not problematic
        """
        return [flagged for flagged in self.flagged_clauses if not flagged.clause.is_malicious]


    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"summary"            : self.summary,
                "key_details"        : [detail.to_dict() for detail in self.key_details],
                "flagged_clauses"    : [flagged.to_dict() for flagged in self.flagged_clauses],
                "overall_risk_score" : self.overall_risk_score,
                "recommendations"    : list(self.recommendations),
               }
