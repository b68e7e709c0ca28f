# DEPENDENCIES
from typing import Optional
from typing import Sequence
from utils.logger import log_info
from services.data_models import AnalysisResult
from utils.logger import ContractAnalyzerLogger
from config.clause_catalog import ClausePattern
from services.risk_analyzer import RiskAnalyzer
from services.clause_matcher import ClauseMatcher
from config.clause_catalog import BC_RENTAL_CLAUSES
from services.summary_generator import SummaryGenerator
from services.key_detail_extractor import KeyDetailExtractor
from services.recommendation_engine import RecommendationEngine


class ContractAnalyzer:
    """
    Orchestrates the rental contract analysis

    Analysis Pipeline:
    1. Clause matching against the catalog
    2. Key detail extraction
    3. Risk scoring
    4. Summary synthesis
    5. Recommendation synthesis

    Holds no per-call state: one instance may be shared between concurrent callers.
    """
    def __init__(self, catalog: Optional[Sequence[ClausePattern]] = None):
        """
        Arguments:
        ----------
            catalog { list } : Default clause catalog (the BC catalog when omitted)
        """
        self.catalog                = tuple(catalog) if catalog is not None else BC_RENTAL_CLAUSES

        self.clause_matcher         = ClauseMatcher()
        self.key_detail_extractor   = KeyDetailExtractor()
        self.risk_analyzer          = RiskAnalyzer()
        self.summary_generator      = SummaryGenerator()
        self.recommendation_engine  = RecommendationEngine()

        log_info("ContractAnalyzer initialized", catalog_size = len(self.catalog))


    @ContractAnalyzerLogger.log_execution_time("analyze_contract")
    def analyze(self, text: str, catalog: Optional[Sequence[ClausePattern]] = None) -> AnalysisResult:
        """
        Analyze contract text against a clause catalog

        Arguments:
        ----------
            text    { str }  : Full extracted contract text (any length, including empty)

            catalog { list } : Clause catalog overriding the instance default

        Returns:
        --------
           { AnalysisResult } : Flagged clauses, key details, score, summary and recommendations
        """
        catalog         = self.catalog if catalog is None else catalog

        flagged_clauses = self.clause_matcher.find_flagged_clauses(text = text, catalog = catalog)
        key_details     = self.key_detail_extractor.extract_key_details(text = text)
        risk            = self.risk_analyzer.calculate_risk(flagged_clauses = flagged_clauses)
        summary         = self.summary_generator.generate_summary(key_details = key_details, risk = risk)
        recommendations = self.recommendation_engine.generate_recommendations(flagged_clauses = flagged_clauses)

        log_info("Contract analysis complete",
                 text_length     = len(text),
                 flagged_clauses = len(flagged_clauses),
                 malicious       = risk.malicious_count,
                 key_details     = len(key_details),
                 risk_score      = risk.score,
                 risk_level      = risk.risk_level,
                )

        return AnalysisResult(summary            = summary,
                              key_details        = key_details,
                              flagged_clauses    = flagged_clauses,
                              overall_risk_score = risk.score,
                              recommendations    = recommendations,
                             )


_default_analyzer : Optional[ContractAnalyzer] = None


def analyze_contract(text: str, catalog: Optional[Sequence[ClausePattern]] = None) -> AnalysisResult:
    """
    Analyze contract text with a shared analyzer (BC catalog unless `catalog` is given)
    """
    global _default_analyzer

    if _default_analyzer is None:
        _default_analyzer = ContractAnalyzer()

    return _default_analyzer.analyze(text = text, catalog = catalog)
