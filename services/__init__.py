# DEPENDENCIES
from .data_models import KeyDetail
from .data_models import RiskBreakdown
from .data_models import FlaggedClause
from .data_models import AnalysisResult
from .risk_analyzer import RiskAnalyzer
from .clause_matcher import ClauseMatcher
from .summary_generator import SummaryGenerator
from .contract_analyzer import analyze_contract
from .contract_analyzer import ContractAnalyzer
from .key_detail_extractor import KeyDetailExtractor
from .recommendation_engine import RecommendationEngine



__all__ = ['KeyDetail',
           'RiskAnalyzer',
           'ClauseMatcher',
           'FlaggedClause',
           'RiskBreakdown',
           'AnalysisResult',
           'SummaryGenerator',
           'ContractAnalyzer',
           'analyze_contract',
           'KeyDetailExtractor',
           'RecommendationEngine',
          ]
