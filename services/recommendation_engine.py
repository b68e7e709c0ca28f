# DEPENDENCIES
from typing import List
from utils.logger import log_debug
from config.risk_rules import RiskRules
from services.data_models import FlaggedClause
from config.clause_catalog import get_category_label


class RecommendationEngine:
    """
    Fixed advisory recommendations, plus one pointer per distinct malicious clause category
    """
    def __init__(self, max_recommendations: int = RiskRules.MAX_RECOMMENDATIONS):
        self.max_recommendations = max_recommendations


    def generate_recommendations(self, flagged_clauses: List[FlaggedClause]) -> List[str]:
        """
        Build the recommendation list

        Arguments:
        ----------
            flagged_clauses { list } : Flagged clauses in catalog scan order

        Returns:
        --------
                 { list }            : Recommendations, truncated from the end to `max_recommendations`
        """
        malicious       = [flagged for flagged in flagged_clauses if flagged.clause.is_malicious]
        recommendations = list()

        if not malicious:
            recommendations.extend(RiskRules.NO_CONCERN_RECOMMENDATIONS)

        else:
            recommendations.extend(RiskRules.CONCERN_RECOMMENDATIONS)

            # Distinct categories in first-seen order
            categories = list(dict.fromkeys(flagged.clause.category for flagged in malicious))

            for category in categories:
                recommendations.append(RiskRules.CATEGORY_RECOMMENDATION.format(label = get_category_label(category)))

        recommendations.append(RiskRules.FINAL_RECOMMENDATION)

        if (len(recommendations) > self.max_recommendations):
            log_debug("Recommendations truncated",
                      total   = len(recommendations),
                      dropped = recommendations[self.max_recommendations:],
                     )

        return recommendations[:self.max_recommendations]
