# DEPENDENCIES
from typing import List
from config.risk_rules import RiskRules
from services.data_models import KeyDetail
from services.data_models import RiskBreakdown
from services.key_detail_extractor import KeyDetailExtractor


class SummaryGenerator:
    """
    Template-based narrative summary of a rental contract analysis
    """
    def generate_summary(self, key_details: List[KeyDetail], risk: RiskBreakdown) -> str:
        """
        Build the summary: fixed opening, optional rent and deposit sentences, then a closing chosen by score band

        Arguments:
        ----------
            key_details    { list }     : Extracted key details

            risk       { RiskBreakdown } : Scored risk of the flagged clauses

        Returns:
        --------
                      { str }            : Summary text
        """
        summary        = RiskRules.SUMMARY_OPENING

        rent_detail    = KeyDetailExtractor.find_detail(key_details, RiskRules.RENT_LABEL)
        deposit_detail = KeyDetailExtractor.find_detail(key_details, RiskRules.DEPOSIT_LABEL)

        if rent_detail:
            summary += RiskRules.SUMMARY_RENT.format(value = rent_detail.value)

        if deposit_detail:
            summary += RiskRules.SUMMARY_DEPOSIT.format(value = deposit_detail.value)

        summary += self._closing_sentence(risk = risk)

        return summary


    @staticmethod
    def _closing_sentence(risk: RiskBreakdown) -> str:
        risk_level = RiskRules.get_risk_level(risk.score)
        template   = RiskRules.SUMMARY_CLOSINGS[risk_level]

        return template.format(count = risk.malicious_count)
