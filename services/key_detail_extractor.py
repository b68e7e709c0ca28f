# DEPENDENCIES
import re
from typing import List
from typing import Tuple
from typing import Optional
from config.risk_rules import RiskRules
from services.data_models import KeyDetail
from config.clause_catalog import ClauseCategory


class KeyDetailExtractor:
    """
    Pulls labeled facts (rent, deposit, lease dates, address, landlord, notice period) out of contract text
    """
    def __init__(self, patterns: Optional[List[Tuple[str, str, ClauseCategory]]] = None):
        """
        Arguments:
        ----------
            patterns { list } : (label, regex, category) rules; the regex must have one capturing group
        """
        patterns       = patterns if patterns is not None else RiskRules.get_key_detail_patterns()

        # Precompile patterns
        self.compiled  = [(label, re.compile(pattern, re.IGNORECASE | re.ASCII), category) for label, pattern, category in patterns]


    def extract_key_details(self, text: str) -> List[KeyDetail]:
        """
        Apply every rule independently; each rule contributes at most one KeyDetail

        Arguments:
        ----------
            text { str } : Full contract text

        Returns:
        --------
              { list }   : KeyDetails in rule order
        """
        key_details = list()

        for label, pattern, category in self.compiled:
            match = pattern.search(text)

            if match and match.group(1):
                key_details.append(KeyDetail(label    = label,
                                             value    = match.group(1).strip(),
                                             category = category,
                                            ))

        return key_details


    @staticmethod
    def find_detail(key_details: List[KeyDetail], label: str) -> Optional[KeyDetail]:
        """
        First KeyDetail carrying the given label
        """
        return next((detail for detail in key_details if (detail.label == label)), None)
