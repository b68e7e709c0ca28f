# DEPENDENCIES
import re
from typing import List
from typing import Tuple
from typing import Optional
from typing import Sequence
from utils.logger import log_debug
from config.risk_rules import RiskRules
from utils.text_processor import TextProcessor
from services.data_models import FlaggedClause
from config.clause_catalog import ClausePattern


class ClauseMatcher:
    """
    Case-insensitive keyword scan of contract text against a clause catalog

    Matching rules:
    - Catalog entries are scanned in catalog order
    - Keywords of an entry are tried in declared order; the first keyword present anywhere wins
    - Only the first occurrence of that keyword is reported
    - At most one FlaggedClause per catalog id
    """
    def __init__(self, context_window: int = RiskRules.CONTEXT_WINDOW):
        """
        Arguments:
        ----------
            context_window { int } : Characters of original text kept on each side of a match
        """
        self.context_window = context_window


    def find_flagged_clauses(self, text: str, catalog: Sequence[ClausePattern]) -> List[FlaggedClause]:
        """
        Find catalog clauses present in the contract

        Arguments:
        ----------
            text    { str }  : Full contract text

            catalog { list } : Ordered clause patterns

        Returns:
        --------
                { list }     : Flagged clauses in catalog scan order
        """
        flagged_clauses = list()
        flagged_ids     = set()

        for clause in catalog:
            if clause.id in flagged_ids:
                continue

            match = self._find_first_keyword(text = text, keywords = clause.keywords)

            if match is None:
                continue

            position, length, keyword = match
            matched_text              = TextProcessor.extract_context(text   = text,
                                                                      start  = position,
                                                                      length = length,
                                                                      window = self.context_window,
                                                                     )

            flagged_clauses.append(FlaggedClause(clause       = clause,
                                                 matched_text = matched_text,
                                                 position     = position,
                                                ))
            flagged_ids.add(clause.id)

            log_debug("Clause flagged", clause_id = clause.id, keyword = keyword, position = position)

        return flagged_clauses


    @staticmethod
    def _find_first_keyword(text: str, keywords: Sequence[str]) -> Optional[Tuple[int, int, str]]:
        """
        Offset (in the original text), matched length and keyword of the first declared keyword found
        """
        for keyword in keywords:
            match = re.search(re.escape(keyword), text, re.IGNORECASE)

            if match:
                return match.start(), match.end() - match.start(), keyword

        return None
