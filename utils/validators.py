# DEPENDENCIES
import re
from typing import Any
from typing import Dict
from typing import Tuple


class ContractValidator:
    """
    Gate extracted text before analysis and estimate whether it is a tenancy agreement
    """
    # Text constraints
    MIN_CONTRACT_LENGTH = 100
    MAX_CONTRACT_LENGTH = 500000  # 500KB text

    TOO_SHORT_MESSAGE   = "The document appears to be too short or empty. Please upload a complete rental contract."

    # Indicators of a residential tenancy agreement (keyword: weight)
    STRONG_INDICATORS   = {'tenancy agreement'          : 6,
                           'residential tenancy'        : 6,
                           'rental agreement'           : 5,
                           'lease'                      : 4,
                           'landlord'                   : 4,
                           'tenant'                     : 4,
                           'rent'                       : 3,
                           'security deposit'           : 4,
                           'damage deposit'             : 4,
                           'pet deposit'                : 2,
                           'premises'                   : 3,
                           'rental unit'                : 3,
                           'month-to-month'             : 3,
                           'fixed term'                 : 3,
                           'notice to end tenancy'      : 4,
                           'condition inspection'       : 3,
                           'utilities'                  : 2,
                           'strata'                     : 2,
                           'sublet'                     : 2,
                           'residential tenancy act'    : 6,
                           'agreement'                  : 2,
                           'parties'                    : 1,
                           'signature'                  : 2,
                          }

    # Structural patterns typical of rental contracts (regex: weight)
    STRUCTURAL_PATTERNS = [(r'(?:monthly\s+)?rent\s+(?:of|is|:)\s*\$?\s*[\d,]+', 6),
                           (r'(?:security|damage)\s+deposit\s+(?:of|is|:)\s*\$?\s*[\d,]+', 6),
                           (r'(?:start|commencement|beginning)\s+date', 4),
                           (r'(?:end|termination|expiry)\s+date', 4),
                           (r'between\s+.{1,80}\s+and\s+.{1,80}', 3),
                           (r'(?:due|payable)\s+on\s+the\s+\d+(?:st|nd|rd|th)?', 3),
                           (r'signed?\s*:?\s*_+', 3),
                          ]


    @staticmethod
    def is_valid_contract(text: str, min_length: int = None) -> Tuple[bool, str, str]:
        """
        Length gate applied before analysis

        Arguments:
        ----------
            text       { str } : Extracted document text

            min_length { int } : Minimum length override (optional)

        Returns:
        --------
               { tuple }       : (is_valid, validation_type, message) tuple
        """
        min_length = ContractValidator.MIN_CONTRACT_LENGTH if min_length is None else min_length
        stripped   = (text or "").strip()

        if (len(stripped) < min_length):
            return (False, "too_short", ContractValidator.TOO_SHORT_MESSAGE)

        if (len(stripped) > ContractValidator.MAX_CONTRACT_LENGTH):
            return (False, "too_long", f"Text too long ({len(stripped)} chars, maximum {ContractValidator.MAX_CONTRACT_LENGTH}). This may be a combined document.")

        return (True, "ok", "Contract text accepted for analysis")


    @staticmethod
    def _check_structural_patterns(text: str) -> int:
        """
        Score structural patterns typical of rental contracts
        """
        return sum(weight for pattern, weight in ContractValidator.STRUCTURAL_PATTERNS if re.search(pattern, text, re.IGNORECASE))


    @staticmethod
    def get_validation_report(text: str) -> Dict[str, Any]:
        """
        Detailed validation report with a 0-100 tenancy-agreement confidence
        """
        is_valid, validation_type, message = ContractValidator.is_valid_contract(text = text)

        text_lower                         = (text or "").lower()

        found_indicators                   = [indicator for indicator in ContractValidator.STRONG_INDICATORS if indicator in text_lower]
        indicator_score                    = sum(ContractValidator.STRONG_INDICATORS[indicator] for indicator in found_indicators)
        structural_score                   = ContractValidator._check_structural_patterns(text = text_lower)
        confidence                         = min(100, indicator_score + structural_score)

        return {"is_valid"         : is_valid,
                "validation_type"  : validation_type,
                "message"          : message,
                "scores"           : {"total"      : confidence,
                                      "indicators" : indicator_score,
                                      "structural" : structural_score,
                                     },
                "found_indicators" : found_indicators,
                "text_statistics"  : {"length"     : len(text or ""),
                                      "word_count" : len((text or "").split()),
                                      "line_count" : len((text or "").split('\n')),
                                     },
               }
