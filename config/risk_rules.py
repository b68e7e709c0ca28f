# DEPENDENCIES
from typing import List
from typing import Tuple
from config.clause_catalog import Severity
from config.clause_catalog import ClauseCategory


class RiskRules:
    """
    Scoring policy, key detail extraction rules and narrative text for rental contract analysis
    """
    # Score contribution per malicious flagged clause
    SEVERITY_WEIGHTS         = {Severity.HIGH   : 30,
                                Severity.MEDIUM : 15,
                                Severity.LOW    : 5,
                               }

    MAX_RISK_SCORE           = 100

    # Lower bounds (inclusive) of the caution bands; score 0 is its own band
    RISK_THRESHOLDS          = {"high"     : 60,
                                "moderate" : 30,
                               }

    # Characters of original text kept on each side of a keyword match
    CONTEXT_WINDOW           = 100

    MAX_RECOMMENDATIONS      = 5

    # (label, pattern, category): first capture group is the extracted value
    KEY_DETAIL_PATTERNS      = [("Monthly Rent", r'(?:monthly\s+)?rent[:\s]+\$?([\d,]+(?:\.\d{2})?)', ClauseCategory.RENT),
                                ("Security Deposit", r'(?:security|damage)\s+deposit[:\s]+\$?([\d,]+(?:\.\d{2})?)', ClauseCategory.SECURITY_DEPOSIT),
                                ("Lease Start Date", r'(?:start|commencement|beginning)\s+date[:\s]+([A-Za-z]+\s+\d{1,2},?\s+\d{4}|\d{1,2}[\/\-]\d{1,2}[\/\-]\d{2,4})', ClauseCategory.TERMINATION),
                                ("Lease End Date", r'(?:end|termination|expiry)\s+date[:\s]+([A-Za-z]+\s+\d{1,2},?\s+\d{4}|\d{1,2}[\/\-]\d{1,2}[\/\-]\d{2,4})', ClauseCategory.TERMINATION),
                                ("Property Address", r'(?:premises|property|address)[:\s]+([^\n]{10,100})', ClauseCategory.OTHER),
                                ("Landlord Name", r'(?:landlord|owner|lessor)[:\s]+([A-Za-z\s]{3,50})', ClauseCategory.OTHER),
                                ("Notice Period", r'(\d+)\s*(?:days?|months?)\s+(?:written\s+)?notice', ClauseCategory.TERMINATION),
                               ]

    RENT_LABEL               = "Monthly Rent"
    DEPOSIT_LABEL            = "Security Deposit"

    # Summary text
    SUMMARY_OPENING          = "This appears to be a residential tenancy agreement for a property in British Columbia. "
    SUMMARY_RENT             = "The monthly rent is listed as ${value}. "
    SUMMARY_DEPOSIT          = "A security deposit of ${value} is required. "
    SUMMARY_CLOSINGS         = {"none"     : "No concerning clauses were detected in this contract. However, always read the full document carefully.",
                                "low"      : "We found {count} potentially concerning clause(s). These may warrant further review.",
                                "moderate" : "We identified {count} problematic clause(s) that may violate BC tenancy laws. We recommend seeking advice before signing.",
                                "high"     : "WARNING: This contract contains {count} highly problematic clause(s) that likely violate BC tenancy laws. We strongly recommend consulting with a tenant rights organization before signing.",
                               }

    # Recommendation text
    NO_CONCERN_RECOMMENDATIONS = ["This contract appears to follow BC tenancy laws, but always read everything carefully before signing.",
                                  "Complete a thorough move-in inspection and keep a copy of the report.",
                                  "Take photos of the unit's condition before moving in.",
                                 ]

    CONCERN_RECOMMENDATIONS    = ["Consider negotiating the removal of problematic clauses before signing.",
                                  "Contact the BC Residential Tenancy Branch (RTB) for free advice: 1-800-665-8779",
                                  "Consult your university's student legal services or tenant advocacy group.",
                                 ]

    CATEGORY_RECOMMENDATION    = "Pay special attention to the {label} section of this contract."

    FINAL_RECOMMENDATION       = "Keep a signed copy of your lease in a safe place."


    @classmethod
    def get_risk_level(cls, score: int) -> str:
        """
        Map a risk score to its band: none (0), low (<30), moderate (<60), high (>=60)
        """
        if (score <= 0):
            return "none"

        elif (score < cls.RISK_THRESHOLDS["moderate"]):
            return "low"

        elif (score < cls.RISK_THRESHOLDS["high"]):
            return "moderate"

        else:
            return "high"


    @classmethod
    def get_key_detail_patterns(cls) -> List[Tuple[str, str, ClauseCategory]]:
        return list(cls.KEY_DETAIL_PATTERNS)
