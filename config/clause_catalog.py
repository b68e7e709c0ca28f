# DEPENDENCIES
import json
from enum import Enum
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic import BaseModel
from pydantic import ConfigDict
from dataclasses import dataclass
from pydantic import ValidationError


class ClauseCategory(Enum):
    SECURITY_DEPOSIT = "security_deposit"
    RENT             = "rent"
    TERMINATION      = "termination"
    MAINTENANCE      = "maintenance"
    PRIVACY          = "privacy"
    PETS             = "pets"
    SUBLETTING       = "subletting"
    UTILITIES        = "utilities"
    OTHER            = "other"


class Severity(Enum):
    LOW    = "low"
    MEDIUM = "medium"
    HIGH   = "high"


class CatalogError(ValueError):
    """
    Raised when a clause catalog cannot be loaded or fails validation
    """
    pass


@dataclass(frozen = True)
class ClausePattern:
    """
    Keyword-detectable contract clause with its legal / risk metadata
    """
    id              : str
    category        : ClauseCategory
    name            : str
    description     : str
    keywords        : Tuple[str, ...]
    is_malicious    : bool
    severity        : Severity   # Only scored when is_malicious is True
    explanation     : str
    legal_reference : Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"id"              : self.id,
                "category"        : self.category.value,
                "name"            : self.name,
                "description"     : self.description,
                "keywords"        : list(self.keywords),
                "is_malicious"    : self.is_malicious,
                "severity"        : self.severity.value,
                "legal_reference" : self.legal_reference,
                "explanation"     : self.explanation,
               }


# BC Residential Tenancy Act: problematic and informational clause patterns
BC_RENTAL_CLAUSES : Tuple[ClausePattern, ...] = (
    # Security deposit
    ClausePattern(id              = "excessive-deposit",
                  category        = ClauseCategory.SECURITY_DEPOSIT,
                  name            = "Excessive Security Deposit",
                  description     = "Deposit exceeding half month's rent",
                  keywords        = ("security deposit", "damage deposit", "first and last", "two months", "1.5 months"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 19",
                  explanation     = "In BC, landlords can only collect a security deposit equal to half a month's rent. Any amount exceeding this is illegal.",
                 ),
    ClausePattern(id              = "non-refundable-deposit",
                  category        = ClauseCategory.SECURITY_DEPOSIT,
                  name            = "Non-Refundable Deposit",
                  description     = "Deposit marked as non-refundable",
                  keywords        = ("non-refundable", "non refundable", "will not be returned", "forfeited"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 38",
                  explanation     = "Security deposits must be refundable. Landlords cannot keep deposits without proper justification and documentation.",
                 ),
    ClausePattern(id              = "pet-deposit-excessive",
                  category        = ClauseCategory.SECURITY_DEPOSIT,
                  name            = "Excessive Pet Deposit",
                  description     = "Pet deposit exceeding half month's rent",
                  keywords        = ("pet deposit", "pet damage deposit", "animal deposit"),
                  is_malicious    = True,
                  severity        = Severity.MEDIUM,
                  legal_reference = "BC RTA Section 19",
                  explanation     = "Pet deposits in BC are also limited to half a month's rent, separate from the security deposit.",
                 ),

    # Rent
    ClausePattern(id              = "illegal-rent-increase",
                  category        = ClauseCategory.RENT,
                  name            = "Unauthorized Rent Increase",
                  description     = "Rent increase exceeding legal limits or without proper notice",
                  keywords        = ("rent increase", "increase rent", "raise rent", "new rent amount"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 42",
                  explanation     = "Landlords can only increase rent once per year with 3 months notice, and only by the amount set by the BC government.",
                 ),
    ClausePattern(id              = "late-fees-excessive",
                  category        = ClauseCategory.RENT,
                  name            = "Excessive Late Fees",
                  description     = "Late fees that may be unenforceable",
                  keywords        = ("late fee", "late payment", "penalty", "interest on late"),
                  is_malicious    = True,
                  severity        = Severity.MEDIUM,
                  legal_reference = "BC RTA",
                  explanation     = "While landlords can charge reasonable late fees, excessive penalties may not be enforceable under BC law.",
                 ),
    ClausePattern(id              = "post-dated-cheques",
                  category        = ClauseCategory.RENT,
                  name            = "Required Post-Dated Cheques",
                  description     = "Requirement to provide post-dated cheques",
                  keywords        = ("post-dated", "postdated", "cheques in advance", "year of cheques"),
                  is_malicious    = True,
                  severity        = Severity.LOW,
                  legal_reference = "BC RTA Section 22",
                  explanation     = "Landlords cannot require tenants to provide post-dated cheques or automatic payment authorization.",
                 ),

    # Termination
    ClausePattern(id              = "illegal-eviction-clause",
                  category        = ClauseCategory.TERMINATION,
                  name            = "Illegal Eviction Terms",
                  description     = "Terms allowing eviction without proper process",
                  keywords        = ("immediate eviction", "evict without notice", "terminate immediately", "vacate within 24"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 45-55",
                  explanation     = "Landlords must follow proper eviction procedures. Clauses allowing immediate eviction are unenforceable.",
                 ),
    ClausePattern(id              = "waiving-notice-period",
                  category        = ClauseCategory.TERMINATION,
                  name            = "Waived Notice Period",
                  description     = "Tenant waiving right to proper notice",
                  keywords        = ("waive notice", "no notice required", "forfeit notice period"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 45",
                  explanation     = "Tenants cannot waive their right to proper notice periods as defined by the RTA.",
                 ),
    ClausePattern(id              = "fixed-term-vacate",
                  category        = ClauseCategory.TERMINATION,
                  name            = "Fixed Term Vacate Clause",
                  description     = "Requiring tenant to move at end of fixed term",
                  keywords        = ("must vacate", "vacate clause", "move out at end", "fixed term ending"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 44",
                  explanation     = "As of 2017, vacate clauses in fixed-term leases are no longer enforceable in BC unless specific conditions are met.",
                 ),

    # Maintenance
    ClausePattern(id              = "tenant-major-repairs",
                  category        = ClauseCategory.MAINTENANCE,
                  name            = "Tenant Responsible for Major Repairs",
                  description     = "Making tenant responsible for structural repairs",
                  keywords        = ("tenant responsible for repairs", "all repairs", "maintain at own expense", "fix at tenant cost"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 32",
                  explanation     = "Landlords are responsible for maintaining the rental unit. Clauses shifting major repair responsibilities to tenants may be unenforceable.",
                 ),

    # Privacy
    ClausePattern(id              = "unrestricted-entry",
                  category        = ClauseCategory.PRIVACY,
                  name            = "Unrestricted Landlord Entry",
                  description     = "Allowing landlord entry without proper notice",
                  keywords        = ("enter at any time", "access without notice", "right to inspect", "enter without permission"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 29",
                  explanation     = "Landlords must give 24 hours written notice before entering, except in emergencies. Clauses allowing unlimited access are illegal.",
                 ),

    # Pets
    ClausePattern(id              = "no-pets-strata",
                  category        = ClauseCategory.PETS,
                  name            = "No Pets Clause (Strata)",
                  description     = "Pet restriction in strata properties",
                  keywords        = ("no pets", "pets not allowed", "pet free", "no animals"),
                  is_malicious    = False,
                  severity        = Severity.LOW,
                  legal_reference = "BC Strata Property Act",
                  explanation     = "In strata properties, no-pet rules may be enforceable if part of strata bylaws. In non-strata rentals, landlords generally cannot prohibit pets.",
                 ),

    # Subletting
    ClausePattern(id              = "no-subletting",
                  category        = ClauseCategory.SUBLETTING,
                  name            = "Subletting Restrictions",
                  description     = "Prohibition on subletting or assignment",
                  keywords        = ("no subletting", "cannot sublet", "no assignment", "cannot assign"),
                  is_malicious    = False,
                  severity        = Severity.LOW,
                  legal_reference = "BC RTA Section 34",
                  explanation     = "While landlords can restrict subletting, they cannot unreasonably refuse. This is important for students who may need to sublet during summer.",
                 ),

    # Utilities
    ClausePattern(id              = "utility-responsibility",
                  category        = ClauseCategory.UTILITIES,
                  name            = "Utility Responsibilities",
                  description     = "Unclear utility payment terms",
                  keywords        = ("utilities included", "tenant pays utilities", "hydro", "electricity", "gas", "water"),
                  is_malicious    = False,
                  severity        = Severity.LOW,
                  explanation     = "Make sure you understand which utilities you are responsible for. This should be clearly stated in the lease.",
                 ),

    # Standard terms
    ClausePattern(id              = "standard-notice",
                  category        = ClauseCategory.TERMINATION,
                  name            = "Standard Notice Period",
                  description     = "One month notice requirement",
                  keywords        = ("one month notice", "30 days notice", "notice to end tenancy"),
                  is_malicious    = False,
                  severity        = Severity.LOW,
                  legal_reference = "BC RTA Section 45",
                  explanation     = "Standard notice period for month-to-month tenancies is one month. This is a normal clause.",
                 ),
    ClausePattern(id              = "condition-inspection",
                  category        = ClauseCategory.MAINTENANCE,
                  name            = "Move-in/Move-out Inspection",
                  description     = "Requirement for condition inspection",
                  keywords        = ("condition inspection", "move-in inspection", "move-out inspection", "inspection report"),
                  is_malicious    = False,
                  severity        = Severity.LOW,
                  legal_reference = "BC RTA Section 23",
                  explanation     = "Condition inspections are required by law and protect both landlord and tenant. Make sure to complete these.",
                 ),
    ClausePattern(id              = "guest-restrictions",
                  category        = ClauseCategory.OTHER,
                  name            = "Excessive Guest Restrictions",
                  description     = "Unreasonable limits on having guests",
                  keywords        = ("no overnight guests", "guest limit", "visitors must", "register guests"),
                  is_malicious    = True,
                  severity        = Severity.MEDIUM,
                  explanation     = "While landlords can set reasonable rules, overly restrictive guest policies may infringe on your right to quiet enjoyment.",
                 ),
    ClausePattern(id              = "waiving-rights",
                  category        = ClauseCategory.OTHER,
                  name            = "Waiving Tenant Rights",
                  description     = "Clauses attempting to waive RTA protections",
                  keywords        = ("waive rights", "give up rights", "not covered by", "exempt from"),
                  is_malicious    = True,
                  severity        = Severity.HIGH,
                  legal_reference = "BC RTA Section 5",
                  explanation     = "Any clause that attempts to waive your rights under the Residential Tenancy Act is void and unenforceable.",
                 ),
)


CATEGORY_LABELS : Dict[ClauseCategory, str] = {ClauseCategory.SECURITY_DEPOSIT : "Security Deposit",
                                               ClauseCategory.RENT             : "Rent & Payments",
                                               ClauseCategory.TERMINATION      : "Termination & Eviction",
                                               ClauseCategory.MAINTENANCE      : "Maintenance & Repairs",
                                               ClauseCategory.PRIVACY          : "Privacy & Access",
                                               ClauseCategory.PETS             : "Pets",
                                               ClauseCategory.SUBLETTING       : "Subletting",
                                               ClauseCategory.UTILITIES        : "Utilities",
                                               ClauseCategory.OTHER            : "Other Terms",
                                              }

# Display style token per severity (hex colors used by the report renderer)
SEVERITY_STYLES : Dict[Severity, str] = {Severity.LOW    : "#2563eb",
                                         Severity.MEDIUM : "#ca8a04",
                                         Severity.HIGH   : "#dc2626",
                                        }


class ClausePatternSchema(BaseModel):
    """
    Validation schema for catalog entries supplied as JSON configuration
    """
    model_config    = ConfigDict(populate_by_name = True, extra = "ignore")

    id              : str            = Field(min_length = 1)
    category        : ClauseCategory
    name            : str
    description     : str            = ""
    keywords        : List[str]      = Field(min_length = 1)
    is_malicious    : bool           = Field(alias = "isMalicious")
    severity        : Severity       = Severity.LOW
    legal_reference : Optional[str]  = Field(default = None, alias = "legalReference")
    explanation     : str            = ""

    def to_pattern(self) -> ClausePattern:
        return ClausePattern(id              = self.id,
                             category        = self.category,
                             name            = self.name,
                             description     = self.description,
                             keywords        = tuple(self.keywords),
                             is_malicious    = self.is_malicious,
                             severity        = self.severity,
                             explanation     = self.explanation,
                             legal_reference = self.legal_reference,
                            )


def build_clause_catalog(entries: List[Dict[str, Any]]) -> Tuple[ClausePattern, ...]:
    """
    Validate raw catalog records and build an ordered, immutable catalog

    Arguments:
    ----------
        entries { list } : Raw catalog records (camelCase or snake_case keys)

    Returns:
    --------
           { tuple }     : Catalog of ClausePattern in the given order
    """
    if not isinstance(entries, list):
        raise CatalogError("Clause catalog must be a JSON array of clause patterns")

    catalog  = list()
    seen_ids = set()

    for index, entry in enumerate(entries):
        try:
            pattern = ClausePatternSchema.model_validate(entry).to_pattern()

        except ValidationError as e:
            raise CatalogError(f"Invalid clause pattern at index {index}: {e}") from e

        if pattern.id in seen_ids:
            raise CatalogError(f"Duplicate clause pattern id: '{pattern.id}'")

        seen_ids.add(pattern.id)
        catalog.append(pattern)

    return tuple(catalog)


def load_clause_catalog(path: Path) -> Tuple[ClausePattern, ...]:
    """
    Load a clause catalog from a JSON file
    """
    path = Path(path)

    try:
        with open(path, "r", encoding = "utf-8") as fh:
            entries = json.load(fh)

    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read clause catalog '{path}': {e}") from e

    return build_clause_catalog(entries)


def get_category_label(category: ClauseCategory) -> str:
    """
    Display label for a category, falling back to a title-cased value
    """
    return CATEGORY_LABELS.get(category, category.value.replace("_", " ").title())
