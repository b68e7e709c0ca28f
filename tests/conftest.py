# DEPENDENCIES
import sys
import pytest
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.clause_catalog import Severity
from config.clause_catalog import ClausePattern
from config.clause_catalog import ClauseCategory


SAMPLE_LEASE = """RESIDENTIAL TENANCY AGREEMENT

Landlord: John Smith, of Vancouver
Tenant: Jane Doe
Premises: 123 Main Street, Vancouver, BC V5K 0A1
Start date: September 1, 2024
End date: August 31, 2025

Monthly rent: $1,800 payable on the first day of each month.
Security deposit: $900 to be held in trust.
The landlord may enter at any time to inspect the unit.
A late fee of $50 applies to rent received after the 5th.
No pets are permitted in the unit.
The tenant must give one month notice to end the tenancy.
Either party may end this agreement with 60 days written notice.
"""


def make_clause(clause_id: str, keywords, is_malicious: bool = True, severity: Severity = Severity.HIGH, category: ClauseCategory = ClauseCategory.OTHER) -> ClausePattern:
    return ClausePattern(id           = clause_id,
                         category     = category,
                         name         = clause_id.replace("-", " ").title(),
                         description  = f"Test clause {clause_id}",
                         keywords     = tuple(keywords),
                         is_malicious = is_malicious,
                         severity     = severity,
                         explanation  = "",
                        )


@pytest.fixture
def sample_lease() -> str:
    return SAMPLE_LEASE


@pytest.fixture
def small_catalog():
    return (make_clause("big-deposit", ["security deposit", "damage deposit"], category = ClauseCategory.SECURITY_DEPOSIT),
            make_clause("late-fee", ["late fee"], severity = Severity.MEDIUM, category = ClauseCategory.RENT),
            make_clause("no-pets", ["no pets"], is_malicious = False, severity = Severity.LOW, category = ClauseCategory.PETS),
           )
