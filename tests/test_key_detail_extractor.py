# DEPENDENCIES
from config.clause_catalog import ClauseCategory
from services.key_detail_extractor import KeyDetailExtractor


def _as_dict(key_details):
    return {detail.label: detail.value for detail in key_details}


def test_sample_lease_details(sample_lease):
    details = _as_dict(KeyDetailExtractor().extract_key_details(sample_lease))

    assert details == {"Monthly Rent"     : "1,800",
                       "Security Deposit" : "900",
                       "Lease Start Date" : "September 1, 2024",
                       "Lease End Date"   : "August 31, 2025",
                       "Property Address" : "123 Main Street, Vancouver, BC V5K 0A1",
                       "Landlord Name"    : "John Smith",
                       "Notice Period"    : "60",
                      }


def test_details_follow_rule_order(sample_lease):
    labels = [detail.label for detail in KeyDetailExtractor().extract_key_details(sample_lease)]

    assert labels == ["Monthly Rent",
                      "Security Deposit",
                      "Lease Start Date",
                      "Lease End Date",
                      "Property Address",
                      "Landlord Name",
                      "Notice Period",
                     ]


def test_deposit_requires_adjacent_amount():
    details = _as_dict(KeyDetailExtractor().extract_key_details("The security deposit is $3000. Monthly rent: $1200."))

    assert details == {"Monthly Rent": "1200"}


def test_numeric_dates_and_damage_deposit():
    text    = "Commencement date: 09/01/2024\nDamage deposit: $750.00"
    details = _as_dict(KeyDetailExtractor().extract_key_details(text))

    assert details["Lease Start Date"] == "09/01/2024"
    assert details["Security Deposit"] == "750.00"


def test_categories_are_attached():
    details = KeyDetailExtractor().extract_key_details("Rent: $1000")

    assert len(details) == 1
    assert details[0].category == ClauseCategory.RENT


def test_no_details_in_unrelated_text():
    assert KeyDetailExtractor().extract_key_details("") == []
    assert KeyDetailExtractor().extract_key_details("Nothing to see here.") == []


def test_custom_patterns():
    extractor = KeyDetailExtractor(patterns = [("Parking Fee", r'parking[:\s]+\$?(\d+)', ClauseCategory.OTHER)])
    details   = extractor.extract_key_details("PARKING: $40 per month")

    assert _as_dict(details) == {"Parking Fee": "40"}


def test_find_detail():
    details = KeyDetailExtractor().extract_key_details("Rent: $1000")

    assert KeyDetailExtractor.find_detail(details, "Monthly Rent").value == "1000"
    assert KeyDetailExtractor.find_detail(details, "Security Deposit") is None


def test_only_ascii_digits_are_extracted():
    assert KeyDetailExtractor().extract_key_details("Rent: ١٢٠٠") == []
    assert _as_dict(KeyDetailExtractor().extract_key_details("Rent: 1200")) == {"Monthly Rent": "1200"}
