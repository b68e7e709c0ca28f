# DEPENDENCIES
from conftest import make_clause
from config.clause_catalog import BC_RENTAL_CLAUSES
from services.clause_matcher import ClauseMatcher


def test_first_declared_keyword_wins():
    matcher = ClauseMatcher()
    catalog = [make_clause("deposit", ["damage deposit", "security deposit"])]
    text    = "The security deposit is due now. A damage deposit is also listed."

    flagged = matcher.find_flagged_clauses(text, catalog)

    assert len(flagged) == 1
    # "damage deposit" is declared first, so it is reported even though it occurs later
    assert flagged[0].position == text.lower().find("damage deposit")


def test_only_first_occurrence_is_reported():
    matcher = ClauseMatcher()
    catalog = [make_clause("late", ["late fee"])]
    text    = "Late fee applies. Another late fee applies."

    flagged = matcher.find_flagged_clauses(text, catalog)

    assert [item.position for item in flagged] == [0]


def test_matching_is_case_insensitive():
    flagged = ClauseMatcher().find_flagged_clauses("NO PETS ALLOWED", [make_clause("pets", ["No Pets"])])

    assert len(flagged) == 1
    assert flagged[0].position == 0


def test_duplicate_ids_flag_once():
    catalog = [make_clause("dup", ["alpha"]),
               make_clause("dup", ["beta"]),
              ]

    flagged = ClauseMatcher().find_flagged_clauses("alpha and beta", catalog)

    assert len(flagged) == 1
    assert flagged[0].clause.keywords == ("alpha",)


def test_results_follow_catalog_order(small_catalog):
    text    = "No pets. A late fee of $20. The security deposit is $500."

    flagged = ClauseMatcher().find_flagged_clauses(text, small_catalog)

    assert [item.clause.id for item in flagged] == ["big-deposit", "late-fee", "no-pets"]


def test_context_excerpt_is_clamped_to_window():
    text    = ("A" * 150) + "Security Deposit" + ("B" * 150)

    flagged = ClauseMatcher().find_flagged_clauses(text, [make_clause("deposit", ["security deposit"])])

    assert flagged[0].position == 150
    assert flagged[0].matched_text == "..." + ("A" * 100) + "Security Deposit" + ("B" * 100) + "..."


def test_context_excerpt_near_text_boundaries():
    text    = "non-refundable fee"

    flagged = ClauseMatcher().find_flagged_clauses(text, [make_clause("fee", ["non-refundable"])])

    assert flagged[0].matched_text == "...non-refundable fee..."


def test_custom_context_window():
    text    = "xxxxx late fee yyyyy"

    flagged = ClauseMatcher(context_window = 2).find_flagged_clauses(text, [make_clause("late", ["late fee"])])

    assert flagged[0].matched_text == "...x late fee y..."


def test_empty_inputs():
    matcher = ClauseMatcher()

    assert matcher.find_flagged_clauses("", BC_RENTAL_CLAUSES) == []
    assert matcher.find_flagged_clauses("The security deposit is $500.", []) == []


def test_bc_catalog_matches_sample_lease(sample_lease):
    flagged = ClauseMatcher().find_flagged_clauses(sample_lease, BC_RENTAL_CLAUSES)

    assert [item.clause.id for item in flagged] == ["excessive-deposit",
                                                    "late-fees-excessive",
                                                    "unrestricted-entry",
                                                    "no-pets-strata",
                                                    "standard-notice",
                                                   ]

    for item in flagged:
        assert item.matched_text.startswith("...")
        assert item.matched_text.endswith("...")


def test_position_is_offset_in_original_text():
    # "İ" lowercases to two characters, which must not shift the reported offset
    text    = ("İ" * 150) + "late fee" + ("z" * 300)

    flagged = ClauseMatcher().find_flagged_clauses(text, [make_clause("late", ["late fee"])])

    assert flagged[0].position == 150
    assert flagged[0].matched_text == "..." + ("İ" * 100) + "late fee" + ("z" * 100) + "..."


def test_mixed_case_keyword_in_text():
    text    = "Tenant pays a LATE Fee monthly"

    flagged = ClauseMatcher().find_flagged_clauses(text, [make_clause("late", ["late fee"])])

    assert flagged[0].position == text.index("LATE Fee")
