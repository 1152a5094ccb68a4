"""Tests for matching candidate names against existing customers."""
import pytest

from ..processors.matcher import CustomerMatcher, levenshtein_score, NO_MATCH
from ..processors.store import CustomerRef

def refuse_scoring(left, right):
    raise AssertionError("fuzzy scoring should not run")

def fixed_score(value):
    return lambda left, right: value

def test_levenshtein_score():
    """Scores run from 0 (identical) to 1 (nothing in common)."""
    assert levenshtein_score('Acme', 'ACME') == 0.0
    assert levenshtein_score('Acme Corporation', 'Acme Corporaton') == pytest.approx(1 / 16)
    assert levenshtein_score('abc', 'xyz') == 1.0
    assert levenshtein_score('Acme Corp', 'Acme Corp Inc') == pytest.approx(4 / 13)

def test_exact_match_is_case_insensitive():
    customers = [CustomerRef(1, 'Beta LLC'), CustomerRef(2, 'Acme Corp')]
    result = CustomerMatcher(scorer=refuse_scoring).match('ACME CORP', customers)

    assert result.matched
    assert result.customer_id == 2
    assert result.method == 'exact'
    assert result.matched_name == 'Acme Corp'

def test_no_customers_means_no_match():
    assert CustomerMatcher(scorer=refuse_scoring).match('Acme Corp', []) == NO_MATCH

def test_one_character_typo_matches():
    customers = [CustomerRef(1, 'Beta LLC'), CustomerRef(7, 'Acme Corporation')]
    result = CustomerMatcher().match('Acme Corporaton', customers)

    assert result.matched
    assert result.customer_id == 7
    assert result.method == 'fuzzy'
    assert result.score == pytest.approx(0.0625)

def test_unrelated_name_does_not_match():
    customers = [CustomerRef(1, 'Acme Corporation')]
    result = CustomerMatcher().match('Totally Different Co', customers)

    assert not result.matched
    assert result.customer_id is None

def test_accept_threshold_is_strict():
    customers = [CustomerRef(1, 'Acme Corp')]

    at_boundary = CustomerMatcher(scorer=fixed_score(0.2)).match('Acme', customers)
    below_boundary = CustomerMatcher(scorer=fixed_score(0.19)).match('Acme', customers)

    assert not at_boundary.matched
    assert at_boundary.score == 0.2  # near miss is still reported
    assert below_boundary.matched
    assert below_boundary.customer_id == 1

def test_scores_beyond_search_threshold_are_discarded():
    customers = [CustomerRef(1, 'Acme Corp')]
    result = CustomerMatcher(scorer=fixed_score(0.35)).match('Acme', customers)

    assert result == NO_MATCH

def test_ties_go_to_lowest_id():
    customers = [CustomerRef(9, 'Acme Corp.'), CustomerRef(3, 'Acme Corp,'), CustomerRef(5, 'Acme Corp!')]
    result = CustomerMatcher().match('Acme Corp', customers)

    assert result.matched
    assert result.method == 'fuzzy'
    assert result.customer_id == 3

def test_best_score_wins_over_lower_id():
    customers = [CustomerRef(1, 'Acme Corp Intl'), CustomerRef(2, 'Acme Corporation')]
    result = CustomerMatcher().match('Acme Corporaton', customers)

    assert result.customer_id == 2
    assert result.score == pytest.approx(levenshtein_score('Acme Corporaton', 'Acme Corporation'))

def test_custom_thresholds():
    customers = [CustomerRef(1, 'Acme Corp')]
    loose = CustomerMatcher(search_threshold=0.5, accept_threshold=0.4)

    assert loose.match('Acme Corp Inc', customers).matched
    assert not CustomerMatcher().match('Acme Corp Inc', customers).matched

@pytest.mark.parametrize('search, accept', [(0.2, 0.3), (1.5, 0.2), (0.3, -0.1)])
def test_invalid_thresholds(search, accept):
    with pytest.raises(ValueError):
        CustomerMatcher(search_threshold=search, accept_threshold=accept)
