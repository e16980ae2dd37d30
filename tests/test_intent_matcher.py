import pytest

from form_assistant.matching import CONFIDENCE_THRESHOLD, IntentMatcher, MatchWeights, spaced_id


def test_empty_input_matches_nothing(matcher):
    assert matcher.score("") == []
    assert matcher.score("   ") == []
    assert matcher.score(None) == []
    assert matcher.best("") is None


def test_unknown_words_match_nothing(matcher):
    assert matcher.score("what's the weather like today") == []


def test_beneficiary_change_ranks_first(matcher):
    best = matcher.best("I want to change my beneficiary")
    assert best.template_id == "beneficiary-change"
    assert best.confidence > 0.7
    assert "beneficiary" in best.matched_keywords


def test_confidence_is_capped(matcher):
    best = matcher.best("Policy loan: I want to borrow a loan against policy, loan form please")
    assert best.template_id == "loan-form"
    assert best.confidence == pytest.approx(1.0)


def test_keyword_only_score(catalog):
    # Patterns disabled: "heir" is a keyword with no overlapping pattern or id hit
    matcher = IntentMatcher(catalog, patterns={})
    (candidate,) = matcher.score("my heir")
    assert candidate.template_id == "beneficiary-change"
    assert candidate.confidence == pytest.approx(0.3)
    assert candidate.matched_keywords == ("heir",)


def test_id_bonus_uses_spaced_id(catalog):
    matcher = IntentMatcher(catalog, patterns={}, weights=MatchWeights(keyword=0.0))
    (candidate,) = matcher.score("please send the amendment request")
    assert candidate.template_id == "amendment-request"
    assert candidate.confidence == pytest.approx(0.5)


def test_spaced_id_replaces_every_separator():
    assert spaced_id("non-forfeiture-option") == "non forfeiture option"
    assert spaced_id("Loan_Form") == "loan form"


def test_threshold_is_exclusive(catalog):
    weights = MatchWeights(keyword=CONFIDENCE_THRESHOLD, pattern=0.0, id_bonus=0.0)
    matcher = IntentMatcher(catalog, patterns={}, weights=weights)
    assert matcher.score("heir") == []


def test_results_are_sorted_and_stable(matcher):
    ranked = matcher.score("cash value surrender or a policy loan")
    scores = [c.confidence for c in ranked]
    assert scores == sorted(scores, reverse=True)
    assert {c.template_id for c in ranked} >= {"surrender-form", "loan-form"}


def test_ties_keep_catalog_order(catalog):
    matcher = IntentMatcher(catalog, patterns={})
    ranked = matcher.score("heir and borrow")
    assert [c.template_id for c in ranked] == ["beneficiary-change", "loan-form"]


def test_matching_is_idempotent(matcher):
    text = "I need to reinstate my lapsed policy"
    assert matcher.score(text) == matcher.score(text)


def test_top_limits_results(matcher):
    text = "cash value surrender or a policy loan, maybe change policy"
    assert len(matcher.top(text, 1)) == 1
    assert matcher.top(text, 0) == []
    assert matcher.top(text, 2) == matcher.score(text)[:2]


def test_input_is_case_insensitive(matcher):
    assert matcher.score("ANNUITY") == matcher.score("annuity")
