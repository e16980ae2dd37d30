import pytest

from form_assistant.discovery import ROOT_NODE_ID, DiscoveryEngine, DiscoveryGraph, DiscoveryNode


def test_no_session_before_start(discovery):
    assert discovery.current_question() is None
    assert discovery.snapshot() is None
    result = discovery.submit_answer("anything")
    assert not result.ok
    assert result.error.kind == "NoActiveSession"


def test_start_asks_root_question(discovery):
    discovery.start()
    question = discovery.current_question()
    assert question.id == ROOT_NODE_ID
    assert question.question == "What would you like to do with your insurance policy?"
    assert "Other" in question.options


def test_branching_answer_moves_to_follow_up(discovery):
    discovery.start()
    result = discovery.submit_answer("Change beneficiary information")
    assert result.ok
    assert not result.completed
    assert result.suggestions is None
    assert discovery.current_question().id == "beneficiary-type"
    assert not discovery.snapshot().is_complete


def test_unknown_root_answer_completes_with_default(discovery):
    discovery.start()
    result = discovery.submit_answer("something entirely different")
    assert result.completed
    assert result.suggestions == ("beneficiary-change",)
    assert discovery.current_question() is None


def test_follow_up_match_is_exact(discovery):
    discovery.start()
    result = discovery.submit_answer("change beneficiary information")
    # Lowercase answer is not a follow-up key, but keywords still match
    assert result.completed
    assert result.suggestions == ("beneficiary-change",)


def test_canonical_root_answer_suggestions(discovery):
    discovery.start()
    discovery.submit_answer("Take a loan against my policy")
    result = discovery.submit_answer("Automatic premium loan")
    assert result.completed
    assert result.suggestions == ("loan-form",)


def test_surrender_branches_on_secondary_answer(discovery):
    discovery.start()
    discovery.submit_answer("Surrender my policy")
    result = discovery.submit_answer("Non-forfeiture option (keep some benefits)")
    assert result.suggestions == ("non-forfeiture-option",)

    discovery.start()
    discovery.submit_answer("Surrender my policy")
    result = discovery.submit_answer("Full surrender (cancel policy)")
    assert result.suggestions == ("surrender-form",)


def test_policy_details_suggest_amendment(discovery):
    discovery.start()
    discovery.submit_answer("Change policy details")
    assert discovery.submit_answer("Coverage amount").suggestions == ("amendment-request",)


def test_free_text_falls_back_to_keywords(discovery):
    discovery.start()
    discovery.submit_answer("Other")
    assert discovery.current_question().type == "text"
    result = discovery.submit_answer("I would like to borrow money and ask about my annuity")
    assert result.suggestions == ("loan-form", "annuity-contract-change")


def test_answers_recorded_verbatim_in_order(discovery):
    discovery.start()
    discovery.submit_answer("Other")
    discovery.submit_answer("  Something Odd  ")
    snapshot = discovery.snapshot()
    assert list(snapshot.answers.items()) == [("intent", "Other"), ("describe-need", "  Something Odd  ")]
    assert snapshot.current_node_id is None
    assert snapshot.suggested_template_ids == ["beneficiary-change"]


def test_answer_after_completion_fails(discovery):
    discovery.start()
    discovery.submit_answer("nothing useful")
    result = discovery.submit_answer("again")
    assert result.error.kind == "NoCurrentQuestion"
    assert len(discovery.snapshot().answers) == 1


def test_snapshot_is_a_copy(discovery):
    discovery.start()
    discovery.snapshot().answers["intent"] = "tampered"
    assert discovery.snapshot().answers == {}


def test_reset_discards_session(discovery):
    discovery.start()
    discovery.reset()
    assert discovery.current_question() is None
    assert discovery.submit_answer("Other").error.kind == "NoActiveSession"


def test_start_supersedes_previous_session(discovery):
    discovery.start()
    discovery.submit_answer("Other")
    discovery.start()
    assert discovery.current_question().id == ROOT_NODE_ID
    assert discovery.snapshot().answers == {}


def test_sessions_are_independent(discovery):
    discovery.start(session_id="a")
    discovery.start(session_id="b")
    discovery.submit_answer("Surrender my policy", session_id="a")
    assert discovery.current_question("a").id == "surrender-type"
    assert discovery.current_question("b").id == ROOT_NODE_ID
    assert discovery.current_question() is None


def test_progress(discovery):
    assert discovery.progress().questions_answered == 0
    discovery.start()
    discovery.submit_answer("Apply for reinstatement")
    discovery.submit_answer("Other reinstatement situation")
    progress = discovery.progress()
    assert progress.questions_answered == 2
    assert progress.forms_narrowed == 1
    assert progress.is_complete


def test_default_suggestion_is_configurable(catalog):
    engine = DiscoveryEngine(catalog, default_suggestion="amendment-request")
    engine.start()
    assert engine.submit_answer("xyz").suggestions == ("amendment-request",)


def test_graph_rejects_dangling_links():
    nodes = [DiscoveryNode(id="intent", question="?", type="select", follow_up={"a": "missing"})]
    with pytest.raises(ValueError):
        DiscoveryGraph(nodes)
