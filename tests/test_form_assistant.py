import logging

from config import LoggingSettings, Settings, configure_logging
from form_assistant import FormAssistant, suggest_forms
from form_assistant.discovery import DEFAULT_SUGGESTION


def _assistant(**overrides):
    return FormAssistant.from_settings(Settings(**overrides))


def test_settings_environment_overrides():
    assert Settings(environment="production").logging.log_level == "WARNING"
    assert Settings(environment="development").logging.log_level == "DEBUG"


def test_nested_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MATCHING__MAX_RESULTS", "1")
    monkeypatch.setenv("VALIDATION__DATE_FORMAT", "us")
    cfg = Settings()
    assert cfg.matching.max_results == 1
    assert cfg.validation.date_format == "us"


def test_template_lookup_round_trip():
    assistant = _assistant()
    for template_id in assistant.list_template_ids():
        assert assistant.get_template(template_id).id == template_id
    assert assistant.form_summary("loan-form").title == "Policy Loan Application"


def test_match_intent_respects_max_results():
    assistant = _assistant(matching={"max_results": 1})
    text = "cash value surrender or a policy loan"
    assert len(assistant.match_intent(text)) == 1
    assert len(assistant.match_intent(text, max_results=5)) >= 2
    assert assistant.match_intent("") == []


def test_best_match_and_convenience_wrapper():
    assistant = _assistant()
    assert assistant.best_match("I want to change my beneficiary").template_id == "beneficiary-change"
    assert suggest_forms("reinstate my lapsed policy")[0].template_id == "reinstatement-application"


def test_configured_default_suggestion_and_date_format():
    assistant = _assistant(discovery={"default_suggestion": "loan-form"}, validation={"date_format": "us"})
    assistant.discovery.start()
    assert assistant.discovery.submit_answer("zzz").suggestions == ("loan-form",)

    assistant.elicitation.start("annuity-contract-change")
    for answer in ["CN123456", "Jane Doe", "Other", "Move payments to the first of the month"]:
        assert assistant.elicitation.submit_answer(answer).success
    assert assistant.elicitation.submit_answer("2024-01-15").error.validation == "InvalidDateFormat"
    assert assistant.elicitation.submit_answer("01/15/2024").is_complete


def test_documents_use_configured_directory(tmp_path):
    assistant = _assistant(documents={"forms_dir": tmp_path})
    assert assistant.locate_document("loan-form") is None
    assert assistant.inspect_document("loan-form") is None


def test_resource_uri():
    assert _assistant().resource_uri("surrender-form", {"type": "partial"}) == "form://surrender-form?type=partial"


def test_configure_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "assistant.log"
    logger = configure_logging(LoggingSettings(log_file=log_file, console_logging=False, log_level="debug"))
    assert logger.level == logging.DEBUG

    FormAssistant.from_settings(Settings()).discovery.start()
    for handler in logger.handlers:
        handler.flush()
    assert "Started discovery session" in log_file.read_text(encoding="utf-8")
    configure_logging(LoggingSettings(console_logging=False))


def test_development_keeps_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOGGING__LOG_LEVEL", "warning")
    assert Settings().logging.log_level == "WARNING"
    assert Settings(environment="production").logging.log_level == "WARNING"


def test_unset_default_suggestion_uses_engine_default():
    assert Settings().discovery.default_suggestion is None
    assistant = _assistant()
    assert assistant.discovery.default_suggestion == DEFAULT_SUGGESTION
