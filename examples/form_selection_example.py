#!/usr/bin/env python3
"""
Example script demonstrating the form assistant end to end.

This script shows how to:
1. Suggest forms for a free-text request
2. Narrow the choice with guided discovery
3. Collect validated answers for the chosen form
"""

import sys
from pathlib import Path

# Add src to path
sys.path.append(str(Path(__file__).parent.parent / "src"))
sys.path.append(str(Path(__file__).parent.parent))

from config import settings
from form_assistant import FormAssistant


def suggest_example(assistant: FormAssistant):
    """Rank forms for a typed request."""
    request = "I want to change my beneficiary"
    print(f"Suggestions for: {request!r}")
    for i, candidate in enumerate(assistant.match_intent(request), start=1):
        print(f"  {i}. {candidate.title} ({candidate.template_id})")
        print(f"     Confidence: {candidate.confidence * 100:.1f}%")
        print(f"     Matched keywords: {', '.join(candidate.matched_keywords) or '-'}")


def discovery_example(assistant: FormAssistant) -> str:
    """Walk the discovery questionnaire with scripted answers."""
    discovery = assistant.discovery
    discovery.start()

    for answer in ["Surrender my policy", "Partial surrender (withdraw some cash value)"]:
        question = discovery.current_question()
        print(f"\nQ: {question.question}")
        if question.options:
            print(f"   Options: {', '.join(question.options)}")
        print(f"A: {answer}")
        result = discovery.submit_answer(answer)

    print(f"\nRecommended forms: {', '.join(result.suggestions)}")
    return result.suggestions[0]


def elicitation_example(assistant: FormAssistant, template_id: str):
    """Fill in a form, including one rejected answer that is asked again."""
    elicitation = assistant.elicitation
    elicitation.start(template_id)

    answers = ["POL123456", "Jane Doe", "partial", "partial surrender", "$5,000", "financial need"]
    for answer in answers:
        question = elicitation.current_question()
        result = elicitation.submit_answer(answer)
        status = "ok" if result.success else f"rejected: {result.error}"
        print(f"  {question.label}: {answer!r} -> {status}")

    progress = elicitation.progress()
    print(f"\nProgress: {progress.current}/{progress.total} ({progress.percentage}%)")
    print()
    print(elicitation.render_summary())


if __name__ == "__main__":
    print("Form Selection Example")
    print("=" * 40)

    assistant = FormAssistant.from_settings(settings, configure_logs=True)

    suggest_example(assistant)
    chosen = discovery_example(assistant)
    elicitation_example(assistant, chosen)
