"""Prompt templating helpers."""
from __future__ import annotations

PARITY_TEMPLATE = "Is {{input}} odd or even?"

def render_prompt(template: str, user_input: str) -> str:
    """
    Render user input into the template.

    Args:
        template: Template content containing {{input}}.
        user_input: Input string.

    Returns:
        Rendered prompt.
    """
    return template.replace("{{input}}", user_input)

def parity_question(number_text: str) -> str:
    """Build the question sent to the model for one number."""
    return render_prompt(PARITY_TEMPLATE, number_text)
