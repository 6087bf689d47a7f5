# /boilerforge-backend/app/services/ruleset_service.py

"""
Compiles a generation prompt into the list of technology rules that apply to
it, and assembles the final system prompt sent to the model.

Matching is a plain substring search of each rule keyword in the normalized
prompt. It is deliberately simple: the prompt is composed by our own form,
so the labels it contains are predictable.
"""

from typing import List

from . import prompt_library


def normalize_prompt(prompt: str) -> str:
    """Trimmed + lowercased. Used for both rule matching and the cache key."""
    return (prompt or "").strip().lower()


def compile_rules(prompt: str) -> List[str]:
    """Returns the rules whose keyword appears in the prompt, in dictionary order."""
    normalized = normalize_prompt(prompt)
    if not normalized:
        return []

    matched: List[str] = []
    for keyword, rule in prompt_library.TECH_RULES.items():
        if keyword in normalized and rule not in matched:
            matched.append(rule)
    return matched


def build_system_prompt(prompt: str) -> str:
    """The base system prompt, followed by a numbered rules section when any rule matches."""
    base = prompt_library.BOILERPLATE_SYSTEM_PROMPT.strip()
    rules = compile_rules(prompt)
    if not rules:
        return base

    rule_lines = [f"{index}.  {rule}" for index, rule in enumerate(rules, start=1)]
    return f"{base}\n\n{prompt_library.TECH_RULES_HEADER}\n" + "\n".join(rule_lines)


def build_user_prompt(prompt: str) -> str:
    # The user turn keeps the original casing; only the cache key is normalized.
    return prompt_library.BOILERPLATE_USER_PROMPT.format(prompt=prompt.strip()).strip()
