# /tests/test_ruleset_service.py

from app.services import ruleset_service, prompt_library


def test_normalize_prompt_trims_and_lowercases():
    assert ruleset_service.normalize_prompt("  Python, FastAPI  ") == "python, fastapi"
    assert ruleset_service.normalize_prompt("") == ""
    assert ruleset_service.normalize_prompt(None) == ""


def test_compile_rules_matches_keywords_case_insensitively():
    rules = ruleset_service.compile_rules("Language: Node.js (TypeScript), Framework: Express, Database: MongoDB (Mongoose)")

    assert prompt_library.TECH_RULES["typescript"] in rules
    assert prompt_library.TECH_RULES["express"] in rules
    assert prompt_library.TECH_RULES["mongoose"] in rules
    assert prompt_library.TECH_RULES["fastapi"] not in rules


def test_compile_rules_keeps_dictionary_order():
    prompt = "Include Dockerfile & docker-compose, Language: Python, Framework: FastAPI"
    rules = ruleset_service.compile_rules(prompt)

    expected_order = [
        prompt_library.TECH_RULES["language: python"],
        prompt_library.TECH_RULES["fastapi"],
        prompt_library.TECH_RULES["docker"],
    ]
    assert rules == expected_order


def test_anchored_keywords_do_not_match_ordinary_words():
    # "gin" is inside "engine", "java" inside "javascript".
    rules = ruleset_service.compile_rules("A search engine written in JavaScript")
    assert prompt_library.TECH_RULES["framework: gin"] not in rules
    assert prompt_library.TECH_RULES["language: java"] not in rules


def test_compile_rules_on_empty_prompt_returns_nothing():
    assert ruleset_service.compile_rules("   ") == []


def test_build_system_prompt_without_matches_is_the_base_prompt():
    system_prompt = ruleset_service.build_system_prompt("something completely generic")
    assert system_prompt == prompt_library.BOILERPLATE_SYSTEM_PROMPT.strip()
    assert prompt_library.TECH_RULES_HEADER not in system_prompt


def test_build_system_prompt_appends_numbered_rules():
    system_prompt = ruleset_service.build_system_prompt("Language: Python, Framework: Django")

    assert system_prompt.startswith(prompt_library.BOILERPLATE_SYSTEM_PROMPT.strip())
    assert prompt_library.TECH_RULES_HEADER in system_prompt
    rules_section = system_prompt.split(prompt_library.TECH_RULES_HEADER)[1]
    assert f"1.  {prompt_library.TECH_RULES['language: python']}" in rules_section
    assert f"2.  {prompt_library.TECH_RULES['django']}" in rules_section


def test_build_user_prompt_keeps_original_casing():
    user_prompt = ruleset_service.build_user_prompt("  Go (Golang), Gin  ")
    assert "Generate a starter kit for: Go (Golang), Gin." in user_prompt
