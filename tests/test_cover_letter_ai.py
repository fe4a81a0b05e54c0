from types import SimpleNamespace
from unittest.mock import patch, MagicMock

import pytest

from app.utils.cover_letter_ai import (
    build_cover_letter_prompt,
    generate_cover_letter_content,
    CoverLetterGenerationError,
)


def _user(**overrides):
    data = {
        "industry": "tech-software-development",
        "experience": 5,
        "skills": ["Python", "SQL"],
        "bio": "Backend developer",
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def _completion(text):
    message = SimpleNamespace(content=text)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def test_prompt_contains_job_and_profile():
    prompt = build_cover_letter_prompt(_user(), "Data Engineer", "Acme", "Build pipelines")

    assert "Write a professional cover letter for a Data Engineer position at Acme." in prompt
    assert "- Industry: tech-software-development" in prompt
    assert "- Years of Experience: 5" in prompt
    assert "- Skills: Python, SQL" in prompt
    assert "- Professional Background: Backend developer" in prompt
    assert "Build pipelines" in prompt
    assert "4. Keep it concise (max 400 words)" in prompt
    assert prompt.rstrip().endswith("Format the letter in markdown.")


def test_prompt_with_empty_profile():
    prompt = build_cover_letter_prompt(
        _user(industry=None, experience=None, skills=[], bio=None),
        "Designer", "Globex", "Design things",
    )

    assert "- Skills: \n" in prompt
    assert "- Industry: None" in prompt


def test_generate_returns_trimmed_text():
    client = MagicMock()
    client.chat.completions.create.return_value = _completion("\n  Dear Hiring Manager,\n\nHello.  \n")

    with patch("app.utils.cover_letter_ai.get_client", return_value=client):
        content = generate_cover_letter_content("prompt")

    assert content == "Dear Hiring Manager,\n\nHello."
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]


def test_generate_wraps_provider_errors():
    client = MagicMock()
    client.chat.completions.create.side_effect = RuntimeError("quota exceeded")

    with patch("app.utils.cover_letter_ai.get_client", return_value=client):
        with pytest.raises(CoverLetterGenerationError, match="quota exceeded"):
            generate_cover_letter_content("prompt")


def test_generate_rejects_empty_response():
    client = MagicMock()
    client.chat.completions.create.return_value = _completion("   ")

    with patch("app.utils.cover_letter_ai.get_client", return_value=client):
        with pytest.raises(CoverLetterGenerationError):
            generate_cover_letter_content("prompt")
