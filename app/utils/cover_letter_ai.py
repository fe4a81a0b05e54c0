from openai import OpenAI
from dotenv import load_dotenv
import logging
import os

load_dotenv()

logger = logging.getLogger(__name__)

# Gemini through its OpenAI-compatible endpoint
AI_BASE_URL = os.getenv("AI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")
AI_MODEL = os.getenv("AI_MODEL", "gemini-1.5-flash")
AI_MAX_TOKENS = int(os.getenv("AI_MAX_TOKENS", "1500"))
AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.7"))

_client = None


class CoverLetterGenerationError(Exception):
    """The text-generation call failed or returned nothing usable"""


def get_client() -> OpenAI:
    global _client
    if _client is None:
        _client = OpenAI(
            api_key=os.getenv("AI_API_KEY") or os.getenv("GEMINI_API_KEY"),
            base_url=AI_BASE_URL
        )
    return _client


def build_cover_letter_prompt(user, job_title: str, company_name: str, job_description: str) -> str:
    """
    Fill the cover letter prompt with the job details and the user's profile
    """
    skills = ", ".join(user.skills) if user.skills else ""

    return f"""Write a professional cover letter for a {job_title} position at {company_name}.

About the candidate:
- Industry: {user.industry}
- Years of Experience: {user.experience}
- Skills: {skills}
- Professional Background: {user.bio}

Job Description:
{job_description}

Requirements:
1. Use a professional, enthusiastic tone
2. Highlight relevant skills and experience
3. Show understanding of the company's needs
4. Keep it concise (max 400 words)
5. Use proper business letter formatting in markdown
6. Include specific examples of achievements
7. Relate candidate's background to job requirements

Format the letter in markdown.
"""


def generate_cover_letter_content(prompt: str) -> str:
    """
    Send the prompt to the hosted model and return the trimmed letter text.
    One blocking request, no retries.
    """
    try:
        response = get_client().chat.completions.create(
            model=AI_MODEL,
            messages=[
                {"role": "user", "content": prompt}
            ],
            temperature=AI_TEMPERATURE,
            max_tokens=AI_MAX_TOKENS
        )
        content = response.choices[0].message.content
    except Exception as e:
        raise CoverLetterGenerationError(str(e)) from e

    if not content or not content.strip():
        raise CoverLetterGenerationError("Model returned an empty response")

    return content.strip()
