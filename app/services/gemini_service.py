# /boilerforge-backend/app/services/gemini_service.py

import json
from typing import Dict, Optional

import google.generativeai as genai
from google.generativeai.types import GenerationConfig

from ..core.config import GOOGLE_API_KEY, GEMINI_MODEL

# --- CONFIGURATION (STABLE) ---
if not GOOGLE_API_KEY:
    raise ValueError("FATAL ERROR: GOOGLE_API_KEY environment variable is not set.")

genai.configure(api_key=GOOGLE_API_KEY)


# --- CORE GENERATIVE FUNCTIONS ---

async def generate_json(prompt: str, system_instruction: Optional[str] = None, temperature: float = 0.1) -> Dict:
    """
    Generates a response and GUARANTEES the output is a parsable JSON object
    by using the Gemini API's JSON Mode.
    """
    try:
        model = genai.GenerativeModel(GEMINI_MODEL, system_instruction=system_instruction)
        config = GenerationConfig(
            temperature=temperature,
            response_mime_type="application/json"
        )
        response = await model.generate_content_async(prompt, generation_config=config)
        if not response.parts or not response.text:
            raise ValueError("AI model returned an empty response.")

        usage = getattr(response, "usage_metadata", None)
        if usage:
            print(f"[TOKEN-USAGE] generate_json - Prompt: {getattr(usage, 'prompt_token_count', 0)}, "
                  f"Completion: {getattr(usage, 'candidates_token_count', 0)}, "
                  f"Total: {getattr(usage, 'total_token_count', 0)}")

        parsed = json.loads(response.text)
        if not isinstance(parsed, dict):
            raise ValueError("AI model returned JSON that is not an object.")
        return parsed
    except Exception as e:
        print(f"ERROR in generate_json with Gemini API: {e}")
        raise ValueError(f"Failed to get a valid JSON response from the AI. Error: {e}")
