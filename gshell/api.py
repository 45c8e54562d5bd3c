import logging
import os
import platform
from typing import Iterator, Optional

import google.generativeai as genai

from .errors import StreamError
from .i18n import LANGUAGE_NAMES
from .stream import StreamReader

# Configure logging
logger = logging.getLogger(__name__)


def _chunk_texts(response) -> Iterator[str]:
    """Yields the text of each streamed chunk, skipping chunks without text parts."""
    for chunk in response:
        if not chunk.parts:
            continue
        yield chunk.text


class GeminiClient:
    """A client for streaming shell scripts and explanations from the Gemini API."""

    def __init__(self, api_key: str, model: str, api_endpoint: Optional[str] = None, language: str = "en"):
        """
        Initializes the GeminiClient.

        Args:
            api_key: The Google API key.
            model: The model to use for generation.
            api_endpoint: Optional API host overriding the public endpoint.
            language: Language code the explanations are written in.
        """
        self.api_key = api_key
        self.model_name = model
        self.api_endpoint = api_endpoint
        self.language = language
        if api_endpoint:
            genai.configure(
                api_key=self.api_key,
                transport="rest",
                client_options={"api_endpoint": api_endpoint},
            )
        else:
            genai.configure(api_key=self.api_key)
        self.model = genai.GenerativeModel(self.model_name)
        logger.info(f"Initialized Gemini client with model: {self.model_name}")

    def _get_environment_description(self) -> str:
        shell = os.path.basename(os.environ.get("SHELL", "")) or ("powershell" if platform.system() == "Windows" else "sh")
        return f"{platform.system()} {platform.release()} with the {shell} shell"

    def _get_language_instruction(self) -> str:
        return f"Please reply in {LANGUAGE_NAMES.get(self.language, 'English')}."

    def _construct_script_prompt(self, instruction: str) -> str:
        """Constructs the prompt for generating a script and its explanation."""
        return f"""
You are an expert terminal assistant. Convert the user's request into a single shell command that can be run as-is.

**Environment:** {self._get_environment_description()}

**Response format:**
- First, the command in a single fenced code block (```sh ... ```). Put nothing else in the block.
- Then, after the block, a short step by step explanation of what the command does.
- If the request cannot be turned into a command, return an empty code block and explain why.
- {self._get_language_instruction()}

**Request:**
"{instruction}"
"""

    def _construct_explanation_prompt(self, script: str) -> str:
        """Constructs the prompt for explaining an existing script."""
        return f"""
You are an expert terminal assistant. Explain the following shell script step by step, briefly and concisely.
Do not repeat the script itself. {self._get_language_instruction()}

**Environment:** {self._get_environment_description()}

**Script:**
```sh
{script}
```
"""

    def _construct_revision_prompt(self, feedback: str, code: str) -> str:
        """Constructs the prompt for revising a script from user feedback."""
        return f"""
You are an expert terminal assistant. Update the shell script below according to the user's requested changes.

**Environment:** {self._get_environment_description()}

**Response format:**
- Return only the updated command in a single fenced code block (```sh ... ```). No explanation.

**Current script:**
```sh
{code}
```

**Requested changes:**
"{feedback}"
"""

    def _stream(self, prompt: str) -> StreamReader:
        """Starts a streaming generation and wraps it in a StreamReader."""
        try:
            response = self.model.generate_content(prompt, stream=True)
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}")
            raise StreamError(f"Request to the Gemini API failed: {e}") from e
        return StreamReader(_chunk_texts(response))

    def generate_script_and_info(self, prompt: str) -> StreamReader:
        """Streams a script for a natural language request, followed by its explanation."""
        logger.info(f"Generating script for: {prompt}")
        return self._stream(self._construct_script_prompt(prompt))

    def generate_explanation(self, script: str) -> StreamReader:
        """Streams an explanation of a script."""
        logger.info(f"Generating explanation for: {script}")
        return self._stream(self._construct_explanation_prompt(script))

    def generate_revision(self, prompt: str, code: str) -> StreamReader:
        """Streams a revised script based on the user's feedback."""
        logger.info(f"Revising script {code!r} with: {prompt}")
        return self._stream(self._construct_revision_prompt(prompt, code))
