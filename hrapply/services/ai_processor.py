"""
Resume parser backed by the OpenAI chat completions API
Turns raw resume text into pre-filled Application Record fields
"""

import asyncio
import json
import time
from typing import Any, Dict, Optional

import structlog

from hrapply.core.exceptions import ResumeParsingError

logger = structlog.get_logger()


SYS_PARSER = """You are a resume parser. Extract information from the resume text and return a JSON object with these fields (use empty string if not found):
- firstNameTh, lastNameTh (Thai name)
- firstNameEn, lastNameEn (English name)
- nickname
- address, moo, subDistrict, district, province, zipCode
- mobile, email
- birthDate (YYYY-MM-DD format)
- age
- idCard (13 digits)
- sex (male/female)
- bloodType (A/B/AB/O)
- religion
- height, weight
- maritalStatus (single/married)
- bachelorYear, bachelorName, bachelorMajor, bachelorGpa
- masterYear, masterName, masterMajor, masterGpa
- work1Period, work1Company, work1Position, work1Responsibilities, work1Salary, work1Reason
- work2Period, work2Company, work2Position, work2Responsibilities, work2Salary, work2Reason
- englishSpoken, englishWritten, englishUnderstand (excellent/good/fair/no)
- computerSkills
- training1Course, training1Institution, training1Year

Return ONLY valid JSON, no markdown."""


class AIProcessor:
    """
    Resume field extraction through a chat completion model
    Upstream failures are raised to the caller; nothing is retried
    """

    def __init__(
        self,
        openai_api_key: Optional[str],
        model_text: str = "gpt-4o-mini",
        temperature: float = 0.1,
        timeout: float = 60.0,
        client: Any = None,
    ):
        self.api_key = openai_api_key
        self.model_text = model_text
        self.temperature = temperature
        self.timeout = float(timeout)
        self.client = client

        # Non-sensitive diagnostic
        logger.info(
            "AIProcessor init",
            openai_key_present=bool(openai_api_key),
            openai_key_prefix=(openai_api_key[:5] + "***") if openai_api_key else "none",
            model_text=self.model_text,
            timeout=self.timeout,
        )

    @classmethod
    def from_settings(cls, settings) -> "AIProcessor":
        config = settings.get_openai_config()
        return cls(
            config["api_key"],
            model_text=config["model_text"],
            temperature=config["temperature"],
            timeout=config["timeout"],
        )

    def _get_client(self):
        """Create the OpenAI client on first use"""
        if self.client is not None:
            return self.client
        if not self.api_key:
            raise ResumeParsingError("OpenAI API key is not configured")

        from openai import OpenAI

        # Explicit key, no SDK-level retries
        self.client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self.client

    async def extract_fields(self, resume_text: str) -> Dict[str, Any]:
        """
        Ask the model for Application Record fields found in the resume

        Args:
            resume_text: Plain text of the uploaded resume

        Returns:
            dict: Field name to extracted value, unknown fields as ""

        Raises:
            ResumeParsingError: If the reply is not a JSON object
        """
        client = self._get_client()

        logger.info("Resume parsing starting", model_text=self.model_text, text_length=len(resume_text))

        start_time = time.time()
        response = await asyncio.to_thread(
            client.chat.completions.create,
            model=self.model_text,
            messages=[
                {"role": "system", "content": SYS_PARSER},
                {"role": "user", "content": resume_text}
            ],
            temperature=self.temperature,
        )

        processing_time = time.time() - start_time
        logger.info(f"OpenAI resume parsing completed in {processing_time:.2f}s")

        content = response.choices[0].message.content or ""
        return self._parse_reply(content)

    @staticmethod
    def _parse_reply(content: str) -> Dict[str, Any]:
        try:
            parsed = json.loads(content.strip())
        except json.JSONDecodeError as e:
            logger.warning("Completion reply is not valid JSON", error=str(e), reply_length=len(content))
            raise ResumeParsingError(f"Could not parse completion reply as JSON: {e}") from e

        if not isinstance(parsed, dict):
            raise ResumeParsingError("Completion reply is not a JSON object")

        return parsed
