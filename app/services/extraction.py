"""
extraction.py

Sends a business card image to the OpenAI vision model and returns the
model's raw text. Parsing that text is the normalizer's job, not ours.
"""
import base64
import logging
from typing import Optional

import openai
from openai import OpenAI

from app.errors import ExtractionError

log = logging.getLogger(__name__)

EXTRACTION_PROMPT = (
    "Please identify all business card information in this image. "
    "Extract the following from each card: name, position, email, phone number, "
    "company name, company address. Return as a JSON array where each business "
    "card is an object with the keys name, position, email, phone, companyName "
    "and companyAddress. If a field cannot be found, set it to an empty string."
)


class ExtractionClient:
    """
    Thin wrapper around the OpenAI chat completions API.

    One call per image, no retries. The client timeout bounds how long a
    request can wait on the model.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        max_tokens: int = 2000,
        timeout: float = 60.0,
        client: Optional[OpenAI] = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.client = client or OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    @staticmethod
    def to_data_url(image: bytes, content_type: str = "image/jpeg") -> str:
        if content_type == "image/jpg":
            content_type = "image/jpeg"
        return f"data:{content_type};base64,{base64.b64encode(image).decode('utf-8')}"

    def extract(self, image: bytes, content_type: str = "image/jpeg") -> str:
        """
        Ask the model for the cards in `image`.

        Returns:
            The model's message content ("" if it sent none).
        Raises:
            ExtractionError: network failure, quota, invalid key, timeout.
        """
        log.info("sending %d byte image to %s", len(image), self.model)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": EXTRACTION_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {"url": self.to_data_url(image, content_type)},
                            },
                        ],
                    }
                ],
                max_tokens=self.max_tokens,
            )
        except openai.OpenAIError as e:
            log.error("vision model call failed: %s", e)
            raise ExtractionError("Business card recognition failed", str(e)) from e

        content = response.choices[0].message.content or ""
        log.info("model returned %d chars", len(content))
        return content
