import base64
import binascii
import json
import re

from google import genai
from google.genai import types
from loguru import logger


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_MIME_TYPE = "image/jpeg"

DATA_URL_RE = re.compile(r'^data:(image/[a-zA-Z0-9.+-]+);base64,(.+)$', re.DOTALL)
JSON_BLOCK_RE = re.compile(r'\{[\s\S]*\}')

ARTIFACT_PROMPT = """Analyze this image of an artifact, sculpture, painting, or historical object. Provide detailed information in the following JSON format:
{
  "name": "Full name of the artifact",
  "description": "Detailed description (2-3 sentences)",
  "period": "Historical period or date",
  "significance": "Cultural and historical significance (2-3 sentences)",
  "museum": "Museum or location where it's displayed (if known)",
  "materials": "Materials used (if identifiable)",
  "artist": "Artist or creator (if known)",
  "isArtifact": true/false
}

Focus on Indian artifacts, sculptures, and paintings. If it's not an artifact or historical object, set "isArtifact" to false. Be specific and accurate with historical details."""


class InvalidImage(Exception):
    pass


class ScannerUnavailable(Exception):
    """The vision model could not be reached or rejected the request."""


class ScannerError(Exception):
    """The vision model answered without any text."""


def split_data_url(image_data):
    """
    Accepts a data URL (data:image/png;base64,...) or bare base64 and
    returns (mime_type, image_bytes).
    """
    mime_type = DEFAULT_MIME_TYPE
    if not isinstance(image_data, str):
        raise InvalidImage("Invalid image data")
    payload = image_data.strip()
    match = DATA_URL_RE.match(payload)
    if match:
        mime_type, payload = match.group(1), match.group(2)
    # MIME encoders wrap base64 in lines
    payload = ''.join(payload.split())

    if not payload:
        raise InvalidImage("Invalid image data")
    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImage("Invalid image data") from e
    if not image_bytes:
        raise InvalidImage("Invalid image data")
    return mime_type, image_bytes


def _fallback(text):
    return {
        "name": "Artifact Detected",
        "description": text,
        "period": "Unknown",
        "significance": "This appears to be a cultural or historical artifact.",
        "isArtifact": True,
    }


def parse_artifact_response(text):
    """
    The model may wrap its JSON in markdown fences or prose. Take the outermost
    {...} block; anything unparseable becomes a minimal record around the raw text.
    """
    match = JSON_BLOCK_RE.search(text)
    if not match:
        return _fallback(text)
    try:
        info = json.loads(match.group(0))
    except ValueError:
        logger.warning("Scanner reply contained a JSON-like block that did not parse")
        return _fallback(text)
    if not isinstance(info, dict):
        return _fallback(text)
    return info


def identify_artifact(image_data, api_key=None, model=None):
    mime_type, image_bytes = split_data_url(image_data)

    try:
        client = genai.Client(api_key=api_key) if api_key else genai.Client()
    except Exception as e:
        logger.error(f"Error initializing Gemini client: {e}")
        raise ScannerUnavailable("AI scanner service unavailable") from e

    try:
        response = client.models.generate_content(
            model=model or DEFAULT_MODEL,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                ARTIFACT_PROMPT,
            ],
            config=types.GenerateContentConfig(max_output_tokens=500),
        )
    except Exception as e:
        logger.error(f"Error calling Gemini API for artifact scan: {e}")
        raise ScannerUnavailable("Failed to analyze image") from e

    text = response.text
    if not text:
        raise ScannerError("No response from the vision model")
    return parse_artifact_response(text)
