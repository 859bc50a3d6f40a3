"""Short-profile (Kurzprofil) text for the AI prompt."""

import io
import logging
import time

import pdfplumber
import requests

from config import settings

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def truncate(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def download(url: str, timeout: float, max_bytes: int) -> bytes | None:
    """Stream a document, giving up past max_bytes or once timeout has elapsed in total."""
    deadline = time.monotonic() + timeout
    chunks = []
    size = 0
    with requests.get(url, timeout=timeout, stream=True) as response:
        response.raise_for_status()
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            size += len(chunk)
            if size > max_bytes:
                logger.warning("Short profile %s exceeds %d bytes, skipping", url, max_bytes)
                return None
            if time.monotonic() > deadline:
                logger.warning("Short profile %s took longer than %.1fs, skipping", url, timeout)
                return None
            chunks.append(chunk)
    return b"".join(chunks)


def fetch_profile_text(url: str, max_chars: int = 2000) -> str | None:
    """Download a short-profile PDF and return its (truncated) text.

    The profile only enriches the prompt, so an unreachable, oversized or
    unreadable document yields None instead of failing the match.
    """
    try:
        content = download(url, settings.profile_fetch_timeout_seconds, settings.profile_max_bytes)
    except requests.RequestException as e:
        logger.warning("Could not fetch short profile %s: %s", url, e)
        return None
    if content is None:
        return None

    try:
        text = extract_text(content)
    except Exception as e:
        logger.warning("Could not parse short profile %s: %s", url, e)
        return None

    return truncate(text, max_chars) if text else None
