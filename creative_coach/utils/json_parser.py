"""
Utility functions for parsing JSON out of free-text LLM replies.
Handles markdown code fences, leading/trailing prose and malformed escapes.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

_BRACKETS = {"object": ("{", "}"), "array": ("[", "]")}


def strip_code_fences(response_text: str) -> str:
    """
    Remove a surrounding ```json ... ``` (or bare ```) fence.

    Args:
        response_text: Raw response text from LLM

    Returns:
        Text inside the fence, or the stripped input if there is none
    """
    text = response_text.strip()
    fenced = re.search(r"```(?:json)?\s*\n?(.*?)\n?```", text, re.DOTALL | re.IGNORECASE)
    if fenced:
        return fenced.group(1).strip()
    return text


def _extract_balanced(text: str, expected_type: str) -> str:
    """Cut out the first balanced object/array, ignoring brackets inside strings."""
    open_char, close_char = _BRACKETS[expected_type]
    start_idx = text.find(open_char)
    if start_idx == -1:
        return text

    depth = 0
    in_string = False
    escaped = False
    for i in range(start_idx, len(text)):
        char = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start_idx : i + 1]
    return text[start_idx:]


def parse_llm_json_response(response_text: str, expected_type: str = "object") -> dict | list:
    """
    Parse JSON from LLM response, handling markdown code blocks and extra text.

    Args:
        response_text: Raw response text from LLM
        expected_type: "object" for dict, "array" for list

    Returns:
        Parsed JSON (dict or list)

    Raises:
        ValueError: If JSON cannot be parsed or has the wrong top-level type
    """
    if expected_type not in _BRACKETS:
        raise ValueError(f"expected_type must be 'object' or 'array', got '{expected_type}'")
    if not response_text or not response_text.strip():
        raise ValueError("Empty response text")

    # Step 1: Remove markdown code fences
    text = strip_code_fences(response_text)

    # Step 2: Extract the JSON object/array from surrounding prose
    text = _extract_balanced(text, expected_type).strip()
    if not text:
        raise ValueError("Empty response after parsing. Original response: " + response_text[:500])

    parsed = None
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        # Step 3: Fix raw control characters and invalid escapes, then retry
        cleaned = re.sub(r"(?<!\\)\n", "\\n", text)
        cleaned = re.sub(r"(?<!\\)\t", "\\t", cleaned)
        cleaned = re.sub(r'\\(?![nrtbf"/\\u])', r"\\\\", cleaned)
        try:
            parsed = json.loads(cleaned)
            logger.warning("⚠️  Successfully parsed JSON after fixing escape sequences")
        except json.JSONDecodeError:
            # Step 4: Drop trailing commas before closing brackets
            relaxed = re.sub(r",\s*([}\]])", r"\1", cleaned)
            try:
                parsed = json.loads(relaxed)
                logger.warning("⚠️  Successfully parsed JSON after removing trailing commas")
            except json.JSONDecodeError:
                logger.error(f"❌ Failed to parse JSON: {e}")
                logger.debug(f"   Attempted to parse: {text[:500]}")
                raise ValueError(
                    f"Invalid JSON response from LLM: {e}. "
                    f"Expected JSON {expected_type}, but received: {text[:200]}"
                ) from e

    expected_python_type = dict if expected_type == "object" else list
    if not isinstance(parsed, expected_python_type):
        raise ValueError(f"Expected JSON {expected_type}, got {type(parsed).__name__}")
    return parsed
