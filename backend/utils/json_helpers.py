def clean_json_response(raw: str) -> str:
    """Strip markdown code fences and whitespace from an LLM JSON response."""
    text = raw.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.rsplit("```", 1)[0]
    return text.strip()


def response_payload(response) -> object:
    """Decoded JSON body of an httpx response, or its text when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text
