import json
import os

from cardmax.config import settings
from cardmax.domain.models import PurchaseContext
from cardmax.errors import PurchaseParseError


def _llm_extract_purchase(message: str) -> dict:
    try:
        from openai import OpenAI
    except ImportError as exc:
        raise PurchaseParseError(
            "openai package is required for LLM parser. Install with: pip install -e '.[llm]'"
        ) from exc

    api_key = (settings.openai_api_key or os.getenv("OPENAI_API_KEY", "")).strip()
    if not api_key:
        raise PurchaseParseError("OPENAI_API_KEY is missing for LLM parser.")

    client = OpenAI(api_key=api_key)

    system_prompt = (
        "Extract a card purchase from the user message. "
        "Return JSON only with keys: merchant, category, amount. "
        "merchant is the store or brand name as written, or an empty string if absent. "
        "category is a short capitalized spending category such as Dining, Travel, "
        "Groceries, Fuel, Shopping, or an empty string if unclear. "
        "amount is a number, 0 if absent."
    )

    response = client.chat.completions.create(
        model=settings.openai_model,
        temperature=0,
        response_format={"type": "json_object"},
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": message},
        ],
    )

    content = response.choices[0].message.content
    if not content:
        raise PurchaseParseError("LLM returned empty content.")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise PurchaseParseError(f"LLM returned invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise PurchaseParseError(f"LLM returned {type(data).__name__}, expected a JSON object.")
    return data


def parse_purchase(
    message: str,
    merchant: str | None = None,
    category: str | None = None,
    amount: float | None = None,
) -> PurchaseContext:
    llm_result = _llm_extract_purchase(message)

    parsed_merchant = (merchant or str(llm_result.get("merchant") or "")).strip()
    parsed_category = (category or str(llm_result.get("category") or "")).strip()
    if not parsed_merchant and not parsed_category:
        raise PurchaseParseError("Could not find a merchant or category in message.")

    parsed_amount = amount if amount is not None else llm_result.get("amount")
    try:
        parsed_amount = float(parsed_amount or 0)
    except (TypeError, ValueError) as exc:
        raise PurchaseParseError(f"Could not parse amount: {parsed_amount!r}") from exc

    return PurchaseContext(
        merchant=parsed_merchant,
        category=parsed_category,
        amount=parsed_amount,
    )
