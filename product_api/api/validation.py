import json

import pydantic
from fastapi import Request

from product_api.exceptions import ValidationError
from product_api.schemas.product import ProductCreate

# What each payload field must be, in the order the rules are checked
FIELD_RULES = {
    "name": "a non-empty string",
    "description": "a string",
    "price": "a non-negative number",
    "category": "a non-empty string",
    "inStock": "a boolean",
}


def validate_product_payload(payload) -> ProductCreate:
    """
    Check a raw product payload and return it as a ProductCreate.

    Only the first failing field is reported. Extra keys are dropped and
    no defaults are filled in.

    Raises:
        ValidationError: If the payload is not an object or a field is
            missing or has the wrong type
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    try:
        return ProductCreate.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(_first_error_message(e.errors())) from None


def _first_error_message(errors: list) -> str:
    # pydantic reports errors in field declaration order, which matches FIELD_RULES
    first = errors[0]
    field = str(first["loc"][0]) if first.get("loc") else "body"

    if first.get("type") == "missing":
        return f"'{field}' is required"

    rule = FIELD_RULES.get(field)
    if rule is None:
        return f"'{field}' is invalid: {first.get('msg')}"
    return f"'{field}' must be {rule}"


async def validated_product(request: Request) -> ProductCreate:
    """
    Dependency that parses the JSON body and validates it as a product.

    Runs before create and update handlers, after the API key check.
    """
    body = await request.body()
    try:
        payload = json.loads(body) if body else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError("Request body must be valid JSON") from None

    return validate_product_payload(payload)
