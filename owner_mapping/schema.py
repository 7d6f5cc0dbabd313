"""JSON schemas for the owner_data.json records and their validation."""

from jsonschema import ValidationError, validate

from .utils import NAME_PATTERN

OPTIONAL_NAME = {"type": ["string", "null"], "pattern": NAME_PATTERN.pattern}

PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"const": "person"},
        "first_name": {"type": "string", "pattern": NAME_PATTERN.pattern},
        "last_name": {"type": "string", "pattern": NAME_PATTERN.pattern},
        "middle_name": OPTIONAL_NAME,
        "prefix_name": {"type": ["string", "null"]},
        "suffix_name": {"type": ["string", "null"]},
    },
    "required": ["type", "first_name", "last_name"],
    "additionalProperties": False,
}

COMPANY_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"const": "company"},
        "name": {"type": "string", "minLength": 1},
    },
    "required": ["type", "name"],
    "additionalProperties": False,
}

INVALID_OWNER_SCHEMA = {
    "type": "object",
    "properties": {
        "raw": {"type": "string"},
        "reason": {
            "enum": [
                "non_name",
                "insufficient_parts",
                "could_not_parse_person",
                "truncated_trust_designation",
                "unrecognized_owner_format",
                "invalid_shared_last_name",
            ]
        },
    },
    "required": ["raw", "reason"],
}

PROPERTY_OWNERS_SCHEMA = {
    "type": "object",
    "properties": {
        "owners_by_date": {
            "type": "object",
            "propertyNames": {"pattern": r"^(\d{4}-\d{2}-\d{2}|current)$"},
            "additionalProperties": {
                "type": "array",
                "items": {"oneOf": [PERSON_SCHEMA, COMPANY_SCHEMA]},
            },
            "required": ["current"],
        },
        "invalid_owners": {"type": "array", "items": INVALID_OWNER_SCHEMA},
    },
    "required": ["owners_by_date", "invalid_owners"],
}


class OwnerDataValidationError(Exception):
    """Raised when produced owner data does not match the owner schema"""

    def __init__(self, property_key, error):
        self.property_key = property_key
        self.error = error
        super().__init__(f"{property_key}: {error.message}")


def validate_property_owners(property_key, data):
    try:
        validate(instance=data, schema=PROPERTY_OWNERS_SCHEMA)
    except ValidationError as e:
        raise OwnerDataValidationError(property_key, e) from e
