# for reference:
#   https://json-schema.org/understanding-json-schema/reference/string

schema_url = "http://json-schema.org/draft-07/schema"

ALLOWED_SOURCES = ("vendor", "community", "internal")

nonEmptyString = {"type": "string", "pattern": r"\S"}

nonEmptyStringArray = {
    "type": "array",
    "minItems": 1,
    "items": nonEmptyString,
}

# scheme and host are checked after parsing, see validator.is_https_url
httpsUrl = nonEmptyString

sha256Digest = {"type": "string", "pattern": r"^[a-fA-F0-9]{64}\Z"}

# calendar validity is checked after matching, see validator.is_iso_date
isoDate = {"type": "string", "pattern": r"^[0-9]{4}-[0-9]{2}-[0-9]{2}\Z"}

source = {"type": "string", "enum": list(ALLOWED_SOURCES)}

entry = {
    "$schema": schema_url,
    "title": "Index Entry Schema",
    "type": "object",
}

NON_EMPTY_STRING = "must be a non-empty string"
NON_EMPTY_STRING_ARRAY = "must be a non-empty string array"
HTTPS_URL = "must be an https URL"

# field name -> (schema, violation text), in check order
ENTRY_FIELDS = {
    "id": (nonEmptyString, NON_EMPTY_STRING),
    "tool": (nonEmptyString, NON_EMPTY_STRING),
    "version": (nonEmptyString, NON_EMPTY_STRING),
    "description": (nonEmptyString, NON_EMPTY_STRING),
    "signer": (nonEmptyString, NON_EMPTY_STRING),
    "frameworks": (nonEmptyStringArray, NON_EMPTY_STRING_ARRAY),
    "mappingIds": (nonEmptyStringArray, NON_EMPTY_STRING_ARRAY),
    "packUrl": (httpsUrl, HTTPS_URL),
    "publicKeyUrl": (httpsUrl, HTTPS_URL),
    "sha256": (sha256Digest, "must be a 64-char hex string"),
    "source": (source, "must be one of: " + ", ".join(ALLOWED_SOURCES)),
    "createdAt": (isoDate, "must be ISO date YYYY-MM-DD"),
}
