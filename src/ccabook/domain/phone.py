"""Phone number checks and canonical form used for duplicate detection."""

import re

import phonenumbers

PHONE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)

_PHONE_PATTERN = re.compile(r"^\+?\d{3,}$")

# Region assumed for numbers typed without a country code. Set once at start-up,
# before any Phone is built; each Phone keeps the canonical form it was built with.
_default_region: str | None = "SG"


def set_default_region(region: str | None) -> None:
    global _default_region
    _default_region = (region or "").strip().upper() or None


def get_default_region() -> str | None:
    return _default_region


def is_valid_phone(raw: str) -> bool:
    return bool(raw) and _PHONE_PATTERN.match(raw) is not None


def canonical_phone(raw: str, region: str | None = None) -> str:
    """Return the E.164 form of the number, or its bare digits if it does not parse.

    Two spellings of the same number ("91234567" and "+6591234567" in SG)
    share one canonical form. Numbers phonenumbers rejects (short internal
    extensions, test numbers) are compared on their digits alone.
    """
    raw = (raw or "").strip()
    region = region or _default_region
    try:
        parsed = phonenumbers.parse(raw, region)
    except phonenumbers.NumberParseException:
        return raw.lstrip("+")
    if not phonenumbers.is_valid_number(parsed):
        return raw.lstrip("+")
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
