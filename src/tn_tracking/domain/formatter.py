"""Tracking number formatting: country lookup, random suffix, final template.

Format: {country_code}-{local_address}-{unique_part}-{random_part}
  e.g.  UK-LDN-004096-7QX2B
"""

import random
import re
import string
from collections.abc import Mapping

from src.tn_common.errors import InvalidConfigurationError

UNKNOWN_COUNTRY_CODE = "XX"
SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
SUFFIX_LENGTH = 5
UNIQUE_PART_MODULUS = 1_000_000
_COUNTRY_CODE_RE = re.compile(r"[A-Za-z]{2}")

DEFAULT_COUNTRY_CODES: Mapping[str, str] = {
    "USA": "US",
    "Canada": "CA",
    "United Kingdom": "UK",
}


def validate_country_codes(country_codes: Mapping[str, str]) -> dict[str, str]:
    """Check every code is 2 ASCII letters; return an uppercased copy."""
    for name, code in country_codes.items():
        if not isinstance(code, str) or not _COUNTRY_CODE_RE.fullmatch(code):
            raise InvalidConfigurationError(f"country_codes[{name!r}]", code, "2 letters A-Z")
    return {name: code.upper() for name, code in country_codes.items()}


def lookup_country_code(country_codes: Mapping[str, str], country: str) -> str:
    """Return the 2-letter code for a country name, 'XX' when unmapped."""
    return country_codes.get(country, UNKNOWN_COUNTRY_CODE).upper()


def random_suffix(rng: random.Random, length: int = SUFFIX_LENGTH) -> str:
    """Cosmetic entropy only, not a security token."""
    return "".join(rng.choices(SUFFIX_ALPHABET, k=length))


def format_tracking_number(
    packed_id: int,
    country_code: str,
    local_address: str,
    random_part: str,
) -> str:
    # The 6-digit part is a truncated projection of the packed id; it is not unique by itself.
    unique_part = abs(packed_id) % UNIQUE_PART_MODULUS
    return f"{country_code.upper()}-{local_address}-{unique_part:06d}-{random_part.upper()}"
