"""
Static Generation Tables
=========================
Lookup data shared by every generator: the alphanumeric alphabet, the
whitelisted date formats, month abbreviations and per-country phone patterns.
Loaded once at import time and never mutated.
"""

import string
from typing import Dict, List

# ── Alphabet for random identifiers (62 chars) ──
ALPHA_NUM: str = string.ascii_uppercase + string.ascii_lowercase + string.digits

EMAIL_DOMAIN: str = "@example.com"
EMAIL_USERNAME_LENGTH: int = 8

DEFAULT_STRING_LENGTH: int = 10
PAD_CHAR: str = "*"

# Largest integer a JSON consumer in a browser can represent exactly
MAX_SAFE_INTEGER: int = 2 ** 53 - 1

# ── Dates ──
SUPPORTED_DATE_FORMATS: List[str] = [
    "YYYY-MM-DD",
    "YYYY/MM/DD",
    "YYYYMMDD",
    "YYYY-MM",
    "DD-MM-YYYY",
    "DD/MM/YYYY",
    "DD.MM.YYYY",
    "MM-DD-YYYY",
    "MM/DD/YYYY",
    "MM/YYYY",
    "DD MMM YYYY",
    "DD-MMM-YYYY",
    "MMM DD, YYYY",
    "MMM YYYY",
]

MONTH_ABBREVIATIONS: List[str] = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Year used for day bounds when the format carries no year token
DEFAULT_BOUND_YEAR: int = 2000

# ── Phone numbers (mobile ranges, E.164 or national notation) ──
COUNTRIES_CODE_PHONE: Dict[str, str] = {
    "FR": r"^(?:\+33|0)[67]\d{8}$",
    "BE": r"^\+32 ?4[5-9]\d{7}$",
    "CH": r"^\+41 ?7[5-9]\d{7}$",
    "DE": r"^\+49 ?1[5-7]\d{8,9}$",
    "ES": r"^\+34 ?[67]\d{8}$",
    "IT": r"^\+39 ?3\d{8,9}$",
    "NL": r"^\+31 ?6\d{8}$",
    "PT": r"^\+351 ?9[1236]\d{7}$",
    "GB": r"^\+44 ?7\d{3} ?\d{6}$",
    "US": r"^\+1[2-9]\d{2}[2-9]\d{6}$",
    "CA": r"^\+1[2-9]\d{2}[2-9]\d{6}$",
    "BR": r"^\+55 ?[1-9]{2} ?9\d{8}$",
    "MA": r"^\+212 ?[67]\d{8}$",
    "IN": r"^\+91 ?[6-9]\d{9}$",
    "JP": r"^\+81 ?[789]0\d{8}$",
    "AU": r"^\+61 ?4\d{8}$",
}
