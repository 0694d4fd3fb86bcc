"""Merchant name canonicalization for grouping recurring charges"""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")

# Brands that recur constantly but are not subscriptions
NON_SUBSCRIPTION_MERCHANTS = (
    "mcdonalds",
    "starbucks",
    "dunkin",
    "chipotle",
    "subway",
    "walmart",
    "target",
    "costco",
    "amazon",
    "uber",
    "lyft",
    "shell",
    "chevron",
    "exxon",
    "bp",
    "7 eleven",
    "cvs",
    "walgreens",
)


def normalize_merchant_name(name: str) -> str:
    """
    Grouping key for a merchant display name.

    "NETFLIX.COM  Monthly" -> "netflixcom monthly"
    "Spotify USA Inc." -> "spotify usa"
    """
    lowered = _NON_ALPHANUMERIC.sub("", name.lower())
    words = _WHITESPACE.sub(" ", lowered).strip().split(" ")
    return " ".join(words[:2])


def is_blocklisted_merchant(merchant_key: str) -> bool:
    """True when the key contains a known non-subscription brand"""
    return any(brand in merchant_key for brand in NON_SUBSCRIPTION_MERCHANTS)
