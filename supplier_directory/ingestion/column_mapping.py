"""
Column mapping for supplier CSV uploads.
Maps each supplier field to the header names accepted for it.
"""

from typing import Dict, List

# Ordered by priority: the first alias found in any header wins.
COLUMN_ALIASES: Dict[str, List[str]] = {
    "name": ["name", "company_name", "business_name", "company"],
    "email": ["email", "contact_email", "email_address"],
    "phone": ["phone", "phone_number", "telephone", "contact_phone"],
    "website": ["website", "url", "web_address"],
    "description": ["description", "about", "summary"],
    "city": ["city", "location", "address"],
    "categories": ["categories", "category", "industry", "sectors"],
}

UNRESOLVED = -1


def find_column_index(headers: List[str], aliases: List[str]) -> int:
    """
    Find the column for a field.

    Args:
        headers: Normalized (trimmed, lowercased) header names
        aliases: Accepted aliases in priority order

    Returns:
        Index of the leftmost header containing the highest-priority
        matching alias, or UNRESOLVED
    """
    for alias in aliases:
        for index, header in enumerate(headers):
            if alias in header:
                return index
    return UNRESOLVED


def resolve_columns(headers: List[str]) -> Dict[str, int]:
    """Resolve every supplier field to a column index."""
    return {field: find_column_index(headers, aliases) for field, aliases in COLUMN_ALIASES.items()}
