# src/volunteer/shared/casing.py
"""
JSON Key Casing - camelCase Naming Policy

The create-volunteer and email-link Edge Functions expect request bodies
serialized with a camelCase naming policy. This module applies that policy
to the keys of an outgoing payload.

The policy only touches leading upper-case characters:
- 'FirstName' -> 'firstName'
- 'URLValue' -> 'urlValue'
- 'first_name' -> 'first_name' (already starts lower-case)
- 'redirectTo' -> 'redirectTo'

Files that USE this module:
- volunteer.adapters.backend.supabase (camelCase payloads)
- tests.test_shared (unit tests)

Files that this module USES:
- None (pure utility functions)
"""
from typing import Any, Dict, Mapping


def to_camel_case(name: str) -> str:
    """
    Convert a property name to camelCase.

    A leading run of upper-case letters is lower-cased. When the run is
    followed by a lower-case letter, its last upper-case letter starts the
    next word and is kept.

    Args:
        name: Property name

    Returns:
        camelCase property name
    """
    if not name or not name[0].isupper():
        return name

    chars = list(name)
    for i, ch in enumerate(chars):
        if i == 1 and not ch.isupper():
            break
        has_next = i + 1 < len(chars)
        # Stop before the upper-case letter that begins the next word
        if i > 0 and has_next and not chars[i + 1].isupper():
            if chars[i + 1] == " ":
                chars[i] = ch.lower()
            break
        chars[i] = ch.lower()
    return "".join(chars)


def camel_case_keys(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of payload with top-level keys converted to camelCase.

    Args:
        payload: Mapping of property names to JSON-serializable values

    Returns:
        New dictionary with camelCase keys, insertion order preserved
    """
    return {to_camel_case(key): value for key, value in payload.items()}
