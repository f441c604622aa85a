"""Packs an alias -> session id map into a single cookie value and back.

The wire format is a flat list of tokens separated by one ASCII space,
alternating alias and id: ``"0 7f3a 1 c91e"``. An empty string means no
sessions. There is no quoting or escaping, so neither aliases nor ids may
contain whitespace.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

SEPARATOR = " "


def decode_session_ids(value: Optional[str]) -> Dict[str, str]:
    session_ids: Dict[str, str] = {}
    if not value:
        return session_ids

    tokens = value.split()
    # an odd trailing alias has no id and is dropped
    for index in range(0, len(tokens) - 1, 2):
        session_ids[tokens[index]] = tokens[index + 1]
    return session_ids


def encode_session_ids(session_ids: Mapping[str, str]) -> str:
    tokens: List[str] = []
    for alias, session_id in session_ids.items():
        if not is_valid_token(alias) or not is_valid_token(session_id):
            continue
        tokens.append(alias)
        tokens.append(session_id)
    return SEPARATOR.join(tokens)


def is_valid_token(value: object) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return not any(char.isspace() for char in value)
