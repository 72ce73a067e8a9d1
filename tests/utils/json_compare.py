from typing import Any, Iterable

# Identifiers and timestamps the store generates on every run
GENERATED_KEYS = frozenset({"id", "uid", "organization_id", "created_at"})


def exclude_keys(data: Any, keys: Iterable[str] = GENERATED_KEYS) -> Any:
    """Drop the given keys at every nesting level of a JSON document"""
    keys = set(keys)
    if isinstance(data, dict):
        return {k: exclude_keys(v, keys) for k, v in data.items() if k not in keys}
    if isinstance(data, list):
        return [exclude_keys(item, keys) for item in data]
    return data
