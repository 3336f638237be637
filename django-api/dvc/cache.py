"""Cache keys for per-user DVC data."""


def contracts_cache_key(user_id: int) -> str:
    return f"dvc:contracts:{user_id}"
