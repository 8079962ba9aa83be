from .characteristics import detect_characteristics
from .store import detect_store_url, match_store_url

__all__ = ["detect_characteristics", "detect_store_url", "match_store_url"]
