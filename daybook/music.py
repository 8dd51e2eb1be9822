"""
Static music lookup for the focus player.
"""

from typing import Dict

MUSIC_BASE_URL = "https://ritika12df.github.io/ritikaaudio"

MUSIC_URLS: Dict[str, str] = {
    "Relax": f"{MUSIC_BASE_URL}/relax.mp3",
    "Focus": f"{MUSIC_BASE_URL}/focus.mp3",
    "Energize": f"{MUSIC_BASE_URL}/energize.mp3",
    "Sleep": f"{MUSIC_BASE_URL}/sleep.mp3",
    "Meditate": f"{MUSIC_BASE_URL}/meditate.mp3",
}

DEFAULT_MUSIC_URL = f"{MUSIC_BASE_URL}/default.mp3"


def resolve_music(category: str) -> Dict[str, str]:
    """Map a category to its track URL. Matching is case-sensitive."""
    return {"url": MUSIC_URLS.get(category, DEFAULT_MUSIC_URL)}
