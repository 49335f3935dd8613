"""Derivation rules for prompt identity, icon, category and tags."""
import re
import time
from collections.abc import Collection, Iterable

from models.prompt import CUSTOM_ID_PREFIX, DEFAULT_ICON, PromptRecord

UNTITLED_ACT = "Untitled"
UNKNOWN_ID_PART = "unknown"
GENERAL_CATEGORY = "General"

_WHITESPACE = re.compile(r"\s+")

# Checked in order; the first group with a keyword contained in the lowercased
# act wins.
ICON_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("💻", (
        "developer", "code", "engineer", "terminal", "interpreter",
        "php", "python", "sql", "javascript", "console",
    )),
    ("✍️", (
        "writer", "poet", "novelist", "storyteller", "essay", "screenwriter", "copywriter",
    )),
    ("🎨", ("designer", "artist", "svg", "painter", "decorator")),
    ("📊", ("seo", "analyst", "statistician", "accountant", "manager", "strategist")),
    ("🧑‍🏫", ("teacher", "coach", "mentor", "guide", "tutor", "instructor")),
    ("🎬", ("movie", "film", "critic", "actor")),
    ("🩺", ("doctor", "health", "psychologist", "therapist", "nurse", "dentist")),
    ("🍳", ("chef", "cook", "food", "dietitian")),
    ("🎵", ("music", "composer", "rapper", "singer")),
    ("🎮", ("game", "player", "gamer")),
)


def icon_for_act(act: str) -> str:
    """Pick a glyph for a persona name by keyword match."""
    lowered = act.lower()
    for icon, keywords in ICON_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return icon
    return DEFAULT_ICON


def curated_prompt_id(index: int, act: str | None) -> str:
    """
    Build the positional id of a curated row.

    Ids depend on row position, so inserting or reordering CSV rows changes the
    ids of every row after the edit.
    """
    name = _WHITESPACE.sub("-", act) if act else UNKNOWN_ID_PART
    return f"{index}-{name}"


def category_for_act(act: str | None) -> str:
    """First whitespace-delimited token of the act."""
    tokens = (act or "").split()
    return tokens[0] if tokens else GENERAL_CATEGORY


def tags_for_act(act: str | None) -> list[str]:
    """Lowercase words of the act."""
    return (act or "").lower().split()


def derive_curated_record(index: int, row: dict[str, str | None]) -> PromptRecord:
    """Expand a raw CSV row into a full prompt record (without overlay fields)."""
    act = row.get("act") or ""
    return {
        "id": curated_prompt_id(index, act),
        "act": act or UNTITLED_ACT,
        "prompt": row.get("prompt") or "",
        "icon": icon_for_act(act),
        "category": category_for_act(act),
        "tags": tags_for_act(act),
    }


def derive_curated_records(rows: Iterable[dict[str, str | None]]) -> list[PromptRecord]:
    """Derive curated records, dropping rows with no prompt text."""
    records = [derive_curated_record(index, row) for index, row in enumerate(rows)]
    return [record for record in records if record["prompt"]]


def normalize_custom_tags(tags: str | Iterable[str] | None) -> list[str]:
    """
    Normalize user-supplied tags.

    Accepts a comma-separated string or a list of terms. Terms are trimmed,
    empty terms dropped and duplicates removed (preserving first occurrence order).
    """
    if tags is None:
        return []
    terms = tags.split(",") if isinstance(tags, str) else tags
    normalized = []
    seen: set[str] = set()
    for term in terms:
        trimmed = str(term).strip()
        if trimmed and trimmed not in seen:
            seen.add(trimmed)
            normalized.append(trimmed)
    return normalized


def generate_custom_id(existing_ids: Collection[str], now_ms: int | None = None) -> str:
    """
    Generate a time-based id for a user-created prompt.

    Bumps the millisecond value until the id is not already taken, so two
    creations in the same millisecond still get distinct ids.
    """
    stamp = now_ms if now_ms is not None else time.time_ns() // 1_000_000
    candidate = f"{CUSTOM_ID_PREFIX}{stamp}"
    while candidate in existing_ids:
        stamp += 1
        candidate = f"{CUSTOM_ID_PREFIX}{stamp}"
    return candidate
