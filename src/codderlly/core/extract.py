"""Body statistics from a markdown-it token stream"""

import math

from codderlly.core.models import BodyStats


PROSE_CHILD_TYPES = {'text', 'code_inline'}
BREAK_CHILD_TYPES = {'softbreak', 'hardbreak'}


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def fence_language(token) -> str | None:
    """Return the first word of a fence's info string, or None for unlabeled fences."""
    info = (token.info or '').strip()
    return info.split()[0] if info else None


def _inline_text(token) -> str:
    """Join the visible text children of an inline token; only line breaks separate them."""
    parts = []
    for child in token.children or []:
        if child.type in PROSE_CHILD_TYPES:
            parts.append(child.content)
        elif child.type in BREAK_CHILD_TYPES:
            parts.append(' ')
    return ''.join(parts)


def body_stats(tokens: list, words_per_minute: int = 200) -> BodyStats:
    """Collect headings, fenced-code languages, prose word count, and reading time."""
    headings: list[tuple[int, str]] = []
    languages: list[str] = []
    words = 0
    pending_level = None

    for tok in tokens:
        level = heading_level(tok)
        if level is not None:
            pending_level = level
            continue

        if tok.type == 'inline':
            text = _inline_text(tok)
            words += len(text.split())
            if pending_level is not None:
                headings.append((pending_level, tok.content.strip()))
                pending_level = None
        elif tok.type == 'fence':
            lang = fence_language(tok)
            if lang and lang not in languages:
                languages.append(lang)

    return BodyStats(
        headings=headings,
        code_languages=languages,
        word_count=words,
        reading_time=max(1, math.ceil(words / words_per_minute)),
    )
