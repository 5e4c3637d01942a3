from __future__ import annotations

from typing import Callable

# Measurement ignores inter-word spacing, so lines may run this far past the limit.
DEFAULT_WRAP_BUFFER = -100.0


def wrap_text(
    text: str,
    max_width: float,
    measure: Callable[[str], float],
    buffer: float = DEFAULT_WRAP_BUFFER,
) -> str:
    """Greedy word wrap.

    A line is broken before a word when ``line_width + measure(word) + buffer``
    exceeds ``max_width``. Words are never split; a word wider than the limit
    ends up alone on its line. Lines are joined with ``\\n``.
    Lines carry no trailing space, and no blank line precedes an over-wide first word.
    """
    lines: list[str] = []
    current: list[str] = []
    line_width = 0.0

    for word in text.split():
        word_width = measure(word)
        if current and line_width + word_width + buffer > max_width:
            lines.append(" ".join(current))
            current = []
            line_width = 0.0
        current.append(word)
        line_width += word_width

    if current:
        lines.append(" ".join(current))
    return "\n".join(lines)
