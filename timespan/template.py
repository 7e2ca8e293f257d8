"""Span templates: strings with a {start} and an {end} placeholder.

Templates are used in both directions. Splitting locates the literal text
around the placeholders in an input string and returns the start and end
text in between. Substitution replaces the placeholders with rendered text.
Only the exact tokens {start} and {end} are placeholders, any other braces
are literal text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from timespan.errors import (
    NoMatchError,
    TemplateAdjacentPlaceholdersError,
    TemplateMissingPlaceholderError,
)

logger = logging.getLogger(__name__)

START = "{start}"
END = "{end}"
DEFAULT_TEMPLATE = f"{START} - {END}"

_PLACEHOLDER_RE = re.compile(r"\{start\}|\{end\}")


@dataclass(frozen=True)
class TemplateLayout:
    """Literal skeleton of a template: prefix, middle and suffix text."""

    prefix: str
    middle: str
    suffix: str
    start_first: bool


def check_placeholders(template: str) -> None:
    """Ensure {start} and {end} each appear exactly once.

    Raises:
        TemplateMissingPlaceholderError: If a placeholder is absent or repeated
    """
    for placeholder in (START, END):
        count = template.count(placeholder)
        if count != 1:
            raise TemplateMissingPlaceholderError(placeholder, count, template)


def analyze_template(template: str) -> TemplateLayout:
    """Break a template into the literal text around its placeholders.

    Args:
        template: Template with exactly one {start} and one {end}, in any order

    Returns:
        The literal prefix, middle and suffix, and which placeholder comes first

    Raises:
        TemplateMissingPlaceholderError: If a placeholder is absent or repeated
    """
    check_placeholders(template)
    start_idx = template.index(START)
    end_idx = template.index(END)

    if start_idx < end_idx:
        first_idx, first_len, second_idx, second_len = start_idx, len(START), end_idx, len(END)
    else:
        first_idx, first_len, second_idx, second_len = end_idx, len(END), start_idx, len(START)

    return TemplateLayout(
        prefix=template[:first_idx],
        middle=template[first_idx + first_len:second_idx],
        suffix=template[second_idx + second_len:],
        start_first=start_idx < end_idx,
    )


def split_template(template: str, text: str) -> tuple[str, str]:
    """Split text into its start and end parts following a template.

    The text must begin with the template's prefix and end with its suffix.
    The middle literal is searched for between them; when it occurs more than
    once, the first occurrence after the prefix is the split point.

    Args:
        template: Template such as "from {start} to {end}"
        text: Input such as "from 10.30 to 14.00"

    Returns:
        Tuple of (start text, end text)

    Raises:
        TemplateMissingPlaceholderError: If a placeholder is absent or repeated
        TemplateAdjacentPlaceholdersError: If nothing separates the placeholders
        NoMatchError: If a literal of the template is not found in the text
    """
    layout = analyze_template(template)
    if not layout.middle:
        raise TemplateAdjacentPlaceholdersError(template)

    if not text.startswith(layout.prefix):
        raise NoMatchError("prefix", layout.prefix, text)
    if not text.endswith(layout.suffix):
        raise NoMatchError("suffix", layout.suffix, text)
    if len(text) < len(layout.prefix) + len(layout.suffix):
        # prefix and suffix overlap
        raise NoMatchError("suffix", layout.suffix, text)

    body = text[len(layout.prefix):len(text) - len(layout.suffix)]
    split_at = body.find(layout.middle)
    if split_at < 0:
        raise NoMatchError("middle", layout.middle, text)

    first = body[:split_at]
    second = body[split_at + len(layout.middle):]
    logger.debug(f"Split {text!r} with {template!r} into {first!r} and {second!r}")

    if layout.start_first:
        return first, second
    return second, first


def substitute(template: str, render_start: Callable[[], str], render_end: Callable[[], str]) -> str:
    """Replace every {start} and {end} in a template in a single pass.

    Each side is rendered at most once, and only if its placeholder occurs.
    Replacement text is never scanned for placeholders again.
    """
    rendered: dict[str, str] = {}

    def replace(m: re.Match) -> str:
        token = m.group(0)
        if token not in rendered:
            rendered[token] = render_start() if token == START else render_end()
        return rendered[token]

    return _PLACEHOLDER_RE.sub(replace, template)
