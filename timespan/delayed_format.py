"""Lazily rendered span text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from timespan.template import substitute

if TYPE_CHECKING:
    from timespan.span import Span


@dataclass(frozen=True)
class RenderedSpan:
    """A span waiting to be rendered into a template.

    Nothing is formatted until render() (or str()) is called. Rendering is a
    pure function of the held values and may be repeated any number of times.

    Attributes:
        span: The span to render
        template: Output template, e.g. "from {start} to {end}"
        start_format: strftime pattern for the start
        end_format: strftime pattern for the end
    """

    span: Span[Any]
    template: str
    start_format: str
    end_format: str

    def render(self) -> str:
        kind = self.span.point_kind
        return substitute(
            self.template,
            lambda: kind.format(self.span.start, self.start_format),
            lambda: kind.format(self.span.end, self.end_format),
        )

    def __str__(self) -> str:
        return self.render()
