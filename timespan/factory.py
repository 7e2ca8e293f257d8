"""Factory for looking up span variants by name."""

from enum import Enum

from timespan.span import Span


class SpanVariants(Enum):
    """Enumeration of the span variants that can be parsed from text."""
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    ZONED_DATETIME = "zoned-datetime"


class SpanVariantFactory:
    """Factory for span variant classes."""

    @staticmethod
    def get_span_class(variant: SpanVariants) -> type[Span]:
        """Get the span class for the specified variant.

        Args:
            variant: The variant to look up

        Returns:
            The span class implementing the variant

        Raises:
            ValueError: If the variant is unknown
        """
        # Import here to avoid circular dependencies
        from timespan.date_time_span import DateTimeSpan
        from timespan.naive import NaiveDateSpan, NaiveDateTimeSpan, NaiveTimeSpan

        if variant == SpanVariants.DATE:
            return NaiveDateSpan
        elif variant == SpanVariants.TIME:
            return NaiveTimeSpan
        elif variant == SpanVariants.DATETIME:
            return NaiveDateTimeSpan
        elif variant == SpanVariants.ZONED_DATETIME:
            return DateTimeSpan
        else:
            raise ValueError(f"Unknown span variant: {variant}")
