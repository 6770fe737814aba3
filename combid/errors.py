"""Identifier generation errors."""


class CombidError(Exception):
    """Base error carrying context and the underlying cause."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        if self.cause is not None:
            return f"{super().__str__()}: {self.cause}"
        return super().__str__()


class ClockError(CombidError):
    """System clock reads earlier than the Unix epoch."""

    def __init__(self, message, epoch_nanos=None, **kwargs):
        context = kwargs.pop("context", {})
        if epoch_nanos is not None:
            context["epoch_nanos"] = epoch_nanos
            context["skew_nanos"] = -epoch_nanos
        super().__init__(message, context=context, **kwargs)
        self.epoch_nanos = epoch_nanos


class EncodingError(CombidError):
    """Fixed-width byte serialization failed."""

    def __init__(self, message, field=None, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.field = field
