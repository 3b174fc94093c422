from .logging_mixin import LoggingMixin, configure_logging

__all__ = ["LoggingMixin", "configure_logging"]
