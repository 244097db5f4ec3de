"""kafkaerr Shared Module.

This package contains the error code domain, the error value type, the legacy
bridge and the logging helpers used across kafkaerr.
"""

__all__ = ["constants", "error_codes", "error_messages", "errors", "legacy", "logging"]
