"""Infrastructure modules for the approval mailer.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and HTTP error classification
- parsing: Quote-aware command tokenizer
"""
