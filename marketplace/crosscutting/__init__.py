"""Cross-cutting concerns: configuration, logging, context, exceptions."""
