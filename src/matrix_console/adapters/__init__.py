"""Front-end adapters."""
