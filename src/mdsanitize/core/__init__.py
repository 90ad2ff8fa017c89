"""Option models, defaults and configuration loading."""
