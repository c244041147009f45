"""Service layer: age calculation, record selection, configuration."""
