from .meter_registry import (
    MeterRegistry, MeterDataError, DEFAULT_TEMPLATES, DEFAULT_REGISTRY, load_templates
)

__all__ = [
    'MeterRegistry',
    'MeterDataError',
    'DEFAULT_TEMPLATES',
    'DEFAULT_REGISTRY',
    'load_templates'
]
