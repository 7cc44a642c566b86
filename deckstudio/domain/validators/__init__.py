"""Domain validators exports."""

from .presentation_validators import PresentationValidators
from .template_validators import TemplateValidators

__all__ = ["PresentationValidators", "TemplateValidators"]
