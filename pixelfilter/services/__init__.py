"""Services module initialization."""
from .pipeline_serializer import PipelineSerializer
from .settings import Settings

__all__ = ["PipelineSerializer", "Settings"]
