"""Export: JSON, DataFrame and HTML preview of arrangements."""

from .serializers import frames_to_dataframe, serialize_frames, serialize_request
from .html_export import HTMLExporter

__all__ = ["HTMLExporter", "frames_to_dataframe", "serialize_frames", "serialize_request"]
