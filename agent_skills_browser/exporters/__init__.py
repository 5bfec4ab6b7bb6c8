"""Exporters for the skills catalog."""

from .json_exporter import CatalogJSONExporter
from .markdown_exporter import CatalogMarkdownExporter

__all__ = ["CatalogJSONExporter", "CatalogMarkdownExporter"]
