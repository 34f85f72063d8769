"""Read-only exports of a finished dungeon graph."""

from .markdown_export import ExportConfig, build_markdown, write_markdown

__all__ = ['ExportConfig', 'build_markdown', 'write_markdown']
