"""Single-author editing session."""

from .editor_session import EditorSession

__all__ = ['EditorSession']
