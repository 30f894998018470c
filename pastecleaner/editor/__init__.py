"""Host editor abstraction used by editor commands."""

from .host import DocumentEditor, EditorHost

__all__ = ["DocumentEditor", "EditorHost"]
