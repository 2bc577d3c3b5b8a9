"""
SchemaGen editor session.
"""

from schemagen.editor.session import SchemaEditor

__all__ = ["SchemaEditor"]
