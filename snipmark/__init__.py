"""Editing model for a screenshot selector: selection, annotations, toolbar, undo, copy and pin."""

__version__ = "0.1.0"