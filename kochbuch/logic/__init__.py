"""Core business logic layer.

Subpackages:
- shopping: aggregating the shopping list from selected recipes
- editing: ingredient list editor and recipe form operations
- catalog: category listing and filtering
"""
__all__ = ["shopping", "editing", "catalog"]
