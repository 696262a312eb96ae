"""Core business logic layer.

Subpackages:
- parsing: unit normalization, categorization, portions, CSV rows, free-text extraction
- importing: CSV and marker-line text meal-plan importers
- shopping: building shopping lists
- reporting: nutrition totals
"""
__all__ = ["parsing", "importing", "shopping", "reporting"]
