"""
Recipe Book.

Client for TheMealDB public recipe database: category browsing with
client-side search, and meal detail decoding.

Structure:
- domain/: Meal models, wire decoding, typed errors
- infrastructure/: TheMealDB HTTP client
- application/: Category list and meal detail state models
- tests/: Test suite (unit, integration)
"""

__version__ = "1.0.0"
