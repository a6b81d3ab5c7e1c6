"""
API Repositories - Data access abstraction layer

Provides a clean interface for review and user documents that can be swapped
between Firestore (production) and an in-process store (development, tests).

Pattern: Repository Pattern
"""
