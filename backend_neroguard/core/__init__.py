"""
Core utilities — error taxonomy and collaborator-side input validation.
"""
