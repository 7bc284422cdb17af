"""
API server package — HTTP interface over the analysis engine.

Validates user input (the engine rejects nothing), runs analyses, and
exposes the history store and text reports to clients.
"""
