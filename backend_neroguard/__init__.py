"""
NeroGuard — heuristic risk scoring for URLs, domains, and free text.

Classifies a user-supplied string, runs it through a fixed rule table,
and returns a risk tier with supporting evidence. Modular architecture
with clear separation between analysis engine, report exporter, history
store, and API server.
"""

__version__ = "0.1.0"
