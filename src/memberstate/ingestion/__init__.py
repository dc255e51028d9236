"""Ingestion layer.

Turns raw gateway dicts into payload models and hands them to the merge
operations in :mod:`memberstate.state.merge`.
"""

__all__: list[str] = []
