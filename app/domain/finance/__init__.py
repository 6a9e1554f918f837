"""
Finance bounded context: domain layer.

People who own financial entries, and the rules that govern
which people may receive new entries.
"""
