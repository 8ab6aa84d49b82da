"""
CodeArena: coding challenge platform backend.
"""
