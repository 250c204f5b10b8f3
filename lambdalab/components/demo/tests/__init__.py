"""
demo component tests.
"""
