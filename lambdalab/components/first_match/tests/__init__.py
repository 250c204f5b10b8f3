"""
first_match component tests.
"""
