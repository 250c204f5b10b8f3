"""
lambda-lab - functional idioms over a list of integers.

Lambdas, function references, predicates and higher-order functions
applied to a lazy "first match, then transform" computation.
"""

__version__ = "0.1.0"
