# Core type aliases for Fez's data model.
# Numbers, strings and vectors use plain Python types (int, float, str, list).
# Symbols, booleans, pairs and the empty list have their own classes under
# fez.types so that Scheme truth and identity never fall back to Python's.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms and the applier
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
