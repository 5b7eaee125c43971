"""ICalc (Integer Calculator) package."""

# Main API
from icalc.icalc import ICalc, parse, evaluate

# Exceptions (for error handling)
from icalc.icalc_error import ICalcError, ICalcTokenError, ICalcParseError, ICalcEvalError

# Value types
from icalc.icalc_value import ICalcValue, ICalcNumber, ICalcBoolean, ICalcString, ICalcNone

# AST nodes
from icalc.icalc_ast import ICalcASTNode, ICalcASTNumber, ICalcASTUnaryOp, ICalcASTBinaryOp

# Lower-level components (for advanced usage)
from icalc.icalc_token import ICalcToken, ICalcTokenType, ICalcOperator
from icalc.icalc_lexer import ICalcLexer
from icalc.icalc_parser import ICalcParser
from icalc.icalc_evaluator import ICalcEvaluator


__all__ = [
    # Main API
    "ICalc", "parse", "evaluate",

    # Exceptions
    "ICalcError", "ICalcTokenError", "ICalcParseError", "ICalcEvalError",

    # Value types
    "ICalcValue", "ICalcNumber", "ICalcBoolean", "ICalcString", "ICalcNone",

    # AST nodes
    "ICalcASTNode", "ICalcASTNumber", "ICalcASTUnaryOp", "ICalcASTBinaryOp",

    # Lower-level components
    "ICalcToken", "ICalcTokenType", "ICalcOperator", "ICalcLexer", "ICalcParser", "ICalcEvaluator"
]
