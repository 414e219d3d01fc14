"""
quickcalc Package

Expression parser and evaluator behind a desktop calculator: a user-typed
string goes in, a number or a structured error comes out.

Architecture:
    quickcalc/
    ├── lexer/           # Tokenization
    ├── parser/          # Expression trees with precedence and associativity
    ├── evaluator/       # Reduction to a number, constants and functions
    ├── calculator.py    # evaluate(text) facade
    ├── display.py       # Answer rounding and formatting
    └── cli.py           # Command-line shell

Author: xwest
License: MIT
"""

__version__ = "0.3.0"
__author__ = "xwest"
__email__ = "dev@quickcalc.org"
__license__ = "MIT"

from .config import CalculatorConfig, AngleMode, DEFAULT_CONFIG
from .lexer import Lexer, CalculationError, ErrorKind
from .parser import Parser
from .evaluator import Evaluator
from .calculator import Calculator, EvaluationResult, evaluate, calculate

__all__ = [
    # Facade
    "evaluate",
    "calculate",
    "Calculator",
    "EvaluationResult",

    # Pipeline stages
    "Lexer",
    "Parser",
    "Evaluator",

    # Configuration and errors
    "CalculatorConfig",
    "AngleMode",
    "DEFAULT_CONFIG",
    "CalculationError",
    "ErrorKind",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
