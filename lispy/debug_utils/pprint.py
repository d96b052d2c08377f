import json

from lispy import LispValue
from lispy.types.builtin import Builtin
from lispy.types.error import Error
from lispy.types.expr import ExprList
from lispy.types.number import Number
from lispy.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[96m"
COLOR_SYMBOL = "\033[94m"
COLOR_BUILTIN = "\033[95m"
COLOR_ERROR = "\033[91m"
COLOR_QEXPR = "\033[93m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_depth": 32,
    "color": False,
    "color_numbers": True,
    "color_symbols": True,
    "color_builtins": True,
    "color_errors": True,
    "color_qexpr_braces": True,
}


# ----------------- Colorize utility -----------------
def colorize(value: LispValue, options: dict = DEFAULT_OPTIONS) -> str:
    """Render an atom, wrapped in its ANSI color when enabled."""
    text = str(value)
    if not options.get("color", False):
        return text
    if isinstance(value, Number) and options.get("color_numbers", True):
        return f"{COLOR_NUMBER}{text}{RESET}"
    if isinstance(value, Symbol) and options.get("color_symbols", True):
        return f"{COLOR_SYMBOL}{text}{RESET}"
    if isinstance(value, Builtin) and options.get("color_builtins", True):
        return f"{COLOR_BUILTIN}{text}{RESET}"
    if isinstance(value, Error) and options.get("color_errors", True):
        return f"{COLOR_ERROR}{text}{RESET}"
    return text


# ----------------- Pretty printer -----------------
def pprint_value(
    value: LispValue,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    """Render a value the way the REPL prints it.

    Numbers print as decimals, errors as "Error: <message>", symbols as their
    name, builtins as <builtin NAME>, S-expressions in parentheses and
    Q-expressions in braces. Nesting deeper than max_depth prints as "...".
    """
    if _current_depth >= options.get("max_depth", 32):
        return "..."

    if not isinstance(value, ExprList):
        return colorize(value, options)

    parts = [pprint_value(v, options, _current_depth + 1) for v in value]
    open_char, close_char = value.open_char, value.close_char
    if (
        open_char == "{"
        and options.get("color", False)
        and options.get("color_qexpr_braces", True)
    ):
        open_char = f"{COLOR_QEXPR}{open_char}{RESET}"
        close_char = f"{COLOR_QEXPR}{close_char}{RESET}"
    return open_char + " ".join(parts) + close_char


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return DEFAULT_OPTIONS
    if not isinstance(user_opts, dict):
        return DEFAULT_OPTIONS
    return {**DEFAULT_OPTIONS, **user_opts}
