"""Compile single-variable formulas such as ``sin(x) / x`` into callables.

The formula is checked against a whitelist of names and syntax first, then
parsed by sympy (``^`` means power) and lambdified onto the ``math`` module.
"""

from __future__ import annotations

import ast
import math
from typing import Any, Callable

import sympy as sp
from sympy.parsing.sympy_parser import convert_xor, parse_expr, standard_transformations

from textplot.errors import PlotDataError


class FormulaError(PlotDataError):
    pass


FUNCTIONS: dict[str, Callable[..., Any]] = {
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "atan2": sp.atan2,
    "sinh": sp.sinh,
    "cosh": sp.cosh,
    "tanh": sp.tanh,
    "asinh": sp.asinh,
    "acosh": sp.acosh,
    "atanh": sp.atanh,
    "exp": sp.exp,
    "ln": sp.log,
    "log": sp.log,
    "log2": lambda value: sp.log(value, 2),
    "log10": lambda value: sp.log(value, 10),
    "sqrt": sp.sqrt,
    "abs": sp.Abs,
    "floor": sp.floor,
    "ceil": sp.ceiling,
    "signum": sp.sign,
    "max": sp.Max,
    "min": sp.Min,
}

CONSTANTS: dict[str, Any] = {"pi": sp.pi, "e": sp.E, "tau": 2 * sp.pi}

_TRANSFORMATIONS = standard_transformations + (convert_xor,)
_OPERATORS = (ast.Add, ast.Sub, ast.Mult, ast.Div, ast.Mod, ast.Pow)


def compile_formula(formula: str, variable: str = "x") -> Callable[[float], float]:
    """Validate ``formula`` once and return ``f(x) -> float``.

    Complex results (``x ** 0.5`` for negative x) come back as NaN; math
    domain errors and division by zero propagate from the call.

    Raises:
        FormulaError: on syntax errors, unknown names or unsupported syntax.
    """
    source = formula.strip()
    _check_source(source, variable)

    symbol = sp.Symbol(variable)
    names: dict[str, Any] = {**FUNCTIONS, **CONSTANTS, variable: symbol}
    try:
        expr = parse_expr(source, local_dict=names, transformations=_TRANSFORMATIONS)
    except (SyntaxError, TypeError, ValueError, sp.SympifyError) as exc:
        raise FormulaError(f"cannot evaluate formula {formula!r}: {exc}") from exc
    if not isinstance(expr, sp.Expr) or not expr.free_symbols <= {symbol}:
        raise FormulaError(f"formula {formula!r} is not a function of {variable}")

    func = sp.lambdify(symbol, expr, "math")

    def evaluate(x: float) -> float:
        value = func(float(x))
        return math.nan if isinstance(value, complex) else float(value)

    return evaluate


def _check_source(source: str, variable: str) -> None:
    # Same token rewrite convert_xor applies, so the tree matches what sympy evaluates.
    try:
        tree = ast.parse(source.replace("^", "**"), mode="eval")
    except SyntaxError as exc:
        raise FormulaError(f"cannot parse formula {source!r}: {exc.msg}") from exc
    _validate(tree.body, variable)


def _validate(node: ast.AST, variable: str) -> None:
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise FormulaError(f"unsupported constant: {node.value!r}")
        return
    if isinstance(node, ast.Name):
        if node.id != variable and node.id not in CONSTANTS:
            raise FormulaError(f"unknown variable: {node.id}")
        return
    if isinstance(node, ast.UnaryOp) and isinstance(node.op, (ast.UAdd, ast.USub)):
        _validate(node.operand, variable)
        return
    if isinstance(node, ast.BinOp) and isinstance(node.op, _OPERATORS):
        _validate(node.left, variable)
        _validate(node.right, variable)
        return
    if isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name) or node.func.id not in FUNCTIONS:
            raise FormulaError(f"unknown function: {ast.unparse(node.func)}")
        if node.keywords:
            raise FormulaError("keyword arguments are not supported")
        if not node.args:
            raise FormulaError(f"{node.func.id} needs at least one argument")
        for arg in node.args:
            _validate(arg, variable)
        return
    raise FormulaError(f"unsupported expression: {ast.unparse(node)}")
