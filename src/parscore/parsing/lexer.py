"""
Bracket-aware lexer for ParsCore expressions.

Commas separate tokens only at bracket depth zero, so ``a[b,c],d`` yields
``["a[b,c]", "d"]``.
"""

from parscore.exceptions import MalformedExpressionError

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
SEPARATOR = ","


def tokenize(expression: str) -> list[str]:
    """
    Split an expression into its top-level tokens.

    A token is also closed when its brackets balance back to depth zero, so
    ``a[1]b`` gives ``["a[1]", "b"]``. Tokens are stripped and empty tokens
    dropped. Unbalanced input never fails here; see `check_balance`.

    Params:
        expression: Raw expression text

    Returns:
        Ordered list of top-level tokens
    """
    tokens = []
    current = []
    depth = 0

    def flush():
        token = "".join(current).strip()
        if token:
            tokens.append(token)
        current.clear()

    for char in expression:
        if char == OPEN_BRACKET:
            depth += 1
            current.append(char)
        elif char == CLOSE_BRACKET:
            depth -= 1
            current.append(char)
            if depth == 0:
                flush()
        elif char == SEPARATOR and depth == 0:
            flush()
        else:
            current.append(char)

    flush()
    return tokens


def split_params(blob: str) -> list[str]:
    """
    Split the inside of ``name[...]`` on commas at nesting depth zero.

    Unlike `tokenize`, a closing bracket does not end a parameter, and
    empty parameters are skipped.

    Params:
        blob: Text between the command's outer brackets

    Returns:
        Ordered list of stripped parameter strings
    """
    params = []
    current = []
    depth = 0

    for char in blob:
        if char == OPEN_BRACKET:
            depth += 1
        elif char == CLOSE_BRACKET:
            depth -= 1
        elif char == SEPARATOR and depth == 0:
            param = "".join(current).strip()
            if param:
                params.append(param)
            current = []
            continue
        current.append(char)

    param = "".join(current).strip()
    if param:
        params.append(param)
    return params


def check_balance(expression: str) -> None:
    """
    Ensure every bracket in an expression is matched.

    Params:
        expression: Raw expression text

    Raises:
        MalformedExpressionError: If a ``]`` has no opening partner or a
            ``[`` is never closed
    """
    depth = 0
    for position, char in enumerate(expression):
        if char == OPEN_BRACKET:
            depth += 1
        elif char == CLOSE_BRACKET:
            depth -= 1
            if depth < 0:
                raise MalformedExpressionError(
                    expression, f"unexpected ']' at position {position}"
                )
    if depth:
        raise MalformedExpressionError(
            expression, f"{depth} unclosed '[' at end of expression"
        )
