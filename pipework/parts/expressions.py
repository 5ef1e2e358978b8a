"""Lightweight syntax checks for Go expressions and code bodies.

These catch obviously broken input at edit time. They are not a Go parser;
the Go compiler remains the authority on generated code.
"""

import re

from ..schema.errors import ValidationError

_TOKEN_RE = re.compile(
    r"""
    \s+
  | (?P<string>"(?:[^"\\\n]|\\.)*"|`[^`]*`|'(?:[^'\\\n]|\\.)+')
  | (?P<number>
        (?:0[xX][0-9a-fA-F_]+(?:\.[0-9a-fA-F_]*)?(?:[pP][+-]?\d[\d_]*)?
          | 0[bB][01_]+
          | 0[oO][0-7_]+
          | \d[\d_]*(?:\.[\d_]*)?(?:[eE][+-]?\d[\d_]*)?
          | \.\d[\d_]*(?:[eE][+-]?\d[\d_]*)?
        )i?
    )
  | (?P<ident>[A-Za-z_]\w*)
  | (?P<op>&&|\|\||<-|<<|>>|&\^|==|!=|<=|>=|[-+*/%&|^<>!])
  | (?P<open>[(\[{])
  | (?P<close>[)\]}])
  | (?P<punct>[.,:])
    """,
    re.VERBOSE,
)

_UNARY = {"!", "-", "+", "^", "*", "&", "<-"}
_PAIRS = {"(": ")", "[": "]", "{": "}"}

# Comments and literals are skipped when matching brackets in code bodies.
_SKIP_RE = re.compile(
    r'//[^\n]*|/\*.*?\*/|"(?:[^"\\\n]|\\.)*"|`[^`]*`|\'(?:[^\'\\\n]|\\.)+\'',
    re.DOTALL,
)


def strip_literals(code: str) -> str:
    """Blank out comments and string/rune literals in Go code."""
    return _SKIP_RE.sub(" ", code)


def check_brackets(code: str, field: str = "Code") -> None:
    """Check that brackets in a code body are balanced.

    Raises:
        ValidationError: If a bracket is unmatched.
    """
    stack: list[tuple[str, int]] = []
    text = strip_literals(code)
    for offset, char in enumerate(text):
        if char in _PAIRS:
            stack.append((_PAIRS[char], offset))
        elif char in ")]}":
            if not stack or stack[-1][0] != char:
                line = text.count("\n", 0, offset) + 1
                raise ValidationError(field, f"unmatched {char!r} on line {line}")
            stack.pop()
    if stack:
        closer, offset = stack[-1]
        line = text.count("\n", 0, offset) + 1
        raise ValidationError(field, f"missing {closer!r} for bracket on line {line}")


def check_expression(expr: str, field: str = "Pred") -> None:
    """Check that a string looks like a single Go expression.

    Raises:
        ValidationError: If the expression cannot be parsed.
    """
    text = expr.strip()
    if not text:
        raise ValidationError(field, "expression must not be empty")

    stack: list[str] = []
    expect_operand = True
    prev = ""
    pos = 0

    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ValidationError(
                field, f"unexpected character {text[pos]!r} in {text!r}"
            )
        pos = match.end()
        kind = match.lastgroup
        if kind is None:
            continue
        token = match.group()

        if kind in ("string", "number", "ident"):
            if not expect_operand:
                raise ValidationError(field, f"missing operator before {token!r} in {text!r}")
            expect_operand = False
        elif kind == "op":
            if not expect_operand:
                expect_operand = True
            elif token not in _UNARY:
                raise ValidationError(field, f"unexpected operator {token!r} in {text!r}")
        elif kind == "open":
            stack.append(_PAIRS[token])
            expect_operand = True
        elif kind == "close":
            if not stack or stack.pop() != token:
                raise ValidationError(field, f"unbalanced {token!r} in {text!r}")
            if expect_operand and prev not in ("(", "[", "{", ":"):
                raise ValidationError(field, f"missing operand before {token!r} in {text!r}")
            expect_operand = False
        elif token == ":":
            if not stack or stack[-1] not in ("]", "}"):
                raise ValidationError(field, f"unexpected ':' in {text!r}")
            expect_operand = True
        else:
            if expect_operand or (token == "," and not stack):
                raise ValidationError(field, f"unexpected {token!r} in {text!r}")
            expect_operand = True

        prev = token

    if stack:
        raise ValidationError(field, f"missing {stack[-1]!r} in {text!r}")
    if expect_operand:
        raise ValidationError(field, f"incomplete expression {text!r}")
