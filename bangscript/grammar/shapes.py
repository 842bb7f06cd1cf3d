"""Statement shapes for bangscript. Every statement is a single line of tokens, and every statement form is an exact
sequence of token kinds:

```
<print>          ::= "print" "(" "'" <identifier> "'" ")"
<print_double>   ::= "print" "(" '"' <identifier> '"' ")"
<print_variable> ::= "print" "(" <identifier> ")"

<var_string>     ::= "var" <identifier> "=" "'" <identifier> "'"
<var_double>     ::= "var" <identifier> "=" '"' <identifier> '"'
<var_number>     ::= "var" <identifier> "=" <integer>
```

Quoted digits lex as identifiers, so `'123'` fits the quoted forms. Lines that fit no shape are not statements.
"""

from bangscript.lang.lexical import TokenKind


PRINT, VAR = TokenKind.PRINT, TokenKind.VAR
IDENT, INT = TokenKind.IDENTIFIER, TokenKind.INTEGER
LPAREN, RPAREN = TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN
SINGLE, DOUBLE = TokenKind.SINGLE_QUOTE, TokenKind.DOUBLE_QUOTE
ASSIGN = TokenKind.ASSIGN

SHAPES = {
    "print": (PRINT, LPAREN, SINGLE, IDENT, SINGLE, RPAREN),
    "print_double": (PRINT, LPAREN, DOUBLE, IDENT, DOUBLE, RPAREN),
    "print_variable": (PRINT, LPAREN, IDENT, RPAREN),
    "var_string": (VAR, IDENT, ASSIGN, SINGLE, IDENT, SINGLE),
    "var_double": (VAR, IDENT, ASSIGN, DOUBLE, IDENT, DOUBLE),
    "var_number": (VAR, IDENT, ASSIGN, INT),
}


def verify(line, statement):
    """Whether or not the token kinds of line match the shape named statement position by position."""
    shape = SHAPES.get(statement)
    if shape is None or len(line) != len(shape):
        return False
    return all(token.kind is kind for token, kind in zip(line, shape))


def infer(line):
    """Returns the name of the first shape line matches, or None."""
    for statement in SHAPES:
        if verify(line, statement):
            return statement
    return None
