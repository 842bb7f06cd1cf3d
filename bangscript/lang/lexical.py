"""Lexical analysis for bangscript. Turns raw script text into tokens and groups them into lines.

Tokens can be loosely defined as follows:

```
<letter>     ::= "a".."z" | "A".."Z" | "_"
<digit>      ::= "0".."9"

<identifier> ::= <letter>+                ; "print" and "var" are keywords
<integer>    ::= <digit>+                 ; an identifier instead when directly preceded by a quote
<builtin>    ::= "(" | ")" | "'" | '"' | "="
<terminator> ::= "!"                      ; ends a statement, never part of a line
```

Whitespace (space, tab, newline, carriage return) separates tokens and is otherwise ignored. Any other character is
illegal and aborts the run.
"""

from dataclasses import dataclass
from enum import Enum

from bangscript.lang.error import IllegalCharacter


class TokenKind(Enum):
    ILLEGAL = "ILLEGAL"
    END_OF_INPUT = "EOF"
    IDENTIFIER = "IDENT"
    PRINT = "PRINT"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    STATEMENT_END = "!"
    SINGLE_QUOTE = "'"
    DOUBLE_QUOTE = '"'
    VAR = "VAR"
    ASSIGN = "="
    INTEGER = "INT"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str

    def __repr__(self):
        return f"Token({self.kind.name}, '{self.literal}')"


BUILTINS = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "!": TokenKind.STATEMENT_END,
    "'": TokenKind.SINGLE_QUOTE,
    '"': TokenKind.DOUBLE_QUOTE,
    "=": TokenKind.ASSIGN,
}

KEYWORDS = {
    "print": TokenKind.PRINT,
    "var": TokenKind.VAR,
}

QUOTES = (TokenKind.SINGLE_QUOTE, TokenKind.DOUBLE_QUOTE)
WHITESPACE = (" ", "\t", "\n", "\r")

EOF = ""  # value of Lexer.char once the cursor has passed the end of the input


def is_letter(char):
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def is_digit(char):
    return "0" <= char <= "9"


class Lexer:
    """Eager tokenizer. Constructing a Lexer tokenizes the whole input: tokens ends up holding every token in source
    order (terminators excluded) and lines holds one tuple of tokens per terminated statement. loc is the line number
    of the first line in text, used when text continues earlier input.
    """

    def __init__(self, text, loc=0):
        self.text = text

        self.position = 0       # index of self.char
        self.read_position = 0  # index of the next char to read
        self.char = EOF
        self.last_token = Token(TokenKind.ILLEGAL, "ILLEGAL")  # used for quote lookback

        self.loc = loc       # number of the line being lexed
        self.tokens = []     # every token, in order
        self.lines = []      # tuple of tokens per sealed line
        self.sources = []    # stripped source text per sealed line (terminator included)
        self.remainder = ""  # unterminated text after the last terminator

        self._line_start = 0

        self.read_char()
        self._tokenize()

    def _tokenize(self):
        line = []
        while True:
            token = self.next_token()

            if token.kind is TokenKind.STATEMENT_END:
                self.lines.append(tuple(line))
                self.sources.append(self.text[self._line_start:self.position].strip())
                self._line_start = self.position
                line = []
                self.loc += 1
                continue

            if token.kind is TokenKind.ILLEGAL:
                expr, start = self._offending_expr()
                raise IllegalCharacter(token.literal, self.loc, expr, start)

            if token.kind is TokenKind.END_OF_INPUT:
                break

            line.append(token)
            self.tokens.append(token)

        self.remainder = self.text[self._line_start:].strip()

    def _offending_expr(self):
        """Returns the source text of the statement containing the current char, and the char's offset in it."""
        end = self.text.find("!", self.position)
        end = len(self.text) if end == -1 else end + 1

        raw = self.text[self._line_start:end]
        expr = raw.lstrip()
        start = self.position - self._line_start - (len(raw) - len(expr))
        return expr.rstrip(), start

    def next_token(self):
        """Returns the next token. Past the end of the input, always returns an END_OF_INPUT token."""
        self.skip_whitespace()

        if self.char == EOF:
            return Token(TokenKind.END_OF_INPUT, "eof")

        if is_letter(self.char):
            ident = self.read_while(is_letter)
            token = Token(KEYWORDS.get(ident, TokenKind.IDENTIFIER), ident)

        elif is_digit(self.char):
            kind = TokenKind.IDENTIFIER if self.last_token.kind in QUOTES else TokenKind.INTEGER
            token = Token(kind, self.read_while(is_digit))

        elif self.char in BUILTINS:
            token = Token(BUILTINS[self.char], self.char)
            self.read_char()

        else:
            return Token(TokenKind.ILLEGAL, self.char)

        self.last_token = token
        return token

    def peek(self):
        if self.read_position >= len(self.text):
            return EOF
        return self.text[self.read_position]

    def skip_whitespace(self):
        while self.char in WHITESPACE:
            self.read_char()

    def read_char(self):
        self.char = self.peek()
        self.position = self.read_position
        self.read_position += 1

    def read_while(self, predicate):
        """Greedily reads chars matching predicate and returns them."""
        start = self.position
        while self.char != EOF and predicate(self.char):
            self.read_char()
        return self.text[start:self.position]


def tokenize(text):
    """Returns the lines of text. Raises IllegalCharacter if text contains an illegal character."""
    return Lexer(text).lines
