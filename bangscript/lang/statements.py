"""Statements for bangscript. Each Statement subclass parses one shape-checked line into named fields, so execution
never has to search a flat token list.

Grammar (see grammar/shapes.py for the exact token sequences):

```
<declaration> ::= "var" <name> "=" <quoted> | "var" <name> "=" <integer>
<print_stmt>  ::= "print" "(" <quoted> ")" | "print" "(" <name> ")"   ; value of the identifier if declared
<quoted>      ::= "'" <identifier> "'" | '"' <identifier> '"'
```
"""

from abc import abstractmethod, ABC

from bangscript.grammar import shapes
from bangscript.lang.lexical import TokenKind
from bangscript.lang.symbols import ValueType


class Statement(ABC):
    """Superclass representing any executable statement."""
    SHAPES = ()  # names of the grammar shapes this statement accepts

    def __init__(self, line, source=None):
        """Assumes check_grammar has been run."""
        self.line = line
        self.source = source if source else " ".join(token.literal for token in line) + "!"
        self._cls = type(self).__name__

    @classmethod
    def check_grammar(cls, line):
        """Whether or not line fits one of this statement's shapes."""
        return any(shapes.verify(line, shape) for shape in cls.SHAPES)

    @classmethod
    def infer(cls, line, source=None):
        """Returns a Statement of the kind whose shape line fits, or None if line is not a statement. Every shape
        starts with its keyword, so at most one kind fits.
        """
        for kind in (Declaration, PrintStmt):
            if kind.check_grammar(line):
                return kind(line, source)
        return None

    @abstractmethod
    def execute(self, symbols):
        """Runs this statement against symbols. Returns the text to output, or None if there is nothing to output."""

    def __repr__(self):
        return f"{self._cls}('{self.source}')"

    def __str__(self):
        return self.source


class Declaration(Statement):
    """var NAME = 'TEXT', var NAME = "TEXT" or var NAME = DIGITS."""
    SHAPES = ("var_string", "var_double", "var_number")

    def __init__(self, line, source=None):
        super().__init__(line, source)

        __, name, __, *value = line
        self.name = name.literal

        if value[0].kind is TokenKind.INTEGER:
            self.value_type = ValueType.NUMBER
            self.value = value[0].literal
        else:
            self.value_type = ValueType.STRING
            self.value = value[1].literal  # text between the quotes

    def execute(self, symbols):
        symbols.declare(self.name, self.value_type, self.value)
        return None

    def __repr__(self):
        return f"{self._cls}(name='{self.name}', value_type={self.value_type.value}, value='{self.value}')"


class PrintStmt(Statement):
    """print('TEXT'), print("TEXT") or print(NAME). If any token of the line names a declared variable, the
    identifier's value is output; otherwise the identifier itself is output as text.
    """
    SHAPES = ("print", "print_double", "print_variable")

    def __init__(self, line, source=None):
        super().__init__(line, source)

        self.quoted = line[2].kind is not TokenKind.IDENTIFIER
        self.name = line[3].literal if self.quoted else line[2].literal

    def references(self, symbols):
        """Whether or not any token of this line names a variable in symbols."""
        return any(token.literal in symbols for token in self.line)

    def execute(self, symbols):
        if self.references(symbols):
            return symbols.lookup(self.name, self.source).render()
        return self.name

    def __repr__(self):
        return f"{self._cls}(name='{self.name}', quoted={self.quoted})"
