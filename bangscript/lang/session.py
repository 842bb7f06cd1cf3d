"""Session control for bangscript. Loads a script (or command-line input), lexes it, infers its statements and runs
them in order against the session's own SymbolTable.

Line numbers are 0-based statement indices: the n-th "!" in the input closes line n.
"""

from bangscript.grammar import shapes
from bangscript.lang.error import GenericException
from bangscript.lang.lexical import Lexer
from bangscript.lang.statements import Statement
from bangscript.lang.symbols import SymbolTable


class Session:
    """Governs a bangscript session. The SymbolTable is created with the session and discarded with it."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line=False, out=None, warn=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.out = out            # output stream, None for sys.stdout
        self.warn = warn          # whether or not to warn about skipped lines

        self.symbols = SymbolTable()
        self.lines = []    # list of (line num, source, tokens) for every lexed line
        self.to_exec = []  # list of (line num, Statement) waiting to run
        self.results = []  # every output line, in order

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8") as file:
                    text = file.read()
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            self.add(text)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @property
    def loc(self):
        """Number of lines lexed so far."""
        return len(self.lines)

    @staticmethod
    def preprocess_line(line):
        """Splits line into its terminated part and the unterminated text after the last '!'. Only the terminated
        part forms lines; the rest needs a continuation.
        """
        head, sep, tail = line.rpartition("!")
        return head + sep, tail.strip()

    def add(self, text):
        """Lexes text and queues its statements. Nothing runs until run is called, so an illegal character anywhere in
        text means none of it runs.
        """
        lexer = Lexer(text, loc=self.loc)

        for line_num, (source, line) in enumerate(zip(lexer.sources, lexer.lines), start=self.loc):
            self.lines.append((line_num, source, line))

            stmt = Statement.infer(line, source)
            if stmt is not None:
                self.to_exec.append((line_num, stmt))
            elif self.warn:
                msg = "'{}' is not a statement, skipping"
                self.error_handler.warn(msg, source, diagnosis=False, line_num=line_num)

        return lexer.remainder

    def run(self):
        """Runs queued statements in order, writing output as each print runs. Raises any errors encountered."""
        to_exec, self.to_exec = self.to_exec, []

        for line_num, stmt in to_exec:
            self.error_handler.register_line(str(stmt), line_num)

            output = stmt.execute(self.symbols)
            if output is not None:
                self.write(output)

            self.error_handler.remove_line()

    def write(self, output):
        print(output, file=self.out)
        self.results.append(output)

    def dump(self):
        """Returns lexed lines, one per row, labelled with the shape each matches."""
        rows = []
        for line_num, source, line in self.lines:
            shape = shapes.infer(line) or "-"
            tokens = ", ".join(repr(token) for token in line)
            rows.append(f"{line_num:>4}  {shape:<15} {source}\n      [{tokens}]")
        return "\n".join(rows)
