"""bangscript interpreter. Runs a .bang script (the bundled one if none is given) or starts command-line mode. Called
from the bang executable script and `python -m bangscript`.

Basic program flow:
    1. Lexer: tokenizes the whole script up front into lines, one per '!'-terminated statement
        - an illegal character aborts before anything runs, see bangscript/lang/lexical.py
    2. Statements: each line is matched against the statement shapes and parsed into a Declaration or a PrintStmt
        - lines that match no shape are skipped, see bangscript/grammar/shapes.py
    3. Execution: statements run in line order against the session's SymbolTable, printing as they go
"""

import argparse
import os

from bangscript.lang.error import ErrorHandler
from bangscript.lang.session import Session
from bangscript.lang.shell import Shell


BUNDLED = os.path.join(os.path.dirname(os.path.abspath(__file__)), "scripts", "hello.bang")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="bang", description="bangscript interpreter")
    parser.add_argument("file", help="script to interpret and run (default: bundled hello.bang)", nargs="?")
    parser.add_argument("-i", "--interactive", help="go to command-line mode", action="store_true")
    parser.add_argument("-t", "--tokens", help="print lexed lines before running", action="store_true")
    parser.add_argument("-w", "--warn", help="warn about lines that are not statements", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs bangscript interpreter. Called from bang executable script."""
    with ErrorHandler() as error_handler:
        args = parse_args(argv)

        if args.interactive:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, warn=args.warn)).cmdloop()
            return

        sess = Session(error_handler, args.file if args.file else BUNDLED, warn=args.warn)
        if args.tokens:
            print(sess.dump())
        sess.run()


if __name__ == "__main__":
    main()
