"""Command-line mode for bangscript. Uses cmd as backend; every input line runs against one Session, so variables
declared earlier stay visible.
"""

import cmd


class Shell(cmd.Cmd):
    """bangscript interpreter shell. Text after the last '!' of an input waits for the next input."""
    intro = "bangscript interpreter :: Python backend\nType '?' or 'help' for more information."
    PROMPT = "> "
    CONTINUATION = ". "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.pending = ""  # unterminated statement text

    @property
    def prompt(self):
        return Shell.CONTINUATION if self.pending else Shell.PROMPT

    def default(self, line):
        """Runs every statement terminated so far."""
        with self.sess.error_handler:  # cmd.Cmd would leave the loop on an exception
            complete, self.pending = self.sess.preprocess_line(f"{self.pending} {line}")
            if complete:
                self.sess.add(complete)
                self.sess.run()

    def do_help(self, arg):
        print("Every statement ends with '!':\n\n"
              "  var x = 'hi'!     declare a string (quoted digits are strings too)\n"
              "  var n = 123!      declare a number\n"
              "  print(x)!         print a variable, or the name itself if undeclared\n"
              "  print('text')!    print text\n\n"
              "Commands: vars, tokens, exit.")

    def do_vars(self, arg):
        """Lists declared variables."""
        for name in self.sess.symbols:
            variable = self.sess.symbols.lookup(name)
            print(f"{name} = {variable.render()} ({variable.value_type.value})")

    def do_tokens(self, arg):
        """Lists lexed lines with the statement shape each matched."""
        print(self.sess.dump())

    def emptyline(self):
        """Empty input does not repeat the previous line."""

    def do_EOF(self, arg):
        print()
        return True

    def do_exit(self, arg):
        return True
