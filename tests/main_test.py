import contextlib
import io
import os
import tempfile
import unittest

from bangscript import main


class MainTestCase(unittest.TestCase):

    def run_main(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        code = 0
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            try:
                main.main(argv)
            except SystemExit as exc:
                code = exc.code
        return code, stdout.getvalue().splitlines(), stderr.getvalue()

    def script(self, text):
        file = tempfile.NamedTemporaryFile("w", suffix=".bang", delete=False, encoding="utf-8")
        with file:
            file.write(text)
        self.addCleanup(os.remove, file.name)
        return file.name

    def test_bundled(self):
        self.assertTrue(os.path.isfile(main.BUNDLED))
        code, output, __ = self.run_main([])
        self.assertEqual(0, code)
        self.assertEqual(["hello", "hi", "42", "bye", "123"], output)

    def test_file(self):
        code, output, __ = self.run_main([self.script("var x = 123!\nprint(x)!\nprint('done')!")])
        self.assertEqual((0, ["123", "done"]), (code, output))

    def test_illegal(self):
        code, output, stderr = self.run_main([self.script("print('a')!\nvar x = 1 @ 2!\nprint('b')!")])
        self.assertEqual(1, code)
        self.assertEqual([], output)
        self.assertIn("@", stderr)
        self.assertIn("line", stderr)

    def test_print_semantics(self):
        text = "print(nope)!\nvar x = 'hi'!\nprint('x')!\nvar n = 0012!\nprint(n)!"
        code, output, stderr = self.run_main([self.script(text)])
        self.assertEqual((0, ["nope", "hi", "12"]), (code, output))
        self.assertEqual("", stderr)

    def test_missing_file(self):
        code, output, stderr = self.run_main([os.path.join(tempfile.gettempdir(), "does_not_exist.bang")])
        self.assertEqual(1, code)
        self.assertIn("could not be opened", stderr)

    def test_tokens(self):
        code, output, __ = self.run_main(["-t", self.script("print('a')!")])
        self.assertEqual(0, code)
        self.assertEqual("a", output[-1])
        self.assertTrue(any("print('a')!" in row for row in output[:-1]))


if __name__ == '__main__':
    unittest.main()
