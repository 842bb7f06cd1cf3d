import unittest

from bangscript.lang.error import UndefinedVariable
from bangscript.lang.lexical import tokenize
from bangscript.lang.statements import Declaration, PrintStmt, Statement
from bangscript.lang.symbols import SymbolTable, ValueType


def line(text):
    return tokenize(text + "!")[0]


class StatementTestCase(unittest.TestCase):

    def test_infer(self):
        cases = {
            "var x = 'hi'": Declaration,
            "var x = 12": Declaration,
            "print('hi')": PrintStmt,
            "print(x)": PrintStmt,
        }
        for case, expected in cases.items():
            self.assertIsInstance(Statement.infer(line(case)), expected, case)

        should_fail = ["x", "x = 1", "print", "var x", "print(x y)", "var x = 'a b'", "x var y = 1", "print(1)"]
        for case in should_fail:
            self.assertIsNone(Statement.infer(line(case)), case)

    def test_check_grammar(self):
        self.assertTrue(Declaration.check_grammar(line("var x = 1")))
        self.assertFalse(Declaration.check_grammar(line("print(x)")))
        self.assertTrue(PrintStmt.check_grammar(line("print(\"x\")")))
        self.assertFalse(PrintStmt.check_grammar(line("var x = 'x'")))

    def test_source(self):
        self.assertEqual("print ( x )!", str(Statement.infer(line("print(x)"))))
        self.assertEqual("print(x)!", str(Statement.infer(line("print(x)"), "print(x)!")))


class DeclarationTestCase(unittest.TestCase):

    def test_init(self):
        cases = {
            "var x = 'hi'": ("x", ValueType.STRING, "hi"),
            "var name = \"bob\"": ("name", ValueType.STRING, "bob"),
            "var n = 123": ("n", ValueType.NUMBER, "123"),
            "var n = '123'": ("n", ValueType.STRING, "123"),
            "var n = 007": ("n", ValueType.NUMBER, "007"),
        }
        for case, (name, value_type, value) in cases.items():
            stmt = Declaration(line(case))
            self.assertEqual((name, value_type, value), (stmt.name, stmt.value_type, stmt.value), case)

    def test_execute(self):
        symbols = SymbolTable()
        self.assertIsNone(Declaration(line("var x = 1")).execute(symbols))
        self.assertIn("x", symbols)

        Declaration(line("var x = 'one'")).execute(symbols)
        self.assertEqual(1, len(symbols))
        self.assertEqual("one", symbols.lookup("x").raw_value)
        self.assertEqual(ValueType.STRING, symbols.lookup("x").value_type)


class PrintStmtTestCase(unittest.TestCase):

    def test_init(self):
        cases = {
            "print('literal')": ("literal", True),
            "print(\"double\")": ("double", True),
            "print('123')": ("123", True),
            "print(x)": ("x", False),
        }
        for case, expected in cases.items():
            stmt = PrintStmt(line(case))
            self.assertEqual(expected, (stmt.name, stmt.quoted), case)

    def test_undeclared_prints_name(self):
        cases = {"print('literal')": "literal", "print(\"double\")": "double", "print('123')": "123", "print(y)": "y"}
        for case, expected in cases.items():
            self.assertEqual(expected, PrintStmt(line(case)).execute(SymbolTable()), case)

    def test_declared_prints_value(self):
        symbols = SymbolTable()
        symbols.declare("s", ValueType.STRING, "hi")
        symbols.declare("n", ValueType.NUMBER, "0042")

        cases = {"print(s)": "hi", "print(n)": "42", "print('s')": "hi", "print(\"n\")": "42", "print('z')": "z"}
        for case, expected in cases.items():
            self.assertEqual(expected, PrintStmt(line(case)).execute(symbols), case)

    def test_lookup_miss(self):
        symbols = SymbolTable()
        symbols.declare("(", ValueType.STRING, "paren")  # another token of the line names a variable

        stmt = PrintStmt(line("print(y)"), "print(y)!")
        self.assertTrue(stmt.references(symbols))
        with self.assertRaises(UndefinedVariable) as context:
            stmt.execute(symbols)

        self.assertEqual("y", context.exception.name)
        self.assertEqual("print(y)!", context.exception.expr)
        self.assertEqual(6, context.exception.start)


if __name__ == '__main__':
    unittest.main()
