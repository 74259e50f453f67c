import io
import os
import re
import tempfile
import unittest
from contextlib import redirect_stderr
from unittest import mock

from cradle.lang.error import ErrorHandler, ExpectedInteger, GenericException
from cradle.lang.session import Session
from cradle.lang.shell import Shell


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, source):
        path = os.path.join(self.tmp.name, "prog.cr")
        with open(path, "wb") as file:
            file.write(source)
        return path

    def session(self, path, **kwargs):
        return Session(ErrorHandler(fatal=False), path, out=io.StringIO(), **kwargs)

    def test_run(self):
        sess = self.session(self.write(b"A=(1+2)*3\nB=-A/2\n!B\n?C x\n!C\n"))
        sess.run()
        self.assertEqual("-4\n120\n", sess.out.getvalue())
        self.assertEqual(sess.path, sess.error_handler.path)

    def test_missing_final_line_ending(self):
        sess = self.session(self.write(b"A=5\n!A"))
        sess.run()
        self.assertEqual("5\n", sess.out.getvalue())

    def test_empty_file(self):
        sess = self.session(self.write(b""))
        sess.run()
        self.assertEqual("", sess.out.getvalue())

    def test_errors_propagate(self):
        sess = self.session(self.write(b"A=1\n!A\nB=\n!A\n"))
        with self.assertRaises(ExpectedInteger) as cm:
            sess.run()

        self.assertEqual("1\n", sess.out.getvalue())
        self.assertEqual(3, cm.exception.line_num)

    def test_unopenable(self):
        self.assertRaises(GenericException, self.session(os.path.join(self.tmp.name, "missing.cr")).run)
        self.assertRaises(GenericException, self.session(Session.SH_FILE).run)

    def test_stdin(self):
        sess = self.session(Session.STDIN)
        with mock.patch("sys.stdin", io.TextIOWrapper(io.BytesIO(b"A=4\n!A\n"))):
            sess.run()
        self.assertEqual("4\n", sess.out.getvalue())

    def test_execute(self):
        sess = self.session(Session.SH_FILE)
        sess.execute("A=3")
        sess.execute("")
        sess.execute("B=A*A\n")
        sess.execute("!B")
        self.assertEqual("9\n", sess.out.getvalue())
        self.assertEqual(3, sess.table["A"])


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.sess = Session(ErrorHandler(fatal=False), Session.SH_FILE, out=io.StringIO())
        self.shell = Shell(self.sess, stdout=io.StringIO())

    def test_statements(self):
        self.shell.onecmd("A=7")
        self.shell.onecmd("!A")
        self.shell.onecmd("?B x")
        self.shell.onecmd("  ?C  ")

        self.assertEqual("7\n", self.sess.out.getvalue())
        self.assertEqual(ord("x"), self.sess.table["B"])
        self.assertEqual(ord(" "), self.sess.table["C"])

    def test_vars_and_reset(self):
        self.shell.onecmd("A=7")
        self.shell.onecmd("Z=-1")
        self.shell.onecmd("vars")
        self.assertEqual("A = 7\nZ = -1\n", self.shell.stdout.getvalue())

        self.shell.onecmd("reset")
        self.assertEqual(0, self.sess.table["A"])

    def test_errors_are_not_fatal(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            self.shell.onecmd("A=")
            self.shell.onecmd("A=2")

        self.assertIn("'Integer' expected", re.sub(r"\x1b\[[0-9;]*m", "", stderr.getvalue()))
        self.assertEqual(2, self.sess.table["A"])

    def test_exit(self):
        self.assertFalse(self.shell.onecmd(""))
        self.assertTrue(self.shell.onecmd("exit"))
        self.assertTrue(self.shell.onecmd("EOF"))


if __name__ == '__main__':
    unittest.main()
