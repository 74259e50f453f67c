"""Handles interactive/command-line mode for cradle interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """cradle interpreter shell."""
    intro = "cradle interpreter :: Python backend\nType 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def parseline(self, line):
        """'?' and '!' begin input/output statements here, not help/shell commands."""
        if line.lstrip().startswith(("?", "!")):
            return None, None, line.lstrip().rstrip("\r\n")  # trailing blanks can be input bytes
        return super().parseline(line)

    def default(self, line):
        """Executes arbitrary cradle statement."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.execute(line)

    def do_vars(self, arg):
        """Prints every variable with a non-zero value."""
        for name, value in self.sess.table.items():
            if value:
                print(f"{name} = {value}", file=self.stdout)

    def do_reset(self, arg):
        """Sets every variable back to 0."""
        self.sess.table.reset()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the cradle interpreter!\n\n"
              "Variables are single letters A-Z holding integers, all starting at 0.\n"
              "Statements are one per line:\n"
              "  A=(1+2)*3   assign an expression (+ - * / and parentheses)\n"
              "  !A          print A\n"
              "  ?A x        store the byte value of 'x' in A\n\n"
              "Shell commands: vars, reset, exit.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
