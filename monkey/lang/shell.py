"""Handles interactive/command-line mode for the monkey interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Monkey interpreter shell."""
    intro = "Monkey interpreter :: Python backend\nType 'help' for more information."
    prompt = ">> "
    secondary_prompt = ".. "  # used for line continuations
    _tmp_prompt = ">> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary monkey source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if self._tmp_line:
                line = self._tmp_line + "\n" + line
            line, add_to_prev = self.sess.preprocess_line(line, self.line_num, bool(self._tmp_line))

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                try:
                    self.sess.add(line, self.line_num)
                except ValueError:
                    return  # if line is empty, terminate

                self.sess.run()

                if self.sess.results:
                    print(self.sess.pop().describe())

    def parseline(self, line):
        """Only a bare command word ('help', 'exit', 'EOF') outside a line continuation is a shell command. Anything
        else, e.g. 'exit + 1' or 'help(1)', is monkey source and goes to default.
        """
        cmd_name, arg, parsed = super().parseline(line)
        if arg or self._tmp_line:
            return None, None, line.strip()
        return cmd_name, arg, parsed

    def do_help(self, arg):
        """Doesn't return docs, but rather a short intro."""
        print("Welcome to the monkey interpreter!\n\n"
              "Monkey is a small language with integers, booleans, strings, if/else and \n"
              "first-class functions. Bindings made with 'let' last for the whole session.\n\n"
              "Try it out by typing 'let add = fn(a, b) { a + b };'. This binds a function \n"
              "to the name 'add'. Next, try typing 'add(1, 2)', giving '3' as the result. \n"
              "Unclosed parens or braces continue onto the next line. Typed on their own, 'help' \n"
              "and 'exit' are shell commands.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
