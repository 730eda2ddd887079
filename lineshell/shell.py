import sys

from lineshell.config import PROMPT
from lineshell.history import History, init_readline
from lineshell.signals import install_interrupt_handler
from lineshell.builtin import execute_builtin
from lineshell.parser import parse_line
from lineshell.executor import run_simple, run_pipeline


class Shell:
    """
    One shell session: its history and the status of the last statement.

    Statements run strictly one after another; nothing here is shared
    between Shell instances except the process itself (cwd, environment).
    """

    def __init__(self, stdin=None):
        self.stdin = stdin
        self.history = History()
        self.last_status = 0

    def execute_line(self, line):
        """Record one input line, then run its statements left to right"""
        self.history.record(line)
        for stages in parse_line(line):
            self.execute_statement(stages)
        return self.last_status

    def execute_statement(self, stages):
        """Run one statement given as the token lists of its stages"""
        if len(stages) > 1:
            self.last_status = run_pipeline(stages)
            return self.last_status

        tokens = stages[0] if stages else []
        if not tokens:
            return self.last_status

        executed, exit_code = execute_builtin(self, tokens)
        if not executed:
            exit_code = run_simple(tokens)
        self.last_status = exit_code
        return exit_code

    def read_line(self):
        """Print the prompt and read one line. Returns None at end of input."""
        if self.stdin is None:
            try:
                return input(PROMPT)
            except EOFError:
                print()
                return None

        print(PROMPT, end="", flush=True)
        line = self.stdin.readline()
        if not line:
            print()
            return None
        return line.rstrip("\n")

    def run(self):
        """Main shell loop"""
        while True:
            line = self.read_line()
            if line is None:
                break
            self.execute_line(line)
        return 0


def main():
    install_interrupt_handler()
    init_readline()
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())
