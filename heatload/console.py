"""Validated console input.

`Console` wraps an input and an output text stream. Each read writes its
prompt, reads one line and, for numeric input, keeps asking until the user
enters a value inside the inclusive bounds.
"""
import sys
from typing import TextIO


class Console:

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            # the input stream is exhausted
            raise EOFError
        return line.rstrip('\r\n')

    def read_line(self, prompt: str) -> str:
        """Writes `prompt` and returns the next line of input without its line
        terminator. The returned string may be empty.
        """
        self.write(prompt)
        return self._readline()

    def _read_token(self, prompt: str) -> str:
        # blank lines are skipped without a new prompt, as if still waiting
        # for the number
        tokens = self.read_line(prompt).split()
        while not tokens:
            tokens = self._readline().split()
        return tokens[0]

    def read_int(self, prompt: str, min_value: int, max_value: int) -> int:
        """Returns the first integer token of the next input line that lies
        between `min_value` and `max_value` (both inclusive). Anything after
        the first token is ignored.
        """
        while True:
            token = self._read_token(prompt)
            try:
                v = int(token)
            except ValueError:
                pass
            else:
                if min_value <= v <= max_value:
                    return v
            self.write(f"  [Error] Enter an integer from {min_value} to {max_value}.\n")

    def read_float(self, prompt: str, min_value: float, max_value: float) -> float:
        """Returns the first number of the next input line that lies between
        `min_value` and `max_value` (both inclusive). NaN and infinite values
        are never accepted, as they fall outside any finite bounds.
        """
        while True:
            token = self._read_token(prompt)
            try:
                v = float(token)
            except ValueError:
                pass
            else:
                if min_value <= v <= max_value:
                    return v
            self.write(f"  [Error] Enter a number from {min_value:g} to {max_value:g}.\n")

    def read_yes_no(self, prompt: str) -> bool:
        while True:
            answer = self.read_line(f"{prompt} (y/n): ").strip().lower()
            if answer == 'y':
                return True
            if answer == 'n':
                return False
            self.write("  [Error] Please type y or n.\n")

    def pause(self) -> None:
        """Blocks until the user presses Enter."""
        self.write("\nPress Enter to continue...")
        self._readline()
