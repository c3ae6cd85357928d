import io
import json
import subprocess

from rich.console import Console

from d1repl.ui import TerminalUI


def completed(stdout="", returncode=0):
    return subprocess.CompletedProcess(args=["wrangler"], returncode=returncode, stdout=stdout)


def d1_response(*batches):
    return completed(json.dumps(list(batches)))


def scripted(lines):
    """read_line replacement: hands out lines, raises items that are exceptions, then EOF."""
    it = iter(lines)

    def read_line(prompt):
        try:
            item = next(it)
        except StopIteration:
            raise EOFError
        if isinstance(item, BaseException):
            raise item
        return item

    return read_line


class CapturedUI(TerminalUI):
    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            console=Console(
                file=self.out, color_system=None, soft_wrap=True, width=200, emoji=False, highlight=False
            ),
            err_console=Console(
                file=self.err, color_system=None, soft_wrap=True, width=200, emoji=False, highlight=False
            ),
        )

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()
