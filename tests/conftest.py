import io

import pytest

from heatload.console import Console


@pytest.fixture
def make_console():
    """Returns a factory of consoles that read the given lines as user input
    and collect their output in a string buffer (`console.stdout.getvalue()`).
    """
    def _make_console(*lines: str) -> Console:
        text = ''.join(line + '\n' for line in lines)
        return Console(stdin=io.StringIO(text), stdout=io.StringIO())
    return _make_console
