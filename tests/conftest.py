import os
import random
import sys

import pytest

# Ensure local src path is importable
_here = os.path.dirname(os.path.dirname(__file__))
_src = os.path.join(_here, "src")
if os.path.isdir(_src) and _src not in sys.path:
    sys.path.insert(0, _src)


# (left, right) pairs covering the alignment edge cases
TEXT_PAIRS = [
    ("", ""),
    ("", "abc"),
    ("abc", ""),
    ("abc", "abc"),
    ("a\nb\nc", "a\nX\nc"),
    ("a\nb", "a\nb\nc"),
    ("a\nb\nc", "a"),
    ("a\n\nc", "a\nb\nc"),
    ("a\n   \nc", "a\nb"),
    ("a\r\nb\r\n", "a\nb\n"),
    ("a\n", "a"),
    ("\n\n\n", "x\ny\nz"),
    ("  a", "a"),
    ("a ", "a"),
    ("héllo\nwörld", "hello\nwörld"),
    ("x\ny\nz\n", ""),
    ("\tindented\n", "indented\n"),
]

_LINE_CHOICES = ["", " ", "\t", "a", "b", "ab", "a b", "é", "line", "  line  "]


def random_document(rng: random.Random, max_lines: int = 8) -> str:
    """Build a small document mixing blank lines, CRLF and trailing newlines."""
    lines = [rng.choice(_LINE_CHOICES) for _ in range(rng.randint(0, max_lines))]
    text = rng.choice(["\n", "\r\n"]).join(lines)
    if lines and rng.random() < 0.5:
        text += "\n"
    return text


@pytest.fixture(params=TEXT_PAIRS, ids=lambda pair: repr(pair)[:40])
def text_pair(request):
    return request.param


@pytest.fixture
def random_pairs():
    rng = random.Random(20241019)
    return [(random_document(rng), random_document(rng)) for _ in range(300)]
