"""
Secret code generation.
Every hole is filled independently and uniformly from the palette (repeats allowed),
using the OS-backed generator from `secrets` so the code is not predictable.
"""

from secrets import randbelow
from typing import Sequence

from .types import Code, Color


def random_code(holes: int, colors: Sequence[Color]) -> Code:
    code = []
    k = 0
    while k < holes:
        # randbelow(n) gives an index between 0 and n-1
        code.append(colors[randbelow(len(colors))])
        k += 1
    return code
