"""Quickstart example for bajzel.

Demonstrates the pipeline stages one by one, then the one-call shortcut,
using the .fuzl files next to this script.

Python 3.13+.
"""

from __future__ import annotations

import random
from pathlib import Path

from bajzel import (
    BajzelError,
    Generator,
    compile_spec,
    evaluate,
    generate_bytes,
    lex,
    parse,
    serialize,
)

HERE = Path(__file__).parent

# Example 1: Pipeline stages
print("=" * 50)
print("Example 1: Pipeline Stages")
print("=" * 50)

source = (HERE / "http.fuzl").read_text(encoding="utf-8")
tokens = lex(source)
print(f"{len(tokens)} tokens, first: {tokens[0]!r}")

program = parse(tokens)
print(f"{len(program)} statements")

env = evaluate(program)
print(f"groups: {list(env.groups)}, OUT_MAX: {env.get_generator().out_max}")

generator = Generator(random.Random(1), append_terminator=True)
print(generator.generate(env))

# Example 2: Reproducible batches
print("\n" + "=" * 50)
print("Example 2: Reproducible Batches")
print("=" * 50)

env = compile_spec((HERE / "command.fuzl").read_text(encoding="utf-8"))
rng = random.Random(2024)
for _ in range(3):
    print(Generator(rng).generate(env))

# Example 3: Binary layouts
print("\n" + "=" * 50)
print("Example 3: Binary Layouts")
print("=" * 50)

header = generate_bytes((HERE / "bmp_header.fuzl").read_text(encoding="utf-8"), random.Random(3))
print(header[:14].hex(" "))

# Example 4: Normalized source
print("\n" + "=" * 50)
print("Example 4: Serialize")
print("=" * 50)

print(serialize(parse(lex('define cmd "PING" u8 as n -> range(0 9) generate cmd'))), end="")

# Example 5: Errors
print("\n" + "=" * 50)
print("Example 5: Errors")
print("=" * 50)

try:
    compile_spec("DEFINE cmd string AS s -> LEN(5 1) GENERATE cmd")
except BajzelError as e:
    print(f"{type(e).__name__}: {e}")
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())
