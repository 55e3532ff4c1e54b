"""Quickstart example for jsfuzzgen.

This example demonstrates generating, printing and reproducing random
JavaScript expressions.
"""

from jsfuzzgen import Configuration, FuzzingContext, Type, generate_node, generate_program, print_code
from jsfuzzgen.constants import DEFAULT_EXTERNS
from jsfuzzgen.diagnostics import UnsatisfiableError
from jsfuzzgen.generation import Symbol
from jsfuzzgen.syntax import budget_units

# Example 1: One program
print("=" * 50)
print("Example 1: Random Program")
print("=" * 50)

tree = generate_program(seed=42, total_budget=25)
print(print_code(tree, statement=True), end="")
print(f"budget units used: {budget_units(tree)} of 25")

# Example 2: Same seed, same program
print("\n" + "=" * 50)
print("Example 2: Reproducibility")
print("=" * 50)

again = generate_program(seed=42, total_budget=25)
print(f"identical tree: {again == tree}")
# Output: identical tree: True

# Example 3: Restrict the root type
print("\n" + "=" * 50)
print("Example 3: Root Types")
print("=" * 50)

for seed in range(3):
    tree = generate_program(seed, 12, {Type.OBJECT, Type.ARRAY})
    print(print_code(tree))

# Example 4: Tune generators
print("\n" + "=" * 50)
print("Example 4: Configuration Knobs")
print("=" * 50)

config = Configuration.from_mapping(
    {
        "function": {"weight": 3.0, "maxParams": 2},
        "string": {"weight": 0},
        "identifier": {"shadow": 0.5},
    }
)
for seed in range(3):
    print(print_code(generate_program(seed, 20, None, config, externs=DEFAULT_EXTERNS)))

# Example 5: Shadowing an enclosing binding
print("\n" + "=" * 50)
print("Example 5: Shadowing")
print("=" * 50)

context = FuzzingContext.create(
    7, Configuration.from_mapping({"identifier": {"shadow": 1.0, "weight": 0}})
)
context.scopes.add_symbol(Symbol("counter"))
print(print_code(generate_node(context, 8, {Type.FUNCTION})))
# Function parameters reuse "counter" instead of minting x_<n> names.

# Example 6: Unsatisfiable requests
print("\n" + "=" * 50)
print("Example 6: Errors")
print("=" * 50)

no_identifiers = Configuration.from_mapping({"identifier": {"weight": 0}})
try:
    generate_program(1, 1, {Type.FUNCTION}, no_identifiers)
except UnsatisfiableError as e:
    print(e)
