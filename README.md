# aoctools

Helpers that come up again and again when solving programming puzzles:
validated ASCII letters, a small register bank with literal/register
operands, and shortest-path search.

## Modules

### `aoctools.chars`

`Alpha`, `LowerAlpha` and `UpperAlpha` are frozen, orderable, hashable
wrappers around a single ASCII letter.

- `Alpha("x")` accepts `'a'..'z'` and `'A'..'Z'`; it can also be built from
  a `LowerAlpha` or `UpperAlpha`.
- `LowerAlpha` accepts only `'a'..'z'`, `UpperAlpha` only `'A'..'Z'`.
- `int(letter)` maps `'a'..'z'` to `0..25` and `'A'..'Z'` to `26..51`; the
  letters also support `__index__`, so they can be used where an integer index
  is expected. `str(letter)` gives the character back.
- An invalid character raises `AlphaError` (a `ValueError`); a non-string
  raises `TypeError`.

### `aoctools.registers`

- `Registers(size, default=0)` holds `size` values. `get(register)` and
  `set(register, value)` take an `int` or a `LowerAlpha` (which selects
  register `int(letter)`). An index that is negative or not below `size`
  raises `RegisterOutOfBoundsError`; other index types raise `TypeError`.
- `len()`, iteration and `==` work over the stored values; `str()` gives a
  `Registers:` header followed by one `NNN: value` line per register.
- `register_index(register)` performs the index conversion on its own.
- `standard_registers(size)` returns integer registers, all zero.
- `VmError` is the base of `RegisterOutOfBoundsError` (also an `IndexError`)
  and `StandardValueParseError` (also a `ValueError`).

### `aoctools.values`

- `Literal(value)` and `Register(register)` are operands; `get(registers)`
  returns the literal itself or the value held in the referenced register.
  `str()` gives `Lit: …` or `Reg: …`.
- `parse_standard_value(text)` reads one operand from the front of `text`
  and returns `(rest, value)`: a signed integer that fits in 64 bits becomes a
  `Literal`, otherwise a single leading lowercase letter becomes a `Register`
  of a `LowerAlpha`. So `"doof"` parses as `Register(LowerAlpha("d"))` with
  `"oof"` left over.
- `standard_value_from_str(text)` requires the whole string to be one operand.
- Both raise `StandardValueParseError` on bad input.

### `aoctools.dijkstra` and `aoctools.astar`

`dijkstra(start, edges, stop)` and `astar(start, edges, stop)` search from
`start` over any hashable nodes. `edges(node)` yields `(neighbour, cost)` for
Dijkstra and `(neighbour, cost, heuristic)` for A*; `stop(node)` returns true
at the goal. Costs start from integer `0`.

Each returns a result (`DijkstraResult` / `AStarResult`) with:

- `found`: whether the goal was reached;
- `cost()`: total cost to the goal;
- `path()`: nodes from start to goal, inclusive;
- `path_len()`: number of steps on that path;
- `examined_nodes`: every node seen, in discovery order, mapped to
  `(parent_index, cost)` (the start's parent is `None`), plus `goal_index`
  and `goal_cost`.

When no goal was reached, `cost()`, `path()` and `path_len()` raise
`DijkstraError` / `AStarError` (both `LookupError`).

### `aoctools.floyd_warshall`

- `make_fw_dist_matrix(size, inf=(2**63 - 1) // 3)`: zero diagonal, `inf`
  elsewhere.
- `make_fw_vertex_matrix(size)`: each node's own index on the diagonal,
  `None` elsewhere; set `matrix[u][v] = u` for every edge `(u, v)`.
- `floyd_warshall(path_matrix)`: replaces distances in place with shortest
  distances.
- `floyd_warshall_with_path(path_matrix, vertex_matrix)`: the same, also
  updating the vertex matrix.
- `reconstruct_path(start, end, vertex_matrix)`: list of node indices from
  `start` to `end`, or `None` when unreachable.

## Example

```python
from aoctools.chars import LowerAlpha
from aoctools.registers import standard_registers
from aoctools.values import standard_value_from_str
from aoctools.dijkstra import dijkstra

regs = standard_registers(26)
regs.set(LowerAlpha("c"), -12)
print(standard_value_from_str("c").get(regs))   # -12
print(standard_value_from_str("10").get(regs))  # 10

graph = {"a": [("b", 1), ("c", 4)], "b": [("c", 1)], "c": []}
result = dijkstra("a", lambda n: graph[n], lambda n: n == "c")
print(result.cost(), result.path())  # 2 ['a', 'b', 'c']
```

## Scope

This is a library only: it has no command-line program, and it does not run
instruction sets itself; it supplies the registers and operands an
interpreter would use.

## Tests

```
pip install -e ".[test]"
pytest
```