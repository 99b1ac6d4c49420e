# algonotes

A collection of classic data structures and algorithms, written to be read
and experimented with. Each module covers one topic and can be used as a
library. Most also come with a small command that runs the algorithm on
input read from standard input.

## What is inside

Containers and structures

- `algonotes.linked_list.LinkedList` – a singly linked list with indexed
  `insert`, `delete` and `get`. Out-of-range positions raise `IndexError`.
- `algonotes.containers.Stack` and `algonotes.containers.Queue` – built on
  the linked list. The queue can be used from both ends (`push_front`,
  `pop_back`).
- `algonotes.disjoint_set.UnionFind` – disjoint sets with union by rank and
  path halving.
- `algonotes.avl.AVLTree` – a self-balancing search tree. Each node also
  records the sizes of its left and right subtrees. `preorder()` lists
  `(data, left_size, right_size, height)` for every node.
- `algonotes.persistent.PersistentArray` – an array in which every version
  stays readable. It is backed by a path-copying segment tree.

Trees

- `algonotes.bracket_tree` – `parse_tree` reads a bracketed tree such as
  `1(2,3(4,5(6,7)))`. `preorder`, `postorder` and `level_order` walk it.
- `algonotes.threaded.ThreadedTree` – in-order threading, with `forward()`
  and `backward()` walks and a `describe()` listing of every link.
- `algonotes.traversal_tree.from_traversals` – rebuilds the bracketed form
  from a preorder and a postorder listing.
- `algonotes.huffman` – `letter_counts` and `huffman_codes`.

Graphs

- `algonotes.graph.Graph` – a directed adjacency-list graph.
  `component(p)` lists the vertices reachable from `p` in depth-first order.
- `algonotes.bridges.find_bridges` – bridge finding by Tarjan's low-link
  values.
- `algonotes.closure.transitive_closure` – the closure of a relation over
  the letters A..Z.
- `algonotes.mst.prim` and `algonotes.mst.kruskal` – the weight of a minimum
  spanning tree. `prim` raises `DisconnectedGraphError` for a disconnected
  graph.
- `algonotes.euler.find_start` and `algonotes.euler.fleury` – Euler paths by
  Fleury's algorithm. `fleury` returns `None` when no walk uses every edge.
- `algonotes.maxflow.max_flow` – maximum flow by Dinic's algorithm.

Numbers, sequences and puzzles

- `algonotes.permutation` – `next_permutation` works in place, and
  `lexicographic_permutations` is a generator.
- `algonotes.number_theory` – `gcd`, `gcd_steps` and `extended_gcd`.
- `algonotes.hanoi.hanoi_moves` – the Tower of Hanoi moves, computed from a
  binary counter without recursion.
- `algonotes.knapsack` – `zero_one_knapsack` and `unbounded_knapsack`.
- `algonotes.abc_sequence` – `abc_sequence` finds a string over A, B, C
  that holds each triple exactly once. `longest_sequence(n)` finds the
  longest sequence over 1..n in which no triple repeats.

The cube

- `algonotes.cube.Cube` – a 3×3×3 cube with the six quarter turns (`turn`).
  It applies move strings such as `"R U R' U2"` (`perform_moves`) and draws
  the unfolded net, in colour or plain (`render`). It can also locate edges
  and corners by colour (`find_edge`, `find_corner`).
- `algonotes.solve_lower` and `algonotes.solve_upper` – a layer-by-layer
  solver. `solve_upper.solve` runs every stage and returns whether the cube
  ended up solved.
- `algonotes.cube_survey` – builds 1152 cubes with the last few pieces
  rearranged. `count_solvable()` counts how many of them the solver
  restores.

## Using it as a library

```python
from algonotes.containers import Stack
from algonotes.disjoint_set import UnionFind
from algonotes.maxflow import max_flow
from algonotes.cube import Cube
from algonotes.solve_upper import solve

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.top())          # 20

sets = UnionFind(10)
sets.union(1, 2)
print(sets.find(1) == sets.find(2))   # True

edges = [(4, 2, 30), (4, 3, 20), (2, 3, 20), (2, 1, 30), (1, 3, 30)]
print(max_flow(4, edges, 4, 3))       # 50

cube = Cube()
cube.perform_moves("D2 L' F' L2 U2 B2 D2 B U2")
print(solve(cube))
print(cube.render(color=False))
```

## Commands

Installing the package adds these commands:

| Command | Runs |
| --- | --- |
| `algonotes-union-find` | the union-find demonstration |
| `algonotes-permutations` | all permutations of 1..n in order |
| `algonotes-gcd` | the extended Euclidean algorithm, step by step |
| `algonotes-hanoi` | the moves for an n-disc Tower of Hanoi |
| `algonotes-knapsack` | the 0/1 knapsack; `--unbounded` lets items repeat |
| `algonotes-closure` | the transitive closure of letter pairs |
| `algonotes-bridges` | the bridges of an undirected graph |
| `algonotes-mst` | the weight of a minimum spanning tree (Prim); `--kruskal` uses Kruskal |
| `algonotes-euler` | an Euler path, if one exists |
| `algonotes-maxflow` | the maximum flow between two vertices |
| `algonotes-persistent` | version updates and queries on a persistent array |
| `algonotes-huffman` | letter counts and Huffman codes for a line of text |
| `algonotes-abc` | the A/B/C string; `--cases N` lists the longest sequences for n = 1..N |
| `algonotes-avl` | the AVL insertion demonstration |
| `algonotes-tree` | traversals of a bracketed tree |
| `algonotes-threaded` | forward and backward walks of a threaded tree |
| `algonotes-rebuild-tree` | a tree rebuilt from preorder and postorder |
| `algonotes-cube` | scrambling and solving the cube, stage by stage (`--moves`, `--no-color`) |
| `algonotes-cube-survey` | the survey of solvable cubes (`-o FILE`, `--no-color`) |

For example:

```
echo "3" | algonotes-hanoi
echo "in computer science a huffman code is a prefix code" | algonotes-huffman
```

## What it does not do

The package has no shortest-path routine. There is no Dijkstra function
and no command for single-source distances. For connectivity questions,
use `Graph.component`, `transitive_closure` or the spanning-tree functions.

## Running the tests

```
pip install -e ".[test]"
pytest
```