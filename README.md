# dddplayer

Building blocks for drawing domain-driven design architecture diagrams as
Graphviz DOT, plus a small command line tool for viewing saved diagrams and
printing the version.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Print the version banner (program, version, platform and build date):

```
dddplayer version
```

Open a previously saved diagram (a `.dot` file) in the web viewer:

```
dddplayer open -p dddplayer/arch.dot
```

`open` reads the file, percent-encodes its text into the fragment of the
viewer URL and starts the system's `open` command on that URL. The viewer's
address is taken from the `DDDPLAYER_SITE_URL` environment variable and
defaults to `http://localhost:8080`. A missing or unreadable file ends the
command with an error message and exit status 1.

## Library

- `dddplayer.radix` – a radix tree `Tree`. `insert(key, value)` adds or
  updates a key (an empty key raises `ValueError`); `get(key)` returns the
  stored value or raises `KeyError`; `walk(walker)` visits every node depth
  first, calling `walker(prefix, value, state)` with `WalkState.IN` on entry
  and `WalkState.OUT` on exit; returning `WalkStatus.STOP` ends the walk.
  `longest_prefix(k1, k2)` gives the length of a shared prefix.
- `dddplayer.directed` – a directed `Graph` of `Node`s and `Edge`s with
  `add_node`, `find_node_by_key`, `add_edge` and `find_paths_to_prefix`,
  which returns every simple path from a start node to nodes whose key has a
  given prefix.
- `dddplayer.directory` – a directory `TreeNode` with `add_path`,
  `add_value`, `get_value` (raising `NodeNotFoundError`) and `get_node`;
  `find_common_root_directory`, `build_directory_tree` and `walk` work on
  lists of `/`-separated file paths.
- `dddplayer.intimacy` – `IntimacyGraph`: `intimacy_plus_one(a, b)`
  strengthens the link between two names, and `intimacy(a, b)` scores them as
  the direct link count plus the share of neighbours they have in common
  (0.0 when either name is unknown).
- `dddplayer.persistence` – `Relations`, an append-only list whose `walk`
  prints and skips errors raised by the walker, and `RadixRepository`, which
  stores objects (anything with an `identifier` that has an `id`) in a radix
  tree; `get_objects` raises `ObjectNotFoundError` for a missing id.
- `dddplayer.port` – `port_str` and `generate_short_url` turn names into
  short, DOT-safe identifiers (32-bit FNV-1a hash in base 62, prefixed with
  `d`); `EdgeArrowHead` and `EdgeType` name the arrow heads and line styles.
- `dddplayer.dot_entity` – the DOT model (`Dot`, `SubGraph`, `Node`, `Table`,
  `Row`, `Data`, `Edge`) and the table layout helpers; `Node.build` lays a
  list of elements out as a summary table, and `Dot.write(stream)` renders
  the diagram.
- `dddplayer.templates` – the Jinja templates and `render(template_names,
  context)`, which renders the last named template with the others available
  to it; `DEFAULT_TEMPLATES` lists them in order.
- `dddplayer.factory` – `DotBuilder(diagram).build()` turns an architecture
  diagram (an object with `name`, `type`, `sub_diagrams` and `edges`) into a
  `Dot`. With `DiagramType.TABLE` sub diagrams become summary tables and edges
  point at table ports; with `DiagramType.PLAIN` each node is a filled box.
  Arrow heads and line styles follow the edge's `RelationType`.
- `dddplayer.disk` – `DiskWriter` and `write_to_disk` save a diagram as
  `<name>.dot` and its SHA-1 as `<name>.hash` in a `dddplayer` folder of the
  first directory upwards that holds a `go.mod` file, skipping the write when
  the stored hash matches.
- `dddplayer.version` – `Version`, `CURRENT_VERSION` and
  `build_version_string`.

Example:

```python
import io

from dddplayer.radix import Tree
from dddplayer.dot_entity import Dot
from dddplayer.templates import DEFAULT_TEMPLATES

tree = Tree()
tree.insert("abc", 1)
tree.insert("abx", 2)
assert tree.get("abx") == 2

out = io.StringIO()
Dot(name="shop", label="shop", templates=list(DEFAULT_TEMPLATES)).write(out)
print(out.getvalue())
```

## What this package does not do

It does not read or analyse a codebase. There is no command that produces an
architecture diagram from source code: diagrams are built with `DotBuilder`
from diagram objects you supply, and the command line only opens diagrams
that are already saved and prints the version. It does not run Graphviz
itself; the output is DOT text.