# leech

Building blocks for tracking changes to tables and describing them as JSON
patch documents. JSON values are plain Python objects throughout: `None`,
`True`, `False`, `str`, numbers, `list` and `dict`.

## Modules

### `leech.values`

- `JsonType` – enum of the seven JSON kinds (`NULL`, `TRUE`, `FALSE`,
  `STRING`, `NUMBER`, `ARRAY`, `OBJECT`); `label` gives the lower-case name.
- `json_type(value)` and `type_name(value)` classify a Python value; anything
  that is not a JSON value raises `JsonError`.
- `member(obj, key, kind=None)` and `element(array, index, kind=None)` return
  a member or element, checking that it exists and, if `kind` is given, that
  it has that type.
- `pop_member(obj, key, kind=None)` and `pop_element(array, index, kind=None)`
  remove and return it with the same checks; on a type mismatch the container
  is left untouched.
- `JsonError` (a `ValueError`) is raised on every failure.

### `leech.ops`

- `equal(left, right)` – structural equality in which values of different
  JSON types are never equal (so `True` differs from `1`).
- `deep_copy(value)`.
- `keys_set_minus(left, right)` – copies of the entries of `left` whose keys
  are not in `right`.
- `keys_intersect_values_minus(left, right)` – copies of the entries of
  `left` whose keys are in `right` but whose values differ.

### `leech.parse`

- `parse(text)` accepts `str`, `bytes` or `bytearray` (bytes are decoded as
  UTF-8 with undecodable bytes kept as surrogate escapes).
- `parse_file(path)` reads and parses a file.
- Inside strings a backslash makes the next character literal (`\"` gives
  `"`, `\n` gives `n`), so arbitrary data survives a compose/parse round
  trip. Numbers always come back as `float`; hexadecimal, `inf` and `nan`
  forms are accepted as well as decimals.
- Failures raise `JsonParseError`, a subclass of `JsonError`.

### `leech.compose`

- `compose(value, pretty=False)` returns JSON text. Only `"` and `\` are
  escaped in strings. Numbers are written in fixed-point notation with
  trailing zeros and a trailing dot removed (`4.0` becomes `4`, `0.5`
  becomes `0.5`). Pretty output puts each element on its own line, indented
  by `INDENT_SIZE` (2) spaces per level, and ends with a newline.
- `compose_file(value, path, pretty=False)` writes the text to a file.

### `leech.logger`

- `Severity` – bit flags `DEBUG`, `VERBOSE`, `INFO`, `WARNING`, `ERROR`.
- `set_severity(mask)` chooses which severities are delivered; the default
  is `DEFAULT_SEVERITY` (errors, warnings and info).
- `set_callback(callback)` replaces the receiver, a function taking
  `(severity, message)`; `None` silences logging.
- `log(severity, message)` delivers a message.
- `default_callback` prints a labelled line, errors to standard error and
  the rest to standard output.

### `leech.patch`

- `create_patch(lastknown, timestamp=None)` returns a dict with `version`
  (`PATCH_VERSION`, currently 1), `lastknown`, `timestamp` (now, in whole
  seconds, by default) and an empty `blocks` list.
- `patch_version(patch)` returns the version as a non-negative integer.
- `parse_patch(raw)` parses a patch and rejects versions newer than
  `PATCH_VERSION`.
- `append_block(patch, block)` appends to `blocks`.
- Failures raise `PatchError`, a subclass of `JsonError`.

### `leech.csvtable`

`CsvTable(filename)` is a table kept in one CSV file whose first row is the
header.

- `create_table(name, primary_columns, subsidiary_columns)` writes the header
  unless the file already exists.
- `get_table(name, columns=None)` returns all rows, header first.
- `begin()` loads the file; `insert_record`, `delete_record`,
  `update_record` and `truncate_table` change the loaded rows; `commit()`
  writes them back and `rollback()` discards them.
- Records are matched on their leading (primary) fields; `update_record`
  replaces the fields that follow them.
- Used as a context manager, the table begins on entry and commits on
  success or rolls back on an exception.
- Failures raise `CsvTableError`.

## Example

```python
from leech.parse import parse
from leech.compose import compose
from leech.ops import keys_set_minus

old = parse('{"a": 1, "b": 2}')
new = parse('{"a": 1, "b": 3, "c": 4}')
print(compose(keys_set_minus(new, old)))   # {"c":4}
```

```python
from leech.patch import create_patch, append_block, parse_patch
from leech.compose import compose

patch = create_patch("0" * 40, 0)
append_block(patch, {"payload": []})
same = parse_patch(compose(patch, True))
```

```python
from leech.csvtable import CsvTable

table = CsvTable("hosts.csv")
table.create_table("hosts", ["id"], ["name"])
with table:
    table.insert_record("hosts", ["id", "name"], ["1", "alpha"])
    table.update_record("hosts", ["id"], ["1"], ["name"], ["beta"])
```

## What the package does not do

It provides the pieces only. There is no command-line tool, no block chain
storage, and no operations that commit table state, compute or merge deltas,
build diffs or rebases, query record history, apply patches to tables or
purge old blocks. The only table backend is the CSV file; there is no
database backend.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```