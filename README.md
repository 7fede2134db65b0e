# baobao

Language-agnostic building blocks for code generators that turn a CLI
manifest into source code. Pure Python, no runtime dependencies.

## Install

```
pip install baobao
pip install "baobao[test]"   # with pytest
```

## What is inside

- `baobao.code_builder.CodeBuilder`: builds indented source text line by
  line. Every method returns the builder, so calls chain: `line`, `blank`,
  `raw`, `indent`, `dedent` (never below zero), `doc`, `rust_doc`, `jsdoc`,
  `block`, `block_with_close`, `when`, `each`, `emit`, `apply_fragment`,
  `current_indent`, `build`. The constructors `CodeBuilder.rust()`,
  `.typescript()` and `.go()` indent with four spaces, two spaces and tabs.
- `baobao.fragments`: the fragment types `Line`, `Blank`, `Raw`, `Block`,
  `Indented`, `Sequence`, `JsDoc`, `RustDoc`, and the abstract base class
  `Renderable` whose `to_fragments()` feeds `CodeBuilder.emit`.
- `baobao.indent.Indent`: an indentation style, `Indent.spaces(n)` or
  `Indent.tab()`, with the presets `Indent.RUST`, `Indent.TYPESCRIPT` and
  `Indent.GO`. `as_str()` gives one level; widths other than 2, 4 and 8
  give four spaces.
- `baobao.file_builder.FileBuilder`: an `ImportCollector` plus a
  `CodeBuilder` for one output file (`add_import`, `add_module`,
  `with_code`, `has_imports`, `into_parts`).
- `baobao.imports`: `ImportCollector` (modules kept in insertion order,
  symbols yielded sorted), `DependencySpec`, and `DependencyCollector`
  (the first spec added for a name wins; `sorted()` orders by name).
- `baobao.handlers`: `HandlerPaths` computes handler and module file paths
  below a base directory and finds handler files no longer expected
  (`find_orphans`, `find_orphans_with_status` returning `OrphanHandler`
  records that tell whether a file still holds the untouched stub marker);
  `find_orphan_commands` finds stray command files in one directory.
- `baobao.files`: `File`, `FileRules`, `Overwrite`, `WriteResult`,
  `write_file`, and the abstract `GeneratedFile`. A file with
  `Overwrite.IF_MISSING` is skipped when it already exists; parent
  directories are created as needed.
- `baobao.bao_toml.BaoToml`: a `GeneratedFile` that renders a starter
  `bao.toml` with a sample `hello` command; written only if missing unless
  `with_overwrite(Overwrite.ALWAYS)` is used.
- `baobao.schema`: `CommandTree` flattens a mapping of command names to
  command objects (nested commands found in each object's `commands`
  mapping) into depth-first `FlatCommand` entries, with `leaves()`,
  `parents()`, `collect_paths()` and `collect_leaf_paths()`; plus the
  info records `CommandInfo`, `ContextFieldInfo`, `PoolConfigInfo` and
  `SqliteConfigInfo`.
- `baobao.casing`: `to_pascal_case`, `to_snake_case`, `to_camel_case`,
  `to_kebab_case`, `toml_value_to_string`.
- `baobao.version.Version`: `X.Y.Z` versions; `Version.parse` raises
  `ValueError` on anything else.
- `baobao.argtypes`: `ArgType`, `DatabaseType`, `ContextFieldType`.
- `baobao.adapters`, `baobao.database`, `baobao.language`, `baobao.naming`:
  the interfaces and records that language-specific generators implement
  (`CliAdapter`, `RuntimeAdapter`, `ErrorAdapter`, `DatabaseAdapter`,
  `LanguageCodegen`, `TypeMapper`, `NamingConvention`, and their info
  types).

## Example

```python
from baobao.code_builder import CodeBuilder

code = (
    CodeBuilder.rust()
    .line("fn main() {")
    .indent()
    .line('println!("Hello, world!");')
    .dedent()
    .line("}")
    .build()
)
assert code == 'fn main() {\n    println!("Hello, world!");\n}\n'
```

```python
from baobao.handlers import HandlerPaths

paths = HandlerPaths("src/handlers", "rs")
print(paths.handler_path(["db", "migrate"]))  # src/handlers/db/migrate.rs
print(paths.mod_path(["db"]))                 # src/handlers/db/mod.rs
```

## What it does not do

The package has no command-line tool and does not read or validate a
`bao.toml` manifest. It ships no concrete generators for any target
language: `LanguageCodegen`, `CliAdapter`, `DatabaseAdapter` and the other
interfaces are abstract and must be implemented by the code that uses
them.

## Running the tests

```
pytest
```