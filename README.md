# rustdrill

Support code for a course of small Rust exercises, in three parts:

- `rustdrill.ui` prints coloured status lines to the terminal.
- `rustdrill.project` writes a `rust-project.json` so that rust-analyzer
  treats every exercise file as a crate of its own.
- `rustdrill.solutions` holds Python versions of the ideas the exercises
  teach, each with tests.

## Requirements

- Python 3.11 or later
- `rich` (installed automatically)
- `rustc` on your `PATH`, only for `RustAnalyzerProject.get_sysroot_src()`

## Installation

```console
pip install rustdrill
```

To run the tests:

```console
pip install "rustdrill[test]"
pytest
```

## Status lines

```python
from rustdrill.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

`success()` prints a green line behind a ✅ mark, `warn()` a red line behind a
⚠️ mark. When the environment variable `NO_EMOJI` is set (`no_emoji()` returns
`True`), the marks are the plain characters `✓` and `!` instead.

## rust-analyzer project file

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()     # runs `rustc --print sysroot`
project.exercises_to_json()   # one crate per .rs file below ./exercises
if project.crates:
    project.write_to_disk()   # writes ./rust-project.json
```

- `get_sysroot_src()` prints the toolchain it found and sets `sysroot_src` to
  its `lib/rustlib/src/rust/library` directory.
- `exercises_to_json()` walks `exercises` in the current directory, in sorted
  order, and adds a `Crate` for every path whose text after the first dot is
  `rs`. Each crate uses edition `2021`, has no dependencies and sets the
  `test` cfg so rust-analyzer also works inside test blocks.
- `to_json()` returns the project as compact JSON; `write_to_disk()` writes
  that to `rust-project.json` in the current directory.

## Solutions

Each module in `rustdrill.solutions` covers one topic:

| Module | Contents |
| --- | --- |
| `basics` | `bigger`, `foo_if_fizz`, `is_even`, `sale_price`, `square`, `maybe_icecream`, string helpers (`trim_me`, `compose_me`, `replace_me`, `is_a_color_word`), list helpers (`array_and_vec`, `vec_loop`, `vec_map`, `fill_vec`, `inner_slice`), `longest`, `last_char` and the generic `Wrapper` |
| `quizzes` | `calculate_price_of_apples`, the `Command`/`transformer` string machine and `ReportCard` |
| `people` | `Person.from_text` (falls back to `Person.default()`) and `Person.parse` (raises a `ParsePersonError` subclass) |
| `colors` | `Color.from_tuple` and `Color.from_sequence`, raising `BadLenError` or `IntConversionError` |
| `errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger` and `parse_pos_nonzero` |
| `hashmaps` | fruit baskets (`default_basket`, `Fruit`, `fill_basket`) and `build_scores_table` with `Team` |
| `iterators` | `capitalize_first` and friends, `divide` with `DivisionError`, `result_with_list`, `list_of_results`, `factorial`, `Progress` counters and the `Cons` list |
| `structs` | `ColorClassic`, `ColorTuple`, `UnitLike`, `Order`, `create_order_template` and `Package` |
| `messages` | the `Echo`/`Move`/`ChangeColor`/`Quit` messages driving `MachineState` |
| `traits` | `append_bar`, `Licensed` software, `compare_license_types`, `SomeTrait`/`OtherTrait` and `some_func` |

A few examples:

```python
from rustdrill.solutions.quizzes import Command, calculate_price_of_apples, transformer
from rustdrill.solutions.people import Person
from rustdrill.solutions.iterators import divide

calculate_price_of_apples(65)                                  # 65
transformer([("hello", Command.UPPERCASE), ("foo", Command.append(1))])
                                                               # ['HELLO', 'foobar']
Person.parse("Mark,20")                                        # Person(name='Mark', age=20)
Person.from_text("Mark,twenty")                                # Person(name='John', age=30)
divide(81, 9)                                                  # 9
divide(81, 6)                                                  # raises NotDivisibleError
```

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile or test exercise files, check whether an exercise is still marked
`I AM NOT DONE`, show hints, list progress or watch the exercise directory for
changes. It offers the status-line, project-file and solution code described
above, to be called from Python.