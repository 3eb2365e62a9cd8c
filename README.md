# consoleparse

`consoleparse` is a small parser for command-line arguments. You register
the options your program accepts and give it the raw argument list. You can
then ask which options were given and what values came with them. It can also
build a plain help text from the registered options.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
import sys

from consoleparse.parser import ArgumentError, ConsoleParser

parser = ConsoleParser()

# "--verbose": long form, no value
parser.register_argument("verbose", False, False, "Print more output.")
# "-q": short form, no value
parser.register_argument("q", True, False, "Be quiet.")
# "--output <value>": long form, takes the following argument as its value
parser.register_argument("output", False, True, "Where to write the result.")

parser.add_additional_help("Example tool.")

# The first element is the program name and is ignored.
parser.parse_arguments(sys.argv)

if parser.has_arguments():
    if parser.is_argument_passed("output"):
        print("writing to", parser.additional_value("output"))

print(parser.console_help(), end="")
```

### Rules

- An option registered with `short_form=True` is matched as `-name`.
  Otherwise it is matched as `--name`.
- An option registered with `additional_value=True` takes the argument
  that comes right after it as its value. Read the value with
  `additional_value(name)`. Values are returned as strings.
- `ArgumentError` is raised in each of these cases:
  - registering the same name twice;
  - asking about a name that was never registered;
  - asking for the value of an option that was registered without one;
  - asking for the value of an option that was not passed;
  - asking for the value of an option that is the last argument and so has
    no value after it.

  `ArgumentError` is a subclass of `RuntimeError`.
- `registered_arguments()` lists each registered option in the form it is
  matched in, such as `--verbose` or `-q`, in the order of registration.
- `console_help()` returns the text given to `add_additional_help()`,
  followed by the line `Arguments that the app takes:` and then one line per
  registered option with its help message.
- `reset()` forgets both the parsed arguments and the registered options.
  It leaves the additional help text as it is.

### What it does not do

The parser only answers questions about the arguments you register.

- It does not report arguments that were passed but never registered.
- It does not check that required options are present.
- It does not convert values to other types.
- It does not split combined short flags such as `-abc`.
- It does not understand `--name=value` syntax.

## Demo command

The package installs a small demonstration command, `consoleparse-demo`.
It registers three options:

- `--long_arg_name`
- `-short_arg`
- `--additional_val_arg`, which takes a value

It then parses the command line and prints the resulting help text:

```
consoleparse-demo --long_arg_name -short_arg --additional_val_arg 42
```

The same entry point is available as `consoleparse.cli.main`. The
`consoleparse.cli.build_parser()` function returns the configured parser on
its own.