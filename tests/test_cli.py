from consoleparse.cli import build_parser, main


def test_build_parser_registers_arguments():
    parser = build_parser()
    assert parser.registered_arguments() == [
        "--long_arg_name",
        "-short_arg",
        "--additional_val_arg",
    ]


def test_build_parser_help_starts_with_additional_help():
    help_text = build_parser().console_help()
    assert help_text.startswith(
        "This is an additional help to the arguments!\nArguments that the app takes:\n"
    )
    assert "\t-short_arg,\t\t\tThis is the help of the short form argument!\n" in help_text


def test_main_prints_help(capsys):
    assert main(["-short_arg"]) == 0
    assert capsys.readouterr().out == build_parser().console_help()


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == build_parser().console_help()


def test_parsed_values_through_built_parser():
    parser = build_parser()
    parser.parse_arguments(["prog", "-short_arg", "--additional_val_arg", "42"])
    assert parser.is_argument_passed("short_arg") is True
    assert parser.is_argument_passed("long_arg_name") is False
    assert parser.additional_value("additional_val_arg") == "42"