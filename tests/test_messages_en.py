from qstools.messages_en import en_us_messages


def test_every_template_translates_to_itself():
    catalogue = en_us_messages()
    assert catalogue
    assert all(key == value for key, value in catalogue.items())


def test_known_templates_present():
    catalogue = en_us_messages()
    assert catalogue["-r is required to copy a directory"] == "-r is required to copy a directory"
    assert catalogue["Bucket <%s> created.\n"] == "Bucket <%s> created.\n"
    assert catalogue["Error: at least one arg is needed for %s"] == (
        "Error: at least one arg is needed for %s"
    )
    assert catalogue["confirm to remove <%s>? [y/N] "] == "confirm to remove <%s>? [y/N] "


def test_multiline_templates_keep_their_layout():
    catalogue = en_us_messages()
    shell_welcome = [key for key in catalogue if "Ctrl + D" in key]
    assert len(shell_welcome) == 1
    assert shell_welcome[0].startswith("\nTo execute command")
    assert shell_welcome[0].endswith("Version %s\n")

    mb_help = [key for key in catalogue if key.startswith("qsctl mb can make")]
    assert len(mb_help) == 1
    assert mb_help[0].endswith("* must not be an available IP address\n\t")


def test_format_help_lists_sequences():
    catalogue = en_us_messages()
    (help_text,) = [key for key in catalogue if key.startswith("use the specified FORMAT")]
    assert "  %F   file type\n" in help_text
    assert "  %c   count of files in this bucket\n" in help_text


def test_each_call_returns_independent_copy():
    first = en_us_messages()
    first.clear()
    second = en_us_messages()
    assert second
    assert "%s\n" in second


def test_templates_with_placeholders_format():
    catalogue = en_us_messages()
    template = catalogue["Dir <%s> copied to <%s>.\n"]
    assert template % ("a", "b") == "Dir <a> copied to <b>.\n"