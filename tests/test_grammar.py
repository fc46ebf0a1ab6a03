from .testdefs import *
from dubman import grammar

name_tests(
    # arguments
    # - upper-cased and italic, trailing dots kept
    argument=parses(grammar.argument(), "<command>", r"\fICOMMAND\fR"),
    argument_dots=parses(grammar.argument(), "<dependency>...]", r"\fIDEPENDENCY...\fR", "]"),
    argument_spaces=parses(grammar.argument(), "<application arguments...>", r"\fIAPPLICATION ARGUMENTS...\fR"),
    argument_hyphen=parses(grammar.argument(), "<version-spec>", r"\fIVERSION\-SPEC\fR"),
    argument_open=fails(grammar.argument(), "<command\n>"),
    argument_empty=fails(grammar.argument(), "<>"),
    # options
    option_short=parses(grammar.option(), "-h  --help", r"\fB\-h\fR", "  --help"),
    option_long=parses(grammar.option(), "--help]", r"\fB\-\-help\fR", "]"),
    option_value=parses(grammar.option(), "--root=VALUE ", r"\fB\-\-root\fR=\fIVALUE\fR", " "),
    option_argument=parses(grammar.option(), "--config=<file>", r"\fB\-\-config\fR=\fIFILE\fR"),
    option_bare_value=parses(grammar.option(), "--mode=fast", r"\fB\-\-mode\fR", "=fast"),
    option_dashes=parses(grammar.option(), "-- <args>", r"\fB\-\-\fR", " <args>"),
    option_none=fails(grammar.option(), "help"),
    # boxes
    box=parses(grammar.box(), "[--version]", r"[\fB\-\-version\fR]"),
    box_nested=parses(grammar.box(), "[<directory> [<dependency>...]]", r"[\fIDIRECTORY\fR [\fIDEPENDENCY...\fR]]"),
    box_adjacent=parses(grammar.box(), "[<package>[@<version-spec>]]", r"[\fIPACKAGE\fR[@\fIVERSION\-SPEC\fR]]"),
    box_words=parses(grammar.box(), "[-- [<application arguments...>]]", r"[\fB\-\-\fR [\fIAPPLICATION ARGUMENTS...\fR]]"),
    box_trailing_space=parses(grammar.box(), "[<path> ]", r"[\fIPATH\fR]"),
    box_unclosed=fails(grammar.box(), "[<path>"),
    box_too_deep=fails(grammar.box(0), "[[<path>]]"),
    any_box=parses(grammar.any_box(), "<path> x", r"\fIPATH\fR", " x"),
    # synopsis
    synopsis=parses(grammar.synopsis(), "USAGE: dub [--version] [<command>] [<options...>] [-- [<application arguments...>]]\nrest",
        r"[\fB\-\-version\fR] [\fICOMMAND\fR] [\fIOPTIONS...\fR] [\fB\-\-\fR [\fIAPPLICATION ARGUMENTS...\fR]]", "rest"),
    synopsis_command=parses(grammar.synopsis("build"), "USAGE: dub build [<package>[@<version-spec>]] [<options...>]\n",
        r"[\fIPACKAGE\fR[@\fIVERSION\-SPEC\fR]] [\fIOPTIONS...\fR]"),
    synopsis_empty=parses(grammar.synopsis(), "usage: dub\n", ""),
    synopsis_wrong_command=fails(grammar.synopsis("run"), "USAGE: dub build <x>\n"),
    synopsis_missing=fails(grammar.synopsis(), "dub: command not found\n"),
    # sections
    section_title=parses(grammar.section_title(), "Common options\n==============\n\n  -h", "COMMON OPTIONS", "\n  -h"),
    section_not_underlined=fails(grammar.section_title(), "Common options\n  -h  --help\n"),
    section_short=fails(grammar.section_title(), "Title\n=\n"),
    separator=parses(grammar.separator(), "Available commands\n==================\n", None),
    subsection_title=parses(grammar.subsection_title(), "  Package creation\n  ----------------\n  init", "Package creation", "  init"),
    subsection_equals=fails(grammar.subsection_title(), "Common options\n==============\n"),
    # lines
    blank_line=parses(grammar.blank_line(), "   \nx", None, "x"),
    blank_line_crlf=parses(grammar.blank_line(), "\r\nx", None, "x"),
    blank_line_text=fails(grammar.blank_line(), "  x\n"),
    description_line=parses(grammar.description_line(), "  Use --force to overwrite  \nnext", r"Use \fB\-\-force\fR to overwrite", "next"),
    description_line_dub=parses(grammar.description_line(), 'Run "dub <command> --help" to get help.\n',
        r'Run "\fBdub\fR \fICOMMAND\fR \fB\-\-help\fR" to get help.'),
    description_line_dub_file=parses(grammar.description_line(), "see dub.json, DUB and dubs\n", "see dub.json, DUB and dubs"),
    description_line_spacing=parses(grammar.description_line(), "one   two\n", "one two"),
    description_line_brackets=parses(grammar.description_line(), "pass [<args>] a<b\n", "pass [<args>] a<b"),
    description_line_minus=parses(grammar.description_line(), "-1 means unlimited\n", r"\-1 means unlimited"),
    description_line_option_value=parses(grammar.description_line(), "use --build=debug\n", r"use \fB\-\-build\fR=debug"),
    description_line_control=parses(grammar.description_line(), ".dub directory\n", r"\&.dub directory"),
    description_line_blank=fails(grammar.description_line(), "   \n"),
    version_line=parses(grammar.version_line(), "DUB version 1.30.0, built on Jan  1 2023\n", None),
    # option entries
    option_names=parses(grammar.option_names(), "-h  --help            Display", r"\fB\-h\fR, \fB\-\-help\fR", "            Display"),
    option_names_comma=parses(grammar.option_names(), "-h, --help\n", r"\fB\-h\fR, \fB\-\-help\fR", "\n"),
    option_line=parses(grammar.option_line(), "  -h  --help            Display general or command specific help\n",
        ".TP\n" r"\fB\-h\fR, \fB\-\-help\fR" "\nDisplay general or command specific help\n"),
    option_line_wrapped=parses(grammar.option_line(), "      --skip-registry=VALUE\n        Sets a mode\n",
        ".TP\n" r"\fB\-\-skip\-registry\fR=\fIVALUE\fR" "\n", "        Sets a mode\n"),
    option_line_text=fails(grammar.option_line(), "      Sets a mode\n"),
    option_line_minus=fails(grammar.option_line(), "                        -1 means unlimited\n"),
    option_line_one_space=fails(grammar.option_line(), "  -f forces it\n"),
    option_line_last=parses(grammar.option_line(), "  --force", ".TP\n" r"\fB\-\-force\fR" "\n"),
    # lists
    listing=parses(grammar.listing(), "    Possible names:\n      debug, plain, release-debug\n  -h",
        "Possible names:\n.nf\n" r"debug, plain, release\-debug" "\n.fi\n", "  -h"),
    listing_two_items=parses(grammar.listing(), "  Values:\n    x86\n     x86_64\n", "Values:\n.nf\nx86\nx86_64\n.fi\n"),
    listing_no_items=fails(grammar.listing(), "    Possible names:\n    debug\n"),
    listing_no_colon=fails(grammar.listing(), "    Possible names\n      debug\n"),
)

def test_command_line_summary_below():
    state = grammar.command_line().run("  init [<directory> [<dependency>...]]\n                        Initializes\n")
    assert state.success
    assert state.value == r"\fBinit\fR [\fIDIRECTORY\fR [\fIDEPENDENCY...\fR]]"
    assert state["cmd"] == "init"
    assert "summary" not in state
    assert state.remaining == "                        Initializes\n"

def test_command_line_summary_inline():
    state = grammar.command_line().run("  list                  Prints a list of all or selected local packages\n")
    assert state.success
    assert state.value == "\\fBlist\\fR\nPrints a list of all or selected local packages"
    assert state["summary"] == "Prints a list of all or selected local packages"
    assert state.remaining == ""

def test_command_line_hyphens():
    state = grammar.command_line().run("  add-local <dir> [<version>]\n")
    assert state.value == r"\fBadd\-local\fR \fIDIR\fR [\fIVERSION\fR]"
    assert state["cmd"] == "add-local"

def test_command_line_forgets_old_summary():
    state = ParserState("  run [<package>]\n", memory={"summary": "Prints a list", "cmd": "list"})
    state = grammar.command_line().run(state)
    assert state["cmd"] == "run"
    assert "summary" not in state

def test_command_line_indent():
    assert not grammar.command_line().match("                        Initializes an empty package skeleton\n")
    assert not grammar.command_line().match(" init\n")
    assert not grammar.command_line().match("\n")

def test_options():
    state = grammar.options().run(help_text('''
        Common options
        ==============

          -h  --help            Display general or command specific help
              --root=VALUE      Path to operate in instead of the current working dir
              --skip-registry=VALUE
                                Sets a mode for skipping the search on certain package
                                registry types

        DUB version 1.30.0, built on Jan  1 2023
    '''))
    assert state.success
    assert state.remaining == ""
    assert state.value == "\n".join([
        ".SH COMMON OPTIONS",
        ".TP",
        r"\fB\-h\fR, \fB\-\-help\fR",
        "Display general or command specific help",
        ".TP",
        r"\fB\-\-root\fR=\fIVALUE\fR",
        "Path to operate in instead of the current working dir",
        ".TP",
        r"\fB\-\-skip\-registry\fR=\fIVALUE\fR",
        "Sets a mode for skipping the search on certain package",
        "registry types",
        "",
    ])
    assert state["section"] == "COMMON OPTIONS"

def test_options_sections():
    state = grammar.options().run("Build options\n=============\n\n  -b  --build=VALUE  Type\n\nCommon options\n==============\n")
    assert state.value == ".SH BUILD OPTIONS\n.TP\n" r"\fB\-b\fR, \fB\-\-build\fR=\fIVALUE\fR" "\nType\n.SH COMMON OPTIONS\n"
    assert state["section"] == "COMMON OPTIONS"

def test_options_wrapped_minus():
    state = grammar.options().run("  -j  --jobs=VALUE  Number of jobs, where\n                        -1 means unlimited\n")
    assert state.value.count(".TP") == 1
    assert state.value == ".TP\n" r"\fB\-j\fR, \fB\-\-jobs\fR=\fIVALUE\fR" "\nNumber of jobs, where\n" r"\-1 means unlimited" "\n"

def test_options_listing():
    state = grammar.options().run(
        "  -b  --build=VALUE  Specifies the type of build.\n"
        "    Possible names:\n"
        "      debug, plain, release\n"
        "  -h  --help         Display help\n"
    )
    assert state.remaining == ""
    assert state.value == "\n".join([
        ".TP",
        r"\fB\-b\fR, \fB\-\-build\fR=\fIVALUE\fR",
        "Specifies the type of build.",
        "Possible names:",
        ".nf",
        "debug, plain, release",
        ".fi",
        ".TP",
        r"\fB\-h\fR, \fB\-\-help\fR",
        "Display help",
        "",
    ])
