"""
    grammars for the text dub prints with --help

    values are groff markup, ready to be written into a page
    the shape of the text they expect:

        USAGE: dub [--version] [<command>] [<options...>] [-- [<application arguments...>]]

        Manages the DUB project in the current directory.

        Available commands
        ==================

          Package creation
          ----------------
          init [<directory> [<dependency>...]]
                                Initializes an empty package skeleton

        Common options
        ==============

          -h  --help            Display general or command specific help
              --root=VALUE      Path to operate in instead of the current working dir

        DUB version 1.30.0, built on Jan  1 2023
"""
from dubman.parser import literal, check, skip, collect_while, collect_until, collect_line, drop_line
from dubman.parser import whitespace, nonwhite, test, mutate, produce
from dubman.parser import save, forget, compare, many, maybe, discard
from dubman.parser.primitives import is_newline, is_inline_white
from dubman.markup import bold, italic, slash, upper, strip, nonempty, insert_newline, spacing, control
from dubman.markup import make_bold

def closes_argument(char):
    return char == ">" or is_newline(char)
def is_option_char(char):
    return not char.isspace() and char not in "[]<>=,.;:\"'()"
def is_word_char(char):
    return not char.isspace() and char not in "[]<>"
def is_value_char(char):
    return char.isupper() or char.isdigit() or char == "_"
def is_two_spaces(value):
    return value == "  "
def is_option_name(name):
    return name[:1].isalpha()
def is_dub(word):
    return word.lstrip('"') == "dub"
def make_dub_bold(word):
    return word[:-len("dub")] + make_bold("dub")
def is_blank(value):
    return not value.strip()
def is_list_head(value):
    return value.endswith(":")
def is_deeper(indent, saved):
    return len(indent) > len(saved)
def section_heading(title):
    return ".SH {}\n".format(title)

def argument():
    """
        <name> or <name>..., upper-cased and italic
    """
    return check("<") / collect_until(closes_argument) / nonempty / check(">") \
        * maybe(many(literal("."), 3, -1)) / upper / slash / italic

def value_word():
    return collect_while(is_value_char) / nonempty / italic

def option(bare=True):
    """
        -x, --name, --name=VALUE or --name=<arg>
        a lone - or -- only when bare, otherwise the name starts with a letter
    """
    name = collect_while(is_option_char)
    if not bare:
        name = name / test(is_option_name)
    name = many(literal("-"), 1, 2) * name / slash / bold
    assignment = literal("=") * (argument() | value_word())
    return name * maybe(assignment)

def word():
    return collect_while(is_word_char) / nonempty / slash

def box(depth=2):
    """
        [...] holding arguments, options, words and boxes nested depth levels deeper
    """
    item = argument() | option()
    if depth > 0:
        item = box(depth - 1) | item
    item = item | word()
    items = item * many(spacing * item, 0, -1)
    return literal("[") * items * whitespace(True, True) * literal("]")

def any_box():
    return argument() | box()

def synopsis(command=None):
    white = whitespace(True, True)
    head = check("USAGE:") / white / check("dub") / white
    if command:
        head = head / check(command) / white
    item = any_box() | option() | word()
    args = item * many(spacing * item, 0, -1)
    return head / maybe(args) / drop_line()

def section_title():
    """
        a title underlined with =, the value is the upper-cased title
    """
    return collect_line(False) / strip / nonempty / upper / whitespace() \
        / discard(many(literal("="), 2, -1)) / drop_line() / save("section")

def separator():
    return discard(section_title())

def subsection_title():
    return collect_line(False) / strip / nonempty / slash / whitespace() \
        / discard(many(literal("-"), 3, -1)) / drop_line()

def command_line():
    """
        DESIGN:
        an entry of the command table, indented by exactly two spaces
        the raw name goes to "cmd"
        a summary on the same line goes to "summary", otherwise "summary" is forgotten
        and the summary is the next line, left for the caller
    """
    indent = many(literal(" "), 2, -1) / test(is_two_spaces)
    name = nonwhite() / nonempty / save("cmd") / bold / slash
    summary = (whitespace(True, True) / collect_line() / strip / nonempty / slash / save("summary")) \
        | (collect_line() / forget("summary"))
    return indent / name * many(spacing * (any_box() | option()), 0, -1) * insert_newline * summary / strip

def blank_line():
    return whitespace(True, True) / (check("\n") | check("\r\n") | check("\r"))

def dub_word():
    return collect_while(is_word_char) / test(is_dub) / mutate(make_dub_bold)

def prose():
    """
        running text, dub in bold, <args> and options marked up like in the synopsis
        blanks between words become single spaces
    """
    item = dub_word() | argument() | option(bare=False) | word() | (nonwhite() / nonempty / slash)
    return item * many(spacing * item, 0, -1)

def description_line():
    white = whitespace(True, True)
    return white / prose() / white / drop_line() / control

def version_line():
    return check("DUB version", ignore_case=False) / drop_line()

def option_names():
    between = whitespace(True, True) / skip(",") / whitespace(True, True)
    return option(bare=False) * many(between / (produce(", ") * option(bare=False)), 0, -1)

def option_line():
    """
        one or more option names, then the description if it starts on the same line
        at least two blanks after the names, so wrapped text starting with - is not an entry
    """
    entry = many(literal(" "), 1, -1) / produce(".TP\n") * option_names() * insert_newline
    description = discard(many(literal(" "), 2, -1)) / collect_line() / strip / nonempty / slash * insert_newline
    line_end = collect_line(False) / test(is_blank) / drop_line()
    return entry * (description | discard(line_end))

def listing():
    """
        DESIGN:
        a line ending in : and the lines below it indented deeper, kept as they are with .nf
        the head's indent goes to "indent", each item is compared against it
    """
    head = collect_while(is_inline_white) / save("indent") / collect_line(False) / strip \
        / test(is_list_head) / slash / control / drop_line() * produce("\n.nf\n")
    item = collect_while(is_inline_white) / compare("indent", is_deeper) / collect_line(False) / strip \
        / nonempty / slash / control / drop_line() * insert_newline
    return head * many(item, 1, -1) * produce(".fi\n")

def options():
    """
        the option sections up to the end of the text
        option entries become tagged paragraphs, other lines continue the last paragraph
    """
    section = section_title() / mutate(section_heading)
    text = description_line() * insert_newline
    skipped = discard(blank_line() | version_line())
    return many(section | option_line() | skipped | listing() | text, 0, -1)
