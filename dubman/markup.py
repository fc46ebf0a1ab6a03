import functools
import re
from dubman.parser import mutate, test, produce, whitespace

def make_bold(s):
    return r"\fB" + s + r"\fR"

def make_italic(s):
    return r"\fI" + s + r"\fR"

@functools.lru_cache(maxsize=None)
def hyphen_pattern():
    return re.compile("-")

def slash_hyphens(s):
    return hyphen_pattern().sub(r"\\-", s)

def make_uppercase(s):
    return s.upper()

def see_also(name, section=1):
    return r"\fI{}\fR({})".format(slash_hyphens(name), section)

def escape_control(s):
    if s.startswith((".", "'")):
        return r"\&" + s
    return s

def collapse_space(s):
    return " " if s else ""

def nonempty_value(value):
    return bool(value)

bold = mutate(make_bold)
italic = mutate(make_italic)
slash = mutate(slash_hyphens)
upper = mutate(make_uppercase)
strip = mutate(str.strip)
control = mutate(escape_control)
nonempty = test(nonempty_value)
insert_newline = produce("\n")
# any run of blanks on the line as a single space, nothing if there were none
spacing = whitespace(drop=False, stop_on_newline=True) / mutate(collapse_space)
