from .state import ParserState
from .parser import Parser
from .primitives import literal, check, skip, produce, fail, collect_while, collect_until, drop_while, drop_until
from .primitives import collect_line, drop_line, whitespace, nonwhite, test, mutate
from .memory import save, load, forget, recall, compare
from .combinators import sequence, collect, alternate, many, maybe, discard
