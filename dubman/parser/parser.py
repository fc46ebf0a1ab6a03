import sys
from dubman.parser.state import ParserState
import dubman.utils.string

LOG = set()
# LOG.add("DEBUG")

class Parser:
    """
        DESIGN:
        a parser is a function from a state to a new state
        this class only gives it a name and the composition operators

            a / b   sequence, b's value replaces a's unless b has none
            a * b   collect, values are concatenated
            a | b   ordered alternation

        / and * share precedence and associate left, like in the grammars written for them
        a grammar is assembled once and run against any number of states
    """
    def __init__(self, func, name=None):
        self.func = func
        if name is None: name = getattr(func, "__name__", "parser")
        self.name = name
    def __call__(self, state):
        return self.func(state)
    def run(self, state):
        if isinstance(state, str):
            state = ParserState(state)
        result = self.func(state)
        if "DEBUG" in LOG:
            print("{}: {} {} at {}".format(
                self.name,
                "ok" if result.success else "failed",
                repr(result.value),
                dubman.utils.string.escape(result.remaining[:Parser.TRACE_LEN], max_length=200),
            ), file=sys.stderr)
        return result
    TRACE_LEN = 30
    def match(self, text):
        return self.run(text).success
    def discard(self):
        from dubman.parser.combinators import discard
        return discard(self)
    def __truediv__(self, other):
        from dubman.parser.combinators import sequence
        return sequence(self, other)
    def __mul__(self, other):
        from dubman.parser.combinators import collect
        return collect(self, other)
    def __or__(self, other):
        from dubman.parser.combinators import alternate
        return alternate(self, other)
    def __repr__(self):
        return self.name

def parser_name(name, *args):
    return "{}({})".format(name, ", ".join(repr(arg) for arg in args))

def func_name(func):
    return getattr(func, "__name__", repr(func))
