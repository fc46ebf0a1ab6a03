from dubman.parser.parser import Parser, parser_name, func_name

def starts_with(text, prefix, ignore_case):
    """
        compares one character at a time, so a match always covers len(prefix) characters
        even where folding the whole slice would change its length
    """
    if len(text) < len(prefix):
        return False
    if not ignore_case:
        return text.startswith(prefix)
    return all(a.casefold() == b.casefold() for a, b in zip(text, prefix))

def literal(text, ignore_case=True):
    def parse(state):
        if not starts_with(state.remaining, text, ignore_case):
            return state.fail()
        return state.succeed(remaining=state.remaining[len(text):], value=text)
    return Parser(parse, parser_name("literal", text))

def check(text, ignore_case=True):
    def parse(state):
        if not starts_with(state.remaining, text, ignore_case):
            return state.fail()
        return state.succeed(remaining=state.remaining[len(text):], value=None)
    return Parser(parse, parser_name("check", text))

def skip(text, ignore_case=True):
    """
        consumes text if it is there, succeeds either way
        the value is not touched
    """
    def parse(state):
        if starts_with(state.remaining, text, ignore_case):
            return state.succeed(remaining=state.remaining[len(text):], value=state.value)
        return state.succeed(value=state.value)
    return Parser(parse, parser_name("skip", text))

def produce(text):
    def parse(state):
        return state.succeed(value=text)
    return Parser(parse, parser_name("produce", text))

def fail():
    def parse(state):
        return state.fail()
    return Parser(parse, "fail()")

def run_length(text, predicate, keep_terminator):
    end = 0
    while end < len(text) and predicate(text[end]):
        end += 1
    if keep_terminator and end < len(text):
        end += 1
    return end

def collect_while(predicate, keep_terminator=False):
    """
        consumes the longest run of characters matching predicate, maybe empty
        keep_terminator also takes the character that ended the run, if there is one
    """
    def parse(state):
        end = run_length(state.remaining, predicate, keep_terminator)
        return state.succeed(remaining=state.remaining[end:], value=state.remaining[:end])
    return Parser(parse, "collect_while({}, {})".format(func_name(predicate), keep_terminator))

def collect_until(predicate, keep_terminator=False):
    parser = collect_while(lambda char: not predicate(char), keep_terminator)
    parser.name = "collect_until({}, {})".format(func_name(predicate), keep_terminator)
    return parser

def drop_while(predicate, keep_terminator=False):
    def parse(state):
        end = run_length(state.remaining, predicate, keep_terminator)
        return state.succeed(remaining=state.remaining[end:], value=None)
    return Parser(parse, "drop_while({}, {})".format(func_name(predicate), keep_terminator))

def drop_until(predicate, keep_terminator=False):
    parser = drop_while(lambda char: not predicate(char), keep_terminator)
    parser.name = "drop_until({}, {})".format(func_name(predicate), keep_terminator)
    return parser

def is_newline(char):
    return char in "\n\r"
def is_white(char):
    return char.isspace()
def is_inline_white(char):
    return char.isspace() and not is_newline(char)

def collect_line(keep_terminator=True):
    return collect_until(is_newline, keep_terminator)
def drop_line(keep_terminator=True):
    return drop_until(is_newline, keep_terminator)

def whitespace(drop=True, stop_on_newline=False):
    predicate = is_inline_white if stop_on_newline else is_white
    if drop:
        return drop_while(predicate)
    return collect_while(predicate)

def nonwhite():
    parser = collect_until(is_white)
    parser.name = "nonwhite()"
    return parser

def test(predicate):
    """
        zero-width gate on the carried value
    """
    def parse(state):
        if not predicate(state.value):
            return state.fail()
        return state.succeed(value=state.value)
    return Parser(parse, "test({})".format(func_name(predicate)))

def mutate(transform):
    def parse(state):
        if not state.success or state.value is None:
            return state.fail()
        return state.update(value=transform(state.value))
    return Parser(parse, "mutate({})".format(func_name(transform)))
