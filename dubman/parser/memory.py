from dubman.parser.parser import Parser, parser_name, func_name

# REASON: combinators roll back remaining, value and success on failure but never memory,
# a save made inside an abandoned branch stays visible to whatever runs next

def save(name):
    def parse(state):
        memory = dict(state.memory)
        memory[name] = state.value
        return state.update(memory=memory)
    return Parser(parse, parser_name("save", name))

def load(name):
    def parse(state):
        return state.succeed(value=state[name])
    return Parser(parse, parser_name("load", name))

def forget(name):
    def parse(state):
        if name not in state.memory:
            return state.succeed(value=state.value)
        memory = dict(state.memory)
        del memory[name]
        return state.succeed(value=state.value, memory=memory)
    return Parser(parse, parser_name("forget", name))

def recall(name):
    def parse(state):
        if name not in state.memory:
            return state.fail()
        return state.succeed(value=state.value)
    return Parser(parse, parser_name("recall", name))

def compare(name, predicate):
    """
        zero-width gate on the value and the value saved as name, predicate(value, saved)
        fails when nothing is saved as name
    """
    def parse(state):
        if name not in state.memory or not predicate(state.value, state.memory[name]):
            return state.fail()
        return state.succeed(value=state.value)
    return Parser(parse, "compare({}, {})".format(repr(name), func_name(predicate)))
