from dubman.parser.parser import Parser

def concat(values):
    result = ""
    for value in values:
        if value is not None:
            result = result + value
    return result

def sequence(left, right):
    """
        runs right on what left left over
        a failure on either side restores the input, the memory written on the way is kept
    """
    def parse(state):
        first = left(state)
        if not first.success:
            return state.fail(memory=first.memory)
        second = right(first)
        if not second.success:
            return state.fail(memory=second.memory)
        if second.value is None:
            return second.update(value=first.value)
        return second
    return Parser(parse, "({} / {})".format(left, right))

def collect(left, right):
    def parse(state):
        first = left(state)
        if not first.success:
            return state.fail(memory=first.memory)
        second = right(first)
        if not second.success:
            return state.fail(memory=second.memory)
        return second.update(value=concat([first.value, second.value]))
    return Parser(parse, "({} * {})".format(left, right))

def alternate(left, right):
    def parse(state):
        first = left(state)
        if first.success:
            return first
        return right(state.update(memory=first.memory))
    return Parser(parse, "({} | {})".format(left, right))

def many(parser, min=0, max=-1):
    """
        DESIGN:
        applies parser until it fails or max applications succeeded
        a negative bound does not limit
        fewer than min successes fail the whole repetition back to the input
        the failing application ends the loop and leaves no trace except in memory

        a parser that succeeds without consuming loops forever when max is negative
    """
    def parse(state):
        values = []
        current = state
        while max < 0 or len(values) < max:
            attempt = parser(current)
            if not attempt.success:
                current = current.update(memory=attempt.memory)
                break
            values.append(attempt.value)
            current = attempt
        if len(values) < min:
            return state.fail(memory=current.memory)
        return current.succeed(value=concat(values))
    return Parser(parse, "many({}, {}, {})".format(parser, min, max))

def maybe(parser):
    result = many(parser, 0, 1)
    result.name = "maybe({})".format(parser)
    return result

def discard(parser):
    def parse(state):
        result = parser(state)
        if not result.success:
            return result
        return result.update(value=None)
    return Parser(parse, "discard({})".format(parser))
