import copy

class ParserState:
    """
        DESIGN:
        the value threaded through every parser
        a transition never modifies a state, it returns a changed copy

        VARS:
        remaining - the unconsumed suffix of the input
        value - the last produced result, None when absent
        success - outcome of the last step
        memory - named slots written by save, read by load and recall
            never modified in place, a write replaces the dict
    """
    def __init__(self, remaining="", value=None, success=True, memory=None):
        self.remaining = remaining
        self.value = value if success else None
        self.success = success
        self.memory = dict(memory) if memory else {}
    def update(self, **kwargs):
        state = copy.copy(self)
        state.__dict__.update(kwargs)
        if not state.success:
            state.value = None
        return state
    def succeed(self, **kwargs):
        return self.update(success=True, **kwargs)
    def fail(self, **kwargs):
        return self.update(success=False, **kwargs)
    def __getitem__(self, name):
        try:
            return self.memory[name]
        except KeyError:
            raise ParserState.NoSlot(name) from None
    def __contains__(self, name):
        return name in self.memory
    class NoSlot(KeyError):
        def __str__(self):
            return "no value saved as {}".format(repr(self.args[0]))
    def __eq__(self, other):
        if not isinstance(other, ParserState):
            return NotImplemented
        return (self.remaining, self.value, self.success, self.memory) == \
               (other.remaining, other.value, other.success, other.memory)
    def __repr__(self):
        return "ParserState(remaining={}, value={}, success={}, memory={})".format(
            repr(self.remaining), repr(self.value), self.success, self.memory)
