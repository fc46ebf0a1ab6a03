import os
import sys
from dubman import grammar
from dubman.parser import ParserState, whitespace, drop_line
from dubman.markup import see_also, slash_hyphens
from dubman.help import help_output
import dubman.utils.string

LOG = set()
# LOG.add("DEBUG")

SYNOPSIS = grammar.synopsis()
SEPARATOR = grammar.separator()
SUBSECTION = grammar.subsection_title()
COMMAND_LINE = grammar.command_line()
DESCRIPTION_LINE = grammar.description_line()
BLANK_LINE = grammar.blank_line()
OPTIONS = grammar.options()
SKIP_WS = whitespace()
SKIP_LINE = drop_line()

FILES = "dub.sdl, dub.json"
FORMATS = [see_also("dub.json", 5), see_also("dub.sdl", 5)]

class ManpageError(Exception):
    pass

class Command:
    def __init__(self, name, summary=None):
        self.name = name
        self.summary = summary
    def extend(self, text):
        self.summary = text if not self.summary else self.summary + " " + text
    def __eq__(self, other):
        return (self.name, self.summary) == (other.name, other.summary)
    def __repr__(self):
        return "Command({}, {})".format(repr(self.name), repr(self.summary))

def open_page(path):
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise ManpageError("Error opening {}: {}".format(repr(path), exc.strerror or exc)) from None

def write_description(out, state):
    """
        copies text up to the next section title, blank lines start new paragraphs
        returns the state at the title
    """
    out.write(".SH DESCRIPTION\n")
    state = SKIP_WS.run(state)
    written, paragraph = False, False
    while state.remaining and not SEPARATOR.match(state.remaining):
        blank = BLANK_LINE.run(state)
        if blank.success:
            paragraph = written
            state = blank
            continue
        line = DESCRIPTION_LINE.run(state)
        if not line.success:
            state = SKIP_LINE.run(state)
            continue
        if paragraph:
            out.write(".PP\n")
            paragraph = False
        out.write(line.value + "\n")
        written = True
        state = line
    out.write("\n")
    return state

def write_options(out, state):
    state = OPTIONS.run(state)
    out.write(state.value)
    return state

def write_files(out):
    out.write("\n.SH FILES\n")
    out.write(FILES + "\n")

def write_see_also(out, refs):
    out.write("\n.SH SEE ALSO\n")
    out.write(dubman.utils.string.join(refs + FORMATS, ", ") + "\n")

class CorePage:
    """
        DESIGN:
        dub.1, rendered from `dub --help`
        the command table is the only part read by hand, one line at a time:
            a subsection title, a new command, or more text about the last command
        the commands found are returned so their own pages can be written
    """
    NAME = r"dub \- a package manager and build system for D programming language"
    def __init__(self, output=".", dub="dub"):
        self.output = output
        self.dub = dub
    @property
    def path(self):
        return os.path.join(self.output, "dub.1")
    def run(self):
        text = help_output(dub=self.dub)
        with open_page(self.path) as out:
            commands = self.write(out, text)
        if "DEBUG" in LOG:
            print("wrote {} ({} commands)".format(self.path, len(commands)), file=sys.stderr)
        return commands
    def write(self, out, text):
        state = ParserState(text)

        out.write('.TH DUB "1"\n')
        out.write(".SH NAME\n")
        out.write(CorePage.NAME + "\n\n")

        out.write(".SH SYNOPSIS\n")
        out.write(".B dub\n")
        state = SYNOPSIS.run(state)
        if not state.success:
            raise ManpageError("no usage line in the output of {}".format(repr(self.dub + " --help")))
        out.write(state.value + "\n\n")

        state = write_description(out, state)

        out.write(".SH COMMANDS\n")
        out.write("Each of the following commands also has a separate manpage.\n\n")
        commands, state = self.write_commands(out, state)
        out.write("\n")

        state = write_options(out, state)
        write_files(out)
        write_see_also(out, [see_also("dub-" + command.name) for command in commands])
        return commands
    def write_commands(self, out, state):
        commands = []
        title = SEPARATOR.run(state)
        if not title.success:
            return commands, state
        state = title
        while state.remaining and not SEPARATOR.match(state.remaining):
            subsection = SUBSECTION.run(state)
            if subsection.success:
                out.write(".PP\n")
                out.write(r"\-\- {} \-\-".format(subsection.value) + "\n\n")
                state = subsection
                continue
            entry = COMMAND_LINE.run(state)
            if entry.success:
                out.write(".TP\n")
                out.write(entry.value + "\n")
                command = Command(entry["cmd"], entry["summary"] if "summary" in entry else None)
                commands.append(command)
                if "DEBUG" in LOG:
                    print("found command {}".format(command.name), file=sys.stderr)
                state = entry
                continue
            line = DESCRIPTION_LINE.run(state)
            if line.success:
                out.write(line.value + "\n")
                if commands:
                    commands[-1].extend(line.value)
                state = line
            else:
                state = SKIP_LINE.run(state)
        return commands, state

class CommandPage:
    def __init__(self, command, output=".", dub="dub"):
        if isinstance(command, str): command = Command(command)
        self.command = command
        self.output = output
        self.dub = dub
        self.synopsis = grammar.synopsis(command.name)
    @property
    def path(self):
        return os.path.join(self.output, "dub-{}.1".format(self.command.name))
    def run(self, commands=()):
        text = help_output(self.command.name, self.dub)
        with open_page(self.path) as out:
            self.write(out, text, commands)
        if "DEBUG" in LOG:
            print("wrote {}".format(self.path), file=sys.stderr)
    def write(self, out, text, commands=()):
        name = self.command.name
        state = ParserState(text)

        out.write('.TH DUB-{} "1"\n'.format(name.upper()))
        out.write(".SH NAME\n")
        out.write(r"dub\-{} \- {}".format(slash_hyphens(name), self.command.summary or "") + "\n")

        out.write(".SH SYNOPSIS\n")
        out.write(r".B dub\-{}".format(slash_hyphens(name)) + "\n")
        state = self.synopsis.run(state)
        if not state.success:
            raise ManpageError("no usage line in the output of {}".format(repr("{} {} --help".format(self.dub, name))))
        out.write(state.value + "\n\n")

        state = write_description(out, state)
        state = write_options(out, state)
        write_files(out)

        refs = [see_also("dub")]
        for command in commands:
            other = command if isinstance(command, str) else command.name
            if other != name:
                refs.append(see_also("dub-" + other))
        write_see_also(out, refs)

def generate(output=".", dub="dub", only=None):
    """
        writes dub.1 and a page for every command it lists, or for those in only
    """
    commands = CorePage(output, dub).run()
    for command in commands:
        if only and command.name not in only:
            continue
        CommandPage(command, output, dub).run(commands)
    return commands
