import argparse
import os
import sys
import dubman
from dubman import manpage
from dubman.help import HelpError
import dubman.parser.parser
from dubman.utils.code import error_line

def parse_args(argv=None):
    arg_parser = argparse.ArgumentParser(
        prog="dubman",
        description="Generate man pages for dub and its commands from their --help output.",
    )
    arg_parser.add_argument("--dub", default="dub", metavar="PATH",
                            help="dub executable to query (default: %(default)s)")
    arg_parser.add_argument("-o", "--output", default=".", metavar="DIR",
                            help="directory the pages are written to (default: %(default)s)")
    arg_parser.add_argument("--command", action="append", dest="commands", metavar="NAME",
                            help="only write the page of this command, can be repeated")
    arg_parser.add_argument("-v", "--verbose", action="store_true",
                            help="trace parsing and report the pages written")
    arg_parser.add_argument("--version", action="version", version="%(prog)s " + dubman.__version__)
    return arg_parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        dubman.parser.parser.LOG.add("DEBUG")
        manpage.LOG.add("DEBUG")
    try:
        os.makedirs(args.output, exist_ok=True)
        commands = manpage.generate(args.output, args.dub, args.commands)
    except (HelpError, manpage.ManpageError, OSError) as exc:
        print(error_line(exc), file=sys.stderr)
        return 1
    if args.commands:
        missing = sorted(set(args.commands) - set(command.name for command in commands))
        if missing:
            print("unknown commands: {}".format(", ".join(missing)), file=sys.stderr)
            return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
