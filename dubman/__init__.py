from .parser import ParserState, Parser
from .manpage import CorePage, CommandPage, generate
import sys

__version__ = "0.1"

def main():
    from .console import main
    return main(sys.argv[1:])
