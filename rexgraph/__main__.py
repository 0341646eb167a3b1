# coding: utf-8
import sys
import unittest

from docopt import docopt

from rexgraph import RegexException, parse


def main(argv=sys.argv):
    """
    Usage:
      rexgraph test [<args>...]
      rexgraph tree <pattern>
      rexgraph graph <pattern>
      rexgraph -h | --help

    Options:
      -h --help  Show this.
    """
    arguments = docopt(main.__doc__, argv[1:], help=True)
    if arguments["test"]:
        program = unittest.main(
            module="rexgraph.tests",
            argv=argv[0:1] + arguments["<args>"],
            buffer=True,
            exit=False
        )
        return 0 if program.result.wasSuccessful() else 1
    try:
        regex = parse(arguments["<pattern>"])
    except RegexException as exception:
        print(
            "%s: %s" % (exception.__class__.__name__, exception),
            file=sys.stderr
        )
        return 1
    if arguments["tree"]:
        print(repr(regex))
    else:
        print(regex.to_graph().to_dot())
    return 0


if __name__ == "__main__":
    sys.exit(main())
