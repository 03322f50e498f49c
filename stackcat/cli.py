"""
stackcat CLI - Command-line entry point

Usage modes:
1. Interactive REPL:       stackcat
2. Run a file:             stackcat program.cat
3. Continue after errors:  stackcat --keep-going program.cat
4. Help:                   stackcat --help
"""

import sys

from .repl import BANNER, InteractiveConcat, new_session, print_help, run_file

USAGE = "usage: stackcat [-h] [-k] [file]"


def main(argv=None, out=None, err=None):
    argv = sys.argv[1:] if argv is None else argv
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    keep_going = False
    path = None
    for arg in argv:
        if arg in ('-h', '--help'):
            print(BANNER, file=out)
            print_help(out)
            return 0
        elif arg in ('-k', '--keep-going'):
            keep_going = True
        elif arg.startswith('-') or path is not None:
            print(USAGE, file=err)
            print(f"unrecognized argument: {arg}", file=err)
            return 2
        else:
            path = arg

    print(BANNER, file=out)

    if path is not None:
        return run_file(new_session(out=out), path, keep_going, err)

    InteractiveConcat(out=out).repl(err=err)
    return 0
