"""Runs the monkey interpreter on a .monkey file, or in command-line mode. Also uses error handling context manager.
Called from the monkey console script and `python -m monkey`.

Evaluation recurses through the host stack once per nested call, so the interpreter runs in a worker thread with a
large stack and a matching recursion limit.
"""

import argparse
import sys
import threading

from monkey.lang.error import ErrorHandler
from monkey.lang.session import Session
from monkey.lang.shell import Shell


RECURSION_LIMIT = 50_000
STACK_SIZE = 256 * 1024 * 1024  # bytes, enough for RECURSION_LIMIT frames


def build_parser():
    parser = argparse.ArgumentParser(prog="monkey", description="Monkey language interpreter.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--lexer", action="store_true", help="print the tokens of every line before running it")
    parser.add_argument("--parser", action="store_true", help="print the parsed form of every line before running it")
    return parser


def run_with_deep_stack(func, *args):
    """Calls func(*args) in a thread with a STACK_SIZE stack and RECURSION_LIMIT, then re-raises whatever it raised
    (SystemExit included) in the calling thread.
    """
    raised = []

    def target():
        try:
            func(*args)
        except BaseException as exc:
            raised.append(exc)

    sys.setrecursionlimit(RECURSION_LIMIT)
    old_size = threading.stack_size(STACK_SIZE)
    try:
        thread = threading.Thread(target=target, daemon=True)
        thread.start()
    finally:
        threading.stack_size(old_size)
    thread.join()

    if raised:
        raise raised[0]


def interpret(error_handler, args):
    if args.file is not None:
        sess = Session(error_handler, args.file, lexer_mode=args.lexer, parser_mode=args.parser)
        sess.run()  # prints each result as it is produced
    else:
        sess = Session(error_handler, Session.SH_FILE, lexer_mode=args.lexer, parser_mode=args.parser)
        Shell(sess).cmdloop()


def main(argv=None):
    """Runs monkey interpreter."""
    with ErrorHandler() as error_handler:
        args = build_parser().parse_args(argv)
        run_with_deep_stack(interpret, error_handler, args)
