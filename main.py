"""
Equation recognizer — Entry point.

Read lines from standard input and say whether each one is an equation,
and if so whether it uses one variable and of what degree.
"""

import argparse
import logging
import sys

from recognizer import classify_equation, format_verdict
from recognizer import storage

logger = logging.getLogger("recognizer")


def setup_logging(level) -> None:
    if logger.handlers:
        logger.setLevel(level)
        return
    log_fmt = logging.Formatter("[%(levelname)s] %(message)s")
    log_handler = logging.StreamHandler()
    log_handler.setFormatter(log_fmt)
    logger.addHandler(log_handler)
    logger.setLevel(level)


def recognize_lines(stream, out, settings: dict, keep_history: bool = True) -> int:
    """Run the prompt loop until the sentinel or end of input.

    Returns the number of lines classified.
    """
    prompt = settings["prompt"]
    sentinel = settings["sentinel"]
    handled = 0
    while True:
        out.write(prompt)
        out.flush()
        line = stream.readline()
        if not line or line.startswith(sentinel):
            break
        line = line.rstrip("\r\n")
        verdict = format_verdict(classify_equation(line))
        out.write(verdict + "\n")
        handled += 1
        if keep_history:
            try:
                storage.add_history(line, verdict)
            except OSError as e:
                logger.warning("could not record history: %s", e)
    if not line:
        out.write("\n")
    out.write("good bye\n")
    return handled


def main(argv=None) -> None:
    arg_parser = argparse.ArgumentParser(
        description="Recognize one-line polynomial equations.")
    arg_parser.add_argument("-d", "--debug",
                            action="store_true",
                            help="Print debugging messages",
                            default=False)
    arg_parser.add_argument("--no-history",
                            action="store_true",
                            help="Do not record classified lines",
                            default=False)
    args = arg_parser.parse_args(argv)

    settings = storage.get_settings()
    setup_logging(logging.DEBUG if args.debug else settings["log_level"])
    logger.debug("recv arguments: %s", args.__dict__)

    keep_history = settings["keep_history"] and not args.no_history
    recognize_lines(sys.stdin, sys.stdout, settings, keep_history)


if __name__ == "__main__":
    main()
