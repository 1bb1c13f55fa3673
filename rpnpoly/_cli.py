import argparse
import os
import platform
import sys
import traceback

from .calculator import Calculator
from . import reports
from .version import __version__ as version


argparser = argparse.ArgumentParser(prog="rpnpoly", description="Reverse Polish notation calculator for sparse multivariate polynomials", epilog="""Each input line is either a polynomial literal such as '(1,2)+(-3,0)', or a command such as 'ADD' or 'AT 5'. Lines starting with '#' are ignored.""")

argparser.add_argument("infiles", metavar="infile", type=str, nargs="*", help="files with polynomials and commands; '-' or none at all means standard input")

argparser.add_argument("--report-format", choices=["bare", "graphical"], default="bare", help="format in which errors are printed (default: bare, i.e. 'ERROR <line> <KIND>')")
argparser.add_argument("--strict", action="store_true", help="exit with status 1 if any line was rejected")

argparser.add_argument("--version", "-v", action="version", version=f"%(prog)s {version} running on {platform.python_implementation()} {platform.python_version()}")


def main_cli(argv=None):
    args = argparser.parse_args(argv)


    error = False
    files_to_run = []
    for path in args.infiles or ["-"]:
        try:
            if path == "-":
                path = "stdin"
                source = sys.stdin.read()
            else:
                path = os.path.abspath(path)
                with open(path, encoding="utf-8") as f:
                    source = f.read()
            files_to_run.append((path, source))
        except IOError as ex:
            print(f"Could not read input file '{path}':\n{ex}", file=sys.stderr)
            error = True
        except UnicodeDecodeError as ex:
            print(f"Input file '{path}' is not in UTF-8:\n{ex}", file=sys.stderr)
            error = True

    if error:
        sys.exit(1)

    report_handler = {
        "graphical": reports.GraphicalHandler,
        "bare": reports.BareHandler
    }[args.report_format]()

    try:
        with reports.handle_reports(report_handler) as handler:
            calc = Calculator()
            for path, source in files_to_run:
                calc.run(path, source)

        if args.strict and handler.is_error_condition:
            sys.exit(1)
    except reports.UnrecoverableError:
        sys.exit(1)
    except Exception as ex:  # pylint: disable=broad-except
        print("An unexpected internal error happened.\nThe following information will be of interest to the maintainer\n(hopefully along with some input samples for reproduction):\n\n---\n", file=sys.stderr)
        print(f"Version: rpnpoly {version}\nPython: {platform.python_implementation()} {platform.python_version()}\nPlatform: {platform.platform()}\n", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)
