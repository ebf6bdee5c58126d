"""example2.py
Declared options with help text, typed values and error reporting."""
import sys

from argopts import ConversionError, Parser

parser = Parser(
    [
        ("h", "help", "print help message"),
        ("v", "verbose", "print more"),
        ("n", "count", "number of repeats"),
        (None, "scale", "scale factor"),
    ]
)


def main(argv: list[str]) -> int:
    options = parser.parse(argv)
    if any(opt.shortopt == "h" for opt in options):
        print(f"Usage:\n{argv[0]} [options]")
        print(f"Options:\n{parser.print_options()}")
        return 0

    count, scale = 1, 1.0
    try:
        for opt in options:
            if opt.shortopt == "v":
                print("Verbose")
            elif opt.shortopt == "n":
                count = int(opt.arg)
            elif opt.longopt == "scale":
                scale = float(opt.arg)
    except ConversionError as error:
        print(error, file=sys.stderr)
        return 1

    for _ in range(count):
        print(scale)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
