"""example.py
Scanning without declaring any options: every flag is reported as found."""
import sys

from argopts import Parser


def main(argv: list[str]) -> int:
    for opt in Parser().parse(argv):
        if opt.is_option("h", "help"):
            print(f"Usage:\n{argv[0]} [options]")
            print("Options:")
            print("-h, --help\t\tprint help message")
            print("-v, --verbose\tprint more")
            print("-f, --file\t\tuse the given file")
        elif opt.is_option("v", "verbose"):
            print("Verbose")
        elif opt.is_option("f", "file"):
            if not opt.arg:
                print("Missing argument to file option\nUsage: -f <file>", file=sys.stderr)
                return 1
            print(f"Using file: '{opt.arg.as_str()}'")
        else:
            print(f"Unknown option: {opt.usage()}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
