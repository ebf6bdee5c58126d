"""type_validation.py
Registering a custom converter and reading an option as that type."""
import sys
from uuid import UUID

from argopts import ConversionError, Parser, register_converter

register_converter(UUID, UUID, name="UUID")

parser = Parser([("u", "uuid", "a valid UUID string")])

if __name__ == "__main__":
    for opt in parser.parse(sys.argv):
        if opt.is_option("u", "uuid"):
            try:
                print(f"Valid UUID: {opt.arg.get(UUID)}")
            except ConversionError as error:
                print(error, file=sys.stderr)
                sys.exit(1)
