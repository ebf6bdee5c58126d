"""config_loading.py"""
import sys
from pathlib import Path

from argopts.config import loader

parser = loader(Path(__file__).parent / "options.yaml")

if __name__ == "__main__":
    for opt in parser.parse(sys.argv):
        print(opt.usage() or opt.longopt, "->", opt.arg.value)
