import sys

from geomutils import commands
from geomutils.click_helper import parse_and_run


def main():
    sys.exit(parse_and_run(commands))


if __name__ == "__main__":
    main()
