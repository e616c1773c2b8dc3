import logging
import sys

from hmpy.crystal import HermannMauguin
from hmpy.errors import HermannMauguinError

LOG = logging.getLogger("hmpy-symbol")


def load_symbol(value, dimension=3):
    "Parse `value` as a group number if it is an integer, else as a symbol"
    cls = HermannMauguin[dimension]
    if value.strip().isdecimal():
        return cls.from_number(int(value))
    return cls.from_string(value)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        description="Print the long and short forms of Hermann-Mauguin symbols"
    )
    parser.add_argument(
        "symbols", nargs="+", help="group numbers or quoted symbols e.g. 'P 2_1/c'"
    )
    parser.add_argument("-d", "--dimension", type=int, default=3, choices=(1, 2, 3))
    parser.add_argument(
        "--ascii", action="store_true", help="write screw axes as e.g. 2_1"
    )
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    for value in args.symbols:
        try:
            hm = load_symbol(value, dimension=args.dimension)
        except (HermannMauguinError, NotImplementedError) as e:
            LOG.error("Could not read symbol '%s': %s", value, e)
            sys.exit(1)
        LOG.debug("Loaded %r from '%s'", hm, value)
        if args.ascii:
            print(f"{hm.long_form(subscripts=False)}\t{hm.short_form(subscripts=False)}")
        else:
            print(hm.describe())


if __name__ == "__main__":
    main()
