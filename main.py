import sys

from rich.console import Console

from cmdline import CommandLineParser

console = Console(highlight=False)
errors = Console(stderr=True, highlight=False)


def main(argv=None):
    parser = CommandLineParser("cat", "show text file context")
    parser.add_argument("file", "text file path")
    parser.add_option("--lines", 1, "-l", "line count to show", True)
    parser.add_option("--back", 0, "-b", "from the back")
    parser.parse(sys.argv if argv is None else argv)

    try:
        with open(str(parser["file"])) as file:
            lines = file.read().splitlines()
    except OSError:
        errors.print("failed to open file: %s" % parser["file"], markup=False, soft_wrap=True)
        errors.print(parser.usage_text(), markup=False, soft_wrap=True)
        errors.print("Try '%s --help' for more information." % parser.path, markup=False)
        return 1

    if parser["--lines"]:
        count = max(0, parser["-l"][0].toint())
        if parser["--back"]:
            lines = lines[max(0, len(lines) - count):]
        else:
            lines = lines[:count]

    for line in lines:
        console.print(line, markup=False, soft_wrap=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
