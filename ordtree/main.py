import getopt
import os
import sys

from . import cmdfile
from . import driver
from . import log
from .exception import OrdTreeError

import ordtree


def default_options():
    opts = {
            'input' : None,
            'output' : None,
            'check' : False,
            'stats' : False,
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def _try_help(argv):
    return ("Try `" + str(os.path.basename(argv[0])) +
            " --help' for more information.")

def parse_arguments(argv):
    long_opts = [
            'check',
            'color=',
            'help',
            'input=',
            'output=',
            'quiet',
            'stats',
            'verbose',
            'version'
    ]
    options = default_options()
    opts = 'chi:o:qsv'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", _try_help(argv))

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-i', '--input'):
            options['input'] = arg

        elif opt in ('-o', '--output'):
            options['output'] = arg

        elif opt in ('-c', '--check'):
            options['check'] = True

        elif opt in ('-s', '--stats'):
            options['stats'] = True

        elif opt in ('-q', '--quiet'):
            log.logger.loglevel = log.LOG_ERROR

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    if options['stats']:
        log.logger.loglevel = max(log.logger.loglevel, log.LOG_INFO)

    if len(args) > 1:
        log.fatal_exit(2, 'too many arguments', "\n", _try_help(argv))
    elif len(args) == 1:
        if options['input'] is not None:
            log.fatal_exit(2, 'input given twice', "\n", _try_help(argv))
        options['input'] = args[0]

    return options

def ordtree_main(argv):
    log.logger = log.Logger()
    options = parse_arguments(argv)

    input_file = None
    stdin = getattr(sys.stdin, 'buffer', sys.stdin)
    out = sys.stdout
    try:
        if options['input'] is None or options['input'] == '-':
            input_file = cmdfile.CommandStream(stdin)
        else:
            try:
                input_file = cmdfile.open_input_cmdfile(options['input'])
            except OSError as e:
                log.fatal("unable to read input file: ", str(e))

        if options['output'] is not None and options['output'] != '-':
            try:
                out = open(options['output'], "w", encoding="utf-8")
            except OSError as e:
                log.fatal("unable to open output file: ", str(e))

        stats = {} if options['stats'] else None
        driver.run(input_file, out, check=options['check'], stats=stats)

        if stats is not None:
            log.info(";; statistics")
            for k, v in stats.items():
                log.info("; ", k, " = ", v)

    except OrdTreeError as e:
        log.fatal(e)
    except OSError as e:
        log.fatal(str(e))
    finally:
        out.flush()
        if out is not sys.stdout:
            out.close()
        if input_file is not None and input_file.f is not stdin:
            input_file.close()
    return 0

def version():
    sys.stdout.write("ordtree " + ordtree.__version__ + "\n")

def usage(program_name):
    sys.stdout.write(
"""usage: {0:s} [options] [file]
Read tree commands from file (or standard input) and execute them.

The first input line holds the number of commands n, each of the next n
lines one command:
  insert KEY     insert KEY into the tree
  find KEY       print `yes' or `no'
  delete KEY     delete one occurrence of KEY
  print          print the keys in-order, then in pre-order

Options:
  -i, --input=FILE     read commands from FILE ('-' is standard input)
  -o, --output=FILE    write results to FILE instead of standard output
  -c, --check          verify the tree invariants after every change
  -s, --stats          log statistics at the end of the run
  -v, --verbose        increase verbosity (may be given more than once)
  -q, --quiet          only log errors
      --color=WHEN     colorize log messages: auto, always or never
  -h, --help           show this help and exit
      --version        show version information and exit
""".format(program_name))

def main():
    try:
        sys.exit(ordtree_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)

if __name__ == '__main__':
    main()
