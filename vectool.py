import argparse
import sys

import torch

from calc import calc
from model import ModelLoadError, load_excluded_words, load_model
from substitute import filter_lines, load_substitutions, substitute


__version__ = '0.2.0'


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='vectool',
        description='Make queries to word vector models')

    parser.add_argument('model', type=str,
                        help='the word vector model file')
    parser.add_argument('--exclude-file', '-e', type=str, default=None,
                        help='file of words removed from the model')
    parser.add_argument('--cuda', type=int, default=0,
                        help='set it to 1 for keeping the vectors on GPU')
    parser.add_argument('--version', action='version',
                        version='%(prog)s {}'.format(__version__))

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.add_parser(
        'filter',
        help='replace words in the input stream with their nearest '
             'neighbours')
    subparsers.add_parser(
        'calc',
        help='find nearest neighbours of linear combinations of word '
             'vectors and compare vectors')
    sub = subparsers.add_parser(
        'substitute',
        help='rewrite the input stream with explicit substitutions and '
             'analogies derived from them')
    sub.add_argument('substitutions', type=str,
                     help='file of "source target" word pairs')

    args = parser.parse_args(argv)

    try:
        if args.command is None:
            raise ValueError('a command is required: filter, calc or '
                             'substitute')
        if args.cuda not in (0, 1):
            raise ValueError('--cuda must be 0 or 1')
    except ValueError as ex:
        parser.print_usage(file=sys.stderr)
        print(ex, file=sys.stderr)
        sys.exit(1)

    return args


def main(argv=None):
    args = parse_args(argv)

    use_cuda = args.cuda and torch.cuda.is_available()
    device = torch.device('cuda' if use_cuda else 'cpu')

    try:
        model = load_model(args.model, device)
        print('Loaded {} word model'.format(len(model)), file=sys.stderr)

        if args.exclude_file is not None:
            model = model.exclude(load_excluded_words(args.exclude_file))

        subs = None
        if args.command == 'substitute':
            subs = load_substitutions(args.substitutions)
    except (ModelLoadError, OSError, ValueError) as ex:
        print(ex, file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == 'filter':
            filter_lines(model, sys.stdin)
        elif args.command == 'calc':
            calc(model, sys.stdin)
        elif args.command == 'substitute':
            substitute(model, sys.stdin, subs)
    except KeyboardInterrupt:
        sys.exit()


if __name__ == '__main__':
    main()
