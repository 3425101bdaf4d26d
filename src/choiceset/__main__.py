""" command line interface for weighted random choices and dice rolls
"""

import sys
import argparse
import logging

from choiceset.choice_set import ChoiceSet
from choiceset.dice import (roll_dice, ANY_DICE_WEIGHTS_3D6,
    ANY_DICE_WEIGHTS_4D6_DROP_LOWEST)
from choiceset.errors import ChoiceSetError

TABLES = {'flat': None, '3d6': ANY_DICE_WEIGHTS_3D6,
    '4d6-drop-lowest': ANY_DICE_WEIGHTS_4D6_DROP_LOWEST}

def roll(args, output):
    logging.info(f'rolling {args.times}d{args.sides}, {args.repeat} times, '
        f'dropping {args.drop_lowest}')
    totals = roll_dice(args.times, args.sides, args.repeat, args.drop_lowest)
    if args.repeat == 1:
        totals = [totals]
    
    for total in totals:
        output.write(f'{total}\n')

def parse_pairs(values):
    """ convert alternating name and weight strings into name, weight values
    
    Args:
        values: list of strings e.g. ['heads', '100', 'tails', '50']
    
    Returns:
        flat list with the weights converted to numbers e.g.
        ['heads', 100.0, 'tails', 50.0]
    """
    parsed = list(values)
    for i in range(1, len(parsed), 2):
        try:
            parsed[i] = float(parsed[i])
        except ValueError:
            raise ValueError(f'weight for {parsed[i - 1]} is not a number: {parsed[i]}')
    return parsed

def choose(args, output):
    choices = ChoiceSet.weighted_set(*parse_pairs(args.pairs))
    logging.info(f'choosing {args.count} from {len(choices)} choices with '
        f'total weight {choices.total_weight}')
    for name in choices.choose_some(args.count):
        output.write(f'{name}\n')

def weighted_range(args, output):
    choices = ChoiceSet.weighted_range(args.start, args.end, TABLES[args.table])
    logging.info(f'choosing {args.count} from {args.start} to {args.end} with '
        f'{args.table} weights')
    for name in choices.choose_some(args.count):
        output.write(f'{name}\n')

def get_options(arguments=None):
    """ get the command line switches
    """
    
    parser = argparse.ArgumentParser(description='choiceset cli interface')
    
    ############################################################################
    # CLI options in common
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--out", default=sys.stdout, help="output filename")
    parent.add_argument("--log", default=sys.stderr, help="where to write log files")
    
    subparsers = parser.add_subparsers()
    
    ############################################################################
    # CLI options for rolling dice
    dice = subparsers.add_parser('roll', parents=[parent],
        description="Roll dice and sum the results.")
    dice.add_argument("--times", type=int, default=1, help="number of dice "
        "to roll.")
    dice.add_argument("--sides", type=int, default=6, help="number of sides "
        "on each die.")
    dice.add_argument("--repeat", type=int, default=1, help="number of times "
        "to repeat the roll.")
    dice.add_argument("--drop-lowest", type=int, default=0, help="number of "
        "the lowest dice to discard from each roll.")
    dice.set_defaults(func=roll)
    
    ############################################################################
    # CLI options for choosing from weighted names
    chooser = subparsers.add_parser('choose', parents=[parent],
        description="Pick from names with relative weights.")
    chooser.add_argument("pairs", nargs="+", metavar="NAME WEIGHT",
        help="alternating names and weights e.g. heads 100 tails 100")
    chooser.add_argument("--count", type=int, default=1, help="number of "
        "picks to make (with replacement).")
    chooser.set_defaults(func=choose)
    
    ############################################################################
    # CLI options for choosing from weighted ranges of integers
    ranger = subparsers.add_parser('range', parents=[parent],
        description="Pick integers from an inclusive range.")
    ranger.add_argument("--start", type=int, required=True, help="first "
        "integer in the range.")
    ranger.add_argument("--end", type=int, required=True, help="last "
        "integer in the range.")
    ranger.add_argument("--table", choices=sorted(TABLES), default="flat",
        help="weights to apply to the range. The dice tables cover 16 values "
            "e.g. 3 to 18.")
    ranger.add_argument("--count", type=int, default=1, help="number of "
        "picks to make (with replacement).")
    ranger.set_defaults(func=weighted_range)
    
    args = parser.parse_args(arguments)
    if 'func' not in args:
        print('Use one of the subcommands: roll, choose, or range\n')
        parser.print_help()
        sys.exit()
    
    args.parser = parser
    
    return args

def open_output(path):
    ''' open output, which could be standard out
    '''
    try:
        output = open(path, 'wt')
    except TypeError:
        output = path
    return output

def main(arguments=None):
    args = get_options(arguments)
    FORMAT = '%(asctime)-15s %(message)s'
    log = open(args.log, 'at') if isinstance(args.log, str) else args.log
    logging.basicConfig(stream=log, format=FORMAT, level=logging.INFO)
    logging.captureWarnings(True)
    
    output = open_output(args.out)
    try:
        args.func(args, output)
    except (ChoiceSetError, ValueError) as error:
        logging.error(f'{args.func.__name__} failed: {error}')
        args.parser.error(str(error))
    finally:
        if isinstance(args.out, str):
            output.close()

if __name__ == '__main__':
    main()
