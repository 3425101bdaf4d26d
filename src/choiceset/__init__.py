""" weighted random selection from sets of named choices
"""

from choiceset.errors import (ChoiceSetError, InvalidArityError,
    InvalidWeightError, SamplingInvariantError, WeightMismatchWarning)
from choiceset.choice import Choice, DEFAULT_WEIGHT, as_meta_and_choice
from choiceset.choice_set import ChoiceSet
from choiceset.dice import (roll_dice, three_d6, four_d6_drop_lowest,
    ANY_DICE_WEIGHTS_3D6, ANY_DICE_WEIGHTS_4D6_DROP_LOWEST)
from choiceset.goodness_of_fit import expected_frequencies, goodness_of_fit

__version__ = '0.1.0'
