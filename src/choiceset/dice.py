""" dice rolling built on ChoiceSet, plus weight tables for the summed rolls of
several six sided dice
"""

from choiceset.choice_set import ChoiceSet

# probabilities (as percentages) of the totals 3 to 18 for 3d6, from anydice.com
ANY_DICE_WEIGHTS_3D6 = (
    0.46, 1.39, 2.78, 4.63, 6.94, 9.72, 11.57, 12.50,
    12.50, 11.57, 9.72, 6.94, 4.63, 2.78, 1.39, 0.46,
    )

# as above, but for 4d6 where the lowest die is dropped
ANY_DICE_WEIGHTS_4D6_DROP_LOWEST = (
    0.08, 0.31, 0.77, 1.62, 2.93, 4.78, 7.02, 9.41, 11.42,
    12.89, 13.27, 12.35, 10.11, 7.25, 4.17, 1.62,
    )

def roll_dice(times, sides, repeat=1, drop_lowest=0, rng=None):
    """ roll a number of dice, and sum the results
    
    e.g. roll_dice(3, 6) is a 3d6 roll, and roll_dice(4, 6, repeat=6,
    drop_lowest=1) rolls a full set of ability scores.
    
    Args:
        times: number of dice to roll
        sides: number of sides on each die
        repeat: number of times to repeat the whole roll
        drop_lowest: number of the lowest dice to discard from each roll
        rng: random source for the dice, defaults to random.random
    
    Returns:
        summed roll as an int if repeat is 1, otherwise a list of summed rolls.
    """
    if times < 1 or sides < 1 or repeat < 1:
        raise ValueError(f'need at least one roll of one die with one side, '
            f'not times={times}, sides={sides}, repeat={repeat}')
    if not 0 <= drop_lowest < times:
        raise ValueError(f"can't drop {drop_lowest} from {times} dice")
    
    die = ChoiceSet.weighted_range(1, sides, rng=rng)
    
    totals = []
    for _ in range(repeat):
        rolls = sorted(die.choose_some(times))
        totals.append(sum(rolls[drop_lowest:]))
    
    return totals[0] if repeat == 1 else totals

def three_d6(rng=None):
    """ a ChoiceSet for the totals 3 to 18, weighted like a 3d6 roll
    """
    return ChoiceSet.weighted_range(3, 18, ANY_DICE_WEIGHTS_3D6, rng=rng)

def four_d6_drop_lowest(rng=None):
    """ a ChoiceSet for the totals 3 to 18, weighted like 4d6 dropping the lowest
    """
    return ChoiceSet.weighted_range(3, 18, ANY_DICE_WEIGHTS_4D6_DROP_LOWEST, rng=rng)
