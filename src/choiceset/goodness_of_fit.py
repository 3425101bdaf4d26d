""" check how well a set of draws matches the weights of a ChoiceSet
"""

from collections import Counter

from scipy.stats import chi2

def expected_frequencies(choice_set):
    """ get the expected proportion of draws for each choice
    
    Args:
        choice_set: ChoiceSet object
    
    Returns:
        list of proportions, in the same order as the choices
    """
    total = choice_set.total_weight
    if total <= 0:
        raise ValueError('choice set has no weight to sample from')
    
    return [ x.weight / total for x in choice_set ]

def goodness_of_fit(choice_set, draws, key='name'):
    """ Pearson's chi-squared test of draws against the choice weights
    
    Choices with zero weight are excluded, since they should never be drawn.
    Draws which don't match any weighted choice give a P-value of zero.
    
    Args:
        choice_set: ChoiceSet object the draws came from
        draws: list of drawn names (or other keys)
        key: property of the choices that the draws hold
    
    Returns:
        tuple of (chi-squared statistic, P-value)
    """
    
    if len(draws) == 0:
        raise ValueError("no draws to test")
    
    expected = {}
    for choice, freq in zip(choice_set, expected_frequencies(choice_set)):
        if freq > 0:
            name = choice[key]
            expected[name] = expected.get(name, 0) + freq * len(draws)
    
    if len(expected) < 2:
        raise ValueError('need at least two weighted choices to test draws')
    
    observed = Counter(draws)
    if any(x not in expected for x in observed):
        return (float('inf'), 0.0)
    
    statistic = sum((observed[x] - exp) ** 2 / exp for x, exp in expected.items())
    
    return (statistic, chi2.sf(statistic, len(expected) - 1))
