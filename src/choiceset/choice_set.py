""" weighted random selection from a set of choices, built on a cumulative
weight list, see:
http://stackoverflow.com/questions/3679694/a-weighted-version-of-random-choice
"""

import bisect
import random
import warnings

from choiceset.choice import Choice, DEFAULT_WEIGHT, check_weight, is_number
from choiceset.errors import (InvalidArityError, SamplingInvariantError,
    WeightMismatchWarning)

def _grouped(values, arity, factory):
    """ split a flat sequence into tuples of a given length
    """
    if len(values) % arity != 0:
        raise InvalidArityError(arity, len(values), factory)
    return zip(*[iter(values)] * arity)

class ChoiceSet(object):
    """ class for weighted choices, rather than a function, so we don't have to
    keep resumming the weights.
    
    Use the named constructors (from_values, from_records, weighted_range,
    weighted_set, weighted_valued_set, weighted_object_set) to build a set from
    different argument shapes. Records are always copied, so the set owns
    everything in it.
    """
    
    def __init__(self, choices=None, rng=None):
        """ set up the choices and their cumulative weights
        
        Args:
            choices: iterable of Choice objects, or None
            rng: function returning uniform random floats in [0, 1). Defaults
                to random.random.
        """
        self.rng = rng if rng is not None else random.random
        self.choices = [ Choice.from_mapping(x) for x in choices or [] ]
        self.calc_intervals()
    
    @classmethod
    def from_values(cls, *values, rng=None):
        """ one choice per value, all with the default weight
        """
        return cls([ Choice(x) for x in values ], rng=rng)
    
    @classmethod
    def of(cls, *values, rng=None):
        """ like from_values, but also accepts a single list of values
        """
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = values[0]
        return cls.from_values(*values, rng=rng)
    
    @classmethod
    def from_records(cls, *records, rng=None):
        """ one choice per dict-like record (or Choice)
        
        Each record needs a 'name', and may have 'weight', 'value', 'obj' and
        any other keys. Missing or falsy weights default to 100. The records are
        copied, never modified.
        """
        return cls(records, rng=rng)
    
    @classmethod
    def weighted_range(cls, start, end, weights=None, rng=None):
        """ one choice per integer from start to end (inclusive)
        
        Args:
            start: first integer in the range
            end: last integer in the range
            weights: optional list of weights, applied in order to the integers
                (see set_weights). Otherwise every integer has weight 100.
            rng: random source
        """
        choice_set = cls(rng=rng)
        choice_set.choices = [ Choice(x) for x in range(start, end + 1) ]
        
        if weights:
            choice_set.set_weights(weights)
        else:
            choice_set.calc_intervals()
        
        return choice_set
    
    @classmethod
    def weighted_set(cls, *values, rng=None):
        """ build from a flat list of name, weight pairs
        
        e.g. ChoiceSet.weighted_set('heads', 100, 'tails', 100)
        
        Raises:
            InvalidArityError if the values don't form complete pairs
        """
        pairs = _grouped(values, 2, 'weighted_set')
        return cls([ Choice(name, weight) for name, weight in pairs ], rng=rng)
    
    @classmethod
    def weighted_valued_set(cls, *values, rng=None):
        """ build from a flat list of name, weight, value triplets
        """
        triples = _grouped(values, 3, 'weighted_valued_set')
        return cls([ Choice(name, weight, value=value)
            for name, weight, value in triples ], rng=rng)
    
    @classmethod
    def weighted_object_set(cls, *values, rng=None):
        """ build from a flat list of name, weight, object triplets
        
        The objects are returned by choose_prop() when they hold the requested
        key, and by one_value() when the choice has no value.
        """
        triples = _grouped(values, 3, 'weighted_object_set')
        return cls([ Choice(name, weight, obj=obj)
            for name, weight, obj in triples ], rng=rng)
    
    def __len__(self):
        return len(self.choices)
    
    def __iter__(self):
        return iter(self.choices)
    
    def __getitem__(self, index):
        return self.choices[index]
    
    def __repr__(self):
        return f'ChoiceSet({self.choices!r})'
    
    @property
    def total_weight(self):
        """ the summed weight of all choices (zero for an empty set)
        """
        return self._total_weight
    
    def calc_intervals(self):
        """ rebuild the cumulative weights from scratch
        
        The list matches the choices in order, so intervals[i] is the summed
        weight of choices 0 to i, and the last entry is the total weight.
        """
        total = 0
        intervals = []
        for choice in self.choices:
            total += (choice.weight or 0)
            intervals.append(total)
        
        self.intervals = intervals
        self._total_weight = total
    
    def add_choice(self, name, weight=None, value=None, obj=None, **extra):
        """ add another possible choice for selection
        
        Args:
            name: an ID so we know each choice.
            weight: relative weight for selecting this choice. Missing or falsy
                weights default to 100, as in set_weight_for().
            value: optional value to return instead of the name
            obj: optional auxiliary object for the choice
        """
        choice = Choice(name, weight or DEFAULT_WEIGHT, value=value, obj=obj)
        choice.extra = extra
        self.choices.append(choice)
        self.calc_intervals()
    
    def append(self, other):
        """ add copies of all the choices from another ChoiceSet
        """
        self.choices += [ x.copy() for x in other ]
        self.calc_intervals()
    
    def set_weight_for(self, index, weight):
        """ change the weight of a single choice
        
        Indexes without a choice are ignored. A falsy weight resets the choice
        to the default weight.
        """
        if not 0 <= index < len(self.choices):
            return
        
        self.choices[index].weight = weight or DEFAULT_WEIGHT
        self.calc_intervals()
    
    def set_weights(self, weights):
        """ replace the weights of the choices, matched up by position
        
        Positions where the new weight is missing, falsy or not a number keep
        their old weight. If the number of weights differs from the number of
        choices, a WeightMismatchWarning is raised and the weights that line up
        are still applied.
        
        Args:
            weights: list of numbers

        Raises:
            InvalidWeightError for negative or infinite weights. No weights are
            changed in that case.
        """
        if len(weights) != len(self.choices):
            warnings.warn(f'got {len(weights)} weights for {len(self.choices)} '
                'choices, applying what is present', WeightMismatchWarning,
                stacklevel=2)
        
        # check every weight before changing any, so a bad weight can't leave
        # the choices half updated
        updates = [ (choice, check_weight(weight, choice.name))
            for choice, weight in zip(self.choices, weights)
            if weight and is_number(weight) ]

        for choice, weight in updates:
            choice.weight = weight

        self.calc_intervals()
    
    def select(self, draw):
        """ find the choice whose interval contains a draw
        
        The first choice with draw < intervals[i] is selected, so a draw sitting
        exactly on a boundary belongs to the next interval, and zero weight
        choices can never be picked.
        
        Args:
            draw: number in [0, total_weight)
        
        Returns:
            the selected Choice
        
        Raises:
            SamplingInvariantError if no interval contains the draw, e.g. for an
            empty set, or a set where all weights are zero.
        """
        pos = bisect.bisect_right(self.intervals, draw)
        if draw < 0 or pos >= len(self.intervals):
            raise SamplingInvariantError(f'draw {draw} outside choice intervals '
                f'(total weight: {self.total_weight}, choices: {len(self.choices)})')
        
        return self.choices[pos]
    
    def one(self):
        """ chooses a random choice using the weights
        
        Returns:
            the selected Choice object
        """
        
        # figure out where in the list a random weight would fall
        return self.select(self.rng() * self.total_weight)
    
    def one_value(self):
        """ chooses a random choice, returning its value, object or name (in that
        order of preference)
        """
        return self.one().resolve()
    
    def choose_prop(self, key='name'):
        """ chooses a random choice, and returns one of its properties
        
        The choice's auxiliary object is checked for the key first, then the
        choice itself.
        """
        return self.one().lookup(key)
    
    def choose_one(self, key='name'):
        return self.choose_prop(key)
    
    def choose_some(self, count, key='name'):
        """ make repeated selections (with replacement)
        
        Args:
            count: number of selections to make
            key: property to return for each selected choice
        
        Returns:
            list of selected properties, in the order they were drawn
        """
        return [ self.choose_prop(key) for _ in range(count) ]
