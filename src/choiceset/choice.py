""" single choice records, and checks on their weights
"""

import math
from collections.abc import Mapping
from numbers import Real

from choiceset.errors import InvalidWeightError

DEFAULT_WEIGHT = 100

CORE_KEYS = ('name', 'weight', 'value', 'obj')

_MISSING = object()

def is_number(weight):
    """ check if a weight is a real number (bools don't count) and not NaN
    """
    if isinstance(weight, bool) or not isinstance(weight, Real):
        return False
    return not math.isnan(weight)

def check_weight(weight, name=None):
    """ make sure a weight can be used for sampling
    
    Args:
        weight: candidate weight
        name: name of the choice the weight belongs to, for the error message
    
    Returns:
        the weight, unchanged
    
    Raises:
        InvalidWeightError if the weight is negative, infinite, NaN or not a
        number at all.
    """
    if not is_number(weight) or math.isinf(weight) or weight < 0:
        raise InvalidWeightError(weight, name)
    return weight

class Choice(object):
    """ a single selectable entry: a name, a weight, and optional payloads
    
    The name is the default thing returned by a selection. A choice can also
    carry a separate value, an auxiliary object (e.g. a dict describing a loot
    item) and any extra keys from the mapping it was built from.
    """
    
    __slots__ = ('name', '_weight', 'value', 'obj', 'extra')
    
    def __init__(self, name, weight=DEFAULT_WEIGHT, value=None, obj=None, **extra):
        self.name = name
        self.weight = weight
        self.value = value
        self.obj = obj
        self.extra = extra
    
    @property
    def weight(self):
        return self._weight
    
    @weight.setter
    def weight(self, weight):
        self._weight = check_weight(weight, self.name)
    
    @classmethod
    def from_mapping(cls, entry):
        """ build a new Choice from a dict-like entry, or copy another Choice
        
        A missing or falsy weight in a mapping falls back to DEFAULT_WEIGHT.
        Choice objects are copied as they are. The entry itself is left
        untouched.
        
        Args:
            entry: Choice, or mapping with 'name' and optionally 'weight',
                'value', 'obj' and any other keys.
        """
        if isinstance(entry, Choice):
            return entry.copy()
        
        entry = dict(entry)
        name = entry.pop('name', None)
        weight = entry.pop('weight', None) or DEFAULT_WEIGHT
        value = entry.pop('value', None)
        obj = entry.pop('obj', None)
        
        choice = cls(name, weight, value=value, obj=obj)
        choice.extra = entry
        return choice
    
    def copy(self):
        choice = Choice(self.name, self.weight, value=self.value, obj=self.obj)
        choice.extra = dict(self.extra)
        return choice
    
    def to_dict(self):
        """ get the choice as a dict, skipping payloads which aren't set
        """
        data = {'name': self.name, 'weight': self.weight}
        if self.value is not None:
            data['value'] = self.value
        if self.obj is not None:
            data['obj'] = self.obj
        data.update(self.extra)
        return data
    
    def resolve(self):
        """ get the most specific payload: the value, else the auxiliary object,
        else the name
        """
        if self.value is not None:
            return self.value
        if self.obj is not None:
            return self.obj
        return self.name
    
    def lookup(self, key='name'):
        """ get a property, preferring the auxiliary object over the choice
        
        Args:
            key: key (for mapping objects) or attribute name to look for
        
        Returns:
            obj[key] if the auxiliary object has that key, otherwise self[key]
        """
        obj = self.obj
        if isinstance(obj, Mapping):
            if key in obj:
                return obj[key]
        elif obj is not None and isinstance(key, str):
            # methods of the payload (e.g. list.count) are not properties
            attr = getattr(obj, key, _MISSING)
            if attr is not _MISSING and not callable(attr):
                return attr
        
        return self[key]
    
    def __getitem__(self, key):
        if key in CORE_KEYS:
            return getattr(self, key)
        return self.extra[key]
    
    def __eq__(self, other):
        if not isinstance(other, Choice):
            return NotImplemented
        return self.to_dict() == other.to_dict()
    
    def __repr__(self):
        fields = ', '.join(f'{k}={v!r}' for k, v in self.to_dict().items())
        return f'Choice({fields})'

def as_meta_and_choice(entry):
    """ split an entry into its selection metadata and the thing it represents
    
    Entries with a finite numeric weight are treated as choice records: the
    choice is the record's value, auxiliary object or name (in that order), and
    the metadata is everything else. Anything else is a bare choice, with the
    default weight as its metadata.
    
    Args:
        entry: Choice, mapping or any other object
    
    Returns:
        tuple of (metadata dict, choice)
    """
    if isinstance(entry, Choice):
        entry = entry.to_dict()
    
    weight = entry.get('weight') if isinstance(entry, Mapping) else None
    if not is_number(weight) or math.isinf(weight):
        return {'weight': DEFAULT_WEIGHT}, entry
    
    choice = next((entry[k] for k in ('value', 'obj', 'name')
        if entry.get(k) is not None), None)
    meta = { k: v for k, v in entry.items() if k not in ('name', 'value', 'obj') }
    
    return meta, choice
