'''Utility functions for other modules of Votetally.

There should normally be no need to use these functions directly.
'''

from typing import Any, Dict
from numbers import Number


def add_dict_to_dict(dict1: Dict[Any, Number],
                     dict2: Dict[Any, Number],
                     ) -> None:
    '''Add the values of dict2 to dict1 in place, key by key.

    Keys missing in dict1 are appended in the order of dict2.
    '''
    for key, addition in dict2.items():
        dict1[key] = dict1.get(key, 0) + addition


def sum_dicts(dict1: Dict[Any, Number],
              dict2: Dict[Any, Number],
              ) -> Dict[Any, Number]:
    '''Return the key-wise sum of two count dictionaries.

    The inputs are left unchanged; the key order of dict1 is kept.
    '''
    summed = dict(dict1)
    add_dict_to_dict(summed, dict2)
    return summed
