"""Apply text operations to pandas Series and DataFrame columns.

Operations can be given as callables or by name. Names refer to the public
functions of `textshape.case`, `textshape.segmenter`, `textshape.truncate`,
`textshape.hashing`, `textshape.primitives` and `textshape.functions`.
"""

__docformat__ = 'google'

__all__ = [
    'OPERATIONS',
    'transform',
    'normalize_columns'
]

from functools import partial
from inspect import isfunction
from typing import Callable, Dict, List
import pandas as pd
from textshape import case, segmenter, truncate, hashing, primitives, functions
from textshape.entities import CaseStyle

def _public_functions(*modules) -> Dict[str, Callable]:
    return {
        name: getattr(module, name)
        for module in modules
        for name in module.__all__
        if isfunction(getattr(module, name))
    }

OPERATIONS: Dict[str, Callable] = _public_functions(
    primitives, functions, case, segmenter, truncate, hashing
)
"""Operations addressable by name in `textshape.frames.transform`."""

def _resolve(operation: str|Callable) -> Callable:
    if callable(operation):
        return operation
    elif operation in OPERATIONS:
        return OPERATIONS[operation]
    else:
        raise ValueError(f'Unknown text operation: {operation}')

def transform(series: pd.Series, operations: str|Callable|List[str|Callable], **kwargs) -> pd.Series:
    """
    Apply one operation, or a chain of operations, to every non-null value.

    Args:
        series: Text values
        operations: A callable or operation name, or a list of them applied in order
        **kwargs: Extra arguments for a single operation

    Raises:
        ValueError: If a name is unknown, or keyword arguments are given with a chain.

    Example:
        >>> transform(pd.Series(['Foo Bar', None]), 'snake').tolist()
        ['foo_bar', None]
        >>> transform(pd.Series(['  Foo Bar ']), ['trim', 'kebab']).tolist()
        ['foo-bar']
    """
    if isinstance(operations, list):
        if kwargs:
            raise ValueError('Keyword arguments apply to a single operation, not a chain')
        chain = list(map(_resolve, operations))
        func = partial(functions.chain_operations, operations=chain)
    else:
        func = partial(_resolve(operations), **kwargs)

    return series.map(func, na_action='ignore')

def normalize_columns(frame: pd.DataFrame, style: CaseStyle|str = CaseStyle.SNAKE) -> pd.DataFrame:
    """
    Rename every column to a case style.

    Example:
        >>> frame = pd.DataFrame({'First Name': ['Ada'], 'lastName': ['Lovelace']})
        >>> normalize_columns(frame).columns.tolist()
        ['first_name', 'last_name']
    """
    return frame.rename(columns=lambda column: case.convert(str(column), style))
