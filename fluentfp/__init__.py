from .errors import FluentError, NotOkError, WrongSideError, MustError
from .zero import zero_of, is_zero
from .option import (
    Option,
    Some,
    NotOk,
    NONE,
    of,
    new,
    not_ok,
    from_nullable,
    of_pointee,
    if_not_zero,
    if_provided,
    map_option,
    lift,
    lookup,
    getenv,
    OptionEncoder,
    to_json as option_to_json,
    from_json as option_from_json,
)
from .either import Either, Left, Right, fold, map_right, map_left
from .advanced import Advanced, ClosableOption, open_as_option
from .value import Cond, LazyCond
from .ternary import Ternary, if_
from .pair import Pair, zip_, zip_with
from .mapper import Mapper, unzip2, unzip3, unzip4
from .logger import ConsoleLogger
from . import must, lof, value, pair
