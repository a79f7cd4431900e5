from .maybe import (
    Maybe,
    MaybeLike,
    Present,
    Absent,
    ABSENT,
    present,
    absent,
    from_nullable,
    to_nullable,
)
from .ops import (
    is_present,
    is_absent,
    with_default,
    map,
    map2,
    map3,
    map4,
    map5,
    map_n,
    and_then,
    case_of,
    equals,
)
from .iterables import values, sequence, traverse, first_present
from .attempt import attempt
from .logger import ConsoleLogger, logger, trace
