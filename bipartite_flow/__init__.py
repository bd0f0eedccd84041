from ._errors import (
    BipartiteFlowError,
    InputFormatError,
    InvalidArgumentError,
    OutOfRangeError,
)
from ._flow import MaxFlowEngine, PathSearch
from ._matching import Matching, extract_matching
from ._models import Edge, MatchingProblem
from ._parser import load_problem, parse_problem
from ._residual import ResidualGraph
from ._solver import BipartiteMatcher, MatchResult, solve
