import dataclasses
import re
from typing import Annotated, get_args, get_origin


class TypeValidator:
    pass


class ValueRange(TypeValidator):
    def __init__(self, min_=None, max_=None):
        self._min = min_
        self._max = max_

    def __call__(self, value: int):
        if self._min is not None and value < self._min:
            raise ValueError(f"Value {value} is less than minimum {self._min}")
        if self._max is not None and value > self._max:
            raise ValueError(f"Value {value} is greater than maximum {self._max}")


class Regex(TypeValidator):
    def __init__(self, pattern: str):
        self._pattern = pattern
        self._regex = re.compile(pattern)

    def __call__(self, value: str):
        if not self._regex.fullmatch(value):
            raise ValueError(f"Value {value!r} does not match pattern {self._pattern}")


class OneOf(TypeValidator):
    def __init__(self, *choices):
        self._choices = choices

    def __call__(self, value):
        if value not in self._choices:
            choices = ", ".join(repr(c) for c in self._choices)
            raise ValueError(f"Value {value!r} is not one of {choices}")


@dataclasses.dataclass
class BaseModel:
    @classmethod
    def init_recursive(cls, **kwargs):
        init_kwargs = {}
        for f in dataclasses.fields(cls):
            if f.name not in kwargs:
                continue

            init_kwargs[f.name] = cls._init_arg(kwargs[f.name], f.type, f.name)

        unknown = kwargs.keys() - init_kwargs.keys()
        if unknown:
            raise ValueError(f"Unknown keys: {', '.join(sorted(unknown))}")

        return cls(**init_kwargs)

    @classmethod
    def _init_arg(cls, value, type_hint, path):
        origin = get_origin(type_hint)
        if origin is Annotated:
            return cls._init_arg(value, type_hint.__origin__, path)

        if origin is list:
            if not isinstance(value, list):
                raise TypeError(f"{path}: Expected list, got {type(value).__name__}")
            (item_type,) = get_args(type_hint)
            return [
                cls._init_arg(v, item_type, f"{path}[{idx}]")
                for idx, v in enumerate(value)
            ]

        if issubclass(type_hint, BaseModel):
            if isinstance(value, type_hint):
                return value
            # compact notation, e.g. an edge written as [1, 3]
            if isinstance(value, (list, tuple)):
                return type_hint(*value)
            return type_hint.init_recursive(**value)

        return value

    def __post_init__(self):
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            self._validate_field(field.name, value, field.type)

    def _validate_field(self, path, value, type_hint, metadata=()):
        origin = get_origin(type_hint)

        if origin is Annotated:
            base_type, *metadata = get_args(type_hint)
            self._validate_field(path, value, base_type, metadata)
            return

        expected = origin or type_hint
        # bool is a subclass of int, but true isn't a node number
        if not isinstance(value, expected) or (
            isinstance(value, bool) and expected is not bool
        ):
            raise TypeError(
                f"{path}: Expected {type_hint.__name__}, got {type(value).__name__}"
            )

        for validator in metadata:
            if isinstance(validator, TypeValidator):
                try:
                    validator(value)
                except Exception as e:
                    raise ValueError(f"{path}: Invalid value") from e

        if origin is list:
            (item_type,) = get_args(type_hint)
            for idx, item in enumerate(value):
                self._validate_field(f"{path}[{idx}]", item, item_type)

    def dict(self):
        return dataclasses.asdict(self)


PositiveInt = Annotated[int, ValueRange(min_=1)]
NodeName = Annotated[str, Regex(r"[A-Za-z0-9]+(?: [A-Za-z0-9]+)*")]
OutputFormat = Annotated[str, OneOf("plain", "table", "json", "flat")]


@dataclasses.dataclass
class Edge(BaseModel):
    left: PositiveInt
    right: PositiveInt


@dataclasses.dataclass
class MatchingProblem(BaseModel):
    """Bipartite graph with named nodes.

    `names` holds one name per node, the first half of the list is the left
    partition, the second half the right partition. Edges refer to nodes by
    their 1-based position in `names`, which is also the node's index in
    the flow network.
    """

    names: list[NodeName]
    edges: list[Edge] = dataclasses.field(default_factory=list)

    def __post_init__(self):
        super().__post_init__()

        node_count = len(self.names)
        if node_count < 2 or node_count % 2 != 0:
            raise ValueError(
                f"names: There should be a positive even number of nodes, "
                f"got {node_count}"
            )

        for idx, edge in enumerate(self.edges):
            try:
                check_edge(edge, node_count)
            except ValueError as e:
                raise ValueError(f"edges[{idx}].{e}") from None

    @property
    def node_count(self):
        return len(self.names)

    def name_of(self, node):
        return self.names[node - 1]


def check_edge(edge, node_count):
    """Check that an edge goes from the left to the right partition."""
    half = node_count // 2
    if not 1 <= edge.left <= half:
        raise ValueError(
            f"left: Node {edge.left} is not in the left partition [1, {half}]"
        )
    if not half < edge.right <= node_count:
        raise ValueError(
            f"right: Node {edge.right} is not in the right partition "
            f"[{half + 1}, {node_count}]"
        )


@dataclasses.dataclass
class Config(BaseModel):
    format: OutputFormat = "plain"
    header: bool = True
    verbose: bool = False
