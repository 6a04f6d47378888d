from dataclasses import dataclass, asdict, is_dataclass
from typing import Any, Type, TypeVar, Union
import json

from pydantic import BaseModel, ValidationError as PydanticValidationError

from .exceptions import ParseError

T = TypeVar("T")

@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

def _encode_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "__dict__"):
        return {key: value for key, value in vars(obj).items() if not key.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of an object.

    Dataclasses, pydantic models and plain objects are encoded by their
    public fields; methods never appear in the output.

    Examples:
        [1, 2, 3] => '[1,2,3]'
        Rectangle(10, 20) => '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_encode_default)

def from_json(proto: Union[Type[T], T], json_string: str) -> T:
    """
    Build an object of the prototype's type from its JSON representation.

    Args:
        proto: Class, or an instance whose class is used, providing the behaviour
        json_string: JSON object holding the field values

    Returns:
        Instance of the prototype's class carrying the decoded fields

    Raises:
        ParseError: If the JSON is invalid or does not fit the prototype
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON string: {str(e)}") from e

    template = proto if isinstance(proto, type) else type(proto)

    if issubclass(template, BaseModel):
        try:
            return template.model_validate(data)
        except PydanticValidationError as e:
            raise ParseError(f"Invalid data for {template.__name__}: {str(e)}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object for {template.__name__}, got {type(data).__name__}")

    # Skip __init__: the fields come from the JSON, not from constructor arguments
    obj = object.__new__(template)
    for key, value in data.items():
        try:
            object.__setattr__(obj, key, value)
        except AttributeError as e:
            raise ParseError(f"Cannot set field {key!r} on {template.__name__}: {str(e)}") from e
    return obj
