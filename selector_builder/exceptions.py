class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass

class SelectorOrderError(ValidationError):
    """A fragment was appended where the selector grammar does not allow it."""
    pass

class OrderViolationError(SelectorOrderError):
    """Fragment appended out of element, id, class, attribute, pseudo-class, pseudo-element order."""
    pass

class DuplicateSingletonError(OrderViolationError):
    """Element, id or pseudo-element appended a second time."""
    pass

class InvalidCombinatorError(ValidationError):
    """Combinator token outside the CSS combinator set."""
    pass

class InvalidSelectorError(ValidationError):
    """Invalid selector error."""
    pass

class InvalidHTMLError(ValidationError):
    """Invalid HTML error."""
    pass
