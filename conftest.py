import pytest
from selector_builder import SelectorFacade, SelectorValidator

@pytest.fixture
def builder():
    """Return a facade with the default, permissive validator."""
    return SelectorFacade()

@pytest.fixture
def strict_builder():
    """Return a facade that only accepts the CSS combinators ' ', '>', '+' and '~'."""
    return SelectorFacade(SelectorValidator(strict_combinators=True))

@pytest.fixture
def sample_html():
    return (
        '<html><body>'
        '<div id="main" class="container editable">'
        '<a href="logo.png" class="thumb">Logo</a>'
        '<a href="notes.txt">Notes</a>'
        '</div>'
        '<table id="data">'
        '<tr><td>1</td><td>2</td></tr>'
        '<tr><td>3</td><td>4</td></tr>'
        '</table>'
        '</body></html>'
    )
