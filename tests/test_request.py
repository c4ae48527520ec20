import pytest

from redwood.exceptions import AmbiguousRenderMode, InvalidRenderOptions
from redwood.view import RenderMode, RenderRequest


def test_bare_string_is_a_page():
    request = RenderRequest.parse('home')

    assert request.mode is RenderMode.PAGE
    assert request.name == 'home'
    assert request.namespace == ''
    assert request.layout is None
    assert request.locals == {}


def test_bare_string_with_options():
    request = RenderRequest.parse('home', layout='main', namespace='blog')

    assert request.is_page
    assert request.layout == 'main'
    assert request.namespace == 'blog'


def test_mapping_with_partial():
    request = RenderRequest.parse({'partial': 'header', 'locals': {'user': 'ada'}})

    assert request.is_partial
    assert request.name == 'header'
    assert request.locals == {'user': 'ada'}


def test_keywords_only():
    request = RenderRequest.parse(page='home', namespace='blog')

    assert request.is_page
    assert request.namespace == 'blog'


def test_request_passes_through():
    request = RenderRequest.page('home')

    assert RenderRequest.parse(request) is request


@pytest.mark.parametrize('options', [
    {},
    {'layout': 'main'},
    {'page': 'home', 'partial': 'header'},
])
def test_exactly_one_mode(options):
    with pytest.raises(AmbiguousRenderMode):
        RenderRequest.parse(options)


def test_string_cannot_also_name_a_partial():
    with pytest.raises(AmbiguousRenderMode):
        RenderRequest.parse('home', partial='header')


@pytest.mark.parametrize('request_value', [42, ['home'], ('home',), object()])
def test_other_shapes_are_invalid(request_value):
    with pytest.raises(InvalidRenderOptions):
        RenderRequest.parse(request_value)


def test_unknown_option():
    with pytest.raises(InvalidRenderOptions):
        RenderRequest.parse(page='home', theme='dark')


def test_option_types():
    with pytest.raises(InvalidRenderOptions):
        RenderRequest.parse(page=['home'])
    with pytest.raises(InvalidRenderOptions):
        RenderRequest.parse(page='home', namespace=3)
    with pytest.raises(InvalidRenderOptions):
        RenderRequest.parse(page='home', locals=['a'])


def test_layout_only_for_pages():
    with pytest.raises(InvalidRenderOptions):
        RenderRequest.parse(partial='header', layout='main')


def test_options_cannot_modify_a_request():
    with pytest.raises(InvalidRenderOptions):
        RenderRequest.parse(RenderRequest.page('home'), layout='main')
